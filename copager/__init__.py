"""Declared tokens and BNF rules, a regex lexer, grammar set analysis and IR builders."""

__version__ = "0.3.2"