"""Ties a language, a lexer and a parser together."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from copager.lang import Lang
from copager.parse import Parse, Read


@dataclass(frozen=True)
class Generator:
    """A language with the lexer and parser that process it.

    ``lexer`` and ``parser`` are callables that take the language and return
    a :class:`BaseLexer` and a :class:`BaseParser`.
    """

    lang: Lang
    lexer: Callable
    parser: Callable


class Processor:
    """Runs source text through a generator's lexer and parser."""

    def __init__(self, generator):
        self.generator = generator
        self._lexer = None
        self._parser = None

    def build(self):
        """Build both the lexer and the parser; return ``self``."""
        return self.build_lexer().build_parser()

    def build_lexer(self):
        """Build the lexer; return ``self``."""
        self._lexer = self.generator.lexer(self.generator.lang)
        return self

    def build_parser(self):
        """Build the parser; return ``self``."""
        self._parser = self.generator.parser(self.generator.lang)
        return self

    def process(self, input, builder):
        """Parse ``input`` and return what a fresh ``builder()`` builds from it.

        Raises :class:`RuntimeError` if the lexer or parser is not built, and
        lets :class:`ParseFailure` through when the input is rejected.
        """
        if self._lexer is None:
            raise RuntimeError("the lexer is not built")
        if self._parser is None:
            raise RuntimeError("the parser is not built")

        ir_builder = builder()
        for event in self._parser.run(self._lexer.run(input)):
            match event:
                case Read(token=token):
                    ir_builder.on_read(token)
                case Parse(rule=rule, length=length):
                    ir_builder.on_parse(rule, length)
                case _:
                    raise TypeError(f"unexpected parse event: {event!r}")
        return ir_builder.build()