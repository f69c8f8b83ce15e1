"""Grammar rules, rule sets and the BNF notation used to declare them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Union

from copager.token import TokenSet


@dataclass(frozen=True)
class NonTerm:
    """A non-terminal symbol."""

    name: str

    def __str__(self):
        return f"<{self.name}>"


@dataclass(frozen=True)
class Term:
    """A terminal symbol: one token kind."""

    token: TokenSet

    def __str__(self):
        quoted = (
            '"' + p.replace("\\", "\\\\").replace('"', '\\"') + '"'
            for p in self.token.as_str_list()
        )
        return "[" + ", ".join(quoted) + "]"


@dataclass(frozen=True)
class Epsilon:
    """The empty string."""

    def __str__(self):
        return "ε"


@dataclass(frozen=True)
class Eof:
    """The end of input."""

    def __str__(self):
        return "$"


EPSILON = Epsilon()
EOF = Eof()

RuleElem = Union[NonTerm, Term, Epsilon, Eof]


class BnfError(ValueError):
    """Raised when a rule written in BNF cannot be read."""


class _BnfReader:
    def __init__(self, src, tokenset):
        self.src = src
        self.tokenset = tokenset
        self.cursor = 0
        self.row = 1
        self.col = 1

    # <rule> ::= <nonterm> '::=' <rhs>
    def rule(self):
        lhs = self.nonterm()
        self.consume("::=")
        return lhs, self.rhs()

    # <rhs> ::= ((<nonterm> | <ident>)*)?
    def rhs(self):
        elems = []
        while True:
            self.skip_spaces()
            rest = self.src[self.cursor:]
            if not rest:
                break
            if rest.startswith("<"):
                elems.append(self.nonterm())
            else:
                elems.append(self.term())
        return elems or [EPSILON]

    # <nonterm> ::= '<' <ident> '>'
    def nonterm(self):
        self.consume("<")
        name = self.ident()
        self.consume(">")
        return NonTerm(name)

    def term(self):
        self.skip_spaces()
        col = self.col
        name = self.ident()
        try:
            return Term(self.tokenset[name])
        except KeyError:
            self.col = col
            self.error(f"Unknown token '{name}'")

    # <ident> ::= [a-zA-Z_][a-zA-Z0-9_]*
    def ident(self):
        self.skip_spaces()
        rest = self.src[self.cursor:]
        length = 0
        for c in rest:
            if not (c.isalnum() or c == "_"):
                break
            length += 1
        if length == 0:
            self.error("Expected an identifier")
        name = rest[:length]
        self.cursor += length
        self.col += length
        return name

    def consume(self, expected):
        self.skip_spaces()
        if self.src.startswith(expected, self.cursor):
            self.cursor += len(expected)
            self.col += len(expected)
        else:
            self.error(f"Expected '{expected}'")

    def skip_spaces(self):
        while self.cursor < len(self.src) and self.src[self.cursor].isspace():
            if self.src[self.cursor] == "\n":
                self.row += 1
                self.col = 1
            else:
                self.col += 1
            self.cursor += 1

    def error(self, message):
        raise BnfError(
            f"Error: {message}\n{self.src}\n{' ' * (self.col - 1)}^ here\n"
        )


def parse_bnf(src, tokenset):
    """Read one rule ``<lhs> ::= ...`` and return its left and right sides.

    Bare identifiers on the right name members of ``tokenset``; an empty
    right side becomes ``[EPSILON]``.
    """
    return _BnfReader(src, tokenset).rule()


@dataclass(frozen=True, repr=False)
class Rule:
    """One production. Equality and hashing ignore ``id``."""

    tag: Optional["RuleSet"]
    lhs: RuleElem
    rhs: tuple
    id: int = field(default=0, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "rhs", tuple(self.rhs))

    def __str__(self):
        return f"{self.lhs} ->" + "".join(f" {elem}" for elem in self.rhs)

    def __repr__(self):
        return f"{self} ({self.id})"

    def nonterms(self):
        """Return the left side followed by the non-terminals on the right."""
        return [self.lhs, *(e for e in self.rhs if isinstance(e, NonTerm))]

    def terms(self):
        """Return the terminals on the right side."""
        return [e for e in self.rhs if isinstance(e, Term)]


@dataclass
class RuleSetData:
    """The productions of a grammar and the name of its start symbol."""

    top: str
    rules: list

    @classmethod
    def from_rules(cls, rules):
        """Collect rules; the left side of the first one is the start symbol."""
        rules = list(rules)
        if not rules:
            raise ValueError("a rule set needs at least one rule")
        first = rules[0].lhs
        if not isinstance(first, NonTerm):
            raise ValueError(f"left side of a rule must be a non-terminal: {first}")
        return cls(first.name, rules)

    def update_top(self, rule):
        """Append ``rule`` and make its left side the start symbol."""
        if isinstance(rule.lhs, NonTerm):
            self.top = rule.lhs.name
        self.rules.append(rule)

    def nonterms(self):
        """Return every non-terminal that appears in the rules."""
        return {elem for rule in self.rules for elem in rule.nonterms()}

    def terms(self):
        """Return every terminal that appears in the rules."""
        return {elem for rule in self.rules for elem in rule.terms()}

    def find_rule(self, target):
        """Return the rules whose left side is ``target``."""
        return [rule for rule in self.rules if rule.lhs == target]


@dataclass(frozen=True, eq=False)
class RuleDef:
    """The BNF sources attached to one member of a rule set."""

    sources: tuple[str, ...]


def rules(*args):
    """Attach productions, written as BNF strings, to a rule-set member."""
    return RuleDef(tuple(args))


class RuleSet(Enum):
    """Base for enumerations of rule tags.

    Members are built with :func:`rules`; the class must be decorated with
    :func:`uses_tokens` to name the token set its rules refer to.
    """

    def as_rules(self):
        """Return the productions tagged by this member."""
        table = getattr(type(self), "_rule_table", None)
        if table is None:
            raise TypeError(f"{type(self).__name__} has no token set; use @uses_tokens")
        found = table[self]
        if not found:
            raise ValueError(f"{self!r} has no rules")
        return list(found)

    @classmethod
    def into_ruleset(cls):
        """Return all productions, numbered by the position of their tag."""
        return RuleSetData.from_rules(
            replace(rule, id=index)
            for index, member in enumerate(cls)
            for rule in member.as_rules()
        )

    def __repr__(self):
        return f"{type(self).__name__}.{self.name}"


def uses_tokens(tokenset):
    """Class decorator naming the token set of a :class:`RuleSet`.

    All rules are read at once, so a malformed one raises :class:`BnfError`
    when the class is defined.
    """

    def decorate(cls):
        table = {}
        for member in cls:
            table[member] = tuple(
                Rule(member, *parse_bnf(src, tokenset))
                for src in member.value.sources
            )
        cls._tokenset = tokenset
        cls._rule_table = table
        return cls

    return decorate