"""The parser interface and the events a parser emits."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from copager.rule import RuleSet
from copager.token import Token


@dataclass(frozen=True)
class Read:
    """The parser shifted a token."""

    token: Token


@dataclass(frozen=True)
class Parse:
    """The parser reduced the last ``length`` elements by a rule tagged ``rule``."""

    rule: RuleSet
    length: int


class ParseFailure(Exception):
    """Raised when the input does not follow the grammar."""

    def __init__(self, message, token=None):
        super().__init__(message)
        self.token = token


class BaseParser(ABC):
    """A parser that turns a stream of tokens into parse events."""

    @abstractmethod
    def run(self, tokens):
        """Yield :class:`Read` and :class:`Parse` events for ``tokens``.

        Raises :class:`ParseFailure` when the input is rejected.
        """