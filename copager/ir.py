"""Intermediate representations built from parse events."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from copager.rule import RuleSet
from copager.token import Token


class IRBuilder(ABC):
    """Receives parse events and builds an intermediate representation."""

    @abstractmethod
    def on_read(self, token):
        """Handle a shifted token."""

    @abstractmethod
    def on_parse(self, rule, length):
        """Handle a reduction of the last ``length`` elements by ``rule``."""

    @abstractmethod
    def build(self):
        """Return the finished representation."""


@dataclass(frozen=True)
class RawAtom:
    """A token in the raw tree."""

    token: Token


@dataclass(frozen=True)
class RawList:
    """A reduced rule in the raw tree with its kept children."""

    rule: RuleSet
    elems: tuple


def _kept(elem):
    return not (
        isinstance(elem, RawAtom) and "ir_omit" in elem.token.kind.as_option_list()
    )


class RawIRBuilder(IRBuilder):
    """Builds a raw tree on a stack and hands its root to ``convert``.

    Tokens whose kind carries the ``ir_omit`` option are dropped from the
    children of a reduction.
    """

    def __init__(self, convert):
        self._convert = convert
        self._stack = []

    def on_read(self, token):
        self._stack.append(RawAtom(token))

    def on_parse(self, rule, length):
        if not 0 <= length <= len(self._stack):
            raise ValueError(
                f"cannot reduce {length} elements, only {len(self._stack)} on the stack"
            )
        split = len(self._stack) - length
        elems = self._stack[split:]
        del self._stack[split:]
        self._stack.append(RawList(rule, tuple(filter(_kept, elems))))

    def build(self):
        if len(self._stack) != 1:
            raise ValueError(f"expected exactly one tree, found {len(self._stack)}")
        return self._convert(self._stack.pop())