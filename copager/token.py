"""Token definitions, token sets and lexed tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, eq=False)
class TokenDef:
    """Regular expressions and option flags attached to one token kind.

    Instances compare by identity so that two kinds with the same pattern
    stay distinct members of their token set.
    """

    patterns: tuple[str, ...]
    options: tuple[str, ...] = ()


def token(*args, options=()):
    """Define a token kind by its regular expressions and option flags.

    ``options`` holds flags such as ``"trivia"``, ``"pre_trivia"``,
    ``"post_trivia"`` or ``"ir_omit"``; a single string is accepted too.
    """
    if isinstance(options, str):
        options = (options,)
    return TokenDef(tuple(args), tuple(options))


class TokenSet(Enum):
    """Base for enumerations of token kinds; members are built with :func:`token`."""

    def as_str_list(self):
        """Return the regular expressions that match this kind."""
        return self.value.patterns

    def as_option_list(self):
        """Return the option flags of this kind."""
        return self.value.options

    def __repr__(self):
        return f"{type(self).__name__}.{self.name}"


@dataclass(frozen=True)
class Token:
    """A lexed token.

    ``body`` spans the token text alone, ``full`` also covers the trivia
    around it; both are ``(start, end)`` offsets into ``src``.
    """

    kind: TokenSet
    src: str
    body: tuple[int, int]
    full: tuple[int, int]

    def as_str(self):
        """Return the token text without trivia."""
        start, end = self.body
        return self.src[start:end]

    def as_full_str(self):
        """Return the token text including its trivia."""
        start, end = self.full
        return self.src[start:end]