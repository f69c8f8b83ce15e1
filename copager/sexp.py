"""S-expressions built from parse events."""

from dataclasses import dataclass

from copager.ir import RawAtom, RawIRBuilder, RawList
from copager.rule import RuleSet

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\0": "\\0",
}


def _escape(c):
    if c in _ESCAPES:
        return _ESCAPES[c]
    if ord(c) < 0x20 or ord(c) == 0x7F:
        return f"\\u{{{ord(c):x}}}"
    return c


@dataclass(frozen=True)
class SExpAtom:
    """The text of one token."""

    text: str

    def __str__(self):
        return '"' + "".join(map(_escape, self.text)) + '"'


@dataclass(frozen=True)
class SExpList:
    """A reduced rule and its children."""

    rule: RuleSet
    elems: tuple

    def __str__(self):
        return "(" + " ".join([self.rule.name, *map(str, self.elems)]) + ")"


def from_raw(raw):
    """Convert a raw tree into an S-expression."""
    if isinstance(raw, RawAtom):
        return SExpAtom(raw.token.as_str())
    if isinstance(raw, RawList):
        return SExpList(raw.rule, tuple(map(from_raw, raw.elems)))
    raise TypeError(f"not a raw tree: {raw!r}")


def sexp_builder():
    """Return a builder that produces an S-expression."""
    return RawIRBuilder(from_raw)