"""Lexers: the lexer interface and a lexer driven by regular expressions."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from copager.token import Token

_TRIVIA_OPTIONS = ("pre_trivia", "trivia", "post_trivia")


class BaseLexer(ABC):
    """A lexer that turns source text into a stream of tokens."""

    @abstractmethod
    def run(self, input):
        """Yield the :class:`Token` objects found in ``input``."""


def _or_pattern(patterns):
    return "^(" + "|".join(patterns) + ")"


def _regex_by_option(tokens, option):
    joined = [
        "|".join(kind.as_str_list())
        for kind in tokens
        if option in kind.as_option_list()
    ]
    if not joined:
        return None
    return re.compile(_or_pattern(joined))


class RegexLexer(BaseLexer):
    """Lexer that matches the token kinds of a language in declaration order.

    Kinds flagged ``pre_trivia`` (or ``trivia``) are skipped before each token
    and kinds flagged ``post_trivia`` after it; the skipped text is kept in the
    token's ``full`` span. Lexing stops at the first text no kind matches.
    Invalid patterns raise :class:`re.error`.
    """

    def __init__(self, lang):
        tokens = list(lang.token_set)

        pre_trivia = _regex_by_option(tokens, "pre_trivia")
        trivia = _regex_by_option(tokens, "trivia")
        self._pre_trivia = pre_trivia if pre_trivia is not None else trivia
        self._post_trivia = _regex_by_option(tokens, "post_trivia")

        self._matchers = [
            (re.compile(_or_pattern(kind.as_str_list())), kind)
            for kind in tokens
            if not any(opt in kind.as_option_list() for opt in _TRIVIA_OPTIONS)
        ]

    def run(self, input):
        pos = 0
        while (found := self._extract_token(input, pos)) is not None:
            pos = found.full[1]
            yield found

    def _extract_token(self, src, begin):
        body_begin = begin + self._pre_trivia_len(src[begin:])
        rest = src[body_begin:]
        for regex, kind in self._matchers:
            matched = regex.match(rest)
            if matched is not None:
                break
        else:
            return None
        body_end = body_begin + len(matched.group(0))
        full_end = body_end + self._post_trivia_len(src[body_end:])
        return Token(kind, src, (body_begin, body_end), (begin, full_end))

    def _pre_trivia_len(self, text):
        if self._pre_trivia is None:
            return 0
        matched = self._pre_trivia.match(text)
        return len(matched.group(0)) if matched else 0

    def _post_trivia_len(self, text):
        if self._post_trivia is None:
            return 0
        matched = self._post_trivia.match(text)
        found = matched.group(0) if matched else ""
        if not found:
            return 0
        if found.endswith("\n"):
            return len(found) - 1
        return len(found)