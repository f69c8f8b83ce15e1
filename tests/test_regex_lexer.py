import re

import pytest

from copager.lang import Lang
from copager.regex_lexer import RegexLexer
from copager.rule import RuleSet, rules, uses_tokens
from copager.token import TokenSet, token


class PlainToken(TokenSet):
    Plus = token(r"[+]")
    Mul = token(r"[*]")
    Num = token(r"[1-9][0-9]*")


@uses_tokens(PlainToken)
class PlainRule(RuleSet):
    Sum = rules("<sum> ::= Num Plus Num")


class TriviaToken(TokenSet):
    Plus = token(r"\+")
    Minus = token(r"-")
    Mul = token(r"\*")
    Div = token(r"/")
    BracketL = token(r"\(")
    BracketR = token(r"\)")
    Num = token(r"[1-9][0-9]*")
    Blank = token(r"[ \t\n]+", options="trivia")


@uses_tokens(TriviaToken)
class TriviaRule(RuleSet):
    Value = rules("<value> ::= Num")


class CommentToken(TokenSet):
    Add = token(r"\+")
    Times = token(r"\*")
    Number = token(r"[1-9][0-9]*")
    Comment = token(
        r"^( |\t|\n|(//(.*)\n))*",
        r"^( |\t|)*(//(.*)\n)",
        options=("pre_trivia", "post_trivia"),
    )


@uses_tokens(CommentToken)
class CommentRule(RuleSet):
    Item = rules("<item> ::= Number")


class BrokenToken(TokenSet):
    Bad = token(r"(")


@uses_tokens(BrokenToken)
class BrokenRule(RuleSet):
    Start = rules("<start> ::= Bad")


def lexer_for(token_set, rule_set):
    return RegexLexer(Lang(token_set, rule_set))


LANGS = [(PlainToken, PlainRule), (TriviaToken, TriviaRule)]


@pytest.mark.parametrize("token_set, rule_set", LANGS)
@pytest.mark.parametrize(
    "src, expected",
    [
        ("1+2*3", ["1", "+", "2", "*", "3"]),
        ("1+2*stop3", ["1", "+", "2", "*"]),
    ],
)
def test_simple(token_set, rule_set, src, expected):
    lexer = lexer_for(token_set, rule_set)
    assert [t.as_str() for t in lexer.run(src)] == expected


@pytest.mark.parametrize(
    "src, expected",
    [
        ("1 + 2 * 3", ["1", "+", "2", "*", "3"]),
        ("1 + 2 * stop 3", ["1", "+", "2", "*"]),
        ("", []),
    ],
)
def test_with_trivia(src, expected):
    lexer = lexer_for(TriviaToken, TriviaRule)
    assert [t.as_str() for t in lexer.run(src)] == expected


def test_with_pp_trivia_restores_input():
    src = (
        "\n"
        "    // This is a comment\n"
        "    // This is another comment\n"
        "    1 + 2 * 3 // This is a comment\n"
        "    "
    )
    found = list(lexer_for(CommentToken, CommentRule).run(src))
    assert [t.as_str() for t in found] == ["1", "+", "2", "*", "3"]
    assert "".join(t.as_full_str() for t in found) == src


def test_kinds_and_spans_with_trivia():
    found = list(lexer_for(TriviaToken, TriviaRule).run("1 + 2"))
    assert [(t.kind, t.body, t.full) for t in found] == [
        (TriviaToken.Num, (0, 1), (0, 1)),
        (TriviaToken.Plus, (2, 3), (1, 3)),
        (TriviaToken.Num, (4, 5), (3, 5)),
    ]


def test_full_spans_are_contiguous():
    src = "(1 +  23) / 4"
    found = list(lexer_for(TriviaToken, TriviaRule).run(src))
    bounds = [0] + [t.full[1] for t in found]
    assert [t.full for t in found] == list(zip(bounds, bounds[1:]))
    assert bounds[-1] == len(src)


def test_invalid_pattern_raises():
    with pytest.raises(re.error):
        lexer_for(BrokenToken, BrokenRule)