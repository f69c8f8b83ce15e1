import pytest

from copager.director import DirectorSet
from copager.rule import EOF, NonTerm, Rule, RuleSet, Term, rules, uses_tokens
from copager.token import TokenSet, token


class PqToken(TokenSet):
    P = token(r"p")
    Q = token(r"q")


@uses_tokens(PqToken)
class PqRule(RuleSet):
    Start = rules("<start> ::= <left> <right>")
    Left = rules("<left> ::= P")
    Right = rules("<right> ::= <start> Q")
    Empty = rules("<empty> ::= ")


@pytest.fixture
def director():
    return DirectorSet(PqRule.into_ruleset())


@pytest.mark.parametrize(
    "tag, expected",
    [
        (PqRule.Start, {Term(PqToken.P)}),
        (PqRule.Left, {Term(PqToken.P)}),
        (PqRule.Right, {Term(PqToken.P)}),
        (PqRule.Empty, {EOF}),
    ],
)
def test_director_set(director, tag, expected):
    assert director.get(tag.as_rules()[0]) == expected


def test_unknown_rule_gives_none(director):
    unknown = Rule(None, NonTerm("other"), (Term(PqToken.Q),))
    assert director.get(unknown) is None