import pytest

from copager.lang import Lang
from copager.rule import NonTerm, RuleSet, Term, rules, uses_tokens
from copager.token import TokenSet, token


class MyToken(TokenSet):
    A = token(r"a")


@uses_tokens(MyToken)
class MyRule(RuleSet):
    A = rules("<a> ::= A")


class UnrelatedToken(TokenSet):
    Other = token(r"o")


def test_lang_holds_token_and_rule_sets():
    lang = Lang(MyToken, MyRule)
    assert (lang.token_set, lang.rule_set) == (MyToken, MyRule)


def test_lang_ruleset():
    data = Lang(MyToken, MyRule).ruleset()
    assert data.top == "a"
    (only,) = data.rules
    assert (only.lhs, only.rhs) == (NonTerm("a"), (Term(MyToken.A),))


def test_lang_rejects_mismatched_token_set():
    with pytest.raises(TypeError):
        Lang(UnrelatedToken, MyRule)