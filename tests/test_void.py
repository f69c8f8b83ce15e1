from copager.lang import Lang
from copager.regex_lexer import RegexLexer
from copager.rule import RuleSet, rules, uses_tokens
from copager.token import TokenSet, token
from copager.void import Void, VoidBuilder


class VoidToken(TokenSet):
    X = token(r"x")


@uses_tokens(VoidToken)
class VoidRule(RuleSet):
    X = rules("<x> ::= X")


def test_build_without_events_gives_void():
    assert VoidBuilder().build() == Void()


def test_events_are_ignored():
    builder = VoidBuilder()
    (tok,) = RegexLexer(Lang(VoidToken, VoidRule)).run("x")
    results = [builder.on_read(tok), builder.on_parse(VoidRule.X, 1), builder.build()]
    assert results == [None, None, Void()]


def test_unbalanced_events_still_build():
    builder = VoidBuilder()
    builder.on_parse(VoidRule.X, 5)
    assert builder.build() == Void()