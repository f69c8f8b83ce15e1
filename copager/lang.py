"""A language: a token set paired with a rule set."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Lang:
    """A grammar made of a :class:`TokenSet` and a :class:`RuleSet` over it."""

    token_set: type
    rule_set: type

    def __post_init__(self):
        used = getattr(self.rule_set, "_tokenset", None)
        if used is not self.token_set:
            raise TypeError(
                f"{self.rule_set.__name__} is not declared over {self.token_set.__name__}"
            )

    def ruleset(self):
        """Return the numbered productions of the grammar."""
        return self.rule_set.into_ruleset()