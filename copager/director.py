"""Director sets of grammar rules."""

from __future__ import annotations

from copager.first import FirstSet
from copager.follow import FollowSet
from copager.rule import EPSILON, NonTerm


class DirectorSet:
    """The director set of every rule of a :class:`RuleSetData`.

    A rule's director set is the FIRST set of its right side, joined with
    the FOLLOW set of its left side when the right side can be empty.
    """

    def __init__(self, ruleset):
        first_set = FirstSet(ruleset)
        follow_set = FollowSet(ruleset)

        table = {}
        for rule in ruleset.rules:
            if not isinstance(rule.lhs, NonTerm):
                raise ValueError(f"left side of a rule must be a non-terminal: {rule.lhs}")
            candidates = set(first_set.get_by(rule.rhs))
            if EPSILON in candidates:
                candidates.update(follow_set.get(rule.lhs.name) or ())
            table[rule] = frozenset(e for e in candidates if e != EPSILON)
        self._table = table

    def get(self, rule):
        """Return the director set of ``rule``, or ``None`` if it is unknown."""
        return self._table.get(rule)