"""FOLLOW sets of non-terminals."""

from __future__ import annotations

from copager.first import FirstSet
from copager.rule import EOF, EPSILON, NonTerm


class FollowSet:
    """The FOLLOW set of every non-terminal of a :class:`RuleSetData`."""

    def __init__(self, ruleset):
        table = {
            elem.name: set()
            for elem in ruleset.nonterms()
            if isinstance(elem, NonTerm)
        }
        table[ruleset.top].add(EOF)
        first_set = FirstSet(ruleset)

        modified = True
        while modified:
            modified = False
            for rule in ruleset.rules:
                if not isinstance(rule.lhs, NonTerm):
                    raise ValueError(f"left side of a rule must be a non-terminal: {rule.lhs}")
                lhs = rule.lhs.name
                for index, target in enumerate(rule.rhs):
                    if not isinstance(target, NonTerm):
                        continue
                    entry = table[target.name]
                    old_len = len(entry)
                    following = rule.rhs[index + 1:]
                    firsts = first_set.get_by(following)
                    entry.update(e for e in firsts if e != EPSILON)
                    if not following or EPSILON in firsts:
                        entry.update(table[lhs])
                    modified |= old_len != len(entry)

        self._table = {name: frozenset(found) for name, found in table.items()}

    def get(self, nonterm):
        """Return the FOLLOW set of the non-terminal named ``nonterm``, or ``None``."""
        return self._table.get(nonterm)