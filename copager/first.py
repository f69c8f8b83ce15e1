"""FIRST sets of grammar symbols."""

from __future__ import annotations

from copager.rule import EOF, EPSILON, NonTerm


class FirstSet:
    """The FIRST set of every symbol of a :class:`RuleSetData`."""

    def __init__(self, ruleset):
        table = {nonterm: set() for nonterm in ruleset.nonterms()}
        for term in ruleset.terms():
            table[term] = {term}
        table[EPSILON] = {EPSILON}
        table[EOF] = {EOF}

        nonterms = list(ruleset.nonterms())
        heads = {
            nonterm: [rule.rhs[0] for rule in ruleset.find_rule(nonterm) if rule.rhs]
            for nonterm in nonterms
        }

        modified = True
        while modified:
            modified = False
            for nonterm in nonterms:
                entry = table[nonterm]
                old_len = len(entry)
                for symbol in heads[nonterm]:
                    if isinstance(symbol, NonTerm):
                        entry.update(table[symbol])
                    else:
                        entry.add(symbol)
                modified |= old_len != len(entry)

        self._table = {elem: frozenset(found) for elem, found in table.items()}

    def get(self, elem):
        """Return the FIRST set of one symbol, or ``None`` if it is unknown."""
        return self._table.get(elem)

    def get_by(self, elems):
        """Return the FIRST set of a sequence of symbols.

        Epsilon is never part of the result; ``EOF`` is added when the whole
        sequence can be empty. Raises :class:`KeyError` for unknown symbols.
        """
        firsts = set()
        for elem in elems:
            firsts.update(self._table[elem])
            if EPSILON in firsts:
                firsts.discard(EPSILON)
                continue
            return frozenset(firsts)
        firsts.add(EOF)
        return frozenset(firsts)