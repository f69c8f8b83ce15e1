"""Concrete syntax trees built from parse events, and a walker over them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from copager.ir import RawAtom, RawIRBuilder, RawList
from copager.rule import RuleSet
from copager.token import TokenSet


@dataclass(frozen=True)
class Leaf:
    """A token: its kind and its text without trivia."""

    tag: TokenSet
    text: str


@dataclass(frozen=True)
class Node:
    """A reduced rule and its children."""

    tag: RuleSet
    children: tuple

    def __post_init__(self):
        object.__setattr__(self, "children", tuple(self.children))


def from_raw(raw):
    """Convert a raw tree into a concrete syntax tree."""
    if isinstance(raw, RawAtom):
        return Leaf(raw.token.kind, raw.token.as_str())
    if isinstance(raw, RawList):
        return Node(raw.rule, tuple(from_raw(elem) for elem in raw.elems))
    raise TypeError(f"not a raw tree: {raw!r}")


def cstree_builder():
    """Return a builder that produces a concrete syntax tree."""
    return RawIRBuilder(from_raw)


class CSTreeWalker:
    """Consumes a tree from the front, one child at a time.

    A walker over a node yields its children in order; a walker over a leaf
    yields the leaf itself once.
    """

    def __init__(self, cst):
        if isinstance(cst, Leaf):
            self._leaf = cst
            self._children = None
        elif isinstance(cst, Node):
            self._leaf = None
            self._children = deque(cst.children)
        else:
            raise TypeError(f"not a tree: {cst!r}")

    def __len__(self):
        if self._children is not None:
            return len(self._children)
        return 1 if self._leaf is not None else 0

    def peek(self):
        """Return ``(token_tag, rule_tag)`` of the next element; unset parts are ``None``."""
        if self._leaf is not None:
            return self._leaf.tag, None
        if self._children:
            head = self._children[0]
            if isinstance(head, Leaf):
                return head.tag, None
            return None, head.tag
        return None, None

    def expect_leaf(self):
        """Consume the next element, which must be a leaf; return ``(tag, text)``."""
        found = self._pop_front()
        if found is None:
            raise IndexError("No more elements in the CSTreeWalker")
        if not isinstance(found, Leaf):
            raise ValueError("Expected a leaf but found a node")
        return found.tag, found.text

    def expect_node(self, factory):
        """Consume the next element and return ``factory`` applied to a walker over it."""
        walker = self._pop_spawn()
        if walker is None:
            raise IndexError("No more elements in the CSTreeWalker")
        return factory(walker)

    def expect_nodes(self, factory):
        """Consume a left-recursive list node and return its items built by ``factory``.

        The list node has the shape ``(list item)`` or ``(item)`` or is empty.
        Returns an empty list when nothing is left.
        """
        walker = self._pop_spawn()
        if walker is None:
            return []

        lasts = []
        tail = None
        while True:
            first = walker._pop_spawn()
            second = walker._pop_spawn()
            if first is None:
                break
            if second is None:
                tail = first
                break
            lasts.append(second)
            walker = first

        items = [factory(tail)] if tail is not None else []
        items.extend(factory(last) for last in reversed(lasts))
        return items

    def _pop_front(self):
        if self._children is not None:
            return self._children.popleft() if self._children else None
        leaf, self._leaf = self._leaf, None
        return leaf

    def _pop_spawn(self):
        tree = self._pop_front()
        return CSTreeWalker(tree) if tree is not None else None