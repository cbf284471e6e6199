"""Node: the single immutable structural unit of an nccl tree.

A parsed document is a synthetic root ``Node`` (empty name) whose children are
the top-level lines.  There is no key/value distinction in the data model: a
leaf is conventionally read as a value and a node with children as a key, but
both are the same type.

Nodes are frozen once built, so finished trees can be shared freely.  Equality
ignores child order (names must match and children must match as multisets);
``__eq__``, ``__hash__``, ``pretty`` and ``walk`` are all written without
recursion so that very deep documents never hit the interpreter's recursion
limit.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias, TypeVar

__all__ = ["Node", "Tree"]

_T = TypeVar("_T")


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Node:
    """A node in an nccl tree.

    Attributes:
        name:     Literal text of the source line after unquoting/unescaping.
                  Never type-coerced.  Empty for the synthetic root.
        children: Child nodes in source (or merge) order.  Lists are accepted
                  at construction and stored as a tuple.
    """

    name: str
    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @classmethod
    def of(cls, name: str, *children: Node | str) -> Node:
        """Build a node from nested nodes or plain strings (strings become leaves).

        Example::

            Node.of("server", Node.of("port", "80", "443"), Node.of("root", "/srv"))
        """
        return cls(name, tuple(c if isinstance(c, Node) else cls(c) for c in children))

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def child(self) -> Node | None:
        """The first child, or None for a leaf."""
        return self.children[0] if self.children else None

    @property
    def value(self) -> str | None:
        """Name of the first child, or None for a leaf.

        For ``port`` with children ``80`` and ``443`` this is ``"80"``.
        """
        return self.children[0].name if self.children else None

    def values(self) -> Iterator[str]:
        """Iterate over the names of all children, in order."""
        return (c.name for c in self.children)

    def get(self, name: str, default: _T | None = None) -> Node | _T | None:
        """Return the first child named ``name`` or ``default``."""
        for c in self.children:
            if c.name == name:
                return c
        return default

    def has_value(self, name: str) -> bool:
        return any(c.name == name for c in self.children)

    def __getitem__(self, name: str) -> Node:
        found = self.get(name)
        if found is None:
            raise KeyError(name)
        return found

    def __contains__(self, item: object) -> bool:
        """``"name" in node`` tests child names; ``child in node`` tests children."""
        if isinstance(item, Node):
            return item in self.children
        return isinstance(item, str) and self.has_value(item)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.children)

    def walk(self) -> Iterator[tuple[int, Node]]:
        """Yield ``(depth, node)`` in pre-order, starting with ``(0, self)``."""
        pending: list[tuple[int, Node]] = [(0, self)]
        while pending:
            depth, node = pending.pop()
            yield depth, node
            pending.extend((depth + 1, c) for c in reversed(node.children))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def pretty(self) -> str:
        """Render the subtree with four spaces per level.

        A node with an empty name (the root) is not rendered itself; its
        children start at column zero.  Names are printed raw, without quoting.
        Use ``nccl.dumps`` for output that parses back.
        """
        start = [self] if self.name else list(self.children)
        lines: list[str] = []
        pending = [(0, n) for n in reversed(start)]
        while pending:
            level, node = pending.pop()
            lines.append("    " * level + node.name)
            pending.extend((level + 1, c) for c in reversed(node.children))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.pretty()

    def __repr__(self) -> str:
        return f"Node({self.name!r}, children={len(self.children)})"

    # ------------------------------------------------------------------
    # Order-insensitive equality
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        if self is other:
            return True
        if self.name != other.name or len(self.children) != len(other.children):
            return False
        left, right = _intern(self, other)
        return left == right

    def __hash__(self) -> int:
        return _fingerprint(self)


Tree: TypeAlias = Node


def _post_order(root: Node) -> Iterator[Node]:
    """Yield every node of ``root``'s subtree after all of its children."""
    pending: list[tuple[Node, bool]] = [(root, False)]
    while pending:
        node, expanded = pending.pop()
        if expanded:
            yield node
        else:
            pending.append((node, True))
            pending.extend((c, False) for c in node.children)


def _intern(*roots: Node) -> list[int]:
    """Map each root to an integer that is equal iff the subtrees are equal.

    Subtrees are numbered bottom-up through one shared table keyed by
    ``(name, sorted child numbers)``, so the keys stay flat however deep
    the trees are.
    """
    table: dict[tuple[str, tuple[int, ...]], int] = {}
    ids: dict[int, int] = {}
    for root in roots:
        for node in _post_order(root):
            key = (node.name, tuple(sorted(ids[id(c)] for c in node.children)))
            ids[id(node)] = table.setdefault(key, len(table))
    return [ids[id(root)] for root in roots]


def _fingerprint(root: Node) -> int:
    hashes: dict[int, int] = {}
    for node in _post_order(root):
        hashes[id(node)] = hash(
            (node.name, tuple(sorted(hashes[id(c)] for c in node.children)))
        )
    return hashes[id(root)]
