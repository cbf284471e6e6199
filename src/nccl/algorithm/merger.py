"""TreeMerger: structural union of two nccl trees by name matching.

Starting at the two roots, the result's children are the base's children in
order; each overlay child is then merged into the first result child with the
exact same name, or appended when no such child exists.  Merging recurses
into matched children with the same rule.

Consequences worth keeping in mind:

- Same-named leaves collapse into one node.
- Differently named overlay children are appended after the base's, which
  gives list-extension for values under a shared key.
- ``merge(a, empty)`` equals ``a``; ``merge`` is not commutative.

The recursion in that definition is executed with a FIFO work queue of
``(target draft, overlay node)`` pairs.  Work items for the same target are
queued in the same relative order the recursive definition would visit them,
so the result is identical while the call stack stays flat.
"""

from __future__ import annotations

from collections import deque

from nccl.tree.draft import DraftNode, freeze
from nccl.tree.nodes import Node

__all__ = ["TreeMerger"]


class TreeMerger:
    """Merges an overlay tree into a base tree without mutating either.

    Untouched subtrees of both inputs are reused in the result; only the
    nodes along matched paths are rebuilt.  Since nodes are immutable this
    is indistinguishable from deep-copying them.

    Example::

        base = Node.of("", Node.of("port", "80"))
        overlay = Node.of("", Node.of("port", "443"))
        TreeMerger().merge(base, overlay)["port"].values()  # "80", "443"
    """

    def merge(self, base: Node, overlay: Node) -> Node:
        """Return the merge of ``overlay`` into ``base``.

        Args:
            base:    Tree whose order and matched nodes take precedence.
            overlay: Tree whose children are merged in or appended.

        Returns:
            A new root named like ``base``.
        """
        root = DraftNode.thaw(base)
        positions: dict[int, dict[str, int]] = {}
        queue: deque[tuple[DraftNode, Node]] = deque([(root, overlay)])

        while queue:
            target, incoming = queue.popleft()
            index = positions.get(id(target))
            if index is None:
                index = positions[id(target)] = _first_positions(target)

            for child in incoming.children:
                at = index.get(child.name)
                if at is None:
                    index[child.name] = len(target.children)
                    target.children.append(child)
                    continue
                if child.is_leaf:
                    continue

                match = target.children[at]
                if isinstance(match, Node):
                    match = DraftNode.thaw(match)
                    target.children[at] = match
                queue.append((match, child))

        return freeze(root)


def _first_positions(draft: DraftNode) -> dict[str, int]:
    """Map each child name to the index of its first occurrence."""
    first: dict[str, int] = {}
    for at, child in enumerate(draft.children):
        first.setdefault(child.name, at)
    return first
