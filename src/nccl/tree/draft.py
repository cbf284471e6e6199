"""DraftNode: mutable scaffold used while a tree is being built or merged.

TreeBuilder and the merger append to drafts and call ``freeze`` once at the
end.  A draft's children may mix further drafts with already-frozen ``Node``
subtrees; frozen subtrees are reused as-is.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from nccl.tree.nodes import Node

__all__ = ["DraftNode", "freeze"]


@dataclass(slots=True)
class DraftNode:
    name: str
    children: list[DraftNode | Node] = field(default_factory=list)

    @classmethod
    def thaw(cls, node: Node) -> DraftNode:
        """Open one level of a frozen node for appending; grandchildren stay frozen."""
        return cls(node.name, list(node.children))


def freeze(root: DraftNode) -> Node:
    """Convert a draft tree to immutable Nodes, children before parents."""
    frozen: dict[int, Node] = {}
    pending: list[tuple[DraftNode, bool]] = [(root, False)]
    while pending:
        draft, expanded = pending.pop()
        if expanded:
            frozen[id(draft)] = Node(
                draft.name,
                tuple(
                    c if isinstance(c, Node) else frozen.pop(id(c))
                    for c in draft.children
                ),
            )
        else:
            pending.append((draft, True))
            pending.extend(
                (c, False) for c in draft.children if isinstance(c, DraftNode)
            )
    return frozen[id(root)]
