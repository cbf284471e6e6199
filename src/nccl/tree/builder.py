"""TreeBuilder: consumes lexer ``Line`` records and produces one rooted tree.

Parent/child links come from an explicit stack of open nodes indexed by
depth (``stack[0]`` is the root).  A line at depth ``d`` becomes a child of
``stack[d]`` and closes every open branch deeper than ``d``.  Nesting depth of
the input therefore costs list entries, never interpreter stack frames.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from nccl.config import ParseConfig
from nccl.errors import DepthSkip, NestingTooDeep
from nccl.syntax.lexer import Line
from nccl.tree.draft import DraftNode, freeze
from nccl.tree.nodes import Node

__all__ = ["TreeBuilder"]


@dataclass
class TreeBuilder:
    """Builds a ``Node`` tree from a sequence of ``Line`` records.

    The builder holds no per-document state between calls; one instance can
    build any number of trees.

    Example::

        builder = TreeBuilder()
        tree = builder.build([Line(0, "server", 1), Line(1, "port", 2)])
        # tree: root -> server -> port
    """

    config: ParseConfig = field(default_factory=ParseConfig)

    def build(self, lines: Iterable[Line]) -> Node:
        """Attach every line under its parent and return the frozen root.

        Args:
            lines: Lines in document order, typically a ``Lexer``.  Errors
                raised while iterating propagate unchanged.

        Returns:
            The root node (empty name).  Empty input gives a root with no
            children.

        Raises:
            DepthSkip: A line is more than one level deeper than the innermost
                open node.
            NestingTooDeep: A line is deeper than ``config.max_depth``.
        """
        root = DraftNode("")
        stack: list[DraftNode] = [root]
        max_depth = self.config.max_depth

        for entry in lines:
            if entry.depth >= len(stack):
                msg = (
                    f"line is nested at depth {entry.depth} but the deepest "
                    f"open parent allows at most {len(stack) - 1}"
                )
                raise DepthSkip(msg, entry.line)
            if max_depth is not None and entry.depth >= max_depth:
                msg = f"nesting exceeds max_depth={max_depth}"
                raise NestingTooDeep(msg, entry.line)

            node = DraftNode(entry.text)
            stack[entry.depth].children.append(node)
            del stack[entry.depth + 1 :]
            stack.append(node)

        return freeze(root)
