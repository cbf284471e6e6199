"""Public API functions for nccl.

``parse`` turns text into a tree, ``merge``/``merge_all`` combine trees and
``dumps`` writes a tree back out.  Each call builds its own lexer, builder or
merger, so no state is shared between calls.
"""

from __future__ import annotations

import logging

from nccl.algorithm.merger import TreeMerger
from nccl.config import ParseConfig
from nccl.emitter import dumps
from nccl.syntax.lexer import Lexer
from nccl.tree.builder import TreeBuilder
from nccl.tree.nodes import Node

__all__ = ["dumps", "merge", "merge_all", "parse"]

logger = logging.getLogger(__name__)


def parse(text: str, config: ParseConfig | None = None) -> Node:
    """Parse nccl source text into a tree.

    Args:
        text:   The whole document.
        config: Parser options.  Defaults to ``ParseConfig()`` when None.

    Returns:
        The root node (empty name) whose children are the top-level lines.

    Raises:
        ParseError: On the first lexical or structural error.  No partial tree
            is returned.
    """
    config = config if config is not None else ParseConfig()
    logger.debug("parsing %d chars", len(text))
    tree = TreeBuilder(config=config).build(Lexer(text, config=config))
    logger.debug("parsed %d top-level nodes", len(tree.children))
    return tree


def merge(base: Node, overlay: Node) -> Node:
    """Return the structural union of ``base`` and ``overlay``.

    Children of ``overlay`` are matched to children of ``base`` by exact name
    at every level; matches are merged, the rest appended.  Neither input is
    modified.

    Args:
        base:    The tree being extended.
        overlay: The tree extending it.

    Returns:
        A new tree.  ``merge(base, Node(""))`` equals ``base``.
    """
    logger.debug(
        "merging %d overlay top-level nodes into %d base top-level nodes",
        len(overlay.children),
        len(base.children),
    )
    return TreeMerger().merge(base, overlay)


def merge_all(*trees: Node) -> Node:
    """Fold ``merge`` over ``trees`` left to right.

    ``merge_all(a, b, c)`` is ``merge(merge(a, b), c)``.  With no arguments
    the result is an empty root.
    """
    if not trees:
        return Node("")
    merger = TreeMerger()
    result = trees[0]
    for overlay in trees[1:]:
        result = merger.merge(result, overlay)
    return result
