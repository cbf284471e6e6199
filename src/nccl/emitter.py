"""Serialize an nccl tree back to source text.

``dumps`` is the inverse of ``parse`` up to whitespace and quoting style:
``parse(dumps(tree)) == tree`` for every tree.  Names that would not survive
as bare text are written as double-quoted literals.
"""

from __future__ import annotations

from nccl.syntax.literals import BLANK, quote
from nccl.tree.nodes import Node

__all__ = ["dumps"]

_QUOTE_STARTS = ('"', "'", "#")


def needs_quoting(name: str) -> bool:
    """Whether ``name`` would be read back differently if written bare."""
    return (
        not name
        or name != name.strip(BLANK)
        or name.startswith(_QUOTE_STARTS)
        or "\n" in name
        or "\r" in name
    )


def dumps(tree: Node, indent: str = "    ") -> str:
    """Render the children of ``tree`` as nccl text.

    Args:
        tree:   Root node; its own name is not written.
        indent: One indentation unit, a non-empty run of only spaces or only
                tabs.

    Returns:
        The document text, one line per node, newline-terminated.  An empty
        tree gives an empty string.

    Raises:
        ValueError: If ``indent`` is not a valid indentation unit.
    """
    if not indent or indent[0] not in " \t" or indent.strip(indent[0]):
        msg = f"indent must be a non-empty run of spaces or of tabs, got {indent!r}"
        raise ValueError(msg)

    lines: list[str] = []
    pending = [(0, c) for c in reversed(tree.children)]
    while pending:
        level, node = pending.pop()
        name = quote(node.name) if needs_quoting(node.name) else node.name
        lines.append(indent * level + name)
        pending.extend((level + 1, c) for c in reversed(node.children))

    return "".join(f"{line}\n" for line in lines)
