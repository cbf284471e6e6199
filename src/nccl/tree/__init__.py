"""Tree subpackage for nccl tree primitives.

Re-exports the public API for the tree module:
- Node: frozen dataclass for one node; the root of a document is a Node too
- Tree: alias of Node used where a whole document is meant
- TreeBuilder: converts lexer Line records into a rooted Node tree
"""

from nccl.tree.builder import TreeBuilder
from nccl.tree.nodes import Node, Tree

__all__ = ["Node", "Tree", "TreeBuilder"]
