"""nccl - indentation-based configuration trees with structural merge."""

from __future__ import annotations

import logging

from nccl.api import dumps, merge, merge_all, parse
from nccl.config import ParseConfig
from nccl.errors import (
    DepthSkip,
    ErrorKind,
    InconsistentIndentation,
    NestingTooDeep,
    ParseError,
    TrailingCharacters,
    UnknownEscape,
    UnterminatedLiteral,
)
from nccl.tree.nodes import Node, Tree

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "DepthSkip",
    "ErrorKind",
    "InconsistentIndentation",
    "NestingTooDeep",
    "Node",
    "ParseConfig",
    "ParseError",
    "TrailingCharacters",
    "Tree",
    "UnknownEscape",
    "UnterminatedLiteral",
    "dumps",
    "merge",
    "merge_all",
    "parse",
]
