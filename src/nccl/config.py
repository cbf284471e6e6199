"""ParseConfig: immutable knobs for the nccl parser.

ParseConfig is a frozen dataclass validated on construction, so an invalid
configuration fails at the call site rather than half-way through a parse.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ParseConfig"]


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable configuration for ``parse``.

    Attributes:
        single_quotes: When True (default), a line starting with ``'`` opens a
            single-quoted literal with the same escape rules as ``"``.  When
            False, a leading ``'`` is ordinary bare text.
        max_depth: Maximum nesting depth, counting top-level nodes as depth 1.
            ``None`` (default) means unbounded.  Exceeding it raises
            ``NestingTooDeep``.
    """

    single_quotes: bool = True
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            msg = f"max_depth must be >= 1 or None, got {self.max_depth}"
            raise ValueError(msg)
