"""ParseError hierarchy and ErrorKind StrEnum for nccl parse failures.

Every failure detected while lexing or building a tree aborts the whole parse
and surfaces as a subclass of ``ParseError``.  ``ParseError`` subclasses
``ValueError`` so callers that only care about "bad input" can catch the
builtin.

Merge and serialization of valid trees never fail, so nothing here is raised
outside ``parse``.
"""

from __future__ import annotations

from enum import StrEnum, auto

__all__ = [
    "DepthSkip",
    "ErrorKind",
    "InconsistentIndentation",
    "NestingTooDeep",
    "ParseError",
    "TrailingCharacters",
    "UnknownEscape",
    "UnterminatedLiteral",
]


class ErrorKind(StrEnum):
    """Taxonomy of parse failures.

    - UNTERMINATED_LITERAL:     quoted literal has no closing delimiter.
    - INCONSISTENT_INDENTATION: indent is not a multiple of the subtree's unit,
                                or mixes spaces and tabs within one subtree.
    - DEPTH_SKIP:               a line is nested more than one level past its
                                nearest open ancestor.
    - UNKNOWN_ESCAPE:           backslash followed by an unsupported character.
    - TRAILING_CHARACTERS:      text after a closing quote on the same line.
    - NESTING_TOO_DEEP:         depth exceeds ``ParseConfig.max_depth``.
    """

    UNTERMINATED_LITERAL = auto()
    INCONSISTENT_INDENTATION = auto()
    DEPTH_SKIP = auto()
    UNKNOWN_ESCAPE = auto()
    TRAILING_CHARACTERS = auto()
    NESTING_TOO_DEEP = auto()


class ParseError(ValueError):
    """Base class for all nccl parse failures.

    Attributes:
        kind:   Which failure this is (see ErrorKind).
        line:   1-based physical line number where the failure was detected,
                or 0 when it is not tied to a line.
        detail: Human-readable description without the line prefix.
    """

    kind: ErrorKind

    def __init__(self, detail: str, line: int = 0) -> None:
        self.detail = detail
        self.line = line
        super().__init__(f"line {line}: {detail}" if line else detail)


class UnterminatedLiteral(ParseError):
    kind = ErrorKind.UNTERMINATED_LITERAL


class InconsistentIndentation(ParseError):
    kind = ErrorKind.INCONSISTENT_INDENTATION


class DepthSkip(ParseError):
    kind = ErrorKind.DEPTH_SKIP


class UnknownEscape(ParseError):
    kind = ErrorKind.UNKNOWN_ESCAPE


class TrailingCharacters(ParseError):
    kind = ErrorKind.TRAILING_CHARACTERS


class NestingTooDeep(ParseError):
    kind = ErrorKind.NESTING_TOO_DEEP
