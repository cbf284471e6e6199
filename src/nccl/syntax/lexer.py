"""Lexer: turns nccl source text into a lazy sequence of ``Line`` records.

Each logical line becomes one ``Line(depth, text, line)``.  Comment lines
(first non-whitespace character ``#``) and whitespace-only lines produce
nothing.

Indentation is inferred per top-level subtree: the first indented line after
a depth-0 line fixes the indent character (space or tab) and the unit width
for everything until the next depth-0 line.  Deeper lines must be an exact
multiple of that unit made only of that character.

Only space, tab and carriage return count as whitespace; other Unicode spaces
are part of the text.

Example::

    list(Lexer("server\\n    port\\n        80\\n"))
    # [Line(0, "server", 1), Line(1, "port", 2), Line(2, "80", 3)]
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from nccl.config import ParseConfig
from nccl.errors import InconsistentIndentation, TrailingCharacters
from nccl.syntax.literals import BLANK, TRIPLE_QUOTE, scan_quoted, scan_triple

__all__ = ["Lexer", "Line"]

_INDENT_CHARS = " \t"
_CHAR_NAMES = {" ": "spaces", "\t": "tabs"}


@dataclass(frozen=True, slots=True)
class Line:
    """One logical line.

    Attributes:
        depth: Nesting level, 0 for top-level lines.
        text:  Unquoted, unescaped text of the line.
        line:  1-based physical line number where the logical line starts.
    """

    depth: int
    text: str
    line: int


@dataclass(frozen=True, slots=True)
class _IndentUnit:
    char: str
    width: int


class Lexer:
    """Iterable over the ``Line`` records of one document.

    Iteration is lazy and starts from scratch every time, with fresh
    indentation inference, so a ``Lexer`` can be iterated repeatedly.  Errors
    are raised from the iterator at the offending line.
    """

    def __init__(self, text: str, config: ParseConfig | None = None) -> None:
        self._text = text
        self._config = config if config is not None else ParseConfig()

    def __iter__(self) -> Iterator[Line]:
        return self._scan()

    def _scan(self) -> Iterator[Line]:
        lines = self._text.split("\n")
        unit: _IndentUnit | None = None
        row = 0
        while row < len(lines):
            source = lines[row]
            lineno = row + 1
            body = source.lstrip(_INDENT_CHARS)
            if not body.strip(BLANK) or body.lstrip(BLANK).startswith("#"):
                row += 1
                continue

            leading = source[: len(source) - len(body)]
            if not leading:
                unit = None
                depth = 0
            else:
                if unit is None:
                    unit = _infer_unit(leading, lineno)
                depth = _measure(leading, unit, lineno)

            column = len(leading)
            if body.startswith(TRIPLE_QUOTE):
                text, row = scan_triple(lines, row, column + len(TRIPLE_QUOTE))
            elif self._opens_quote(body[0]):
                text, end = scan_quoted(source, column, lineno)
                if source[end:].strip(BLANK):
                    msg = "unexpected text after closing quote"
                    raise TrailingCharacters(msg, lineno)
                row += 1
            else:
                text = body.strip(BLANK)
                row += 1

            yield Line(depth, text, lineno)

    def _opens_quote(self, ch: str) -> bool:
        return ch == '"' or (ch == "'" and self._config.single_quotes)


def _infer_unit(leading: str, line: int) -> _IndentUnit:
    if leading.strip(leading[0]):
        msg = "indentation mixes spaces and tabs"
        raise InconsistentIndentation(msg, line)
    return _IndentUnit(leading[0], len(leading))


def _measure(leading: str, unit: _IndentUnit, line: int) -> int:
    if leading.strip(unit.char):
        msg = (
            "indentation mixes spaces and tabs; this block is indented with "
            f"{_CHAR_NAMES[unit.char]}"
        )
        raise InconsistentIndentation(msg, line)
    if len(leading) % unit.width:
        msg = (
            f"indentation of {len(leading)} {_CHAR_NAMES[unit.char]} is not a "
            f"multiple of {unit.width}"
        )
        raise InconsistentIndentation(msg, line)
    return len(leading) // unit.width
