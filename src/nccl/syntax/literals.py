"""Quoted and triple-quoted literal scanning.

Three literal forms exist:

- ``"..."`` / ``'...'``: one physical line; backslash escapes are decoded via
  ``ESCAPES``.
- ``\"\"\"...\"\"\"``: may span physical lines; content is taken verbatim and the
  first ``\"\"\"`` after the opening one closes it.
- Bare text, handled by the lexer itself.

``quote`` is the inverse used by the emitter.
"""

from __future__ import annotations

from collections.abc import Sequence

from nccl.errors import TrailingCharacters, UnknownEscape, UnterminatedLiteral

__all__ = ["BLANK", "ESCAPES", "TRIPLE_QUOTE", "quote", "scan_quoted", "scan_triple"]

TRIPLE_QUOTE = '"""'
# Characters trimmed around line content.  Other Unicode spaces are text.
BLANK = " \t\r"

ESCAPES: dict[str, str] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    '"': '"',
    "'": "'",
}

_QUOTE_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def scan_quoted(source: str, start: int, line: int) -> tuple[str, int]:
    """Decode the quoted literal opening at ``source[start]``.

    Args:
        source: One physical line.
        start:  Index of the opening ``"`` or ``'``.
        line:   1-based line number, for error messages.

    Returns:
        ``(text, end)`` where ``end`` is the index just past the closing quote.

    Raises:
        UnknownEscape: backslash followed by a character not in ``ESCAPES``.
        UnterminatedLiteral: the line ends before the closing quote.
    """
    delimiter = source[start]
    out: list[str] = []
    i = start + 1
    while i < len(source):
        ch = source[i]
        if ch == delimiter:
            return "".join(out), i + 1
        if ch == "\\" and i + 1 < len(source):
            code = source[i + 1]
            if code not in ESCAPES:
                msg = f"unknown escape sequence '\\{code}'"
                raise UnknownEscape(msg, line)
            out.append(ESCAPES[code])
            i += 2
            continue
        if ch == "\\":
            break
        out.append(ch)
        i += 1
    msg = f"missing closing {delimiter} before end of line"
    raise UnterminatedLiteral(msg, line)


def scan_triple(lines: Sequence[str], row: int, column: int) -> tuple[str, int]:
    """Collect a triple-quoted literal whose content starts at ``lines[row][column]``.

    Args:
        lines:  All physical lines of the document.
        row:    0-based index of the line holding the opening delimiter.
        column: Index just past the opening delimiter.

    Returns:
        ``(text, next_row)``: the verbatim content (physical lines joined with
        ``"\\n"``) and the index of the first line after the closing one.

    Raises:
        UnterminatedLiteral: no closing delimiter before the end of input.
        TrailingCharacters: non-whitespace after the closing delimiter.
    """
    parts: list[str] = []
    current = row
    while current < len(lines):
        source = lines[current]
        end = source.find(TRIPLE_QUOTE, column)
        if end != -1:
            parts.append(source[column:end])
            if source[end + len(TRIPLE_QUOTE) :].strip(BLANK):
                msg = "unexpected text after closing triple quote"
                raise TrailingCharacters(msg, current + 1)
            return "\n".join(parts), current + 1
        parts.append(source[column:])
        current += 1
        column = 0
    msg = "missing closing triple quote before end of input"
    raise UnterminatedLiteral(msg, row + 1)


def quote(text: str) -> str:
    """Return ``text`` as a double-quoted literal that ``scan_quoted`` decodes back."""
    return '"' + "".join(_QUOTE_ESCAPES.get(ch, ch) for ch in text) + '"'
