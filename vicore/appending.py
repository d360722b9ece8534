"""Building new line images for insert, replace and open commands."""

from __future__ import annotations

from collections.abc import Sequence

from vicore.insertion import max_repeat

TABSTOP = 8
LIMIT = 4096


def _whitecnt(text: str) -> int:
    column = 0
    for char in text:
        if char == " ":
            column += 1
        elif char == "\t":
            column += TABSTOP - column % TABSTOP
        else:
            break
    return column


def _genindent(width: int) -> str:
    return "\t" * (width // TABSTOP) + " " * (width % TABSTOP)


def _check_cursor(line: str, cursor: int) -> None:
    if not 0 <= cursor <= len(line):
        raise IndexError("cursor out of range")


def _check_count(count: int) -> None:
    if count < 1:
        raise ValueError("count must be at least 1")


def _final_cursor(position: int) -> int:
    return position - 1 if position > 0 else 0


def insert_text(
    line: str, cursor: int, text: str, count: int = 1, limit: int = LIMIT
) -> tuple[str, int]:
    """Insert ``count`` copies of ``text`` before column ``cursor``.

    The count is reduced so the line stays within ``limit``.  Returns the
    new line and the cursor, which rests on the last inserted character.
    """
    _check_cursor(line, cursor)
    _check_count(count)
    if text:
        count = max_repeat(line, text, count, limit)
    inserted = text * count
    result = line[:cursor] + inserted + line[cursor:]
    return result, _final_cursor(cursor + len(inserted))


def overwrite_text(
    line: str, cursor: int, text: str, count: int = 1, limit: int = LIMIT
) -> tuple[str, int]:
    """Type ``text`` over the line from ``cursor`` on, ``count`` times.

    Only the first copy replaces existing characters; further copies are
    inserted after it.  Returns the new line and the cursor.
    """
    _check_cursor(line, cursor)
    _check_count(count)
    covered = min(len(line) - cursor, len(text))
    line = line[:cursor] + line[cursor + covered :]
    if text:
        count = max_repeat(line, text, count, limit)
    inserted = text * count
    result = line[:cursor] + inserted + line[cursor:]
    return result, _final_cursor(cursor + len(inserted))


def open_line(
    lines: Sequence[str], dot: int, above: bool = False, indent: bool = False
) -> tuple[list[str], int, int]:
    """Open a new line below (or above) line ``dot``.

    With ``indent`` the new line takes the leading white space of line
    ``dot``, made of tabs and spaces.  Returns the new lines, the index of
    the opened line and the cursor column on it.
    """
    result = list(lines)
    if not result:
        return [""], 0, 0
    if not 0 <= dot < len(result):
        raise IndexError("line out of range")
    prefix = _genindent(_whitecnt(result[dot])) if indent else ""
    position = dot if above else dot + 1
    result.insert(position, prefix)
    return result, position, len(prefix)