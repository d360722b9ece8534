"""Delete, change, replace, shift and yank operators with one level of undo.

:class:`LineEdit` works on the characters of a single line, :class:`Editor`
on whole lines of a buffer.  Undo swaps the current state with the one
saved before the last change, so undoing twice redoes the change.
"""

from __future__ import annotations

from collections.abc import Sequence

from vicore.registers import Region, Registers, normalize_region

TABSTOP = 8


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


def _indent(width: int) -> str:
    return "\t" * (width // TABSTOP) + " " * (width % TABSTOP)


class LineEdit:
    """Character operations within one line.

    ``deleted`` holds the text removed by the last delete or change, ready
    to be put back elsewhere.
    """

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.cursor = 0
        self.deleted = ""
        self._saved: str | None = None
        self._change_start = 0

    def _check(self, position: int) -> None:
        if not 0 <= position <= len(self.text):
            raise IndexError("column out of range")

    def _ordered(self, start: int, end: int) -> tuple[int, int]:
        self._check(start)
        self._check(end)
        if end < start:
            start, end = end, start
        if start == end:
            raise ValueError("empty range")
        return start, end

    def _remember(self, start: int) -> None:
        self._saved = self.text
        self._change_start = start

    def delete(self, start: int, end: int) -> int:
        """Delete the characters from ``start`` up to ``end`` and return the cursor."""
        start, end = self._ordered(start, end)
        self._remember(start)
        self.deleted = self.text[start:end]
        self.text = self.text[:start] + self.text[end:]
        cursor = start
        if cursor > 0 and cursor >= len(self.text):
            cursor -= 1
        self.cursor = cursor
        return cursor

    def change(self, start: int, end: int, replacement: str) -> int:
        """Replace the characters from ``start`` up to ``end`` with ``replacement``.

        The cursor rests on the last character typed in.
        """
        start, end = self._ordered(start, end)
        self._remember(start)
        self.deleted = self.text[start:end]
        self.text = self.text[:start] + replacement + self.text[end:]
        self.cursor = max(start + len(replacement) - 1, 0)
        return self.cursor

    def replace(self, cursor: int, count: int, char: str) -> int:
        """Replace ``count`` characters from ``cursor`` on with ``char``."""
        self._check(cursor)
        if len(char) != 1:
            raise ValueError("replacement must be a single character")
        if count < 1 or count > len(self.text) - cursor:
            raise ValueError("count exceeds the rest of the line")
        self._remember(cursor)
        self.text = self.text[:cursor] + char * count + self.text[cursor + count :]
        self.cursor = cursor + count - 1
        return self.cursor

    def undo(self) -> str:
        """Swap back the text from before the last change and return it."""
        if self._saved is None:
            raise ValueError("nothing to undo")
        self.text, self._saved = self._saved, self.text
        self.cursor = max(min(self._change_start, len(self.text) - 1), 0)
        return self.text


class Editor:
    """Line-range operators over a buffer, with registers and undo.

    Deleted lines go into numbered register ``1`` (older deletes move down)
    and into ``unnamed``; yanks go into ``unnamed`` and the named register
    if one is given.
    """

    def __init__(self, lines: Sequence[str]) -> None:
        self.lines = list(lines)
        self.dot = 0
        self.registers = Registers()
        self.unnamed: list[str] = []
        self._undo: tuple[list[str], int] | None = None

    def _region(self, start: int, end: int) -> Region:
        return normalize_region(self.lines, start, None, end, None)

    def _save(self) -> None:
        self._undo = (list(self.lines), self.dot)

    def delete_range(self, start: int, end: int) -> list[str]:
        """Delete lines ``start`` to ``end`` inclusive and return them."""
        region = self._region(start, end)
        deleted = self.lines[region.start : region.end + 1]
        self._save()
        self.registers.yank("1", deleted)
        self.unnamed = list(deleted)
        del self.lines[region.start : region.end + 1]
        self.dot = min(region.start, len(self.lines) - 1) if self.lines else 0
        return deleted

    def shift(
        self, start: int, end: int, direction: str, shiftwidth: int = 8
    ) -> list[str]:
        """Shift lines ``start`` to ``end`` right (``">"``) or left (``"<"``).

        Empty lines are left alone.  Returns the shifted lines.
        """
        if direction not in ("<", ">"):
            raise ValueError("direction must be '<' or '>'")
        if shiftwidth <= 0:
            raise ValueError("shiftwidth must be positive")
        region = self._region(start, end)
        self._save()
        step = shiftwidth if direction == ">" else -shiftwidth
        for index in range(region.start, region.end + 1):
            text = self.lines[index]
            if text == "":
                continue
            width = max(_whitecnt(text) + step, 0)
            self.lines[index] = _indent(width) + text.lstrip(" \t")
        self.dot = region.start
        return self.lines[region.start : region.end + 1]

    def yank(self, start: int, end: int, register: str | None = None) -> list[str]:
        """Copy lines ``start`` to ``end`` into the registers and return them.

        A yank leaves nothing to undo.
        """
        region = self._region(start, end)
        yanked = self.lines[region.start : region.end + 1]
        if register is not None:
            self.registers.yank(register, yanked)
        self.unnamed = list(yanked)
        self._undo = None
        self.dot = region.start
        return list(yanked)

    def undo(self) -> list[str]:
        """Swap back the buffer from before the last change and return it."""
        if self._undo is None:
            raise ValueError("nothing to undo")
        current = (list(self.lines), self.dot)
        self.lines, self.dot = self._undo
        self._undo = current
        return list(self.lines)