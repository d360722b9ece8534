"""Screen geometry for showing buffer lines in a window.

Lines are addressed by their index in the list handed to :class:`Window`.
A line longer than the screen is wide folds onto further screen rows; the
number of rows it takes is its depth.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Sequence

DEFAULT_COLUMNS = 80
DEFAULT_TABSTOP = 8
DEFAULT_SCREEN_LINES = 23


def display_width(text: str, tabstop: int = DEFAULT_TABSTOP) -> int:
    """Return the number of screen columns ``text`` takes.

    Tabs advance to the next multiple of ``tabstop``, control characters
    show as a caret pair, wide characters take two columns and combining
    marks none.
    """
    if tabstop <= 0:
        raise ValueError("tabstop must be positive")
    column = 0
    for char in text:
        if char == "\t":
            column += tabstop - column % tabstop
        elif char < " " or char == "\x7f":
            column += 2
        elif unicodedata.combining(char):
            continue
        elif unicodedata.east_asian_width(char) in ("W", "F"):
            column += 2
        else:
            column += 1
    return column


class Window:
    """Works out how buffer lines fit on a screen of a given width."""

    def __init__(
        self,
        lines: Sequence[str],
        columns: int = DEFAULT_COLUMNS,
        tabstop: int = DEFAULT_TABSTOP,
    ) -> None:
        if columns <= 0:
            raise ValueError("columns must be positive")
        if tabstop <= 0:
            raise ValueError("tabstop must be positive")
        self.lines = list(lines)
        self.columns = columns
        self.tabstop = tabstop

    def _line(self, index: int) -> str:
        if not 0 <= index < len(self.lines):
            raise IndexError("line out of range")
        return self.lines[index]

    def depth(self, index: int) -> int:
        """Return how many screen rows line ``index`` occupies (at least one)."""
        width = display_width(self._line(index), self.tabstop)
        rows = (width + self.columns - 1) // self.columns
        return rows or 1

    def back(self, index: int, count: int) -> int:
        """Return the earliest line at or before ``index`` whose predecessors
        up to ``index`` fill no more than ``count`` rows."""
        self._line(index)
        if count > 0:
            while index > 0:
                rows = self.depth(index - 1)
                if rows > count:
                    break
                count -= rows
                index -= 1
        return index

    def fit(self, start: int, count: int, dot: int | None = None, slack: int = 0) -> int:
        """Return how many rows rolling ``count`` lines from ``start`` takes.

        When ``start`` lies below ``dot`` the ``slack`` rows already free
        at the bottom of the screen are taken off.
        """
        rows = sum(self.depth(start + offset) for offset in range(count))
        if dot is not None and start > dot:
            rows -= slack
        return rows

    def context_top(
        self, addr: int, where: str = ".", screen_lines: int = DEFAULT_SCREEN_LINES
    ) -> tuple[int, int]:
        """Choose the top line for showing line ``addr`` in context.

        ``where`` is ``"."`` for the middle of the screen, ``"-"`` for the
        bottom and ``"^"`` for the bottom of the screen before this one;
        anything else puts ``addr`` at the top.  Returns the line to show
        and the line to draw from.
        """
        if where == "^":
            addr = self.back(addr, screen_lines - self.depth(addr))
            where = "-"
        if where == "-":
            top = self.back(addr, screen_lines - self.depth(addr))
        elif where == ".":
            top = self.back(addr, screen_lines // 2 - self.depth(addr))
        else:
            self._line(addr)
            top = addr
        return addr, top