"""Operator regions and the registers that yanked text is kept in."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from string import ascii_lowercase, ascii_uppercase

_NUMBERED = "123456789"


@dataclass(frozen=True)
class Region:
    """Text an operator acts on, from ``(start, start_col)`` to ``(end, end_col)``.

    A column of None marks a whole-line region.  The end column is exclusive.
    """

    start: int
    start_col: int | None
    end: int
    end_col: int | None

    @property
    def count(self) -> int:
        """Number of lines the region touches."""
        return self.end - self.start + 1

    @property
    def linewise(self) -> bool:
        return self.end_col is None


def _past_white(text: str) -> int:
    return len(text) - len(text.lstrip(" \t"))


def normalize_region(
    lines: Sequence[str],
    dot: int,
    cursor: int | None,
    wdot: int | None,
    wcursor: int | None,
) -> Region:
    """Order the two ends of a region and check that it is reasonable.

    When the far end sits at the very start of a later line, the region is
    pulled back to the end of the previous line, or made whole lines if the
    near end lies within the leading white space.  Raises IndexError when
    either line lies outside the buffer.
    """
    if wdot is None or not 0 <= wdot < len(lines):
        raise IndexError("region end out of range")
    if not 0 <= dot < len(lines):
        raise IndexError("region start out of range")
    if dot > wdot or (
        dot == wdot
        and wcursor is not None
        and cursor is not None
        and cursor > wcursor
    ):
        dot, wdot = wdot, dot
        cursor, wcursor = wcursor, cursor
    if cursor is not None and wcursor == 0 and wdot > dot:
        wdot -= 1
        if _past_white(lines[dot]) >= cursor:
            wcursor = None
        else:
            wcursor = len(lines[wdot])
    return Region(dot, cursor, wdot, wcursor)


class Registers:
    """Named registers ``a``-``z`` and numbered registers ``1``-``9``.

    Yanking into an upper-case name appends to the lower-case register.
    Yanking into ``1`` first moves the numbered registers down one place,
    dropping the oldest.
    """

    def __init__(self) -> None:
        self._store: dict[str, list[str]] = {}

    @staticmethod
    def _check(name: str) -> None:
        if len(name) != 1 or name not in ascii_lowercase + ascii_uppercase + _NUMBERED:
            raise ValueError(f"bad register name: {name!r}")

    def yank(self, name: str, lines: Sequence[str]) -> None:
        """Store ``lines`` in register ``name``."""
        self._check(name)
        text = list(lines)
        if name in ascii_uppercase:
            self._store.setdefault(name.lower(), []).extend(text)
            return
        if name == "1":
            for higher, lower in zip(reversed(_NUMBERED[1:]), reversed(_NUMBERED[:-1])):
                if lower in self._store:
                    self._store[higher] = self._store[lower]
                else:
                    self._store.pop(higher, None)
        self._store[name] = text

    def get(self, name: str) -> list[str]:
        """Return a copy of the lines held in register ``name``."""
        self._check(name)
        return list(self._store.get(name.lower(), []))