"""Recording of inserted text for repeats, and repeat-count limits."""

from __future__ import annotations


class LineTooLongError(ValueError):
    """Raised when an edit would make a line longer than allowed."""

    def __init__(self, message: str = "Line too long") -> None:
        super().__init__(message)


class InsertRecord:
    """The text of the last insertion, kept so it can be repeated.

    Once the text grows beyond what fits within ``limit`` the record is
    marked as overflowed and no longer accepts characters until cleared.
    """

    def __init__(self, limit: int = 128) -> None:
        if limit < 3:
            raise ValueError("limit must be at least 3")
        self.limit = limit
        self._chars: list[str] = []
        self._overflowed = False

    @property
    def overflowed(self) -> bool:
        return self._overflowed

    def add(self, char: str) -> None:
        """Append ``char`` to the record, overflowing if it would not fit."""
        if self._overflowed:
            return
        if len(self._chars) + 2 >= self.limit:
            self._overflowed = True
            self._chars.clear()
            return
        self._chars.append(char)

    def clear(self) -> None:
        """Start a fresh, empty record."""
        self._chars.clear()
        self._overflowed = False

    def text(self) -> str | None:
        """Return the recorded text, or None if it overflowed."""
        if self._overflowed:
            return None
        return "".join(self._chars)


def max_repeat(line: str, inserted: str, count: int, limit: int) -> int:
    """Return how many times ``inserted`` may be added to ``line``.

    The count is capped so the resulting line stays within ``limit - 2``
    characters.  Raises LineTooLongError when not even one copy fits.
    """
    room = limit - 2
    count = min(count, room)
    if len(line) + count * len(inserted) <= room:
        return count
    count = (room - len(line)) // len(inserted)
    if count <= 0:
        raise LineTooLongError()
    return count