"""Reading a line of inserted text from a stream of keys.

This handles the editing keys of insert mode: erase, kill, word erase,
quoting, soft tabs and backtabs, word abbreviations and the wrap margin.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from vicore.insertion import LineTooLongError
from vicore.window import display_width

ESCAPE = "\x1b"
ATTN = "\x7f"
QUIT = "\x1c"
CTRL_D = "\x04"
CTRL_H = "\b"
CTRL_Q = "\x11"
CTRL_T = "\x14"
CTRL_V = "\x16"
CTRL_W = "\x17"

_SPACE = " \t\n\v\f\r"
_KILL = object()


def _is_space(char: str) -> bool:
    return char in _SPACE


def _is_word(char: str) -> bool:
    return char.isalnum() or char == "_"


@dataclass(frozen=True)
class InputResult:
    """What one call of :meth:`LineInput.read` produced.

    ``text`` is the whole buffer including any prefix, ``start`` where the
    typed part begins.  ``terminator`` is the newline, escape or interrupt
    key that ended input, or None if the keys ran out.  ``pending`` holds
    keys pushed back by abbreviations or wrapping that were not read.
    """

    text: str
    terminator: str | None
    start: int
    backtabs: int = 0
    margin: str | None = None
    gobbled: bool = False
    pending: tuple[str, ...] = ()


class LineInput:
    """Collects typed characters into a line, with insert-mode editing."""

    tabstop = 8
    shiftwidth = 8
    limit = 4096

    def __init__(
        self,
        erase: str = CTRL_H,
        kill: str = "\x15",
        wrapmargin: int = 0,
        columns: int = 80,
        abbreviations: Mapping[str, str] | None = None,
    ) -> None:
        if columns <= 0:
            raise ValueError("columns must be positive")
        self.erase = erase
        self.kill = kill
        self.wrapmargin = wrapmargin
        self.columns = columns
        self.abbreviations = list((abbreviations or {}).items())

    def _whitecnt(self, text: str) -> int:
        column = 0
        for char in text:
            if char == " ":
                column += 1
            elif char == "\t":
                column += self.tabstop - column % self.tabstop
            else:
                break
        return column

    def _indent(self, width: int) -> str:
        return "\t" * (width // self.tabstop) + " " * (width % self.tabstop)

    def _backtab(self, width: int) -> int:
        step = width % self.shiftwidth or self.shiftwidth
        return max(width - step, 0)

    @staticmethod
    def _word_start(buf: str, start: int) -> int:
        cp = len(buf)
        while cp > start and _is_space(buf[cp - 1]):
            cp -= 1
        if cp > start:
            kind = _is_word(buf[cp - 1])
            while cp > start and not _is_space(buf[cp - 1]) and _is_word(buf[cp - 1]) == kind:
                cp -= 1
        return cp

    def read(self, keys: Iterable[str], prefix: str = "") -> InputResult:
        """Read keys until a newline, escape or interrupt, or until they end."""
        source = iter(keys)
        pushed: deque[str] = deque()

        def getkey() -> str | None:
            if pushed:
                return pushed.popleft()
            return next(source, None)

        def push(text: str) -> None:
            pushed.extendleft(reversed(text))

        buf = prefix
        start = len(prefix)
        iwhite = self._whitecnt(prefix)
        backtabs = 0
        margin: str | None = None
        gobbled = False
        gobblebl = 0
        used: set[str] = set()
        terminator: str | None = None

        while True:
            backsl = False
            if gobblebl:
                gobblebl -= 1
            key = getkey()
            if key is None:
                break
            c: object = key
            if c == self.erase:
                c = CTRL_H
            elif c == self.kill:
                c = _KILL
            if c == ATTN or c == QUIT:
                terminator = key
                break

            target: int | None = None
            literal = False
            if c == CTRL_H:
                if len(buf) <= start:
                    continue
                target = len(buf) - 1
            elif c == CTRL_W:
                target = self._word_start(buf, start)
            elif c is _KILL:
                target = start
            elif c == "\\":
                following = getkey()
                if following is not None and following in (self.erase, self.kill):
                    c = following
                    literal = True
                else:
                    if following is not None:
                        push(following)
                    backsl = True
            elif c in (CTRL_Q, CTRL_V):
                following = getkey()
                if following is None:
                    break
                c = following
                literal = c != "\n"
            if target is not None:
                buf = buf[:target]
                continue
            assert isinstance(c, str)

            if not literal:
                if c != "\n":
                    if c == " " and gobblebl:
                        gobbled = True
                        continue
                    if self.wrapmargin:
                        column = display_width(buf, self.tabstop)
                        threshold = self.columns - self.wrapmargin
                        if column >= threshold or (backsl and column == 0):
                            work = buf + c
                            if backsl:
                                following = getkey()
                                if following is not None:
                                    work += following
                            cp = len(work)
                            while cp > start and _is_space(work[cp - 1]):
                                cp -= 1
                            extra = self.columns if backsl else 0
                            wrap = True
                            if column + extra - (len(work) - cp) >= threshold:
                                while cp > start and not _is_space(work[cp - 1]):
                                    cp -= 1
                                if cp <= start:
                                    c = work[-1]
                                    buf = work[:-1]
                                    wrap = False
                                else:
                                    push(work[cp:])
                                    cp -= 1
                            if wrap:
                                push("\n")
                                while cp > start and _is_space(work[cp - 1]):
                                    cp -= 1
                                gobblebl = 3
                                buf = work[:cp]
                                continue

                if (
                    self.abbreviations
                    and len(buf) > start
                    and not _is_word(c)
                    and _is_word(buf[-1])
                ):
                    cp = len(buf)
                    while cp > start and _is_word(buf[cp - 1]):
                        cp -= 1
                    word = buf[cp:]
                    expanded = False
                    for name, value in self.abbreviations:
                        if name not in used and name == word:
                            used.add(name)
                            push(c)
                            push(value)
                            buf = buf[:cp]
                            expanded = True
                            break
                    if expanded:
                        continue

                if c == "\r":
                    c = "\n"
                if c == "\n":
                    terminator = c
                    break
                if c == ESCAPE:
                    terminator = c
                    break
                if c in (CTRL_D, CTRL_T):
                    pastwh = len(buf) - len(buf.lstrip(" \t"))
                    white = self._whitecnt(buf)
                    if c == CTRL_T:
                        if pastwh == len(buf):
                            iwhite = self._backtab(white + self.shiftwidth + 1)
                            buf = self._indent(iwhite)
                            start = len(buf)
                        continue
                    if white == iwhite and white != 0:
                        if pastwh == len(buf):
                            iwhite = self._backtab(white)
                            backtabs += 1
                            buf = self._indent(iwhite)
                            start = len(buf)
                        elif pastwh + 1 == len(buf) and buf[pastwh] in "^0":
                            margin = buf[pastwh]
                            buf = ""
                            start = 0
                            backtabs = 1
                    continue

            if len(buf) > self.limit - 2:
                raise LineTooLongError()
            buf += c

        return InputResult(
            text=buf,
            terminator=terminator,
            start=start,
            backtabs=backtabs,
            margin=margin,
            gobbled=gobbled,
            pending=tuple(pushed),
        )