"""Motions over text structure: sentences, paragraphs, sections and s-expressions.

Lines are addressed by their index in the list handed to :class:`Motion`
and cursors by the index of a character within a line.  A position is a
``(line, column)`` tuple.  A column equal to the length of the line stands
for the end of the line.
"""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_PARAGRAPHS = "IPLPPPQPP LIpplpipbp"
DEFAULT_SECTIONS = "NHSHH HUnhsh"
TABSTOP = 8

_SPACE = " \t\n\v\f\r"
_SENTENCE_END = ".!?"
_CLOSERS = ")]'"


def _whitecnt(text: str, tabstop: int) -> int:
    column = 0
    for char in text:
        if char == " ":
            column += 1
        elif char == "\t":
            column += tabstop - column % tabstop
        else:
            break
    return column


def _width(text: str, tabstop: int) -> int:
    column = 0
    for char in text:
        if char == "\t":
            column += tabstop - column % tabstop
        else:
            column += 1
    return column


def is_macro_line(text: str, macros: str) -> bool:
    """Tell whether ``text`` is a formatter request named in ``macros``.

    ``macros`` holds two-character request names run together; a name
    whose second character is a blank also matches a one-letter request.
    """
    if not text.startswith("."):
        return False
    first, second = text[1:2], text[2:3]
    for a, b in zip(macros[::2], macros[1::2]):
        if first == a and (second == b or (second == "" and b == " ")):
            return True
    return False


def ends_paragraph(text: str, paragraphs: str, sections: str) -> bool:
    """Tell whether ``text`` is a blank line or a paragraph or section request."""
    return (
        text == ""
        or is_macro_line(text, paragraphs)
        or is_macro_line(text, sections)
    )


def _toggle(char: str) -> str:
    if char.isupper():
        other = char.lower()
    elif char.islower():
        other = char.upper()
    else:
        return char
    return other if len(other) == 1 else char


def switch_case(text: str, cursor: int, count: int) -> tuple[str, int]:
    """Toggle the case of up to ``count`` characters starting at ``cursor``.

    Returns the new text and the new cursor, which rests after the changed
    characters, or on the last one when they reach the end of the line.
    """
    if cursor < 0 or cursor > len(text):
        raise IndexError("cursor out of range")
    if cursor == len(text):
        return text, cursor
    n = min(max(count, 1), len(text) - cursor)
    segment = "".join(_toggle(char) for char in text[cursor : cursor + n])
    result = text[:cursor] + segment + text[cursor + n :]
    end = cursor + n
    return result, end if end < len(result) else end - 1


class Motion:
    """Finds structural positions in a list of lines.

    Set ``moving`` to true when the motion is a plain cursor move rather
    than the target of an operator; it keeps the cursor on the last
    character instead of past it at the end of the buffer.
    """

    tabstop = TABSTOP

    def __init__(
        self,
        lines: Sequence[str],
        paragraphs: str = DEFAULT_PARAGRAPHS,
        sections: str = DEFAULT_SECTIONS,
        lisp: bool = False,
    ) -> None:
        self.lines = list(lines)
        self.paragraphs = paragraphs
        self.sections = sections
        self.lisp = lisp
        self.moving = False
        self._buf = ""
        self._wdot: int | None = 0
        self._wcur = 0
        self._dir = 1
        self._llimit = 0
        self._lf: str | None = None

    # -- low level stepping -------------------------------------------------

    @property
    def _last(self) -> int:
        return len(self.lines) - 1

    def _char(self, column: int | None = None) -> str:
        if column is None:
            column = self._wcur
        if 0 <= column < len(self._buf):
            return self._buf[column]
        return ""

    def _load(self, index: int) -> None:
        self._buf = self.lines[index]

    def _start(self, dot: int, cursor: int, direction: int) -> None:
        if not self.lines:
            raise ValueError("no lines")
        if not 0 <= dot <= self._last:
            raise IndexError("line out of range")
        if direction not in (1, -1):
            raise ValueError("direction must be 1 or -1")
        self._dir = direction
        self._wdot = dot
        self._wcur = cursor
        self._load(dot)

    def _next(self) -> bool:
        if self._dir > 0:
            if self._char():
                self._wcur += 1
            if self._char():
                return True
            if self._wdot >= self._llimit:
                if self._lf == "move" and self._wcur > 0:
                    self._wcur -= 1
                return False
            self._wdot += 1
            self._load(self._wdot)
            self._wcur = 0
            return True
        self._wcur -= 1
        if self._wcur >= 0:
            return True
        if self._lf == "lindent" and self._buf.startswith("("):
            self._llimit = self._wdot
        if self._wdot <= self._llimit:
            self._wcur = 0
            return False
        self._wdot -= 1
        self._load(self._wdot)
        self._wcur = 0 if self._buf == "" else len(self._buf) - 1
        return True

    def _end_ps(self) -> bool:
        return ends_paragraph(self._buf, self.paragraphs, self.sections)

    def _end_sentence(self, pastatom: bool) -> bool:
        cp = self._wcur
        if cp == 0:
            return self._end_ps()
        char = self._char(cp)
        if char and char in _SENTENCE_END:
            while True:
                cp += 1
                following = self._char(cp)
                if not following:
                    return True
                if following not in _CLOSERS:
                    break
            first = self._char(cp)
            cp += 1
            if first == " " and self._char(cp) == " ":
                return True
        if self._char(cp + 1) == "":
            return self._end_ps()
        return False

    def _to_solid(self, parens: str) -> bool:
        if parens and not self._char() and not self._next():
            return False
        while self._char() in tuple(_SPACE) or (self._char() == "" and parens):
            if not self._next():
                return False
        char = self._char()
        if (char and char in parens) or self._dir > 0:
            return True
        cp = self._wcur
        while cp > 0:
            before = self._char(cp - 1)
            if before in tuple(_SPACE) or (before and before in parens):
                break
            cp -= 1
        self._wcur = cp
        return True

    def _skip_balanced(self, parens: str) -> bool:
        level = self._dir
        while True:
            if not self._next():
                self._wdot = None
                return False
            char = self._char()
            if char == parens[1]:
                level -= 1
            elif char == parens[0]:
                level += 1
            if level == 0:
                return True

    def _skip_atom(self, parens: str) -> bool:
        while True:
            if self._dir < 0 and self._wcur == 0:
                if not self._next():
                    return False
                break
            char = self._char()
            if char and (char in _SPACE or char in parens):
                break
            if not self._next():
                return False
            if self._dir > 0 and self._wcur == 0:
                break
        return self._to_solid(parens)

    def _skip_blank_lines(self) -> bool:
        while True:
            if not self._next():
                return False
            if self._buf:
                return True

    # -- sentence, paragraph and s-expression motion -----------------------

    def find(self, dot, cursor, direction, count, pastatom=False, limit=None):
        """Move over ``count`` sentences, paragraphs or s-expressions.

        ``pastatom`` selects paragraphs (or, in lisp, whole lists) instead
        of sentences (or atoms).  ``limit`` bounds the search; by default it
        is the first or last line in the direction of motion.  Returns the
        position reached, or None when there is nowhere to go.
        """
        self._start(dot, cursor, direction)
        self._lf = "move" if self.moving else None
        if limit is None:
            limit = 0 if direction < 0 else self._last
        self._llimit = limit
        pastatom = bool(pastatom)
        if self.lisp:
            found = self._find_lisp(count, pastatom)
        else:
            found = self._find_text(dot, cursor, count, pastatom)
        if not found or self._wdot is None:
            return None
        return (self._wdot, self._wcur)

    def _find_text(self, dot: int, cursor: int, count: int, pastatom: bool) -> bool:
        at_start = False
        if self._buf == "":
            if not self._skip_blank_lines():
                return True
            if self._dir > 0:
                self._wdot -= 1
                self._buf = ""
                self._wcur = 0
                if not pastatom:
                    at_start = True
        icurs, idot = self._wcur, self._wdot
        if not at_start:
            if self._dir > 0:
                if not self._next():
                    return False
            else:
                self._skip_atom("")
        remaining = count
        while True:
            while not self._end_sentence(pastatom):
                if not self._next():
                    return True
            if not pastatom or (self._wcur == 0 and self._end_ps()):
                remaining -= 1
                if remaining <= 0:
                    break
            if self._buf == "":
                if not self._skip_blank_lines():
                    return True
            elif not self._next():
                return True
        if self._dir < 0 and (self._wdot != self._llimit or self._wcur != 0):
            self._dir = 1
            self._llimit = dot
            if (
                self._buf == ""
                and not pastatom
                and (self._wdot != dot - 1 or cursor != 0)
            ):
                self._next()
                return True
        if (
            (self._wcur == icurs and self._wdot == idot)
            or self._wcur != 0
            or not self._end_ps()
        ):
            self._skip_atom("")
        return True

    def _find_lisp(self, count: int, pastatom: bool) -> bool:
        char = self._char()
        if (self._dir < 0 and char == "(") or (self._dir > 0 and char == ")"):
            if not self._next():
                return False
        remaining = count
        while remaining > 0:
            char = self._char()
            if (self._dir < 0 and char == ")") or (self._dir > 0 and char == "("):
                if not self._skip_balanced("()"):
                    return True
                if self._dir < 0 and remaining == 1:
                    return True
                if not self._next() or not self._to_solid("()"):
                    return True
                remaining -= 1
            elif (self._dir < 0 and char == "(") or (self._dir > 0 and char == ")"):
                return True
            else:
                if not self._skip_atom("()"):
                    return True
                if not pastatom:
                    remaining -= 1
        return True

    # -- matching brackets --------------------------------------------------

    def match_paren(self, dot, cursor, limit=None):
        """Find the bracket matching the first one at or after ``cursor``.

        Returns its position, or None if the line holds no bracket from the
        cursor on or the bracket is unmatched within ``limit``.
        """
        self._start(dot, cursor, 1)
        rest = self._buf[cursor:]
        offset = next((i for i, c in enumerate(rest) if c in "({[)}]"), None)
        if offset is None:
            return None
        column = cursor + offset
        char = self._buf[column]
        parens = "()" if char in "()" else "[]" if char in "[]" else "{}"
        self._lf = None
        if char == parens[1]:
            self._dir = -1
            self._llimit = 0
        else:
            self._dir = 1
            self._llimit = self._last
        if limit is not None:
            self._llimit = limit
        self._wcur = column
        self._wdot = dot
        if self._skip_balanced(parens):
            return (self._wdot, self._wcur)
        return None

    # -- sections -----------------------------------------------------------

    def section(self, dot, key, direction, moving):
        """Move to the next section boundary for ``[[`` or ``]]``.

        ``key`` is ``"["`` or ``"]"``.  Returns ``(line, column)``, where the
        column is None for a plain move, or None when no boundary lies ahead.
        """
        if key not in "[]" or len(key) != 1:
            raise ValueError("key must be '[' or ']'")
        self._start(dot, 0, direction)
        addr = dot
        while True:
            addr += direction
            if addr < 0 or addr > self._last:
                addr -= direction
                break
            text = self.lines[addr]
            if (
                text.startswith("{")
                or (self.lisp and text.startswith("("))
                or is_macro_line(text, self.sections)
            ):
                if key == "]" and not moving:
                    addr = max(addr - 1, 0)
                break
            if key == "]" and not moving and text.startswith("}"):
                break
        if addr == dot:
            return None
        if moving:
            return (addr, None)
        return (addr, len(self.lines[addr]) if key == "]" else 0)

    # -- lisp indentation ---------------------------------------------------

    def lisp_indent(self, addr):
        """Return the lisp indentation for a new line placed at index ``addr``."""
        if not 0 <= addr <= len(self.lines):
            raise IndexError("line out of range")
        while addr > 0:
            addr -= 1
            text = self.lines[addr]
            if text.strip(" \t") == "":
                continue
            if text.count("(") == text.count(")"):
                return _whitecnt(text, self.tabstop)
            addr += 1
            break
        self._buf = ""
        self._wcur = 0
        self._wdot = addr
        self._dir = -1
        self._llimit = 0
        self._lf = "lindent"
        if not self._skip_balanced("()"):
            indent = 0
        elif self._wcur == 0:
            indent = 2
        else:
            saved = self._wcur
            self._dir = 1
            self._llimit = self._wdot
            if not self._next() or not self._to_solid("()") or not self._skip_atom("()"):
                self._wcur = saved
                indent = 1
            else:
                indent = 0
            indent += _width(self._buf[: self._wcur + 1], self.tabstop) - 1
        self._lf = None
        return indent