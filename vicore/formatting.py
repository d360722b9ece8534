"""A small printf-style formatter with the editor's own conventions.

The conversions understood are ``c``, ``s``, ``o``/``O``, ``x``/``X``,
``d``/``D``, ``i``/``I`` and ``u``/``U``.  Any other character after ``%``
is emitted as itself, so ``%%`` gives a single percent sign.  Flags are
``-`` (left justify) and a leading ``0`` (zero fill); width and precision
may be given as digits or as ``*`` to take them from the arguments.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

_NULL_STRING = "(null pointer)"
_UINT32 = 1 << 32
_UINT64 = 1 << 64


@dataclass
class _Spec:
    left: bool = False
    zero_fill: bool = False
    sign_first: bool = False
    width: int = 0
    precision: int = -1
    length: int = 0


def decimal_digits(value: int) -> str:
    """Return the decimal digits of ``value`` read as an unsigned 64-bit number."""
    if value < 0:
        value += _UINT64
    if not 0 <= value < _UINT64:
        raise OverflowError(f"value out of range: {value}")
    return str(value)


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _char_of(value: Any) -> str:
    if isinstance(value, str):
        return value[:1]
    code = int(value) & 0xFF
    return chr(code) if code else ""


def _emit(body: str, spec: _Spec) -> str:
    width = max(spec.width, len(body))
    pad_char = "0" if spec.zero_fill else " "
    lead = ""
    if body.startswith("-") and spec.sign_first:
        lead, body = "-", body[1:]
        width -= 1
    padding = pad_char * max(0, width - len(body))
    if spec.left:
        return lead + body + padding
    return lead + padding + body


def _radix(value: int, code: str, spec: _Spec) -> tuple[str, str]:
    """Return (prefix emitted before padding, body) for o/x conversions."""
    value &= _UINT32 - 1
    if code == "o":
        digits = format(value, "o")
        return "", ("0" + digits) if value else digits
    digits = format(value, "x")
    if not spec.left and spec.zero_fill:
        spec.width -= 2
        return "0" + code, digits
    return "", "0" + code + digits


def _parse_number(fmt: str, pos: int) -> tuple[int, int]:
    start = pos
    while pos < len(fmt) and fmt[pos].isdigit():
        pos += 1
    return (int(fmt[start:pos]) if pos > start else 0), pos


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the resulting text."""
    out: list[str] = []
    arg_iter = iter(args)
    pos = 0
    end = len(fmt)
    while pos < end:
        percent = fmt.find("%", pos)
        if percent < 0:
            out.append(fmt[pos:])
            break
        out.append(fmt[pos:percent])
        pos = percent + 1
        spec = _Spec()
        if pos < end and fmt[pos] == "-":
            spec.left = True
            pos += 1
        if pos < end and fmt[pos] == "0":
            spec.zero_fill = True
            pos += 1
        if pos < end and fmt[pos] == "*":
            spec.width = int(_next_arg(arg_iter))
            if spec.width < 0:
                spec.width = -spec.width
                spec.left = not spec.left
            pos += 1
        else:
            spec.width, pos = _parse_number(fmt, pos)
        if pos < end and fmt[pos] == ".":
            pos += 1
            if pos < end and fmt[pos] == "*":
                spec.precision = int(_next_arg(arg_iter))
                pos += 1
            else:
                spec.precision, pos = _parse_number(fmt, pos)
        if pos < end and fmt[pos] in "lLhH":
            spec.length = 1 if fmt[pos] in "lL" else -1
            pos += 1
        if pos >= end:
            break
        code = fmt[pos]
        pos += 1

        prefix = ""
        if code == "c":
            body = _char_of(_next_arg(arg_iter))
        elif code == "s":
            text = _next_arg(arg_iter)
            text = _NULL_STRING if text is None else str(text)
            body = text if spec.precision < 0 else text[: spec.precision]
        elif code in "oOxX":
            if code == "O":
                spec.length, code = 1, "o"
            raw = int(_next_arg(arg_iter))
            prefix, body = _radix(raw, code, spec)
        elif code in "dDiIuU":
            if code in "DIU":
                spec.length, code = 1, code.lower()
            raw = int(_next_arg(arg_iter))
            bits = 64 if spec.length > 0 else 32
            if code == "u":
                number = raw & ((1 << bits) - 1)
                body = decimal_digits(number)
            else:
                number = _to_signed(raw, bits)
                body = ("-" if number < 0 else "") + str(abs(number))
            if spec.zero_fill:
                spec.sign_first = True
        else:
            body = code
        out.append(prefix + _emit(body, spec))
    return "".join(out)