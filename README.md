# vicore

Text-handling routines of a vi-style editor as a plain Python library with no
dependencies. It has the logic behind insert-mode input, structural motions,
screen window geometry, registers and the line operators. All of it works on
Python strings and lists of lines.

## Installation

```
pip install .
```

## Modules

### `vicore.formatting`

- `sprintf(fmt, *args)` formats in the style of printf. It understands the
  conversions `c`, `s`, `o`/`O`, `x`/`X`, `d`/`D`, `i`/`I` and `u`/`U`. The
  flags are `-` (left justify) and a leading `0` (zero fill). Width and
  precision can be written as digits or as `*`, which takes them from the
  arguments. Any other character after `%` is emitted as itself, so `%%`
  gives `%`. A `None` passed to `%s` prints `(null pointer)`. If there are
  too few arguments it raises `TypeError`.
- `decimal_digits(value)` returns the decimal digits of `value`, treated as
  an unsigned 64-bit number.

### `vicore.insertion`

- `InsertRecord(limit=128)` keeps the text of the last insertion so that it
  can be repeated. It has the methods `add(char)`, `clear()` and `text()`.
  `text()` returns `None` once the record has overflowed its limit. The
  `overflowed` property says whether that has happened.
- `max_repeat(line, inserted, count, limit)` caps a repeat count so that the
  line stays within `limit - 2` characters. It raises `LineTooLongError` when
  not even one copy fits.

### `vicore.lineinput`

`LineInput(erase, kill, wrapmargin, columns, abbreviations)` reads keys into a
line. Call `read(keys, prefix="")`. It stops at a newline, an escape or an
interrupt key, or when the keys run out. While reading it handles:

- erase, kill and `^W` word erase
- `\` and `^Q`/`^V` quoting
- `^T` soft tab and `^D` backtab, including `^^D` and `0^D`
- word abbreviations
- breaking lines at the wrap margin

`read` returns an `InputResult` with these fields:

- `text`
- `terminator`
- `start`
- `backtabs`
- `margin`
- `gobbled`
- `pending`: keys pushed back but not read

### `vicore.structure`

- `Motion(lines, paragraphs, sections, lisp=False)` finds positions in the
  text. Each of its methods returns a `(line, column)` position, or `None`.
  - `find(dot, cursor, direction, count, pastatom=False, limit=None)` moves
    over sentences, paragraphs, or s-expressions in lisp mode.
  - `match_paren(dot, cursor, limit=None)` finds the bracket that matches.
  - `section(dot, key, direction, moving)` handles `[[` and `]]`.
  - `lisp_indent(addr)` returns the lisp indentation for a new line.
- `is_macro_line(text, macros)` and `ends_paragraph(text, paragraphs, sections)`
  recognise formatter requests and paragraph ends.
- `switch_case(text, cursor, count)` toggles case, as the `~` command does.

### `vicore.window`

- `display_width(text, tabstop=8)` measures text in screen columns. Tabs are
  expanded. Control characters count as two columns, wide characters as two,
  and combining marks as none.
- `Window(lines, columns=80, tabstop=8)` works out how lines fit on the
  screen. Its methods are:
  - `depth(index)`: the number of rows a line takes
  - `back(index, count)`
  - `fit(start, count, dot=None, slack=0)`
  - `context_top(addr, where=".", screen_lines=23)`: picks the line to draw
    from so that `addr` lands in the middle (`"."`), at the bottom (`"-"`) or
    one screen back (`"^"`)

### `vicore.registers`

- `Registers()` holds named registers `a`–`z` and numbered registers `1`–`9`.
  Yanking into an upper-case name appends to that register. Yanking into `1`
  moves the older numbered registers down. It has the methods
  `yank(name, lines)` and `get(name)`.
- `normalize_region(lines, dot, cursor, wdot, wcursor)` puts the two ends of
  an operator region in order and returns a `Region`.

### `vicore.appending`

- `insert_text(line, cursor, text, count=1, limit=4096)` inserts text.
- `overwrite_text(line, cursor, text, count=1, limit=4096)` types text over
  the line.
- `open_line(lines, dot, above=False, indent=False)` opens a new line, with
  an optional autoindent.

### `vicore.operators`

- `LineEdit(text)` edits characters within one line. Its methods are
  `delete`, `change`, `replace` and `undo`. The last deleted text is kept in
  `deleted`.
- `Editor(lines)` works on whole lines of a buffer. Its methods are
  `delete_range`, `shift` and `yank`, all working over an inclusive range,
  plus `undo`. Deleted lines go into register `1` and into `unnamed`.

Both classes keep one level of undo. Undoing a second time redoes the change.

## Example

```python
from vicore.formatting import sprintf
from vicore.operators import Editor

print(sprintf("%-5d|%05x", 42, 255))   # "42   |0x0ff"

editor = Editor(["alpha", "beta", "gamma"])
editor.delete_range(1, 2)              # ["beta", "gamma"]
editor.undo()                          # ["alpha", "beta", "gamma"]
```

## What it does not do

vicore is a library of routines. It has:

- no command to run
- no terminal screen or drawing
- no reading or writing of files
- no ex command line

It has no program around these routines. The caller supplies the keys, the
lines and the screen size, and uses the results.

## Tests

```
pip install .[test]
pytest
```