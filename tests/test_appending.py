import pytest

from vicore.appending import insert_text, open_line, overwrite_text
from vicore.insertion import LineTooLongError


def test_insert_repeated():
    assert insert_text("abc", 1, "XY", 2, 100) == ("aXYXYbc", 4)


def test_insert_keeps_surrounding_text():
    line, cursor = insert_text("hello", 5, "!", 1, 100)
    assert line.startswith("hello")
    assert line[cursor] == "!"


def test_insert_at_start_cursor_on_last_inserted():
    line, cursor = insert_text("tail", 0, "ab", 1, 100)
    assert line.endswith("tail")
    assert line[cursor] == "b"


def test_insert_count_capped_by_limit():
    line, _ = insert_text("abc", 3, "xy", 10, 10)
    assert len(line) <= 10 - 2
    assert line.startswith("abcxy")


def test_insert_too_long_raises():
    with pytest.raises(LineTooLongError):
        insert_text("abcdefgh", 0, "xy", 1, 10)


def test_insert_empty_text_leaves_line():
    line, _ = insert_text("abc", 1, "", 3, 100)
    assert line == "abc"


def test_insert_bad_cursor_raises():
    with pytest.raises(IndexError):
        insert_text("abc", 4, "x", 1, 100)


def test_insert_bad_count_raises():
    with pytest.raises(ValueError):
        insert_text("abc", 0, "x", 0, 100)


def test_overwrite_within_line():
    assert overwrite_text("abcdef", 1, "XY", 1, 100) == ("aXYdef", 2)


def test_overwrite_keeps_length_when_text_fits():
    line, cursor = overwrite_text("abcdefgh", 2, "XYZ", 1, 100)
    assert len(line) == len("abcdefgh")
    assert line[2:5] == "XYZ"
    assert line[cursor] == "Z"


def test_overwrite_past_end_extends():
    line, _ = overwrite_text("ab", 1, "XYZ", 1, 100)
    assert line[1:] == "XYZ"
    assert line[0] == "a"


def test_overwrite_repeat_inserts_further_copies():
    line, _ = overwrite_text("abcdef", 0, "XY", 2, 100)
    assert line.startswith("XYXY")
    assert line.endswith("cdef")


def test_open_below_with_indent():
    lines, dot, cursor = open_line(["\tfoo", "bar"], 0, False, True)
    assert lines[1] == "\t"
    assert dot == 1
    assert cursor == 1
    assert lines[2] == "bar"


def test_open_above():
    original = ["one", "two", "three"]
    lines, dot, cursor = open_line(original, 1, True, False)
    assert lines[dot] == ""
    assert dot == 1
    assert cursor == 0
    assert [x for x in lines if x] == original


def test_open_above_first_line():
    lines, dot, _ = open_line(["only"], 0, True, False)
    assert dot == 0
    assert lines[1] == "only"


def test_open_indent_from_spaces():
    lines, dot, cursor = open_line(["   x"], 0, False, True)
    assert lines[dot] == "   "
    assert cursor == len("   ")


def test_open_without_indent():
    lines, dot, _ = open_line(["    x"], 0, False, False)
    assert lines[dot] == ""


def test_open_empty_buffer():
    assert open_line([], 0) == ([""], 0, 0)


def test_open_bad_dot_raises():
    with pytest.raises(IndexError):
        open_line(["a"], 3)