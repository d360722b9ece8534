import pytest

from vicore.operators import Editor, LineEdit


def test_delete_records_text_and_undo_restores():
    le = LineEdit("hello world")
    le.delete(0, 6)
    assert le.deleted == "hello world"[0:6]
    assert le.text + "" == "hello world"[6:]
    assert le.undo() == "hello world"


def test_double_undo_redoes():
    le = LineEdit("abcdef")
    le.delete(2, 4)
    changed = le.text
    le.undo()
    assert le.undo() == changed


def test_delete_reversed_range_matches():
    a = LineEdit("abcdef")
    b = LineEdit("abcdef")
    a.delete(1, 4)
    b.delete(4, 1)
    assert a.text == b.text
    assert a.cursor == b.cursor


def test_delete_to_end_puts_cursor_on_last_char():
    le = LineEdit("abc")
    cursor = le.delete(1, 3)
    assert cursor == len(le.text) - 1


def test_delete_empty_range_raises():
    with pytest.raises(ValueError):
        LineEdit("abc").delete(1, 1)


def test_delete_out_of_range_raises():
    with pytest.raises(IndexError):
        LineEdit("abc").delete(0, 9)


def test_change_replaces_and_places_cursor():
    le = LineEdit("abcdef")
    cursor = le.change(0, 3, "xyz")
    assert le.text == "xyz" + "def"
    assert cursor == len("xyz") - 1
    assert le.deleted == "abc"


def test_replace_characters():
    le = LineEdit("abcdef")
    cursor = le.replace(0, 2, "x")
    assert le.text == "xx" + "cdef"
    assert cursor == 1
    assert le.undo() == "abcdef"


def test_replace_too_many_raises():
    with pytest.raises(ValueError):
        LineEdit("abc").replace(1, 3, "x")


def test_undo_without_change_raises():
    with pytest.raises(ValueError):
        LineEdit("abc").undo()


def test_delete_range_fills_numbered_registers():
    ed = Editor(["a", "b", "c", "d"])
    assert ed.delete_range(0, 1) == ["a", "b"]
    assert ed.lines == ["c", "d"]
    assert ed.registers.get("1") == ["a", "b"]
    ed.delete_range(1, 1)
    assert ed.registers.get("1") == ["d"]
    assert ed.registers.get("2") == ["a", "b"]
    assert ed.unnamed == ["d"]


def test_delete_range_reversed_and_dot():
    ed = Editor(["a", "b", "c"])
    assert ed.delete_range(2, 1) == ["b", "c"]
    assert ed.dot == len(ed.lines) - 1


def test_delete_range_out_of_range():
    with pytest.raises(IndexError):
        Editor(["a"]).delete_range(0, 5)


def test_undo_delete_and_redo():
    ed = Editor(["a", "b", "c"])
    ed.delete_range(0, 0)
    assert ed.undo() == ["a", "b", "c"]
    assert ed.undo() == ["b", "c"]


def test_shift_right_and_skip_empty():
    ed = Editor(["foo", ""])
    ed.shift(0, 1, ">", 4)
    assert ed.lines == [" " * 4 + "foo", ""]
    ed.shift(0, 0, ">", 4)
    assert ed.lines[0] == "\tfoo"


def test_shift_left_stops_at_margin():
    ed = Editor(["  foo"])
    ed.shift(0, 0, "<", 8)
    assert ed.lines == ["foo"]
    assert ed.undo() == ["  foo"]


def test_shift_bad_direction():
    with pytest.raises(ValueError):
        Editor(["x"]).shift(0, 0, "=", 8)


def test_yank_into_register_clears_undo():
    ed = Editor(["a", "b", "c"])
    ed.delete_range(0, 0)
    assert ed.yank(0, 1, "a") == ["b", "c"]
    assert ed.registers.get("a") == ["b", "c"]
    assert ed.unnamed == ["b", "c"]
    assert ed.lines == ["b", "c"]
    with pytest.raises(ValueError):
        ed.undo()