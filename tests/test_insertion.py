import pytest

from vicore.insertion import InsertRecord, LineTooLongError, max_repeat


def test_record_collects_characters():
    record = InsertRecord(128)
    for ch in "hello":
        record.add(ch)
    assert record.text() == "hello"
    assert record.overflowed is False


def test_record_overflow_boundary():
    record = InsertRecord(10)
    for ch in "abcdefgh":
        record.add(ch)
    assert record.text() == "abcdefgh"
    record.add("i")
    assert record.text() is None
    assert record.overflowed is True
    record.add("j")
    assert record.text() is None


def test_record_clear_resets_overflow():
    record = InsertRecord(5)
    for ch in "abcdefg":
        record.add(ch)
    assert record.overflowed
    record.clear()
    assert record.text() == ""
    record.add("x")
    assert record.text() == "x"


def test_record_rejects_tiny_limit():
    with pytest.raises(ValueError):
        InsertRecord(2)


def test_max_repeat_fits_unchanged():
    assert max_repeat("abc", "xy", 3, 100) == 3


@pytest.mark.parametrize(
    "line, inserted, count, limit",
    [("abc", "xy", 100, 20), ("", "hello", 50, 40), ("a" * 30, "b", 1000, 64)],
)
def test_max_repeat_is_largest_that_fits(line, inserted, count, limit):
    result = max_repeat(line, inserted, count, limit)
    assert 0 < result <= count
    assert len(line) + result * len(inserted) <= limit - 2
    assert len(line) + (result + 1) * len(inserted) > limit - 2


def test_max_repeat_caps_count_for_empty_insert():
    assert max_repeat("", "", 1000, 50) == 48


def test_max_repeat_raises_when_nothing_fits():
    with pytest.raises(LineTooLongError):
        max_repeat("a" * 17, "xyz", 1, 20)


def test_line_too_long_message():
    with pytest.raises(LineTooLongError, match="Line too long"):
        max_repeat("a" * 18, "x", 2, 20)