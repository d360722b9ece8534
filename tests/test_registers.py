import pytest

from vicore.registers import Region, Registers, normalize_region

LINES = ["  alpha beta", "gamma", "delta epsilon", "zeta"]


def test_backward_region_is_swapped():
    forward = normalize_region(LINES, 0, 3, 2, 4)
    backward = normalize_region(LINES, 2, 4, 0, 3)
    assert backward == forward
    assert backward.start == 0 and backward.end == 2


def test_same_line_cursor_order():
    region = normalize_region(LINES, 1, 4, 1, 1)
    assert region.start_col == 1
    assert region.end_col == 4


def test_end_at_line_start_pulls_back_to_previous_line_end():
    region = normalize_region(LINES, 0, 5, 1, 0)
    assert region.end == 0
    assert region.end_col == len(LINES[0])


def test_end_at_line_start_within_indent_becomes_linewise():
    region = normalize_region(LINES, 0, 1, 1, 0)
    assert region.end == 0
    assert region.linewise


def test_region_count():
    region = normalize_region(LINES, 1, None, 3, None)
    assert region.count == 3
    assert region.linewise


def test_out_of_range_end_raises():
    with pytest.raises(IndexError):
        normalize_region(LINES, 0, 0, len(LINES), 0)


def test_missing_end_raises():
    with pytest.raises(IndexError):
        normalize_region(LINES, 0, 0, None, None)


def test_out_of_range_start_raises():
    with pytest.raises(IndexError):
        normalize_region(LINES, -1, 0, 1, 0)


def test_region_is_frozen():
    region = Region(0, None, 1, None)
    with pytest.raises(AttributeError):
        region.start = 5
    assert region.start == 0
    assert region.end == 1
    assert region == Region(0, None, 1, None)


def test_yank_and_get_round_trip():
    regs = Registers()
    regs.yank("a", ["one", "two"])
    assert regs.get("a") == ["one", "two"]


def test_upper_case_appends():
    regs = Registers()
    regs.yank("b", ["one"])
    regs.yank("B", ["two"])
    assert regs.get("b") == ["one", "two"]
    assert regs.get("B") == ["one", "two"]


def test_numbered_registers_shift():
    regs = Registers()
    regs.yank("1", ["first"])
    regs.yank("1", ["second"])
    assert regs.get("1") == ["second"]
    assert regs.get("2") == ["first"]


def test_oldest_numbered_register_drops_off():
    regs = Registers()
    for n in range(10):
        regs.yank("1", [str(n)])
    assert regs.get("9") == ["1"]
    assert regs.get("1") == ["9"]


def test_empty_register():
    assert Registers().get("z") == []


def test_get_returns_copy():
    regs = Registers()
    regs.yank("c", ["x"])
    regs.get("c").append("y")
    assert regs.get("c") == ["x"]


@pytest.mark.parametrize("name", ["", "ab", "!", "0"])
def test_bad_names_raise(name):
    with pytest.raises(ValueError):
        Registers().yank(name, ["x"])