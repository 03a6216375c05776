import pytest

from xzkit.flagvalues import (
    BoolValue,
    IntValue,
    PresetValue,
    StringValue,
    format_usage,
    line_flags,
)


@pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
def test_bool_set_true(text):
    v = BoolValue(False)
    v.set(text)
    assert v.get() is True


@pytest.mark.parametrize("text", ["0", "f", "F", "FALSE", "false", "False"])
def test_bool_set_false(text):
    v = BoolValue(True)
    v.set(text)
    assert v.get() is False


def test_bool_set_invalid_raises_and_clears():
    v = BoolValue(True)
    with pytest.raises(ValueError):
        v.set("yes")
    assert v.get() is False


def test_bool_update_and_str():
    v = BoolValue()
    assert str(v) == "false"
    v.update()
    assert v.get() is True
    assert str(v) == "true"


@pytest.mark.parametrize(
    "text, expected",
    [("0x23", 0x23), ("077", 0o77), ("33", 33), ("0", 0), ("-33", -33),
     ("0b101", 0b101), ("0o17", 0o17)],
)
def test_int_set(text, expected):
    v = IntValue()
    v.set(text)
    assert v.get() == expected
    assert str(v) == str(expected)


@pytest.mark.parametrize("text", ["", "abc", "1 2", " 5", "08", "0x", "9223372036854775808"])
def test_int_set_invalid(text):
    v = IntValue(7)
    with pytest.raises(ValueError):
        v.set(text)
    assert v.get() == 7


def test_int_update_increments():
    v = IntValue(3)
    v.update()
    v.update()
    assert v.get() == 5


def test_string_set_and_update_restores_default():
    v = StringValue("test")
    assert v.get() == "test"
    v.set("s")
    assert str(v) == "s"
    v.update()
    assert v.get() == "test"


def test_presets_share_target():
    target = IntValue(6)
    presets = [PresetValue(target, i) for i in range(10)]
    presets[0].update()
    presets[9].update()
    presets[8].update()
    assert target.get() == 8
    assert presets[3].get() == 8
    assert str(presets[1]) == "8"


def test_preset_set_parses_integer():
    target = IntValue(6)
    p = PresetValue(target, 1)
    p.set("0x3")
    assert target.get() == 3
    with pytest.raises(ValueError):
        p.set("nope")


def test_line_flags_short_and_long_with_default():
    assert line_flags("test-a", "a", "3") == "-a, --test-a=3"


def test_line_flags_only_long():
    result = line_flags("count", "", "")
    assert result == "--" + "count"


def test_line_flags_multiple_shorthands():
    result = line_flags("", "vq", "")
    assert result.split(", ") == ["-v", "-q"]


def test_line_flags_without_name_ignores_default():
    assert "=" not in line_flags("", "x", "5")


def test_format_usage_sorted_and_aligned():
    lines = [("-b, --count-b", "counts b"), ("-a, --test-a=3", "tests a"), ("-0 ... -9", "preset flag")]
    text = format_usage(lines)
    rows = text.splitlines()
    assert len(rows) == 3
    assert text.endswith("\n")
    flags_in_order = [row.strip().split("  ")[0] for row in rows]
    assert flags_in_order == sorted(f for f, _ in lines)
    columns = {row.index(usage) for row, usage in zip(rows, ["preset flag", "tests a", "counts b"])}
    assert len(columns) == 1
    assert all(row.startswith("  ") for row in rows)


def test_format_usage_empty():
    assert format_usage([]) == ""


def test_format_usage_single_line():
    assert format_usage([("-h", "help")]) == "  -h  help\n"