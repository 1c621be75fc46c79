import pytest

from cub3d.printf import (
    apply_flags,
    combo_dash,
    combo_hashtag,
    combo_plus,
    combo_space,
    combo_width,
    combo_zero,
    format_string,
    go_to_width,
    print_formatted,
    zero,
    zero_length,
)
from cub3d.printf_args import Arguments

STANDARD_CASES = [
    ("%d", 42),
    ("%i", -12),
    ("%5d", 42),
    ("%-5d", 42),
    ("%05d", -42),
    ("%.3d", -7),
    ("%8.3d", -7),
    ("%-8.3d", 7),
    ("%05.3d", 7),
    ("%+d", 5),
    ("%+d", 0),
    ("%+5d", 5),
    ("%+8.3d", 7),
    ("% d", 5),
    ("% d", -5),
    ("% 5d", 5),
    ("%x", 3054),
    ("%X", 3054),
    ("%#x", 255),
    ("%#8x", 255),
    ("%#010x", 255),
    ("%#-8x", 255),
    ("%s", "hello"),
    ("%-5s", "ab"),
    ("%5.1s", "ab"),
    ("%.1s", "ab"),
    ("%5c", "a"),
    ("%-3c", "a"),
]


@pytest.mark.parametrize("fmt,value", STANDARD_CASES)
def test_matches_standard_formatting(fmt, value):
    assert format_string(fmt, value) == fmt % value


@pytest.mark.parametrize("fmt,value", STANDARD_CASES)
def test_printed_count_matches_output(fmt, value, capsys):
    count = print_formatted(fmt, value)
    out = capsys.readouterr().out
    assert out == fmt % value
    assert count == len(out)


def test_mixed_text_and_conversions():
    fmt = "x=%d, s=%s, h=%X%%"
    assert format_string(fmt, 10, "hi", 255) == fmt % (10, "hi", 255)


def test_null_string_and_pointer():
    assert format_string("%s", None) == "(null)"
    assert format_string("%p", 0) == "(nil)"
    assert format_string("%p", 255) == hex(255)


def test_unsigned_wraps():
    assert format_string("%u", -1) == "4294967295"


def test_zero_precision_hides_zero():
    assert format_string("%.0d", 0) == ""


def test_nul_character():
    assert format_string("%c", 0) == "\0"


def test_width_on_percent_is_ignored():
    assert format_string("%5%") == format_string("%%")


def test_trailing_percent_is_printed():
    assert format_string("50%") == "50%"


def test_repeated_flags_collapse():
    assert format_string("%--5d", 42) == format_string("%-5d", 42)


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_string(None)


def test_missing_argument_raises():
    with pytest.raises(ValueError):
        format_string("%d")


def test_go_to_width_keeps_position_on_width_digit():
    assert go_to_width("%5d", 0) == 0


def test_go_to_width_lands_on_last_flag_of_run():
    spec = "%---5d"
    pos = go_to_width(spec, 0)
    assert spec[pos + 1] == "-"
    assert spec[pos + 2] == "5"


def test_zero_pads_after_sign():
    args = Arguments(["-42"])
    assert zero("05d", args, 0) == ("%05d" % -42, 5)
    assert args.position == 1


def test_zero_subtracts_other_flags():
    assert zero("#05x", Arguments(["ff"]), 2) == ("%03x" % 255, 3)


def test_zero_length_does_not_consume():
    args = Arguments(["42"])
    assert zero_length("05d", args, 0) == 5
    assert args.position == 0
    assert zero_length("05d", Arguments(["1234567"]), 0) == len("1234567")


def test_apply_flags_consumes_one_argument():
    args = Arguments(["42", "7"])
    assert apply_flags("%-5d", args) == ("%-5d" % 42, 5)
    assert args.position == 1


def test_combo_dash_with_precision():
    assert combo_dash("-8.3d", Arguments(["7"]), 0) == ("%-8.3d" % 7, 8)


def test_combo_zero_with_precision_uses_spaces():
    assert combo_zero("05.3d", Arguments(["7"])) == ("%05.3d" % 7, 5)


def test_combo_width_without_precision():
    assert combo_width("5d", Arguments(["42"]), 0) == ("%5d" % 42, 5)


def test_combo_hashtag_left_justified():
    assert combo_hashtag("#-8x", Arguments(["ff"])) == ("%#-8x" % 255, 8)


def test_combo_plus_with_precision():
    text, count = combo_plus("+.3d", Arguments(["7"]))
    assert text == "%+.3d" % 7
    assert count == len(text)


def test_combo_space_negative_has_no_space():
    text, count = combo_space(" .3d", Arguments(["-7"]))
    assert text == "% .3d" % -7
    assert count == len(text)