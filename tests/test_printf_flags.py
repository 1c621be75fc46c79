import pytest

from cub3d.printf_args import Arguments
from cub3d.printf_flags import (
    dash,
    dash_length,
    hashtag,
    plus,
    precision,
    precision_length,
    space,
    width,
)


def args_of(*values):
    return Arguments(list(values))


def test_dash_left_justifies_number():
    args = args_of("42", "7")
    text, count = dash("-6d", args, 0)
    assert text.rstrip(" ") == "42"
    assert len(text) == 6
    assert count == 6
    assert args.position == 1


def test_dash_other_flag_shrinks_field():
    text, count = dash("-6d", args_of("42"), 2)
    assert len(text) == 4
    assert count == 4


def test_dash_value_longer_than_field():
    text, count = dash("-2s", args_of("hello"), 0)
    assert text == "hello"
    assert count == len("hello")


def test_dash_nul_char():
    text, count = dash("-3c", args_of(None), 0)
    assert text[0] == "\0"
    assert len(text) == 3
    assert count == 3


def test_dash_null_pointer():
    text, count = dash("-3p", args_of("(nil)"), 0)
    assert text == "(nil)"
    assert count == 5


def test_dash_empty_string_is_all_spaces():
    text, count = dash("-4s", args_of(""), 0)
    assert text == " " * 4
    assert count == 4


@pytest.mark.parametrize("spec,value", [
    ("-6d", "42"), ("-2s", "hello"), ("-3c", "a"), ("-0c", "a"),
    ("-9p", "0x1f"), ("-4s", ""), ("-3p", "(nil)"),
])
def test_dash_length_matches_dash(spec, value):
    args = args_of(value)
    predicted = dash_length(spec, args, 0)
    assert args.position == 0
    assert dash(spec, args, 0)[1] == predicted


def test_hashtag_prefix_lower_and_upper():
    text, count = hashtag("#x", args_of("ff"))
    assert text == "0x" + "ff"
    assert count == len(text)
    text, _ = hashtag("#X", args_of("FF"))
    assert text == "0X" + "FF"


def test_hashtag_pads_to_width():
    text, count = hashtag("#8x", args_of("ff"))
    assert text.lstrip(" ") == "0xff"
    assert len(text) == 8 == count


def test_hashtag_zero_has_no_prefix():
    assert hashtag("#x", args_of("0")) == ("0", 1)
    text, count = hashtag("#4x", args_of("0"))
    assert text.strip() == "0" and len(text) == 4 == count


def test_width_right_justifies():
    args = args_of("abc")
    text, count = width("5s", args, 0)
    assert text.lstrip(" ") == "abc"
    assert len(text) == 5 == count
    assert args.position == 1


def test_width_nul_char():
    text, count = width("3c", args_of(None), 0)
    assert text.endswith("\0")
    assert len(text) == 3 == count


def test_plus_adds_sign():
    text, count = plus("+d", args_of("5"))
    assert text == "+5"
    assert count == 2


def test_plus_keeps_negative_and_pads():
    text, count = plus("+5d", args_of("-3"))
    assert text.lstrip(" ") == "-3"
    assert len(text) == 5 == count
    text, count = plus("+5d", args_of("3"))
    assert text.lstrip(" ") == "+3"
    assert len(text) == 5 == count


def test_space_adds_leading_space():
    text, count = space(" d", args_of("5"))
    assert text == " 5"
    assert count == 2


def test_space_negative_and_string():
    assert space(" d", args_of("-5")) == ("-5", 2)
    text, count = space(" 4s", args_of("ab"))
    assert text.rstrip(" ") == "ab" and len(text) == 4 == count


def test_precision_truncates_string():
    text, count = precision(".3s", args_of("abcdef"))
    assert text == "abcdef"[:3]
    assert count == 3


def test_precision_null_string_skips_two_arguments():
    args = args_of("(null)", "x", "y")
    assert precision(".2s", args) == ("", 0)
    assert args.position == 2
    args = args_of("(null)", "x", "y")
    assert precision(".8s", args) == ("(null)", 6)
    assert args.position == 2


def test_precision_zero_pads_numbers():
    text, count = precision(".5d", args_of("42"))
    assert text.lstrip("0") == "42" and len(text) == 5 == count
    text, count = precision(".5d", args_of("-42"))
    assert text.startswith("-")
    assert text[1:].lstrip("0") == "42"
    assert len(text) == 6 == count


def test_precision_zero_value_zero_precision_prints_nothing():
    assert precision(".0d", args_of("0")) == ("", 0)
    assert precision(".0x", args_of("0")) == ("", 0)
    assert precision(".0u", args_of("0")) == ("", 0)


def test_precision_char():
    assert precision(".5c", args_of(None)) == ("\0", 1)


@pytest.mark.parametrize("spec,value", [
    (".3s", "abcdef"), (".9s", "abc"), (".2s", "(null)"), (".8s", "(null)"),
    (".5d", "42"), (".5d", "-42"), (".1d", "-42"), (".0d", "0"),
    (".4x", "ff"), (".0x", "0"), (".0u", "0"), (".6u", "123"), (".2c", "z"),
])
def test_precision_length_matches_precision(spec, value):
    args = args_of(value, "pad", "pad")
    predicted = precision_length(spec, args)
    assert args.position == 0
    assert precision(spec, args)[1] == predicted


def test_missing_argument_raises():
    with pytest.raises(IndexError):
        width("3d", args_of(), 0)
    with pytest.raises(IndexError):
        precision_length(".3d", args_of())