"""Single-flag conversions of the formatted printer.

Each handler receives ``spec``, the part of a conversion that starts at its
flag character and ends at the conversion letter, and the converted
:class:`~cub3d.printf_args.Arguments`. Handlers that print consume the
argument under the cursor. They return the text they print and the count
they report. The two agree except in a few corner cases that the printer
keeps as they are. The ``*_length`` functions work out the count only and
leave the cursor where it is.
"""

from __future__ import annotations

from .printf_args import CONVERSIONS, NULL_POINTER, NULL_STRING, Arguments, find_any, parse_int

Output = tuple[str, int]

_NUL = "\0"


def _spaces(count: int) -> str:
    return " " * max(count, 0)


def _zeros(count: int) -> str:
    return "0" * max(count, 0)


def _conversion(spec: str) -> str:
    return spec[find_any(spec[1:], CONVERSIONS) + 1]


def _char(value: str | None) -> str:
    return _NUL if value is None else value


def dash(spec: str, args: Arguments, other: int) -> Output:
    """Left-justify the argument in a field of the width after the '-'."""
    conversion = _conversion(spec)
    width = parse_int(spec[1:]) - other
    if conversion == "c":
        text = _char(args.take()) + _spaces(width - 1)
        return text, 1 if width <= 0 else width
    value = args.take()
    length = len(value)
    text = value + _spaces(width - length)
    if conversion == "p":
        if value.startswith(NULL_POINTER):
            return text, 5 if width <= 5 else width
        return text, max(length, width)
    if length == 0:
        return text, width
    if width <= length:
        return value, length
    return text, width


def dash_length(spec: str, args: Arguments, other: int) -> int:
    """Count that :func:`dash` would report for the current argument."""
    conversion = _conversion(spec)
    width = parse_int(spec[1:]) - other
    if conversion == "c":
        return 1 if width <= 0 else width
    length = len(args.current())
    if conversion == "p":
        return max(length, width)
    if length == 0:
        return width
    return max(length, width)


def hashtag(spec: str, args: Arguments) -> Output:
    """Prefix a non-zero hexadecimal argument with 0x or 0X, right-justified."""
    width = parse_int(spec[1:])
    value = args.take()
    if value[:1] == "0":
        if width == 0:
            return "0", 1
        return _spaces(width - 1) + "0", width
    prefix = "0x" if _conversion(spec) == "x" else "0X"
    length = len(value)
    if width <= length + 2:
        return prefix + value, length + 2
    return _spaces(width - (length + 2)) + prefix + value, width


def width(spec: str, args: Arguments, other: int) -> Output:
    """Right-justify the argument in a field of the width ``spec`` starts with."""
    conversion = _conversion(spec)
    field = parse_int(spec) - other
    value = args.take()
    if conversion == "c":
        return _spaces(field - 1) + _char(value), field
    length = len(value)
    if field <= length:
        return value, length
    return _spaces(field - length) + value, field


def _signed(value: str, field: int, sign: str, pad_before_sign: int) -> Output:
    length = len(value)
    if value[:1] == "-":
        if field <= length:
            return value, length
        return _spaces(field - length) + value, field
    if field <= length + 1:
        return sign + value, length + 1
    return _spaces(pad_before_sign) + value if not sign.strip() else (
        _spaces(pad_before_sign) + sign + value), field


def plus(spec: str, args: Arguments) -> Output:
    """Print a signed number with an explicit '+' when it is not negative."""
    field = parse_int(spec)
    value = args.take()
    return _signed(value, field, "+", field - len(value) - 1)


def space(spec: str, args: Arguments) -> Output:
    """Print a number with a leading space when it is not negative."""
    field = parse_int(spec[1:])
    value = args.take()
    if _conversion(spec) == "s":
        length = len(value)
        if field <= length:
            return value, length
        return value + _spaces(field - length), field
    return _signed(value, field, " ", field - len(value))


def _precision_string(value: str, digits: int, args: Arguments) -> Output:
    if value.startswith(NULL_STRING):
        args.position += 1
        if digits < 6:
            return "", 0
        return value, 6
    if digits >= len(value):
        return value, len(value)
    return (value if digits < 0 else value[:digits]), digits


def _precision_signed(value: str, digits: int) -> Output:
    length = len(value)
    if value[:1] == "-":
        if digits <= length - 1:
            return value, length
        return "-" + _zeros(digits - (length - 1)) + value[1:], digits + 1
    if digits <= length:
        return value, length
    return _zeros(digits - length) + value, digits


def _precision_plain(value: str, digits: int) -> Output:
    length = len(value)
    if digits <= length:
        return value, length
    return _zeros(digits - length) + value, digits


def precision(spec: str, args: Arguments) -> Output:
    """Apply a '.' precision: truncate strings, zero-pad numbers."""
    conversion = _conversion(spec)
    digits = parse_int(spec[1:])
    if conversion == "c":
        return _char(args.take()), 1
    if conversion == "s":
        return _precision_string(args.take(), digits, args)
    if conversion in "di":
        value = args.take()
        if value[:1] == "0" and digits == 0:
            return "", 0
        return _precision_signed(value, digits)
    if conversion in "xX":
        value = args.take()
        if digits == 0 and value[:1] == "0":
            return "", 0
        return _precision_plain(value, digits)
    value = args.take()
    if conversion == "u" and value[:1] == "0" and digits == 0:
        return "", digits
    return _precision_plain(value, digits)


def precision_length(spec: str, args: Arguments) -> int:
    """Count that :func:`precision` would report for the current argument."""
    conversion = _conversion(spec)
    digits = parse_int(spec[1:])
    if conversion == "c":
        return 1
    value = args.current()
    length = len(value)
    if conversion == "s":
        if value.startswith(NULL_STRING):
            return 0 if digits < 6 else 6
        return length if digits >= length else digits
    if conversion in "di":
        if value[:1] == "0" and digits == 0:
            return 0
        if value[:1] == "-":
            return length if digits <= length - 1 else digits + 1
        return max(length, digits)
    if conversion in "xX":
        if digits == 0 and value[:1] == "0":
            return 0
        return max(length, digits)
    if conversion == "u" and value[:1] == "0" and digits == 0:
        return digits
    return max(length, digits)