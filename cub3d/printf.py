"""Flag combinations and the top-level formatted printer.

A conversion such as ``%-08.3x`` is dispatched on its flags to the
combination handlers here, which in turn call the single-flag handlers.
Every handler returns the text it produces and the count it reports.
"""

from __future__ import annotations

import sys

from .printf_args import CONVERSIONS, Arguments, collect_arguments, find_any, parse_int
from .printf_flags import dash, hashtag, plus, precision, precision_length, space, width

Output = tuple[str, int]

_DIGITS = "0123456789"
_FLAG_CHARS = " +#-.0123456789"
_NUL = "\0"


def _at(text: str, index: int) -> str:
    """Character at ``index``, or NUL when the index falls outside ``text``."""
    return text[index] if 0 <= index < len(text) else _NUL


def _tail(text: str, index: int) -> str:
    return text[index:] if index >= 0 else text


def _spaces(count: int) -> str:
    return " " * max(count, 0)


def _zeros(count: int) -> str:
    return "0" * max(count, 0)


def _char(value: str | None) -> str:
    return _NUL if value is None else value


def _first(value: str | None) -> str:
    return value[:1] if value else ""


def _conversion_letter(spec: str) -> str:
    return _at(spec, find_any(spec[1:], CONVERSIONS) + 1)


def _prefix(spec: str) -> str:
    index = find_any(spec, "xX")
    return "0" + (spec[index] if index >= 0 else "x")


def zero(spec: str, args: Arguments, other: int) -> Output:
    """Right-justify the argument with leading zeros after any minus sign."""
    conversion = _conversion_letter(spec)
    field = parse_int(spec[1:]) - other
    value = _char(args.take())
    length = len(value)
    if field <= length:
        return value, length
    if conversion in "di" and value[:1] == "-":
        return "-" + _zeros(field - length) + value[1:], field
    return _zeros(field - length) + value, field


def zero_length(spec: str, args: Arguments, other: int) -> int:
    """Count that :func:`zero` would report for the current argument."""
    field = parse_int(spec[1:]) - other
    return max(len(_char(args.current())), field)


def go_to_width(spec: str, pos: int) -> int:
    """Skip a run of the flag at ``pos + 1`` so that ``pos + 1`` lands on its last copy.

    A non-zero digit at ``pos + 1`` starts a width and leaves ``pos`` as it is.
    """
    target = _at(spec, pos + 1)
    if target in _DIGITS and target != "0":
        return pos
    i = pos
    while 0 <= i + 1 < len(spec) and spec[i + 1] == target:
        i += 1
    return i - 1


def apply_flags(spec: str, args: Arguments) -> Output:
    """Handle a whole conversion, from '%' to its letter, that carries flags."""
    pos = go_to_width(spec, find_any(spec[1:], _FLAG_CHARS))
    flag = _at(spec, pos + 1)
    rest = _tail(spec, pos + 1)
    if flag == "-":
        return combo_dash(rest, args, 0)
    if flag == "0":
        return combo_zero(rest, args)
    if flag == ".":
        return precision(rest, args)
    if flag == "#":
        return combo_hashtag(rest, args)
    if flag == " ":
        return combo_space(rest, args)
    if flag == "+":
        return combo_plus(rest, args)
    return combo_width(rest, args, 0)


def combo_dash(spec: str, args: Arguments, other: int) -> Output:
    """Left-justify, honouring a precision if one follows the width."""
    total = parse_int(spec[1:]) - other
    pos = go_to_width(spec, find_any(spec, "."))
    if pos == -1:
        return dash(spec, args, other)
    rest = _tail(spec, pos)
    length = precision_length(rest, args)
    if total <= length:
        return precision(rest, args)
    text, _ = precision(rest, args)
    return text + _spaces(total - length), total


def combo_zero(spec: str, args: Arguments) -> Output:
    """Zero-pad, unless a precision is given, in which case pad with spaces."""
    pos = go_to_width(spec, find_any(spec[1:], "."))
    if pos == -1:
        return zero(spec, args, 0)
    return combo_width(spec, args, 0)


def combo_width(spec: str, args: Arguments, other: int) -> Output:
    """Right-justify, honouring a precision if one follows the width."""
    total = parse_int(spec) - other
    pos = go_to_width(spec, find_any(spec, "."))
    if pos == -1:
        return width(spec, args, other)
    rest = _tail(spec, pos)
    length = precision_length(rest, args)
    if total <= length:
        return precision(rest, args)
    text, count = precision(rest, args)
    return _spaces(total - length) + text, count + total - length


def _hashtag_dash_point(spec: str, args: Arguments) -> Output:
    prefix = _prefix(spec)
    pos = go_to_width(spec, find_any(spec[1:], "-.123456789"))
    rest = _tail(spec, pos + 1)
    show = _first(args.current()) not in ("-", "0")
    if _at(spec, pos + 1) == "-":
        if show:
            text, count = combo_dash(rest, args, 2)
            return prefix + text, count + 2
        return combo_dash(rest, args, 0)
    if show:
        text, count = precision(rest, args)
        return prefix + text, count + 2
    return precision(rest, args)


def _hashtag_zero(spec: str, args: Arguments, prefix: str) -> Output:
    if _first(args.current()) == "0":
        return combo_zero(spec, args)
    pos = go_to_width(spec, find_any(spec[1:], "."))
    if pos == -1:
        text, count = zero(spec, args, 2)
        return prefix + text, count + 2
    total = parse_int(spec[1:])
    rest = _tail(spec, pos + 1)
    digits = precision_length(rest, args)
    text, count = precision(rest, args)
    if total <= digits + 2:
        return prefix + text, count + 2
    return _spaces(total - (digits + 2)) + prefix + text, count + total - digits


def _hashtag_width(spec: str, args: Arguments, prefix: str) -> Output:
    total = parse_int(spec[1:])
    pos = go_to_width(spec, find_any(spec, "."))
    if pos == -1:
        return hashtag(spec, args)
    rest = _tail(spec, pos)
    digits = precision_length(rest, args)
    if _first(args.current()) != "-":
        text, count = precision(rest, args)
        if total <= digits + 1:
            return prefix + text, count + 2
        return _spaces(total - (digits + 2)) + prefix + text, total
    return combo_width(_tail(spec, pos + 1), args, 0)


def combo_hashtag(spec: str, args: Arguments) -> Output:
    """Handle '#' together with any width, precision or other flags."""
    prefix = _prefix(spec)
    pos = go_to_width(spec, find_any(spec[1:], "-.0123456789"))
    flag = _at(spec, pos + 1)
    if flag in ("-", "."):
        return _hashtag_dash_point(spec, args)
    if flag == "0":
        return _hashtag_zero(spec, args, prefix)
    if pos == -1:
        return hashtag(spec, args)
    return _hashtag_width(spec, args, prefix)


def _signed_prefix(sign: str, spec: str, pos: int, args: Arguments) -> Output | None:
    """Shared '-' and '.' branches of the '+' and ' ' combinations."""
    flag = _at(spec, pos + 1)
    rest = _tail(spec, pos + 1)
    positive = _first(args.current()) != "-"
    if flag == "-":
        if positive:
            text, count = combo_dash(rest, args, 1)
            return sign + text, count + 1
        return combo_dash(rest, args, 0)
    if flag == ".":
        if positive:
            text, count = precision(rest, args)
            return sign + text, count + 1
        return precision(rest, args)
    return None


def _plus_width(spec: str, args: Arguments) -> Output:
    total = parse_int(spec[1:])
    pos = go_to_width(spec, find_any(spec, "."))
    if pos == -1:
        return plus(spec, args)
    rest = _tail(spec, pos)
    digits = precision_length(rest, args)
    if _first(args.current()) != "-":
        text, count = precision(rest, args)
        if total <= digits + 1:
            return "+" + text, count + 1
        return _spaces(total - (digits + 1)) + "+" + text, total
    return combo_width(_tail(spec, pos + 1), args, 0)


def combo_plus(spec: str, args: Arguments) -> Output:
    """Handle '+' together with any width, precision or '-' flag."""
    pos = go_to_width(spec, find_any(spec[1:], "-.123456789"))
    result = _signed_prefix("+", spec, pos, args)
    if result is not None:
        return result
    if pos == -1:
        return plus(spec, args)
    return _plus_width(spec, args)


def combo_space(spec: str, args: Arguments) -> Output:
    """Handle ' ' together with any width, precision or '-' flag."""
    pos = go_to_width(spec, find_any(spec[1:], "-.123456789"))
    result = _signed_prefix(" ", spec, pos, args)
    if result is not None:
        return result
    if pos == -1:
        return space(spec, args)
    rest = _tail(spec, pos + 1)
    if _first(args.current()) != "-":
        text, count = combo_width(rest, args, 1)
        return " " + text, count + 1
    return combo_width(rest, args, 0)


def _one_conversion(fmt: str, args: Arguments) -> tuple[str, int, int]:
    """Render the conversion at the start of ``fmt``; also return its offset."""
    offset = find_any(fmt[1:], CONVERSIONS)
    letter = _at(fmt, offset + 1)
    text, count = "", 0
    if letter == "%":
        text, count = "%", 1
        args.position += 1
    if offset != 0 and letter != "%":
        flagged, printed = apply_flags(fmt[:offset + 2], args)
        return flagged, printed, offset
    if letter == "c":
        text += _char(args.take())
        count += 1
    elif letter != _NUL and letter in "psdiuxX":
        value = args.take()
        text += value
        count += len(value)
    return text, count, offset


def _render(fmt: str, values) -> Output:
    if fmt is None:
        raise TypeError("format must be a string, not None")
    args = collect_arguments(fmt, values)
    pieces: list[str] = []
    count = 0
    i = 0
    while i < len(fmt):
        if fmt[i] != "%":
            pieces.append(fmt[i])
            count += 1
            i += 1
            continue
        text, printed, offset = _one_conversion(fmt[i:], args)
        pieces.append(text)
        count += printed
        i += offset + 2
    return "".join(pieces), count


def format_string(fmt: str, *args) -> str:
    """Return the text that :func:`print_formatted` would write."""
    return _render(fmt, args)[0]


def print_formatted(fmt: str, *args) -> int:
    """Write the formatted text to standard output and return the printed count."""
    text, count = _render(fmt, args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return count