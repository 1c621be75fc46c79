"""Argument collection and string helpers for the formatted printer.

Every conversion in a format string is turned into the text it prints
before any flag handling happens; the flag handlers then consume those
texts in order through an :class:`Arguments` cursor.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Iterable, Sequence

CONVERSIONS = "cspdiuxX%"
NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_UINT32 = 0xFFFFFFFF
_ULONG = 0xFFFFFFFFFFFFFFFF
_ATOI_SPACE = frozenset(" \b\t\n\v\f\r")


@dataclass
class Arguments:
    """The converted arguments of one format string, with a read cursor.

    A ``None`` entry stands for a ``%c`` whose character was NUL.
    """

    values: list[str | None] = field(default_factory=list)
    position: int = 0

    def current(self) -> str | None:
        """Return the argument under the cursor without consuming it."""
        if not 0 <= self.position < len(self.values):
            raise IndexError(f"no argument at position {self.position}")
        return self.values[self.position]

    def take(self) -> str | None:
        """Return the argument under the cursor and move past it."""
        value = self.current()
        self.position += 1
        return value


def find_any(text: str, charset: str) -> int:
    """Index of the first character of ``text`` found in ``charset``, or -1."""
    return next((i for i, char in enumerate(text) if char in charset), -1)


def parse_int(text: str) -> int:
    """Read a leading decimal integer the way ``atoi`` does; 0 if none."""
    i = 0
    while i < len(text) and text[i] in _ATOI_SPACE:
        i += 1
    sign = 1
    if i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    result = 0
    while i < len(text) and text[i] in string.digits:
        result = result * 10 + int(text[i])
        i += 1
    return sign * result


def hex_string(value: int, case: str) -> str:
    """Hexadecimal digits of a non-negative number; upper case unless ``case`` is 'x'."""
    if value < 0:
        raise ValueError("hex_string needs a non-negative value")
    digits = format(value, "x")
    return digits if case == "x" else digits.upper()


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value & 0x80000000 else value


def _char_text(value: int | str) -> str | None:
    code = ord(value[0]) if isinstance(value, str) and value else int(value or 0)
    code &= 0xFF
    return chr(code) if code else None


def _pointer_text(value: int | None) -> str:
    if not value:
        return NULL_POINTER
    return "0x" + hex_string(value & _ULONG, "x")


def _convert(conversion: str, source) -> str | None:
    if conversion == "%":
        return "%"
    try:
        value = next(source)
    except StopIteration:
        raise ValueError(f"missing argument for %{conversion}") from None
    if conversion == "c":
        return _char_text(value)
    if conversion == "s":
        return NULL_STRING if value is None else str(value)
    if conversion == "p":
        return _pointer_text(value)
    if conversion in "di":
        return str(_to_int32(int(value)))
    if conversion == "u":
        return str(int(value) & _UINT32)
    return hex_string(int(value) & _UINT32, conversion)


def collect_arguments(fmt: str, args: Sequence | Iterable) -> Arguments:
    """Convert ``args`` to the texts the conversions of ``fmt`` will print.

    Each ``%`` is matched with the next conversion letter that follows it,
    whatever lies between. Collection stops at a ``%`` with no conversion
    after it. Raises ValueError when a conversion has no argument left.
    """
    source = iter(args)
    values: list[str | None] = []
    i = 0
    while i < len(fmt):
        if fmt[i] == "%":
            offset = find_any(fmt[i + 1:], CONVERSIONS)
            if offset == -1:
                break
            values.append(_convert(fmt[i + 1 + offset], source))
            i += offset + 1
        i += 1
    return Arguments(values)