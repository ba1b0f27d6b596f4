"""A small printf supporting the conversions %s %d %i %c %x %X %p %u and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

_CONVERSIONS = frozenset("sdicxXpu")
_UINT32_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int32(value: Any) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    number = int(value) & _UINT32_MASK
    return number - (1 << 32) if number >= 1 << 31 else number


def _as_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _convert(spec: str, value: Any) -> str:
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in ("d", "i"):
        return str(_as_int32(value))
    if spec == "c":
        return _as_char(value)
    if spec == "x":
        return format(int(value) & _UINT32_MASK, "x")
    if spec == "X":
        return format(int(value) & _UINT32_MASK, "X")
    if spec == "p":
        if not value:
            return "(nil)"
        return "0x" + format(int(value) & _POINTER_MASK, "x")
    if spec == "u":
        return str(int(value) & _UINT32_MASK)
    raise ValueError(f"unsupported conversion %{spec}")


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text.

    A ``%`` followed by an unknown character produces nothing, and that
    character is consumed. A lone trailing ``%`` is dropped. Surplus
    arguments are ignored; a missing one raises ``ValueError``.
    """
    if fmt is None:
        raise TypeError("format must be a string")
    out: list[str] = []
    values: Iterator[Any] = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            out.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            out.append("%")
        elif spec in _CONVERSIONS:
            try:
                value = next(values)
            except StopIteration:
                raise ValueError(f"missing argument for %{spec}") from None
            out.append(_convert(spec, value))
    return "".join(out)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default)
    and return the number of characters written."""
    text = format_printf(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)