"""Formatted output: number and string rendering and a small printf family."""

from __future__ import annotations

import sys
from typing import IO, Any, Iterator

from cub3d.chars import INT_MAX, INT_MIN

UINT_MASK = 0xFFFFFFFF
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


def _to_int32(n: int) -> int:
    value = n & UINT_MASK
    return value - 2**32 if value > INT_MAX else value


def _to_uint32(n: int) -> int:
    return n & UINT_MASK


def _in_base(n: int, base: int, digits: str) -> str:
    if n < 0:
        raise ValueError(f"cannot format a negative value in base {base}: {n}")
    text = []
    while True:
        n, remainder = divmod(n, base)
        text.append(digits[remainder])
        if n == 0:
            break
    return "".join(reversed(text))


def format_number(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)


def format_unsigned(n: int) -> str:
    """Return the decimal text of a 32-bit unsigned integer."""
    if not 0 <= n <= UINT_MASK:
        raise OverflowError(f"{n} does not fit in a 32-bit unsigned integer")
    return str(n)


def format_hex(n: int) -> str:
    """Return ``n`` in lowercase hexadecimal, without prefix."""
    return _in_base(n, 16, _LOWER_DIGITS)


def format_upper_hex(n: int) -> str:
    """Return ``n`` in hexadecimal with only the last digit in uppercase.

    The leading digits are written in lowercase, as the uppercase form
    delegates everything but its final digit to the lowercase one.
    """
    if n < 0:
        raise ValueError(f"cannot format a negative value in base 16: {n}")
    high, low = divmod(n, 16)
    prefix = format_hex(high) if high else ""
    return prefix + _UPPER_DIGITS[low]


def format_octal(n: int) -> str:
    """Return a non-negative ``n`` in octal, without prefix."""
    return _in_base(n, 8, _LOWER_DIGITS)


def format_pointer(address: int | None) -> str:
    """Return an address as ``0x``-prefixed hexadecimal, or ``(nil)`` for a null one."""
    if not address:
        return "(nil)"
    return "0x" + format_hex(address)


def format_string(s: str | None) -> str:
    """Return ``s``, or ``(null)`` when it is missing."""
    return "(null)" if s is None else s


def _format_char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(c & 0xFF)


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for format specifier %{spec}") from None


def _render_specifier(spec: str, args: Iterator[Any]) -> str:
    if spec == "c":
        return _format_char(_next_arg(args, spec))
    if spec == "s":
        return format_string(_next_arg(args, spec))
    if spec == "p":
        return format_pointer(_next_arg(args, spec))
    if spec in ("d", "i"):
        return format_number(_to_int32(_next_arg(args, spec)))
    if spec == "u":
        return format_unsigned(_to_uint32(_next_arg(args, spec)))
    if spec == "x":
        return format_hex(_to_uint32(_next_arg(args, spec)))
    if spec == "X":
        return format_upper_hex(_to_uint32(_next_arg(args, spec)))
    if spec == "%":
        return "%"
    return "%" + spec


def render_format(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with the conversions c, s, p, d, i, u, x, X and %%.

    An unknown conversion is written out as is; a lone ``%`` at the end of the
    format stops the output there. Integer arguments wrap to 32 bits.
    """
    pieces: list[str] = []
    remaining = iter(args)
    position = 0
    while position < len(fmt):
        ch = fmt[position]
        if ch != "%":
            pieces.append(ch)
            position += 1
            continue
        if position + 1 >= len(fmt):
            break
        pieces.append(_render_specifier(fmt[position + 1], remaining))
        position += 2
    return "".join(pieces)


def dprintf(stream: IO[str], fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to ``stream``; return the characters written."""
    text = render_format(fmt, *args)
    stream.write(text)
    return len(text)


def printf(fmt: str, *args: Any) -> int:
    """Write the expansion of ``fmt`` to standard output; return the characters written."""
    return dprintf(sys.stdout, fmt, *args)


def put_endl(s: str | None, stream: IO[str]) -> int:
    """Write ``s`` and a newline to ``stream``; return the characters written."""
    text = format_string(s) + "\n"
    stream.write(text)
    return len(text)