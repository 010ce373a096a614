"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _check_int32(n: int) -> None:
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0 to 9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: int | str) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) < 128


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lowercase letter to uppercase; other values pass through.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Map an ASCII uppercase letter to lowercase; other values pass through.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace and one optional sign are accepted; parsing stops at the
    first non-digit. Text without digits yields 0. The result wraps to a
    32-bit signed integer.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    number = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        number = number * 10 + _DIGITS.index(ch)
    value = (sign * number) & 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    _check_int32(n)
    return str(n)


def digit_count(n: int) -> int:
    """Return how many characters the decimal text of ``n`` takes, sign included."""
    return len(itoa(n))