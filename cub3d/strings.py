"""String helpers with C string-library semantics: searching, slicing, joining."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable


def _cstr(s: str) -> str:
    """Return ``s`` up to its first NUL character, as a C string would see it."""
    return s.split("\0", 1)[0]


def _single_char(c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    _single_char(sep)
    return [word for word in s.split(sep) if word]


def strappend(dest: str | None, src: str | None, nb: int) -> str:
    """Return ``dest`` followed by at most ``nb`` characters of ``src``.

    A missing ``dest`` counts as the empty string; a missing ``src`` or a zero
    ``nb`` leaves ``dest`` as it is.
    """
    if nb < 0:
        raise ValueError(f"negative length: {nb}")
    base = "" if dest is None else dest
    if src is None or nb == 0:
        return base
    return base + src[:nb]


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    _single_char(c)
    if c == "\0":
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the terminator at ``len(s)``.
    """
    _single_char(c)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch, or 0."""
    if n < 0:
        raise ValueError(f"negative length: {n}")
    for a, b in zip_longest(_cstr(s1)[:n], _cstr(s2)[:n], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return the index of ``little`` in the first ``length`` characters of ``big``, or None."""
    if length < 0:
        raise ValueError(f"negative length: {length}")
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("negative start or length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string built from ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``, which exceeds the copy when it was truncated.
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had; when ``dst`` already fills the buffer it is returned unchanged
    and the length is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    if len(dst) >= size:
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(src) + len(dst)