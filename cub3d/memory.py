"""Byte-buffer helpers: filling, copying, searching and comparing."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check(buffer, n: int, offset: int = 0) -> None:
    if n < 0 or offset < 0:
        raise ValueError("negative length or offset")
    if offset + n > len(buffer):
        raise IndexError(f"range {offset}..{offset + n} exceeds buffer of {len(buffer)} bytes")


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("negative allocation size")
    if size and nmemb > SIZE_MAX // size:
        raise OverflowError("allocation size overflows")
    return bytearray(nmemb * size)


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buffer`` to ``value`` (as an unsigned byte)."""
    _check(buffer, n)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buffer``."""
    return memset(buffer, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` into ``dest``."""
    _check(dest, n)
    _check(src, n)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buffer``; overlapping ranges are handled."""
    _check(buffer, n, dest_offset)
    _check(buffer, n, src_offset)
    if n:
        buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memchr(data: bytes, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` within ``n`` bytes, or None."""
    _check(data, n)
    target = value & 0xFF
    return next((i for i, byte in enumerate(data[:n]) if byte == target), None)


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Return the difference of the first differing byte in ``n`` bytes, or 0."""
    _check(first, n)
    _check(second, n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0