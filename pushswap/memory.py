"""Byte-buffer helpers: filling, searching, comparing and copying."""

from __future__ import annotations

from typing import Optional

__all__ = [
    "memset",
    "bzero",
    "calloc",
    "memchr",
    "memcmp",
    "memcpy",
    "memmove",
]


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer of length {len(buf)}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` truncated to a byte."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte equal to ``c`` within ``n`` bytes, or None."""
    _check_count(n, data)
    offset = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if offset < 0 else offset


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: Optional[bytearray], src: Optional[bytes], n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes from ``src`` to the start of ``dest`` and return ``dest``."""
    if dest is None and src is None:
        return None
    if dest is src:
        return dest
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to ``dest``, overlap-safe."""
    if min(dest, src) < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    if max(dest, src) + n > len(buf):
        raise ValueError("move extends past the end of the buffer")
    if dest != src:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf