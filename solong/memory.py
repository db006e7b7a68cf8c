"""Byte-buffer operations on bytearray and bytes objects."""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_size(size: int, *buffers: bytes | bytearray) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    for buf in buffers:
        if size > len(buf):
            raise ValueError(f"size {size} exceeds buffer length {len(buf)}")


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    _check_size(n, buffer)
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises MemoryError when the product would overflow a native size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > SIZE_MAX // size:
        raise MemoryError(f"cannot allocate {count} x {size} bytes")
    return bytearray(count * size)


def _c_remainder(value: int, divisor: int) -> int:
    remainder = abs(value) % divisor
    return -remainder if value < 0 else remainder


def memchr(data: bytes | bytearray, value: int, size: int) -> int | None:
    """Return the index of the first byte equal to ``value`` in the first ``size`` bytes.

    Values beyond the signed-char range are first reduced modulo 128.
    Returns None when no byte matches.
    """
    _check_size(size, data)
    if value > 127 or value < -127:
        value = _c_remainder(value, 128)
    target = value & 0xFF
    index = bytes(data[:size]).find(bytes([target]))
    return None if index == -1 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, size: int) -> int:
    """Compare the first ``size`` bytes; return the difference at the first mismatch, else 0."""
    _check_size(size, first, second)
    for a, b in zip(first[:size], second[:size]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, size: int) -> bytearray:
    """Copy the first ``size`` bytes of ``src`` into ``dest`` and return ``dest``."""
    _check_size(size, dest, src)
    dest[:size] = bytes(src[:size])
    return dest


def memmove(buffer: bytearray, dest: int, src: int, size: int) -> bytearray:
    """Copy ``size`` bytes inside ``buffer`` from offset ``src`` to offset ``dest``.

    The regions may overlap. Returns ``buffer``.
    """
    if size < 0 or dest < 0 or src < 0:
        raise ValueError("offsets and size must not be negative")
    if dest + size > len(buffer) or src + size > len(buffer):
        raise ValueError("region lies outside the buffer")
    buffer[dest:dest + size] = bytes(buffer[src:src + size])
    return buffer


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with the low byte of ``value``."""
    _check_size(n, buffer)
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer