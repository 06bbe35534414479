"""Byte-buffer operations on mutable and immutable byte sequences."""

from __future__ import annotations

import sys
from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ByteSource = Union[bytes, bytearray, memoryview]

SIZE_MAX = 2 * sys.maxsize + 1


def _check_length(length: int, *buffers: ByteSource) -> None:
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    for buf in buffers:
        if length > len(buf):
            raise ValueError(f"length {length} exceeds buffer of size {len(buf)}")


def memset(buffer: Buffer, value: int, length: int) -> Buffer:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` taken modulo 256."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: Buffer, length: int) -> None:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of ``count`` elements of ``size`` bytes.

    Raises MemoryError when the total size would overflow a machine size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size and count > SIZE_MAX // size:
        raise MemoryError(f"{count} * {size} bytes overflows the address space")
    return bytearray(count * size)


def memchr(data: ByteSource, value: int, length: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` (mod 256) in the
    first ``length`` bytes of ``data``, or None."""
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: ByteSource, b: ByteSource, length: int) -> int:
    """Compare the first ``length`` bytes; return the difference of the first
    differing pair, or 0 when they are equal."""
    _check_length(length, a, b)
    for x, y in zip(bytes(a[:length]), bytes(b[:length])):
        if x != y:
            return x - y
    return 0


def memcpy(dst: Buffer, src: ByteSource, length: int) -> Buffer:
    """Copy the first ``length`` bytes of ``src`` into ``dst``."""
    _check_length(length, dst, src)
    dst[:length] = bytes(src[:length])
    return dst


def memmove(buffer: Buffer, dest: int, source: int, length: int) -> Buffer:
    """Copy ``length`` bytes inside ``buffer`` from offset ``source`` to offset
    ``dest``; overlapping regions are handled correctly."""
    if dest < 0 or source < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if max(dest, source) + length > len(buffer):
        raise ValueError("region extends past the end of the buffer")
    chunk = bytes(buffer[source:source + length])
    buffer[dest:dest + length] = chunk
    return buffer