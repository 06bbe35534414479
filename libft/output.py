"""Writing characters, strings and numbers to raw file descriptors.

A negative descriptor is silently ignored, as is a missing string.
"""

from __future__ import annotations

import os
from typing import Optional, Union

from .convert import itoa

CharLike = Union[int, str]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _char_bytes(c: CharLike) -> bytes:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c.encode("utf-8")
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return bytes([c & 0xFF])


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write one character to ``fd``.

    An integer is written as a single byte taken modulo 256; a one-character
    string is written in UTF-8.
    """
    data = _char_bytes(c)
    if fd >= 0:
        _write_all(fd, data)


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` up to its first NUL to ``fd`` in UTF-8."""
    if fd < 0 or s is None:
        return
    _write_all(fd, s.partition("\0")[0].encode("utf-8"))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``."""
    if fd < 0 or s is None:
        return
    putstr_fd(s, fd)
    putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of the 32-bit signed integer ``n`` to ``fd``."""
    if fd < 0:
        return
    putstr_fd(itoa(n), fd)