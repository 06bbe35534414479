"""String helpers with NUL-terminated semantics.

Text is handled as Python ``str``; a ``"\\0"`` character ends a string, so
anything after it is ignored. Searches return an index instead of a pointer,
and None where nothing is found. The bounded copy functions ``strlcpy`` and
``strlcat`` write into a ``bytearray`` and return the length they tried to
create.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, List, MutableSequence, Optional, Union

CharLike = Union[int, str]
ByteSource = Union[bytes, bytearray, memoryview]

_NUL = "\0"


def _terminated(s: str) -> str:
    return s.partition(_NUL)[0]


def _terminated_bytes(data: ByteSource) -> bytes:
    return bytes(data).partition(b"\0")[0]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _check_size(size: int, dest: bytearray) -> None:
    _check_non_negative("size", size)
    if size > len(dest):
        raise ValueError(f"size {size} exceeds destination of size {len(dest)}")


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(s))


def strdup(s: str) -> str:
    """A copy of ``s`` up to its first NUL."""
    return _terminated(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of ``c``, or None.

    Searching for NUL yields the index of the terminator, the string's length.
    """
    target = _char(c)
    text = _terminated(s)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of ``c``, or None.

    Searching for NUL yields the index of the terminator, the string's length.
    """
    target = _char(c)
    text = _terminated(s)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one counts as absent, both missing gives None."""
    if s1 is None and s2 is None:
        return None
    if s1 is None:
        return strdup(s2)
    if s2 is None:
        return strdup(s1)
    return _terminated(s1) + _terminated(s2)


def strlcpy(dest: bytearray, src: ByteSource, size: int) -> int:
    """Copy at most ``size - 1`` bytes of ``src`` into ``dest`` and NUL-terminate.

    Returns the length of ``src``. ``size`` may not exceed the size of ``dest``.
    """
    _check_size(size, dest)
    data = _terminated_bytes(src)
    if size == 0:
        return len(data)
    count = min(len(data), size - 1)
    dest[:count] = data[:count]
    dest[count] = 0
    return len(data)


def strlcat(dest: bytearray, src: ByteSource, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dest`` so that the
    result, terminator included, fits in ``size`` bytes.

    Returns the length of the string it tried to create: ``len(src) + size``
    when ``dest`` already holds ``size`` or more characters.
    """
    _check_size(size, dest)
    data = _terminated_bytes(src)
    if size == 0:
        return len(data)
    d_len = len(_terminated_bytes(dest))
    if size <= d_len:
        return len(data) + size
    count = min(len(data), size - 1 - d_len)
    dest[d_len:d_len + count] = data[:count]
    dest[d_len + count] = 0
    return len(data) + d_len


def striteri(
    chars: Optional[MutableSequence],
    func: Optional[Callable[[int, object], object]],
) -> None:
    """Replace each element of ``chars`` before the terminator with
    ``func(index, element)``, in place."""
    if chars is None or func is None:
        return
    for index, value in enumerate(chars):
        if value == _NUL or (isinstance(value, int) and value == 0):
            break
        chars[index] = func(index, value)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first
    differing pair of character codes, or 0."""
    _check_non_negative("n", n)
    pairs = zip_longest(_terminated(s1) + _NUL, _terminated(s2) + _NUL, fillvalue=_NUL)
    for x, y in islice(pairs, n):
        if x != y or x == _NUL:
            return ord(x) - ord(y)
    return 0


def strmapi(
    s: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """A new string made of ``func(index, char)`` for each character of ``s``."""
    if s is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(_terminated(s)))


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of the first occurrence of ``needle`` lying wholly within the
    first ``n`` characters of ``haystack``, or None. An empty needle gives 0."""
    _check_non_negative("n", n)
    pattern = _terminated(needle)
    if not pattern:
        return 0
    index = _terminated(haystack)[:n].find(pattern)
    return None if index < 0 else index


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``s`` from ``start``; empty when
    ``start`` is past the end."""
    if s is None:
        return None
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    text = _terminated(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """``s`` with every leading and trailing character found in ``charset`` removed."""
    if s is None:
        return None
    if charset is None:
        return strdup(s)
    return _terminated(s).strip(_terminated(charset))


def split(s: Optional[str], sep: CharLike) -> Optional[List[str]]:
    """The non-empty pieces of ``s`` separated by the character ``sep``."""
    if s is None:
        return None
    delimiter = _char(sep)
    text = _terminated(s)
    if delimiter == _NUL:
        return [text] if text else []
    return [word for word in text.split(delimiter) if word]