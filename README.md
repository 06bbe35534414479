# libft

Small utilities that follow the behaviour of the classic C library routines
(NUL-terminated strings, bounded copies, byte buffers, a singly linked list),
expressed with Python data types. Searches return an index, or `None` where
the C routine would return a null pointer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `libft.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`,
`to_upper`. Each takes an integer character code or a one-character string.
The classifiers are ASCII-only and return a `bool`; the converters change only
ASCII letters and return a value of the same type they were given.

### `libft.convert`

- `atoi(text)` skips leading whitespace and one optional sign, then reads
  digits up to the first non-digit. A value that overflows a 64-bit signed
  integer gives `-1` (positive) or `0` (negative); otherwise the result is
  truncated to a 32-bit signed integer.
- `itoa(n)` returns the decimal text of a 32-bit signed integer and raises
  `OverflowError` for anything outside that range.

### `libft.memory`

Operations on `bytearray`/`memoryview` buffers (sources may also be `bytes`):

- `memset(buffer, value, length)` and `bzero(buffer, length)` fill the first
  `length` bytes.
- `calloc(count, size)` returns a zeroed `bytearray`; it raises `MemoryError`
  when `count * size` would overflow a machine size.
- `memchr(data, value, length)` returns the index of the first matching byte,
  or `None`.
- `memcmp(a, b, length)` returns the difference of the first differing bytes,
  or `0`.
- `memcpy(dst, src, length)` copies bytes into `dst`.
- `memmove(buffer, dest, source, length)` copies a region inside one buffer
  between two offsets, handling overlap.

A negative length, or one that runs past the end of a buffer, raises
`ValueError`.

### `libft.strings`

Strings are `str`; a `"\0"` ends a string. Provided: `strlen`, `strdup`,
`strchr`, `strrchr`, `strjoin`, `strlcpy`, `strlcat`, `striteri`, `strncmp`,
`strmapi`, `strnstr`, `substr`, `strtrim`, `split`.

- `strlcpy(dest, src, size)` and `strlcat(dest, src, size)` write into a
  `bytearray` and return the length of the string they tried to create.
- `striteri(chars, func)` replaces each element of a mutable sequence in place
  with `func(index, element)`, stopping at a terminator.
- `split(s, sep)` returns the non-empty pieces of `s` between occurrences of
  the character `sep`.

### `libft.output`

`putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` write to a raw file
descriptor with `os.write`. A negative descriptor or a `None` string is
ignored. Strings are written in UTF-8; an integer character is written as a
single byte.

### `libft.linkedlist`

`Node` (with `content`, `next` and `release(delete)`) and `LinkedList` (held
by `head`) with `push_front`, `push_back`, `last`, `clear(delete)`,
`for_each(func)` and `map(func, delete)`. `LinkedList` supports `len()` and
iterates over the node contents. `map` returns a new list; if `func` raises,
the values built so far are passed to `delete` and the exception propagates.

## Example

```python
from libft.convert import atoi, itoa
from libft.strings import split, strtrim
from libft.linkedlist import LinkedList, Node

atoi("  -42abc")               # -42
itoa(-2147483648)              # "-2147483648"
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"

items = LinkedList()
items.push_back(Node(1))
items.push_back(Node(2))
items.push_front(Node(0))
len(items)                     # 3
doubled = items.map(lambda v: v * 2, lambda v: None)
list(doubled)                  # [0, 2, 4]
```

## What it does not do

This is a library only: it has no command-line program. Import the modules
directly.