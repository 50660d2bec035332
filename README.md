# bytekit

Small, dependency-free helpers for low-level text and byte work, using
C-style semantics where they matter (ASCII-only classification, 32-bit
integers, NUL-terminated text).

## Modules

- `bytekit.chars`: ASCII classification and case conversion. Each function
  takes a character code (`int`) or a one-character `str`:
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`,
  `to_lower`. The case functions return a value of the same kind they were
  given and leave anything that is not an ASCII letter unchanged.
- `bytekit.numbers`:
  - `atoi(text)` skips leading whitespace (tab, newline, vertical tab, form
    feed, carriage return, space), reads one optional `+` or `-`, then digits
    up to the first non-digit. Text without digits gives `0`; values outside
    the 32-bit signed range wrap around.
  - `itoa(n)` returns the decimal text of a 32-bit signed integer and raises
    `OverflowError` for anything outside that range.
- `bytekit.output`: write to a file descriptor with `os.write`:
  `put_char(c, fd)` (a one-character string, written as UTF-8, or a byte
  value 0-255), `put_str(s, fd)`, `put_endl(s, fd)` (adds a newline) and
  `put_nbr(n, fd)` (a 32-bit signed integer). `put_str` and `put_endl`
  write nothing when given `None`.
- `bytekit.memory`: operations on byte buffers. Buffers written to must be a
  `bytearray` or writable `memoryview`; a length or offset past the end of a
  buffer raises `ValueError`.
  - `memset(buffer, value, length)`, `bzero(buffer, length)`
  - `memcpy(dst, src, n)`
  - `memmove(buffer, dst_offset, src_offset, n)`: overlap-safe copy within
    one buffer
  - `memchr(data, c, n)`: offset of the first matching byte, or `None`
  - `memcmp(a, b, n)`: difference of the first differing bytes, or `0`
  - `calloc(count, size)`: a zero-filled `bytearray`
- `bytekit.strings`: operations on text read up to its first `"\0"`.
  Search functions return an index, or `None` when nothing is found.
  - `strlen`, `strdup`, `substr`, `strjoin`, `strtrim`, `split` (drops empty
    pieces)
  - `strchr`, `strrchr` (searching for NUL finds the terminator at
    `strlen(s)`), `strnstr` (an empty needle is found at `0`), `strncmp`
  - `strlcpy(dst, src, size)` and `strlcat(dst, src, size)` work on
    `bytearray` buffers holding NUL-terminated data and return the length
    the full result would have
  - `strmapi(s, f)` builds a string from `f(index, char)`; an empty input
    gives `None`
  - `striteri(chars, f)` calls `f(index, item)` on a mutable sequence up to a
    `"\0"` or `0` element, replacing the element with whatever `f` returns
    other than `None`
- `bytekit.linkedlist`: `LinkedList`, a singly linked list of `Node` objects
  (each with `content` and `next`). It supports `len()`, iteration,
  `push_front`, `push_back` (both return the new node), `last()` (the last
  node or `None`), `pop_front(delete)`, `clear(delete)`, `for_each(f)` and
  `map(f, delete)`. The optional `delete` callback receives each removed
  element; `clear` and a failed `map` call it from last to first.

## Examples

```python
from bytekit.numbers import atoi, itoa
from bytekit.strings import split, strtrim, strchr
from bytekit.linkedlist import LinkedList

atoi("   -42abc")              # -42
itoa(-2147483648)              # "-2147483648"
split("  hello  world ", " ")  # ["hello", "world"]
strtrim("xxhixx", "x")         # "hi"
strchr("hello", "l")           # 2

items = LinkedList([1, 2, 3])
items.push_front(0)
len(items)                     # 4
doubled = items.map(lambda x: x * 2)
list(doubled)                  # [0, 2, 4, 6]
```

## What it does not do

bytekit is a library only: it has no command-line tool and does no
allocation or memory management of its own beyond ordinary Python objects.

## Running the tests

```
pip install -e ".[test]"
pytest
```