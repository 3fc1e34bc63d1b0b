# ftkit

A small library of everyday helpers with C-library semantics: ASCII
character classes, number parsing and digit counting, string search and
comparison, a `printf`-style formatter, a line reader over file
descriptors, an arena and a growable byte buffer, a seeded pseudo-random
generator and an unbalanced binary search tree.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module          | What it offers |
|-----------------|----------------|
| `ftkit.chars`   | `isalpha`, `isdigit`, `isalnum`, `isascii`, `isblank`, `isprint`, `isspace`, `toupper`, `tolower`; each takes a one-character string or an integer code |
| `ftkit.convert` | `atoi`, `atof`, `strtoi`, `strtof`, `itoa`, digit counts `bytelen`, `intlen`, `uintlen`, `llulen`, and `word_len`, `count_words`, `split` |
| `ftkit.strings` | `skip_blank`, `strchr`, `strrchr`, `strcmp`, `strncmp`, `strnstr`, `strpbrk`, `strtrim`, `substr`, `strmapi` |
| `ftkit.numbers` | `abs_char`, `abs_int`, `expf`, the `LinearCongruential` generator and the shared-generator functions `srand`, `rand`, `randf`, `randf_norm` |
| `ftkit.memory`  | `memchr`, `memchrset`, `memcmp`, an `Arena` of fixed-size blocks and a `GrowableBuffer` |
| `ftkit.gnl`     | `LineReader`, and `get_next_line` and `close` on a shared reader |
| `ftkit.printf`  | `render`, `printf`, `dprintf` for `%c %s %p %d %i %u %x %X %%` with the flags `-+ #0`, width and precision (`*` takes them from the arguments) |
| `ftkit.bst`     | `BinarySearchTree` with `push`, `find`, prefix, infix and suffix iteration, `level_count` and `clear` |

Search functions in `ftkit.strings` return an index or `None`;
comparisons return the difference of the first differing character codes.
`strtoi` and `strtof` return the value together with the index where
parsing stopped, and `strtoi` raises `OverflowError` outside the 32-bit
range.

## Examples

```python
from ftkit.convert import split, strtoi
from ftkit.printf import render
from ftkit.bst import BinarySearchTree

split("  ls   -la\t/tmp ", " \t")          # ['ls', '-la', '/tmp']
strtoi("  -42abc")                         # (-42, 5): value and stop index
render("[%-5d|%05x]", 42, 255)             # '[42   |000ff]'
render("%s", None)                         # '(null)'

tree = BinarySearchTree(lambda a, b: a - b, [5, 2, 8, 1])
list(tree)                                 # [1, 2, 5, 8]
list(tree.iter_prefix())                   # [5, 2, 1, 8]
tree.level_count()                         # 2
```

Reading a file line by line through a descriptor; lines come back as
bytes with their newline, and `b""` marks the end:

```python
import os
from ftkit.gnl import get_next_line, close

fd = os.open("notes.txt", os.O_RDONLY)
while (line := get_next_line(fd)):
    print(line.decode(), end="")
close(fd)
```

Taking memory from an arena, which hands out `memoryview` slices of its
blocks and drops them all when the `with` block ends:

```python
from ftkit.memory import Arena, GrowableBuffer

with Arena(1024) as arena:
    chunk = arena.malloc(16)
    chunk[:5] = b"hello"

buf = GrowableBuffer(b"abc")
buf.write(b"xyz", 3)
bytes(buf)[:6]                             # b'abcxyz'
```

## What it does not do

The package has no linked-list container, no helpers that write
characters, strings or numbers straight to a file descriptor, no
error-message helpers, and nothing for running programs: no command
lookup on `PATH`, no launching of commands through pipes and no
here-document input. It offers no command-line program of its own.