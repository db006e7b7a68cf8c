# solong

Map handling for a small top-down puzzle: a player walks a walled map, picks
up every collectible and then reaches the exit. This package reads map files
and decides whether a map is playable, and ships the small text, byte-buffer,
list, line-reading and formatted-output helpers it is built on.

## Installing

```
pip install .
```

There are no runtime dependencies beyond the standard library.

## Map files

A map is a plain text file whose name ends in `.ber`. Each line is one row of
tiles:

| Tile | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | empty floor  |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

Example:

```
1111111111
1P0C000001
1000110C01
10000000E1
1111111111
```

The rules are checked in this order, and the first one that fails gives the
message:

| Rule | Message |
|------|---------|
| the text from the first `.` of the file name is a prefix of `.ber` | `The file must be a .ber file.` |
| no blank lines, all rows the same length, 3 to 25 rows of 5 to 48 tiles | `The map isn't rectangular.` |
| the border is entirely walls | `The map must be framed by walls.` |
| exactly one `P` | `The card must contain one starting point.` |
| exactly one `E` | `The card must contain one exit.` |
| at least one `C` | `The map must contain at least one collectible item.` |
| only `P 0 1 C E` appear | `At least one character is unknown.` |
| every `C` and the `E` can be reached from `P` | `The game can't be finished.` |

## Using `solong.maps`

```python
from solong.maps import load_map, MapError, find_tile, PLAYER

try:
    rows = load_map("level.ber")
except MapError as error:
    print("Error")
    print(error)
else:
    print(find_tile(rows, PLAYER))   # Position(x=1, y=1) for the example
```

- `load_map(path)` reads the file, checks every rule and returns the rows as a
  list of strings, or raises `MapError` (a `ValueError`) with the message of
  the first failed rule.
- `validation_error(lines, content, filename)` returns that message, or
  `None` for a playable map, without raising.
- `read_map_text(path)` and `split_lines(content)` read a file and split it
  into rows, dropping empty ones.
- The single checks are available on their own: `is_ber`, `is_rectangle`,
  `framed_by_walls`, `only_valid_characters`, `has_empty_line`,
  `count_occurrences`, `unfinishable`.
- `flood_fill(grid, x, y)` marks with `F` every tile of a grid of mutable rows
  that is reachable from `(x, y)` without crossing a wall.
- `find_tile(lines, tile)` returns the `Position` of the last occurrence of a
  tile in reading order, or `None`.

## Helper modules

- `solong.strings` – string functions with NUL-terminated conventions:
  `split`, `strchr`, `strrchr`, `strdup`, `striteri`, `strmapi`, `strjoin`,
  `strlcpy`, `strlcat`, `strlen`, `strncmp`, `strnstr`, `strtrim`, `substr`.
  Searches return an index or `None`; `strlcpy` and `strlcat` return the new
  text together with the length they report.
- `solong.chars` – `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper` (for one-character strings or codes),
  `atoi` (leading integer, wrapping to 32 bits) and `itoa`.
- `solong.memory` – `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove`, `memset` on `bytearray` and `bytes`.
- `solong.printing` – `format_printf(fmt, *args)` returns the text of a small
  printf supporting `%c %s %p %d %i %u %x %X %%`; `printf`, `put_char`,
  `put_str`, `put_endl`, `put_nbr`, `put_unsigned`, `put_nbr_base` and
  `write_address` write to a text stream (standard output by default) and
  return the number of characters written.

  ```python
  from solong.printing import format_printf
  format_printf("Step = %d, Count = %d\n", 3, 1)   # 'Step = 3, Count = 1\n'
  ```
- `solong.lists` – `LinkedList` of `Node`s with `push_front`, `push_back`,
  `last`, `for_each`, `clear`, `len()` and iteration over contents.
- `solong.reader` – `LineReader(stream, buffer_size=1)` hands out lines with
  their newline through `next_line()` or iteration; `read_text(stream)` reads
  a whole stream that way.

## What this package does not do

It validates maps but does not play them: there is no game state, no player
movement or step counting, no window or drawing, and no command-line program.
Those would have to be built on top of `solong.maps`.

## Running the tests

```
pip install .[test]
pytest
```