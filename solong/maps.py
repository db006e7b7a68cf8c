"""Reading and validating the tile maps the game is played on."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import MutableSequence, Optional, Sequence, Union

from solong.reader import read_text
from solong.strings import split

WALL = "1"
EMPTY = "0"
PLAYER = "P"
COLLECTIBLE = "C"
EXIT = "E"
FILLED = "F"
VALID_TILES = frozenset({PLAYER, EMPTY, WALL, COLLECTIBLE, EXIT})

MIN_ROWS = 3
MAX_ROWS = 25
MIN_COLUMNS = 5
MAX_COLUMNS = 48

NOT_BER = "The file must be a .ber file."
NOT_RECTANGULAR = "The map isn't rectangular."
NOT_FRAMED = "The map must be framed by walls."
NO_SINGLE_START = "The card must contain one starting point."
NO_SINGLE_EXIT = "The card must contain one exit."
NO_COLLECTIBLE = "The map must contain at least one collectible item."
UNKNOWN_CHARACTER = "At least one character is unknown."
UNFINISHABLE = "The game can't be finished."

Row = Union[str, Sequence[str]]
PathType = Union[str, "PathLike[str]"]


@dataclass(frozen=True)
class Position:
    """A tile position: column ``x`` and row ``y``."""

    x: int
    y: int


class MapError(ValueError):
    """Raised when a map cannot be played."""


def read_map_text(path: PathType) -> str:
    """Return the whole text of the map file at ``path``."""
    with open(path, encoding="utf-8", newline="") as stream:
        return read_text(stream)


def split_lines(content: str) -> list[str]:
    """Split map text into rows, dropping empty ones."""
    return split(content, "\n")


def count_occurrences(lines: Sequence[Row], tile: str) -> int:
    """Count how many times ``tile`` appears in the rows."""
    return sum(list(row).count(tile) for row in lines)


def has_empty_line(content: str) -> bool:
    """True when the text holds two newlines in a row."""
    return "\n\n" in content


def flood_fill(grid: Sequence[MutableSequence[str]], x: int, y: int) -> None:
    """Mark with ``F`` every tile reachable from (x, y) without crossing a wall."""
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if not 0 <= cy < len(grid) or not 0 <= cx < len(grid[cy]):
            continue
        if grid[cy][cx] in (WALL, FILLED):
            continue
        grid[cy][cx] = FILLED
        stack.extend(((cx - 1, cy), (cx + 1, cy), (cx, cy - 1), (cx, cy + 1)))


def is_rectangle(lines: Sequence[Row], content: str) -> bool:
    """True when all rows have one length and the size lies within bounds."""
    if not lines or has_empty_line(content):
        return False
    width = len(lines[0])
    if any(len(row) != width for row in lines):
        return False
    return MIN_ROWS <= len(lines) <= MAX_ROWS and MIN_COLUMNS <= width <= MAX_COLUMNS


def framed_by_walls(lines: Sequence[Row]) -> bool:
    """True when the first and last rows and columns are all walls."""
    if not lines:
        return False
    last = len(lines) - 1
    for index, row in enumerate(lines):
        if index in (0, last):
            if any(tile != WALL for tile in row):
                return False
        elif not row or row[0] != WALL or row[-1] != WALL:
            return False
    return True


def only_valid_characters(lines: Sequence[Row]) -> bool:
    """True when every tile is one of ``P 0 1 C E``."""
    return all(tile in VALID_TILES for row in lines for tile in row)


def is_ber(filename: str) -> bool:
    """True when the text from the first dot of ``filename`` is a prefix of ``.ber``."""
    dot = filename.find(".")
    if dot == -1:
        return False
    return ".ber".startswith(filename[dot:])


def find_tile(lines: Sequence[Row], tile: str) -> Optional[Position]:
    """Return the position of the last ``tile`` in reading order, or None."""
    found = None
    for y, row in enumerate(lines):
        for x, value in enumerate(row):
            if value == tile:
                found = Position(x, y)
    return found


def unfinishable(lines: Sequence[Row]) -> bool:
    """True when some collectible or the exit cannot be reached from the start."""
    start = find_tile(lines, PLAYER)
    if start is None:
        raise MapError(NO_SINGLE_START)
    grid = [list(row) for row in lines]
    flood_fill(grid, start.x, start.y)
    return count_occurrences(grid, COLLECTIBLE) > 0 or count_occurrences(grid, EXIT) > 0


def validation_error(lines: Sequence[Row], content: str, filename: str) -> Optional[str]:
    """Return the message for the first problem with the map, or None if it is playable."""
    if not is_ber(filename):
        return NOT_BER
    if not is_rectangle(lines, content):
        return NOT_RECTANGULAR
    if not framed_by_walls(lines):
        return NOT_FRAMED
    if count_occurrences(lines, PLAYER) != 1:
        return NO_SINGLE_START
    if count_occurrences(lines, EXIT) != 1:
        return NO_SINGLE_EXIT
    if count_occurrences(lines, COLLECTIBLE) == 0:
        return NO_COLLECTIBLE
    if not only_valid_characters(lines):
        return UNKNOWN_CHARACTER
    if unfinishable(lines):
        return UNFINISHABLE
    return None


def load_map(path: PathType) -> list[str]:
    """Read and validate the map at ``path`` and return its rows.

    Raises MapError with the reason when the map is not playable.
    """
    content = read_map_text(path)
    lines = split_lines(content)
    message = validation_error(lines, content, str(path))
    if message is not None:
        raise MapError(message)
    return lines