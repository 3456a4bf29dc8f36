"""Grid map of walls and open cells, and the text format it is read from."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

MAP_WIDTH = 8
MAP_HEIGHT = 8
WALL_CHARS = frozenset("#1")


class MapError(ValueError):
    """Raised when a map cannot be read or is malformed."""


@dataclass(frozen=True)
class GameMap:
    """An immutable grid of cells; ``True`` marks a wall."""

    cells: tuple[tuple[bool, ...], ...]

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    @property
    def height(self) -> int:
        return len(self.cells)

    def is_wall(self, x: float, y: float) -> bool:
        """Return whether the cell holding point (x, y) is a wall.

        Coordinates are truncated toward zero. Anything outside the grid
        counts as a wall, so rays and movement never leave the map.
        """
        col, row = int(x), int(y)
        if not (0 <= row < self.height and 0 <= col < self.width):
            return True
        return self.cells[row][col]

    def __str__(self) -> str:
        return "\n".join(
            "".join("#" if cell else "." for cell in row) for row in self.cells
        )


def _strip_line_end(line: str) -> str:
    for terminator in ("\r", "\n"):
        line = line.split(terminator, 1)[0]
    return line


def parse_map(lines: Iterable[str]) -> GameMap:
    """Build a map from text lines.

    The first ``MAP_HEIGHT`` lines are used and each must hold at least
    ``MAP_WIDTH`` characters; '#' or '1' is a wall, anything else is open.
    """
    rows: list[tuple[bool, ...]] = []
    for line in lines:
        if len(rows) >= MAP_HEIGHT:
            break
        text = _strip_line_end(line)
        if len(text) < MAP_WIDTH:
            raise MapError(f"Line {len(rows) + 1} too short.")
        rows.append(tuple(ch in WALL_CHARS for ch in text[:MAP_WIDTH]))
    if len(rows) < MAP_HEIGHT:
        raise MapError(f"Map file has {len(rows)} rows; expected {MAP_HEIGHT}.")
    return GameMap(tuple(rows))


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Read and parse a map file."""
    try:
        with open(path, encoding="latin-1") as handle:
            return parse_map(handle)
    except OSError as exc:
        raise MapError(f"Could not open map file '{os.fspath(path)}'") from exc