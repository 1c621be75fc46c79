"""The level grid and its top-down minimap."""

from __future__ import annotations

from enum import IntEnum

from .geometry import CELLSIZE, Vec
from .image import Image

MINIMAP_CELL = CELLSIZE // 2


class Cell(IntEnum):
    """What occupies one square of the grid."""

    OPEN_DOOR = -1
    EMPTY = 0
    WALL = 1
    DOOR = 2


_LAYOUT = (
    (1, 1, 1, 1, 1, 1, 1, 1),
    (1, 0, 1, 0, 2, 1, 0, 1),
    (1, 0, 1, 0, 0, 1, 0, 1),
    (1, 0, 1, 0, 0, 1, 0, 1),
    (1, 0, 0, 0, 0, 2, 0, 1),
    (1, 0, 1, 1, 0, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 0, 1),
    (1, 1, 1, 1, 1, 1, 1, 1),
)

_COLORS = {
    Cell.EMPTY: 0x0000008B,
    Cell.WALL: 0x00414E58,
    Cell.DOOR: 0x0006402B,
}
_OTHER_COLOR = 0x003B3B3B


def default_map() -> list[list[Cell]]:
    """Return a fresh, mutable copy of the built-in 8x8 level."""
    return [[Cell(value) for value in row] for row in _LAYOUT]


def cell_color(cell: int) -> int:
    """Minimap colour of a cell."""
    return _COLORS.get(cell, _OTHER_COLOR)


def draw_minimap(grid: list[list[int]], image: Image) -> None:
    """Paint every cell of ``grid`` as a half-size square onto ``image``."""
    for row, cells in enumerate(grid):
        top = row * MINIMAP_CELL
        for col, cell in enumerate(cells):
            color = cell_color(cell)
            left = col * MINIMAP_CELL
            for x in range(left, left + MINIMAP_CELL):
                image.draw_straight(Vec(x, top), Vec(x, top + MINIMAP_CELL), color)