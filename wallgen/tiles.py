"""Tile descriptors and grid constants.

A descriptor is ``(x, y, w, h)``: the grid cell of the tile's origin corner
and its span in cells. World coordinates are ``CELL_SIZE`` units per cell.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from .errors import MalformedTableError

CELL_SIZE = 32
HALF_CELL = CELL_SIZE // 2
DESCRIPTOR_WIDTH = 4

WALL_TAG = "Wall"
WALL_SPRITE = 0
IDENTITY_ROTATION = (1, 0, 0, 0)  # scalar-first quaternion

# Arena outline plus interior cover, one row per wall segment.
DEFAULT_TABLE = (
    0, 2, 5, 1,
    0, 3, 1, 7,
    0, 10, 5, 1,
    4, 0, 14, 1,
    4, 1, 1, 1,
    4, 11, 1, 1,
    4, 12, 14, 1,
    17, 1, 1, 1,
    17, 2, 5, 1,
    17, 10, 5, 1,
    17, 11, 1, 1,
    21, 3, 1, 7,
    3, 4, 2, 1,
    3, 6, 1, 1,
    3, 8, 2, 1,
    6, 2, 4, 1,
    6, 10, 2, 1,
    7, 4, 1, 2,
    7, 7, 1, 2,
    9, 4, 4, 1,
    9, 8, 4, 1,
    9, 9, 1, 2,
    12, 2, 1, 2,
    12, 10, 4, 1,
    14, 2, 2, 1,
    14, 4, 1, 2,
    14, 7, 1, 2,
    17, 4, 2, 1,
    17, 8, 2, 1,
    18, 6, 1, 1,
)  # fmt: skip


@dataclass(frozen=True)
class Tile:
    x: int
    y: int
    w: int
    h: int

    @classmethod
    def from_values(cls, values: Sequence[int]) -> "Tile":
        if len(values) != DESCRIPTOR_WIDTH:
            raise MalformedTableError(f"descriptor needs {DESCRIPTOR_WIDTH} values, got {len(values)}")
        for v in values:
            # bool is an int subclass; floats would be truncated
            if isinstance(v, bool) or not isinstance(v, int):
                raise MalformedTableError(f"expected integer, got {v!r}")
        x, y, w, h = values
        return cls(x, y, w, h)

    def as_tuple(self):
        return (self.x, self.y, self.w, self.h)


def group_descriptors(values: Sequence[int]) -> List[Tile]:
    """Split a flat ``x, y, w, h, x, y, ...`` sequence into tiles.

    Raises:
        MalformedTableError: if the length is not a multiple of four. Nothing
        is truncated; a partial trailing group is always an error.
    """
    if len(values) % DESCRIPTOR_WIDTH:
        raise MalformedTableError(
            f"table length {len(values)} is not a multiple of {DESCRIPTOR_WIDTH}"
        )
    return [
        Tile.from_values(values[i : i + DESCRIPTOR_WIDTH])
        for i in range(0, len(values), DESCRIPTOR_WIDTH)
    ]


def as_tiles(table: Iterable) -> List[Tile]:
    """Accept either a flat integer table or an iterable of ``Tile`` objects."""
    items = list(table)
    if items and all(isinstance(t, Tile) for t in items):
        return items
    return group_descriptors(items)


def tile_center(tile: Tile, cell_size: int = CELL_SIZE):
    """World-space centre of the tile's bounding box."""
    half = cell_size // 2
    return (tile.x * cell_size + tile.w * half, tile.y * cell_size + tile.h * half)


def collider_size(tile: Tile, cell_size: int = CELL_SIZE):
    return (tile.w * cell_size, tile.h * cell_size)


__all__ = [
    "CELL_SIZE",
    "HALF_CELL",
    "DESCRIPTOR_WIDTH",
    "WALL_TAG",
    "WALL_SPRITE",
    "IDENTITY_ROTATION",
    "DEFAULT_TABLE",
    "Tile",
    "group_descriptors",
    "as_tiles",
    "tile_center",
    "collider_size",
]
