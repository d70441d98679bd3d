"""
project: Wall Prefab Generator
module: emitter.py
License: MIT

Render wall tiles as RON prefab entities for the map loader.

Each tile becomes one ``(data: Some((...)),),`` entry carrying a transform,
a ``"Wall"`` rect collider and a sprite reference. Two layouts share the same
field order:

  compact   one entity per line, byte-identical to the hand-built map file
  pretty    the same entity split over indented lines

``emit_records`` returns the whole buffer; callers write it once.
"""

from __future__ import annotations

from typing import Iterable, List

from .tiles import (
    CELL_SIZE,
    IDENTITY_ROTATION,
    WALL_SPRITE,
    WALL_TAG,
    Tile,
    as_tiles,
    collider_size,
    tile_center,
)

LAYOUTS = ("compact", "pretty")

COMPACT_TEMPLATE = (
    "(data: Some(("
    "transform: Some((translation: ({cx}, {cy}, 0),rotation: ({rotation}),scale: ({w}, {h}, 1),)),"
    "collider: Some((tag: \"{tag}\",width: {pw},height: {ph},)),"
    "sprite: Some((sprite_number: {sprite},)),"
    ")),),"
)

PRETTY_TEMPLATE = (
    "(data: Some((\n"
    "  transform: Some((\n"
    "    translation: ({cx}, {cy}, 0),\n"
    "    rotation: ({rotation}),\n"
    "    scale: ({w}, {h}, 1),\n"
    "  )),\n"
    "  collider: Some((\n"
    "    tag: \"{tag}\",\n"
    "    width: {pw},\n"
    "    height: {ph},\n"
    "  )),\n"
    "  sprite: Some((\n"
    "    sprite_number: {sprite},\n"
    "  )),\n"
    ")),),"
)

_TEMPLATES = {"compact": COMPACT_TEMPLATE, "pretty": PRETTY_TEMPLATE}

DOCUMENT_HEADER = "#![enable(implicit_some)]\nPrefab(\n    entities: [\n"
DOCUMENT_FOOTER = "    ],\n)\n"


def _template(layout: str) -> str:
    try:
        return _TEMPLATES[layout]
    except KeyError:
        raise ValueError(f"unknown layout {layout!r}; expected one of {', '.join(LAYOUTS)}") from None


def render_record(tile: Tile, cell_size: int = CELL_SIZE, layout: str = "compact") -> str:
    """Serialize one tile. No trailing newline."""
    cx, cy = tile_center(tile, cell_size)
    pw, ph = collider_size(tile, cell_size)
    return _template(layout).format(
        cx=cx,
        cy=cy,
        rotation=", ".join(str(v) for v in IDENTITY_ROTATION),
        w=tile.w,
        h=tile.h,
        tag=WALL_TAG,
        pw=pw,
        ph=ph,
        sprite=WALL_SPRITE,
    )


def _render_all(table: Iterable, cell_size: int, layout: str) -> List[str]:
    # Validate the whole table before rendering anything.
    tiles = as_tiles(table)
    return [render_record(tile, cell_size, layout) for tile in tiles]


def emit_records(table: Iterable, cell_size: int = CELL_SIZE, layout: str = "compact") -> str:
    """Render every tile in table order, each record followed by a newline.

    ``table`` is either a flat ``x, y, w, h, ...`` integer sequence or an
    iterable of ``Tile``. An empty table yields an empty string.

    Raises:
        MalformedTableError: flat table length is not a multiple of four.
    """
    buf = _render_all(table, cell_size, layout)
    return "".join(record + "\n" for record in buf)


def _indent(text: str, prefix: str) -> str:
    return "\n".join(prefix + line for line in text.split("\n"))


def render_document(table: Iterable, cell_size: int = CELL_SIZE, layout: str = "compact") -> str:
    """Wrap the records in a loadable ``Prefab(entities: [...])`` document."""
    buf = [DOCUMENT_HEADER]
    for record in _render_all(table, cell_size, layout):
        buf.append(_indent(record, "        ") + "\n")
    buf.append(DOCUMENT_FOOTER)
    return "".join(buf)


def count_records(text: str) -> int:
    return text.count("(data: Some((")


__all__ = [
    "LAYOUTS",
    "COMPACT_TEMPLATE",
    "PRETTY_TEMPLATE",
    "render_record",
    "emit_records",
    "render_document",
    "count_records",
]
