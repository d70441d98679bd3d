"""Public wallgen package interface."""

from .config import GeneratorConfig
from .emitter import emit_records, render_document, render_record
from .errors import ConfigError, MalformedTableError, WallgenError
from .generator import generate
from .table_io import load_table
from .tiles import (
    CELL_SIZE,
    DEFAULT_TABLE,
    Tile,
    collider_size,
    group_descriptors,
    tile_center,
)

__all__ = [
    "GeneratorConfig",
    "emit_records",
    "render_document",
    "render_record",
    "ConfigError",
    "MalformedTableError",
    "WallgenError",
    "generate",
    "load_table",
    "CELL_SIZE",
    "DEFAULT_TABLE",
    "Tile",
    "collider_size",
    "group_descriptors",
    "tile_center",
]
