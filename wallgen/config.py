from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .emitter import LAYOUTS
from .errors import ConfigError
from .tiles import CELL_SIZE


@dataclass
class GeneratorConfig:
    cell_size: int = CELL_SIZE
    layout: str = "compact"
    # Wrap records in a full Prefab(entities: [...]) document
    document: bool = False
    table_path: Optional[str] = None
    # None means stdout
    out_path: Optional[str] = None

    def validate(self) -> "GeneratorConfig":
        if not isinstance(self.cell_size, int) or self.cell_size <= 0 or self.cell_size % 2:
            raise ConfigError("cell_size", f"must be a positive even integer, got {self.cell_size!r}")
        if self.layout not in LAYOUTS:
            raise ConfigError("layout", f"must be one of {', '.join(LAYOUTS)}, got {self.layout!r}")
        return self

    @staticmethod
    def _parse_bool(v: Optional[str], default: bool) -> bool:
        if v is None:
            return default
        return v.strip().lower() in ("1", "true", "yes", "on")

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Read WALLGEN_* overrides. Parses only; call validate() once flags are applied."""
        cfg = cls()
        raw_cell = os.environ.get("WALLGEN_CELL_SIZE")
        if raw_cell:
            try:
                cfg.cell_size = int(raw_cell)
            except ValueError:
                # Kept raw so a --cell-size flag can still replace it
                cfg.cell_size = raw_cell
        cfg.layout = (os.environ.get("WALLGEN_LAYOUT") or cfg.layout).strip().lower()
        cfg.document = cls._parse_bool(os.environ.get("WALLGEN_DOCUMENT"), cfg.document)
        cfg.table_path = os.environ.get("WALLGEN_TABLE") or cfg.table_path
        cfg.out_path = os.environ.get("WALLGEN_OUT") or cfg.out_path
        return cfg


__all__ = ["GeneratorConfig"]
