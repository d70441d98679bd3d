"""Load a table, render it and write the result once."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .config import GeneratorConfig
from .emitter import count_records, emit_records, render_document
from .logging_utils import get_logger
from .table_io import load_table
from .tiles import DEFAULT_TABLE

logger = get_logger("wallgen.generator")


def resolve_table(cfg: GeneratorConfig):
    if cfg.table_path:
        return load_table(cfg.table_path)
    return list(DEFAULT_TABLE)


def generate(cfg: GeneratorConfig, table=None) -> str:
    """Return the full output text for ``cfg``; performs no writes."""
    if table is None:
        table = resolve_table(cfg)
    if cfg.document:
        return render_document(table, cell_size=cfg.cell_size, layout=cfg.layout)
    return emit_records(table, cell_size=cfg.cell_size, layout=cfg.layout)


def write_output(text: str, out_path: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """Single write of the finished buffer. ``OSError`` propagates."""
    if out_path:
        with open(out_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        return
    stream = stream or sys.stdout
    stream.write(text)
    stream.flush()


def run(cfg: GeneratorConfig, stream: Optional[TextIO] = None) -> int:
    text = generate(cfg)
    records = count_records(text)
    write_output(text, cfg.out_path, stream)
    logger.info(
        event="generate",
        records=records,
        layout=cfg.layout,
        document=cfg.document,
        source=cfg.table_path or "builtin",
        dest=cfg.out_path or "stdout",
    )
    return records


__all__ = ["resolve_table", "generate", "write_output", "run"]
