"""Read descriptor tables from disk.

Supported formats:
  - ``.json``: a flat list of integers (``[0, 2, 5, 1, ...]``) or a list of
    four-integer rows (``[[0, 2, 5, 1], ...]``).
  - anything else: plain text, one descriptor per line, integers separated
    by commas and/or whitespace. Blank lines and ``#`` comments are skipped.

Both loaders return the flat integer table in file order.
"""

from __future__ import annotations

import json
import os
import re
from typing import Any, List

from .errors import MalformedTableError
from .tiles import DESCRIPTOR_WIDTH

_SPLIT = re.compile(r"[,\s]+")


def _as_int(value: Any, source: str, line: int | None = None) -> int:
    # bool is an int subclass; reject it along with floats and strings.
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedTableError(f"expected integer, got {value!r}", source, line)
    if value < 0:
        raise MalformedTableError(f"negative value {value}", source, line)
    return value


def parse_json_table(text: str, source: str = "<json>") -> List[int]:
    """Parse a JSON descriptor table.

    Args:
        text: JSON document, either a flat integer list or a list of rows.
        source: Name used in error messages.

    Returns:
        Flat integer table. Length is a multiple of four.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedTableError(f"invalid JSON: {exc.msg}", source, exc.lineno) from exc
    if not isinstance(data, list):
        raise MalformedTableError("top-level value must be a list", source)
    if not data:
        return []
    values: List[int] = []
    if all(isinstance(row, list) for row in data):
        for idx, row in enumerate(data, start=1):
            if len(row) != DESCRIPTOR_WIDTH:
                raise MalformedTableError(
                    f"row {idx} has {len(row)} values, expected {DESCRIPTOR_WIDTH}", source
                )
            values.extend(_as_int(v, source) for v in row)
        return values
    values = [_as_int(v, source) for v in data]
    if len(values) % DESCRIPTOR_WIDTH:
        raise MalformedTableError(
            f"table length {len(values)} is not a multiple of {DESCRIPTOR_WIDTH}", source
        )
    return values


def parse_text_table(text: str, source: str = "<text>") -> List[int]:
    """Parse whitespace/comma separated rows, one descriptor per line."""
    values: List[int] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        tokens = [t for t in _SPLIT.split(line) if t]
        if len(tokens) != DESCRIPTOR_WIDTH:
            raise MalformedTableError(
                f"expected {DESCRIPTOR_WIDTH} values, got {len(tokens)}", source, lineno
            )
        for tok in tokens:
            try:
                num = int(tok)
            except ValueError:
                raise MalformedTableError(f"not an integer: {tok!r}", source, lineno) from None
            values.append(_as_int(num, source, lineno))
    return values


def load_table(path: str) -> List[int]:
    """Load a table file, picking the parser from the file extension.

    Raises:
        MalformedTableError: the file content is not a valid table.
        OSError: the file cannot be read.
    """
    name = os.path.basename(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as exc:
        raise MalformedTableError(f"not valid UTF-8: {exc.reason}", name) from exc
    if path.lower().endswith(".json"):
        return parse_json_table(text, name)
    return parse_text_table(text, name)


__all__ = ["parse_json_table", "parse_text_table", "load_table"]
