import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

ENV_KEYS = (
    "WALLGEN_TABLE",
    "WALLGEN_OUT",
    "WALLGEN_LAYOUT",
    "WALLGEN_DOCUMENT",
    "WALLGEN_CELL_SIZE",
    "WALLGEN_LOG_LEVEL",
    "WALLGEN_LOG_JSON",
)


@pytest.fixture(autouse=True)
def _clean_wallgen_env(monkeypatch):
    """Keep developer shells and earlier tests from leaking WALLGEN_* settings."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture()
def table_file(tmp_path):
    """Write ``content`` to a table file and return its path as a string."""

    def _write(content, name="walls.txt"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write
