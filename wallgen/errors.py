from __future__ import annotations

from typing import Optional


class WallgenError(Exception):
    """Base class for generator errors."""


class MalformedTableError(WallgenError):
    def __init__(self, message: str, source: Optional[str] = None, line: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.source = source
        self.line = line

    def __str__(self):
        if self.source and self.line:
            return f"{self.source}:{self.line}: {self.message}"
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class ConfigError(WallgenError):
    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


__all__ = ["WallgenError", "MalformedTableError", "ConfigError"]
