"""Exceptions raised while harvesting tidbit headings."""
from __future__ import annotations


class HarvestError(RuntimeError):
    """Base error; ``path`` names the input that caused it."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class PathResolutionError(HarvestError):
    pass


class NotTextFileError(HarvestError):
    pass


class OpenError(HarvestError):
    pass


class ReadError(HarvestError):
    pass


class StatsOpenError(OpenError):
    """Opening a file failed during the line-count pass."""


class StatsReadError(ReadError):
    """Reading a file failed during the line-count pass."""
