"""Tidbit heading harvester package."""
from __future__ import annotations

from collections.abc import Iterable

from . import config, errors, matcher, parser, paths, pipeline, renderer, reports

__all__ = [
    "config",
    "errors",
    "matcher",
    "parser",
    "paths",
    "pipeline",
    "renderer",
    "reports",
    "harvest",
]


def harvest(file_paths: Iterable[str]) -> list[parser.MatchRecord]:
    """Convenience wrapper: resolve ``file_paths`` and scan them."""
    return parser.scan_paths(paths.resolve_paths(file_paths))
