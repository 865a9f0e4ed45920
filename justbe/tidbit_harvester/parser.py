"""Line scanning for tidbit headings."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .errors import OpenError, ReadError, StatsOpenError, StatsReadError
from .matcher import match_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchRecord:
    """One heading occurrence extracted from a file."""

    file_path: str
    line_number: int
    name: str
    indent_level: int

    @property
    def location(self) -> str:
        return f"{self.file_path}:{self.line_number}"


def _open_text(path: str | Path, error_cls: type[OpenError]) -> TextIO:
    try:
        return open(path, "r", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise error_cls(f"error opening file {path}: {exc}", str(path)) from exc


def _iter_lines(
    fh: TextIO, path: str | Path, error_cls: type[ReadError]
) -> Iterator[tuple[int, str]]:
    line_number = 0
    try:
        for raw_line in fh:
            line_number += 1
            line = raw_line.removesuffix("\n").removesuffix("\r")
            yield line_number, line
    except (OSError, UnicodeDecodeError) as exc:
        raise error_cls(
            f"error reading file {path} after line {line_number}: {exc}", str(path)
        ) from exc


def scan_file(path: str | Path) -> list[MatchRecord]:
    """Return the heading records of ``path`` in line order."""
    file_path = str(path)
    records: list[MatchRecord] = []
    with _open_text(path, OpenError) as fh:
        for line_number, line in _iter_lines(fh, path, ReadError):
            heading = match_line(line)
            if heading is None:
                continue
            records.append(
                MatchRecord(
                    file_path=file_path,
                    line_number=line_number,
                    name=heading.name,
                    indent_level=heading.depth,
                )
            )
    logger.debug("Scanned %s: %d matches", file_path, len(records))
    return records


def count_lines(path: str | Path) -> int:
    line_count = 0
    with _open_text(path, StatsOpenError) as fh:
        for line_count, _ in _iter_lines(fh, path, StatsReadError):
            pass
    return line_count


def scan_paths(paths: Iterable[str | Path]) -> list[MatchRecord]:
    """Scan every path in order and concatenate the records.

    The first failing path aborts the whole scan; nothing collected before
    it is returned.
    """
    records: list[MatchRecord] = []
    scanned = 0
    for path in paths:
        records.extend(scan_file(path))
        scanned += 1
    logger.info("Extracted %d headings from %d files", len(records), scanned)
    return records
