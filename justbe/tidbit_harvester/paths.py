"""Input path handling: home expansion and plain-text checks."""
from __future__ import annotations

import codecs
from collections.abc import Iterable
from pathlib import Path

from .errors import NotTextFileError, OpenError, PathResolutionError

SNIFF_BYTES = 3072


def resolve_paths(paths: Iterable[str | Path]) -> list[str]:
    """Expand ``~`` and make each path absolute, keeping order and repeats."""
    resolved: list[str] = []
    for raw_path in paths:
        try:
            expanded = Path(raw_path).expanduser()
        except RuntimeError as exc:
            raise PathResolutionError(
                f"error expanding home directory in path {raw_path}: {exc}", str(raw_path)
            ) from exc
        resolved.append(str(expanded.absolute()))
    return resolved


def looks_like_text(sample: bytes, *, truncated: bool = False) -> bool:
    if b"\x00" in sample:
        return False
    decoder = codecs.getincrementaldecoder("utf-8")()
    try:
        decoder.decode(sample, final=not truncated)
    except UnicodeDecodeError:
        return False
    return True


def ensure_text_files(paths: Iterable[str | Path]) -> None:
    for path in paths:
        try:
            with open(path, "rb") as fh:
                sample = fh.read(SNIFF_BYTES + 1)
        except OSError as exc:
            raise OpenError(f"error opening file {path}: {exc}", str(path)) from exc
        truncated = len(sample) > SNIFF_BYTES
        if not looks_like_text(sample[:SNIFF_BYTES], truncated=truncated):
            raise NotTextFileError(f"file {path} is not a text file", str(path))
