"""Heading recognition for outline lines ending in ``tidbits``."""
from __future__ import annotations

import re
from dataclasses import dataclass

HEADING_MARKER = "*"
MARKER_WORD = "tidbits"
# ASCII whitespace only; NBSP and other Unicode spaces do not separate fields.
SPACE = r"[\t\n\f\r ]"

HEADING_RE = re.compile(
    rf"^({re.escape(HEADING_MARKER)}+){SPACE}+(.*){SPACE}+{MARKER_WORD}\Z",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class HeadingMatch:
    depth: int
    name: str


def match_line(line: str) -> HeadingMatch | None:
    """Return depth and trimmed name when ``line`` is a tidbits heading.

    Lines whose captured name is blank after stripping are not headings.
    """
    match = HEADING_RE.match(line)
    if not match:
        return None
    name = match.group(2).strip()
    if not name:
        return None
    return HeadingMatch(depth=len(match.group(1)), name=name)


def format_heading(name: str, depth: int = 1) -> str:
    return f"{HEADING_MARKER * max(depth, 1)} {name} {MARKER_WORD}"
