"""Structured reports derived from aggregated match records."""
from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from .errors import StatsOpenError, StatsReadError
from .parser import MatchRecord, count_lines

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortedMatch:
    rank: int
    name: str
    file_path: str
    line_number: int


@dataclass
class NameGroup:
    display_name: str
    count: int = 0
    locations: list[str] = field(default_factory=list)


@dataclass
class StatsSnapshot:
    file_line_counts: dict[str, int] = field(default_factory=dict)
    file_matched_line_counts: dict[str, int] = field(default_factory=dict)
    total_line_count: int = 0
    total_matched_line_count: int = 0
    skipped: dict[str, str] = field(default_factory=dict)


def name_key(name: str) -> str:
    return name.lower()


def build_sorted_matches(records: Iterable[MatchRecord]) -> list[SortedMatch]:
    """Order records by name ignoring case; equal names keep scan order."""
    ordered = sorted(records, key=lambda record: name_key(record.name))
    return [
        SortedMatch(
            rank=rank,
            name=record.name,
            file_path=record.file_path,
            line_number=record.line_number,
        )
        for rank, record in enumerate(ordered)
    ]


def build_name_groups(records: Iterable[MatchRecord], minimum: int = 2) -> list[NameGroup]:
    """Group records by case-insensitive name and keep the repeated ones.

    The display name is the casing seen first. Groups are ordered by count,
    highest first, then alphabetically by lowercase name.
    """
    groups: dict[str, NameGroup] = {}
    for record in records:
        key = name_key(record.name)
        group = groups.get(key)
        if group is None:
            group = groups[key] = NameGroup(display_name=record.name)
        group.count += 1
        group.locations.append(record.location)
    retained = [(key, group) for key, group in groups.items() if group.count >= minimum]
    retained.sort(key=lambda entry: (-entry[1].count, entry[0]))
    return [group for _, group in retained]


def build_stats(
    records: Iterable[MatchRecord],
    paths: Sequence[str],
    *,
    line_counter: Callable[[str], int] = count_lines,
) -> StatsSnapshot:
    """Count lines per file and matched lines per file.

    Files whose line count cannot be read are left out of the line totals
    and listed in ``skipped``; matched counts still come from ``records``.
    A path listed more than once is counted once; its matched count covers
    every scan of it.
    """
    snapshot = StatsSnapshot()
    matched: Counter[str] = Counter(record.file_path for record in records)
    distinct_paths = list(dict.fromkeys(paths))

    for path in distinct_paths:
        try:
            line_count = line_counter(path)
        except (StatsOpenError, StatsReadError) as exc:
            logger.warning("Skipping line count for %s: %s", path, exc)
            snapshot.skipped[path] = str(exc)
            continue
        snapshot.file_line_counts[path] = line_count
        snapshot.total_line_count += line_count

    for path in distinct_paths:
        snapshot.file_matched_line_counts[path] = matched.get(path, 0)
    for path, count in matched.items():
        snapshot.file_matched_line_counts.setdefault(path, count)
    snapshot.total_matched_line_count = sum(snapshot.file_matched_line_counts.values())
    return snapshot
