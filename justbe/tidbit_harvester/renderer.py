"""Text rendering for the tidbit reports."""
from __future__ import annotations

from collections.abc import Iterable

from .pipeline import RunOutcome
from .reports import NameGroup, SortedMatch, StatsSnapshot


def format_number(value: int) -> str:
    return f"{value:,}"


def render_matches(matches: Iterable[SortedMatch]) -> str:
    lines = []
    for match in matches:
        lines.append(
            f"{format_number(match.rank):>5}. {match.name} "
            f"{match.file_path}:{match.line_number}"
        )
    return "\n".join(lines)


def render_name_counts(groups: list[NameGroup]) -> str:
    lines = [f"Name duplicates (>= 2), total: {format_number(len(groups))}"]
    for group in groups:
        lines.append(f"{group.display_name}: {format_number(group.count)}")
        for location in group.locations:
            lines.append(f"    {location}")
    return "\n".join(lines)


def render_stats(stats: StatsSnapshot) -> str:
    lines = ["File Line Counts:"]
    for path, count in sorted(stats.file_line_counts.items()):
        lines.append(f"{format_number(count):>10}: {path}")
    lines.append(f"{format_number(stats.total_line_count):>10}: Total Line Count")
    lines.append("")
    for path, count in sorted(stats.file_matched_line_counts.items()):
        lines.append(f"{format_number(count):>10}: {path}: File Matched Line Counts")
    lines.append(
        f"{format_number(stats.total_matched_line_count):>10}: Total Matched Line Count"
    )
    return "\n".join(lines)


def render_outcome(outcome: RunOutcome) -> list[str]:
    """Render each report present in ``outcome``, in CLI order."""
    blocks = []
    if outcome.sorted_matches is not None:
        blocks.append(render_matches(outcome.sorted_matches))
    if outcome.name_groups is not None:
        blocks.append(render_name_counts(outcome.name_groups))
    if outcome.stats is not None:
        blocks.append(render_stats(outcome.stats))
    return blocks
