"""End-to-end run: resolve paths, scan, build the requested reports."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from . import parser, paths, reports
from .config import RunConfig
from .parser import MatchRecord
from .reports import NameGroup, SortedMatch, StatsSnapshot

logger = logging.getLogger(__name__)


@dataclass
class RunOutcome:
    paths: list[str]
    records: list[MatchRecord] = field(default_factory=list)
    sorted_matches: list[SortedMatch] | None = None
    name_groups: list[NameGroup] | None = None
    stats: StatsSnapshot | None = None


def run(config: RunConfig) -> RunOutcome:
    """Execute one run described by ``config``.

    Path, open and read failures of the matching pass propagate as
    ``HarvestError`` subclasses; no partial outcome is returned.
    """
    resolved = paths.resolve_paths(config.paths)
    if config.check_text:
        paths.ensure_text_files(resolved)
    records = parser.scan_paths(resolved)
    outcome = RunOutcome(paths=resolved, records=records)
    if config.report_matches:
        outcome.sorted_matches = reports.build_sorted_matches(records)
    if config.report_name_counts:
        outcome.name_groups = reports.build_name_groups(records)
    if config.report_stats:
        outcome.stats = reports.build_stats(records, resolved)
        if outcome.stats.skipped:
            logger.warning(
                "Line counts unavailable for %d of %d files",
                len(outcome.stats.skipped),
                len(resolved),
            )
    if not config.any_report:
        logger.info("No report selected; scanned %d files", len(resolved))
    return outcome
