"""Run configuration."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

LOG_FORMATS = ("text", "json")
DEFAULT_LOG_FORMAT = "text"
LOG_FORMAT_ENV = "JUSTBE_LOG_FORMAT"


@dataclass(frozen=True)
class RunConfig:
    """Everything a run needs; built by the CLI and passed to ``pipeline.run``."""

    paths: tuple[str, ...]
    report_matches: bool = False
    report_name_counts: bool = False
    report_stats: bool = False
    check_text: bool = True

    @property
    def any_report(self) -> bool:
        return self.report_matches or self.report_name_counts or self.report_stats


def resolve_log_format(value: str | None) -> str:
    if value:
        if value not in LOG_FORMATS:
            raise ValueError(f"unsupported log format: {value}")
        return value
    env_value = os.environ.get(LOG_FORMAT_ENV)
    if env_value:
        cleaned = env_value.strip().lower()
        if cleaned in LOG_FORMATS:
            return cleaned
        logger.debug("Invalid %s value: %s", LOG_FORMAT_ENV, env_value)
    return DEFAULT_LOG_FORMAT
