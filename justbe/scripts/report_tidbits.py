#!/usr/bin/env python3
"""CLI entrypoint for the tidbit heading reports."""
from __future__ import annotations

import argparse
import json
import logging
from datetime import UTC, datetime

from justbe.tidbit_harvester import config, pipeline, renderer
from justbe.tidbit_harvester.errors import HarvestError

logger = logging.getLogger("justbe.tidbit_harvester.cli")

TEXT_FORMAT = "[%(levelname)s] %(message)s"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def resolve_log_level(verbosity: int) -> int:
    return logging.DEBUG if verbosity > 0 else logging.INFO


def configure_logging(verbosity: int = 0, log_format: str = "text") -> None:
    handler = logging.StreamHandler()
    if log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    logging.basicConfig(level=resolve_log_level(verbosity), handlers=[handler], force=True)


def build_config(args: argparse.Namespace) -> config.RunConfig:
    return config.RunConfig(
        paths=tuple(args.paths),
        report_matches=args.report_matches,
        report_name_counts=args.report_name_counts,
        report_stats=args.report_stats,
    )


def build_parser() -> argparse.ArgumentParser:
    parser_obj = argparse.ArgumentParser(
        description="Report outline headings that end in 'tidbits'"
    )
    parser_obj.add_argument(
        "-p",
        "--path",
        dest="paths",
        action="append",
        required=True,
        help="File path to be processed (repeatable)",
    )
    parser_obj.add_argument(
        "-m", "--report-matches", action="store_true", help="Report matched lines"
    )
    parser_obj.add_argument(
        "-s", "--report-stats", action="store_true", help="Report line-count statistics"
    )
    parser_obj.add_argument(
        "-n",
        "--report-name-counts",
        action="store_true",
        help="Report names that occur more than once",
    )
    parser_obj.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show verbose debug information",
    )
    parser_obj.add_argument(
        "--log-format",
        choices=config.LOG_FORMATS,
        help=f"Log format (overrides {config.LOG_FORMAT_ENV}, default: text)",
    )
    return parser_obj


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, config.resolve_log_format(args.log_format))
    try:
        outcome = pipeline.run(build_config(args))
    except HarvestError as exc:
        logger.error("run failed: %s", exc)
        return 1
    for block in renderer.render_outcome(outcome):
        print(block)
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
