from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

import structlog

from mazegrid.core.config import get_settings
from mazegrid.core.grid_validation import ValidationIssue, validate_grid_document
from mazegrid.core.logging import configure_logging
from mazegrid.store.errors import LoadError
from mazegrid.store.grid_store import GridStore

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate a maze grid JSON document")
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="Path to the grids JSON file (defaults to GRID_DATA_PATH)",
    )
    parser.add_argument(
        "--allow-issues",
        action="store_true",
        help="Report geometry issues but still exit with status 0",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Log level",
    )
    parser.add_argument(
        "--log-format",
        choices=["console", "json"],
        default="console",
        help="Log output format",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    configure_logging(args.log_level, args.log_format)

    data_path = args.data if args.data is not None else get_settings().grid_data_path
    store = GridStore.from_path(data_path, cache_enabled=False)

    try:
        document = store.get_all()
    except LoadError as exc:
        logger.error("grid_validation_load_failed", data_path=str(data_path), reason=str(exc))
        return 1

    result = validate_grid_document(document)
    for issue in result.issues:
        _log_validation_issue(issue)

    logger.info(
        "grid_validation_summary",
        data_path=str(data_path),
        difficulty_count=len(document.grids),
        grid_count=result.grid_count,
        invalid_count=result.invalid_count,
        issue_count=len(result.issues),
    )

    if result.issues and not args.allow_issues:
        return 1
    return 0


def _log_validation_issue(issue: ValidationIssue) -> None:
    event_payload: dict[str, Any] = {
        "difficulty": issue.difficulty,
        "grid_id": issue.grid_id,
        "reason": issue.reason,
    }
    if issue.value is not None:
        event_payload["value"] = issue.value

    logger.error("grid_validation_error", **event_payload)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
