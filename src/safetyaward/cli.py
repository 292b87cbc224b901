"""Command-line entry point for the safety award migration.

Usage:
    safetyaward-migrate --workbook data.xlsx --sheet DataSheet --dry-run
    safetyaward-migrate --workbook s3://hr-exports/data.xlsx --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
import sys

from safetyaward.core.config import AppSettings
from safetyaward.core.exceptions import SafetyAwardError
from safetyaward.core.logging import configure_logging, get_logger
from safetyaward.ingest.workbook_reader import read_table
from safetyaward.persistence import create_employee_store, create_file_store
from safetyaward.pipeline.migration import MigrationPipeline

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_FATAL = 2

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Migrate safety award progress from the HR workbook into DynamoDB",
    )
    parser.add_argument("--workbook", default=None, help="Local path or s3://bucket/key (default: data.xlsx)")
    parser.add_argument("--sheet", default=None, help="Worksheet name (default: DataSheet)")
    parser.add_argument("--mode", choices=["terminated", "active"], default=None,
                        help="Which employees to migrate (default: terminated)")
    parser.add_argument("--dry-run", action="store_true", help="Build documents but write nothing")
    parser.add_argument("--table-name", default=None, help="DynamoDB table name (default: employees)")
    parser.add_argument("--endpoint-url", default=None, help="DynamoDB/S3 endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--log-level", default=None, help="Log level (default: INFO)")
    return parser


def apply_overrides(settings: AppSettings, args: argparse.Namespace) -> AppSettings:
    """Return a copy of ``settings`` with command-line flags applied."""
    ingest = settings.ingest.model_copy(update={
        k: v for k, v in {
            "workbook": args.workbook,
            "sheet": args.sheet,
            "s3_endpoint_url": args.endpoint_url,
        }.items() if v is not None
    })
    dynamodb = settings.dynamodb.model_copy(update={
        k: v for k, v in {
            "table_name": args.table_name,
            "endpoint_url": args.endpoint_url,
        }.items() if v is not None
    })
    update: dict = {"ingest": ingest, "dynamodb": dynamodb}
    if args.mode is not None:
        update["mode"] = args.mode
    if args.dry_run:
        update["dry_run"] = True
    if args.log_level is not None:
        update["log_level"] = args.log_level
    return settings.model_copy(update=update)


def run(settings: AppSettings) -> int:
    """Run one migration batch and return the process exit code."""
    try:
        file_store, path = create_file_store(settings.ingest.workbook, settings)
        table = read_table(file_store.read(path), settings.ingest.sheet)
        store = create_employee_store(settings)
        report = MigrationPipeline(store, mode=settings.mode, dry_run=settings.dry_run).run(table)
    except SafetyAwardError as exc:
        logger.error("migration_aborted", error=str(exc))
        print(f"FATAL: {exc}", file=sys.stderr)
        return EXIT_FATAL

    print(report.summary())
    for diagnostic in report.diagnostics:
        print(f"  {diagnostic}", file=sys.stderr)
    return EXIT_REJECTED if report.failed else EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = apply_overrides(AppSettings(), args)
    configure_logging(
        settings.log_level,
        log_file=settings.logging.file if settings.logging.to_file else None,
        json_output=settings.logging.json_output,
    )
    return run(settings)


if __name__ == "__main__":
    sys.exit(main())
