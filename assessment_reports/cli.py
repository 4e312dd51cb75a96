"""
Command-line report generator.

Usage:
  assessment-report <student_id> <report_type>
  assessment-report --list

report_type is 1 (diagnostic), 2 (progress), 3 (feedback) or the kind name.
"""

from __future__ import annotations

import argparse
import logging
import sys

from assessment_reports.application.exceptions import DataSourceError
from assessment_reports.core.config import settings
from assessment_reports.core.logging_config import configure_logging
from assessment_reports.domain.entities.report_kind import ReportKind
from assessment_reports.wiring.dependencies import build_report_generator

RULE = "=" * 40

logger = logging.getLogger(__name__)


def _print_report_types() -> None:
    print("Assessment Report Generator")
    print("=" * 26)
    print()
    print("Available Report Types:")
    for kind in ReportKind:
        print(f"{kind.code}. {kind.label}")
    print()
    print("Usage:")
    print("  assessment-report <student_id> <report_type>")
    print("  assessment-report student1 1")
    print()
    print("Options:")
    print("  --list        Show available report types")
    print("  --data-dir    Directory holding the JSON datasets")


def _print_report(kind: ReportKind, text: str) -> None:
    print()
    print(RULE)
    print(kind.label.upper())
    print(RULE)
    print()
    print(text.rstrip("\n"))
    print()
    print(RULE)
    print("END OF REPORT")
    print(RULE)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="assessment-report",
        description="Generate assessment reports by student id and report type",
    )
    parser.add_argument("student_id", nargs="?", help="The student ID")
    parser.add_argument("report_type", nargs="?", help="The report type (1-3 or diagnostic/progress/feedback)")
    parser.add_argument("--list", action="store_true", help="List available report types")
    parser.add_argument("--data-dir", default=None, help=f"Dataset directory (default: {settings.DATA_DIR})")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.list or not args.student_id or not args.report_type:
        _print_report_types()
        return 0

    kind = ReportKind.parse(args.report_type)
    if kind is None:
        print("Invalid report type")
        _print_report_types()
        return 2

    config = settings
    if args.data_dir:
        config = settings.model_copy(update={"DATA_DIR": args.data_dir})

    generator = build_report_generator(config)
    try:
        text = generator.generate(kind, args.student_id)
    except DataSourceError as e:
        logger.error("Report generation failed", extra={"report_kind": kind.value, "error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        return 1

    _print_report(kind, text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
