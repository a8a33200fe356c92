"""Command-line entry point: ``vojker-golden [--bless] <case_dir>``.

Exit codes: 0 blessed or matching, 1 golden mismatch, 2 usage or configuration
error, 3 unreadable case input.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from vojker.config.settings import Settings
from vojker.golden.store import GoldenStatus
from vojker.pipeline import AuditPipeline, CaseReport

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_USAGE = 2
EXIT_INPUT_ERROR = 3


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vojker-golden",
        description="Evaluate a golden case directory and verify or bless its audit fixture",
    )
    parser.add_argument(
        "--bless",
        action="store_true",
        help="Overwrite the expected fixture with the freshly computed audit",
    )
    parser.add_argument("case_dir", type=Path, help="Directory holding golden_input.json")
    return parser


def _print_report(report: CaseReport, pipeline: AuditPipeline) -> None:
    settings = pipeline.settings
    golden = report.golden
    if golden.status is GoldenStatus.BLESSED:
        print(f"BLESSED {settings.expected_filename} for case={report.case_name}")
        print(f"WROTE {golden.expected_path}")
        print(f"WROTE {golden.actual_path}")
        return

    label = pipeline.fingerprint_algorithm.upper()
    print(f"CASE={report.case_name}")
    print(f"SNAPSHOT_HASH={report.snapshot_hash}")
    print(f"EXPECTED_{label}={golden.expected_hash}")
    print(f"ACTUAL_{label}={golden.actual_hash}")
    print(f"GOLDEN_MATCH={golden.status.value}")
    if golden.status is GoldenStatus.FAIL:
        print(f"FIRST_MISMATCH_AT_BYTE={golden.first_mismatch}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"ERROR: invalid configuration: {exc}")
        return EXIT_USAGE

    try:
        pipeline = AuditPipeline(settings)
        report = pipeline.run_case(args.case_dir, bless=args.bless)
    except OSError as exc:
        print(f"ERROR: {exc}")
        return EXIT_INPUT_ERROR

    _print_report(report, pipeline)
    return EXIT_MISMATCH if report.golden.status is GoldenStatus.FAIL else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
