"""CLI entry point for the ABA validator."""
from __future__ import annotations

from pathlib import Path
from typing import Sequence
import argparse
import json
import logging

from .assembler import AssembledRecords, RecordFilter, project, assemble
from .processor import FileResult, RecordOutcome
from .reporter import Reporter, compute_status, outcome_to_dict
from .utils import ValidationStatus, configure_logging
from .validator import process_aba_file


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate an Australian Banking Association (ABA) file")
    parser.add_argument("input", type=Path, help="ABA file to validate")
    parser.add_argument(
        "--filter",
        dest="record_filter",
        default=RecordFilter.ALL.value,
        choices=[item.value for item in RecordFilter],
        help="Records to print (default: all)",
    )
    parser.add_argument(
        "--reports-dir",
        type=Path,
        help="Base directory for JSON/TXT reports (no reports when omitted)",
    )
    parser.add_argument("--json", action="store_true", help="Print records as JSON")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level",
    )
    return parser.parse_args(argv)


def _selected(result: FileResult, record_filter: RecordFilter) -> list[RecordOutcome]:
    selection = project(assemble(result.outcomes), record_filter)
    if isinstance(selection, AssembledRecords):
        return [selection.header, *selection.details, selection.trailer]
    if isinstance(selection, RecordOutcome):
        return [selection]
    return list(selection)


def _format_outcome(outcome: RecordOutcome) -> str:
    if outcome.ok:
        return f"{outcome.line_number:>6} {outcome.kind.value:<18} ok {outcome.record}"
    return f"{outcome.line_number:>6} {outcome.kind.value:<18} INVALID {outcome.error.describe()}"


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(getattr(logging, args.log_level.upper(), logging.WARNING))

    result = process_aba_file(args.input)
    status = compute_status(result)

    if args.reports_dir:
        paths = Reporter().render(args.input, result, args.reports_dir.resolve())
        print("Reports written:")
        print(f"- JSON: {paths.json_path}")
        print(f"- TXT: {paths.txt_path}")

    if result.error is not None:
        print(f"{args.input}: {result.error.describe()}")
        return 2

    outcomes = _selected(result, RecordFilter(args.record_filter))
    if args.json:
        print(json.dumps([outcome_to_dict(outcome) for outcome in outcomes], indent=2))
    else:
        for outcome in outcomes:
            print(_format_outcome(outcome))
        print(f"{args.input}: {status.value}")

    if status is ValidationStatus.INVALID:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
