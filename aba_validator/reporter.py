"""Generate validation reports for processed ABA files."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Optional
import datetime as _dt

from .codes import TransactionCode
from .detail_record import DetailRecord
from .file_total_record import FileTotalRecord
from .processor import FileResult, RecordOutcome
from .utils import ValidationStatus, ensure_reports_dir, write_json, write_text


@dataclass
class ReportPaths:
    """Location for generated artifacts."""

    json_path: Path
    txt_path: Path


@dataclass
class Totalizers:
    """Detail amounts summed by direction, next to the trailer's own totals."""

    detail_credit: int
    detail_debit: int
    trailer_credit: Optional[int]
    trailer_debit: Optional[int]


def compute_status(result: FileResult) -> ValidationStatus:
    if result.error is not None:
        return ValidationStatus.ERROR
    if result.invalid_outcomes:
        return ValidationStatus.INVALID
    return ValidationStatus.OK


def compute_totalizers(result: FileResult) -> Totalizers:
    credit = 0
    debit = 0
    trailer: Optional[FileTotalRecord] = None
    for outcome in result.outcomes:
        if isinstance(outcome.record, DetailRecord):
            if outcome.record.transaction_code is TransactionCode.EXTERNALLY_INITIATED_DEBIT:
                debit += outcome.record.amount
            else:
                credit += outcome.record.amount
        elif isinstance(outcome.record, FileTotalRecord):
            trailer = outcome.record
    return Totalizers(
        detail_credit=credit,
        detail_debit=debit,
        trailer_credit=trailer.total_credit if trailer else None,
        trailer_debit=trailer.total_debit if trailer else None,
    )


def outcome_to_dict(outcome: RecordOutcome) -> Dict[str, object]:
    return {
        "kind": outcome.kind.value,
        "line": outcome.line_number,
        "ok": outcome.ok,
        "record": asdict(outcome.record) if outcome.record is not None else None,
        "error": _error_to_dict(outcome.error),
    }


def _error_to_dict(error) -> Optional[Dict[str, object]]:
    if error is None:
        return None
    return {
        "kind": error.kind.value,
        "fields": list(error.fields),
        "line": error.line_number,
        "message": error.message,
    }


class Reporter:
    """Materialize validation results into JSON and text reports."""

    def render(self, source: Path, result: FileResult, base_dir: Path) -> ReportPaths:
        reports_dir = ensure_reports_dir(base_dir)
        stem = source.stem
        target_dir = reports_dir / stem
        target_dir.mkdir(parents=True, exist_ok=True)
        timestamp = _dt.datetime.now().strftime("%Y%m%d%H%M%S")
        json_path = target_dir / f"{stem}.{timestamp}.json"
        txt_path = target_dir / f"{stem}.{timestamp}.txt"

        write_json(json_path, self.build_json(source, result))
        write_text(txt_path, self.build_text(source, result))

        return ReportPaths(json_path=json_path, txt_path=txt_path)

    def build_json(self, source: Path, result: FileResult) -> Dict[str, object]:
        totals = compute_totalizers(result)
        return {
            "file": source.name,
            "path": str(source),
            "status": compute_status(result).value,
            "error": _error_to_dict(result.error),
            "records": {
                "total": len(result.outcomes),
                "details": result.state.detail_count,
                "invalid": len(result.invalid_outcomes),
            },
            "totals": {
                "detail_credit": totals.detail_credit,
                "detail_debit": totals.detail_debit,
                "trailer_credit": totals.trailer_credit,
                "trailer_debit": totals.trailer_debit,
            },
            "outcomes": [outcome_to_dict(outcome) for outcome in result.outcomes],
        }

    def build_text(self, source: Path, result: FileResult) -> str:
        lines: List[str] = []
        lines.append(f"File: {source.name}")
        lines.append(f"Path: {source}")
        lines.append("")
        lines.append("[Validation]")
        lines.append(f"- Status: {compute_status(result).value}")
        if result.error is not None:
            lines.append(f"- Error: {result.error.describe()}")
        lines.append(f"- Records: {len(result.outcomes)}")
        lines.append(f"- Details: {result.state.detail_count}")
        lines.append("")

        invalid = result.invalid_outcomes
        if invalid:
            lines.append("[Invalid records]")
            lines.extend(f"- {outcome.error.describe()}" for outcome in invalid)
            lines.append("")

        if result.ok:
            totals = compute_totalizers(result)
            lines.append("[Totals]")
            lines.append(f"- Detail credits: {totals.detail_credit}")
            lines.append(f"- Detail debits: {totals.detail_debit}")
            lines.append(f"- Trailer credits: {_optional(totals.trailer_credit)}")
            lines.append(f"- Trailer debits: {_optional(totals.trailer_debit)}")
            lines.append("")

        return "\n".join(lines)


def _optional(value: Optional[int]) -> str:
    return "-" if value is None else str(value)


__all__ = [
    "ReportPaths",
    "Reporter",
    "Totalizers",
    "compute_status",
    "compute_totalizers",
    "outcome_to_dict",
]
