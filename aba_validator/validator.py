"""Public entry points: validate an ABA file and query its records."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union
import logging

from .assembler import Projection, RecordFilter, assemble, check_order, project
from .processor import FileResult, process_lines
from .reader import LineReader
from .utils import AbaError, ErrorKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordsResult:
    """Selected projection of an assembled file, or the error that prevented it."""

    records: Optional[Projection] = None
    error: Optional[AbaError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def process_aba_file(file_path: Union[str, Path]) -> FileResult:
    """Read, decode and structurally validate an ABA file.

    Returns every record outcome in file order. Field-level problems appear
    as invalid outcomes; I/O, structural and ordering problems come back as
    ``FileResult.error`` with no outcomes.
    """

    try:
        return _process(file_path)
    except Exception as exc:
        logger.exception("Unexpected failure while processing %s", file_path)
        return FileResult(error=AbaError(ErrorKind.INTERNAL_ERROR, message=repr(exc)))


def _process(file_path: Union[str, Path]) -> FileResult:
    read = LineReader().open(file_path)
    if read.error is not None:
        return FileResult(error=read.error)

    lines = read.lines
    try:
        result = process_lines(lines)
    finally:
        lines.close()

    if result.error is not None:
        return result

    order_error = check_order(result.outcomes)
    if order_error is not None:
        logger.warning("Rejected %s: %s", read.path, order_error.describe())
        return FileResult(error=order_error, state=result.state)

    logger.info(
        "Processed %s: %d records, %d invalid",
        read.path,
        len(result.outcomes),
        len(result.invalid_outcomes),
    )
    return result


def get_records(
    file_path: Union[str, Path],
    record_filter: Union[RecordFilter, str] = RecordFilter.ALL,
) -> RecordsResult:
    """Return the header, detail list, trailer or all three for a file."""

    try:
        selected = RecordFilter(record_filter)
    except ValueError:
        logger.warning("Unknown record filter %r", record_filter)
        return RecordsResult(
            error=AbaError(ErrorKind.INVALID_INPUT, message=f"unknown record filter {record_filter!r}")
        )

    result = process_aba_file(file_path)
    if result.error is not None:
        return RecordsResult(error=result.error)
    return RecordsResult(records=project(assemble(result.outcomes), selected))


__all__ = ["RecordsResult", "get_records", "process_aba_file"]
