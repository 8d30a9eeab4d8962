"""Order checks and partitioning of processed records."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

from .processor import RecordOutcome
from .utils import AbaError, ErrorKind, RecordKind


class RecordFilter(str, Enum):
    """Which part of an assembled file a query returns."""

    ALL = "all"
    DESCRIPTIVE_RECORD = "descriptive_record"
    DETAIL_RECORD = "detail_record"
    FILE_RECORD = "file_record"


@dataclass(frozen=True)
class AssembledRecords:
    header: RecordOutcome
    details: tuple[RecordOutcome, ...]
    trailer: RecordOutcome


Projection = Union[AssembledRecords, RecordOutcome, tuple[RecordOutcome, ...]]


def check_order(outcomes: Sequence[RecordOutcome]) -> Optional[AbaError]:
    """Header must come first and trailer last."""

    if not outcomes:
        return AbaError(ErrorKind.NO_CONTENT)
    first, last = outcomes[0], outcomes[-1]
    if first.kind is not RecordKind.DESCRIPTIVE:
        return AbaError(
            ErrorKind.INCORRECT_ORDER_DETECTED,
            line_number=first.line_number,
            message="first record is not a descriptive record",
        )
    if last.kind is not RecordKind.FILE_TOTAL:
        return AbaError(
            ErrorKind.INCORRECT_ORDER_DETECTED,
            line_number=last.line_number,
            message="last record is not a file total record",
        )
    return None


def assemble(outcomes: Sequence[RecordOutcome]) -> AssembledRecords:
    """Split an ordered outcome list into header, details and trailer.

    Expects a sequence that already passed :func:`check_order`.
    """

    return AssembledRecords(
        header=outcomes[0],
        details=tuple(outcomes[1:-1]),
        trailer=outcomes[-1],
    )


def project(assembled: AssembledRecords, record_filter: RecordFilter) -> Projection:
    if record_filter is RecordFilter.DESCRIPTIVE_RECORD:
        return assembled.header
    if record_filter is RecordFilter.DETAIL_RECORD:
        return assembled.details
    if record_filter is RecordFilter.FILE_RECORD:
        return assembled.trailer
    return assembled


__all__ = ["AssembledRecords", "Projection", "RecordFilter", "assemble", "check_order", "project"]
