"""Decoder for the file total (type 7) record.

Layout after the record code (1-based positions):
- 2-8     BSB filler, always 999-999
- 9-20    blank (12)
- 21-30   file (user) net total amount
- 31-40   file (user) credit total amount
- 41-50   file (user) debit total amount
- 51-74   blank (24)
- 75-80   file (user) count of type 1 records
- 81-120  blank (40)

The record count is compared with the number of detail records seen before
the trailer, which the caller supplies.
"""
from __future__ import annotations

from dataclasses import dataclass

from .fields import is_blank, parse_nonneg_int
from .utils import FILE_TOTAL_CODE, DecodeResult, invalid_format, record_gate, slice_fields

BSB_FILLER = "999-999"

LAYOUT = (
    ("bsb_filler", 7),
    ("first_blank", 12),
    ("net_total", 10),
    ("total_credit", 10),
    ("total_debit", 10),
    ("mid_blank", 24),
    ("record_count", 6),
    ("last_blank", 40),
)

BLANK_FIELDS = ("first_blank", "last_blank", "mid_blank")
AMOUNT_FIELDS = ("net_total", "total_credit", "total_debit", "record_count")


@dataclass(frozen=True)
class FileTotalRecord:
    net_total: int
    total_credit: int
    total_debit: int
    record_count: int


def decode_file_total_record(entry: object, detail_count: int = 0) -> DecodeResult:
    gate_error = record_gate(entry, FILE_TOTAL_CODE)
    if gate_error is not None:
        return DecodeResult(error=gate_error)

    fields = slice_fields(entry, LAYOUT)
    errors: list[str] = []

    if fields["bsb_filler"] != BSB_FILLER:
        errors.append("bsb_filler")
    errors.extend(name for name in BLANK_FIELDS if not is_blank(fields[name]))

    values = {name: parse_nonneg_int(fields[name]) for name in AMOUNT_FIELDS}
    errors.extend(name for name in AMOUNT_FIELDS if values[name] is None)

    net_total = values["net_total"]
    total_credit = values["total_credit"]
    total_debit = values["total_debit"]
    record_count = values["record_count"]

    # cross-field checks only run on parsed inputs
    if None not in (net_total, total_credit, total_debit):
        if net_total != total_credit - total_debit:
            errors.append("net_total_mismatch")
    if record_count is not None and record_count != detail_count:
        errors.append("records_mismatch")

    if errors:
        return invalid_format(errors)

    record = FileTotalRecord(
        net_total=net_total,
        total_credit=total_credit,
        total_debit=total_debit,
        record_count=record_count,
    )
    return DecodeResult(record=record)


__all__ = ["BSB_FILLER", "FileTotalRecord", "decode_file_total_record"]
