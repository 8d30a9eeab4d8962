"""Decoder for the descriptive (type 0) record.

Layout after the record code (1-based positions):
- 2-18    blank (17)
- 19-20   reel sequence number
- 21-23   financial institution abbreviation
- 24-30   blank (7)
- 31-56   user preferred specification
- 57-62   user identification number
- 63-74   description of entries
- 75-80   processing date (DDMMYY)
- 81-120  blank (40)
"""
from __future__ import annotations

from dataclasses import dataclass

from .fields import is_blank, valid_date
from .utils import DESCRIPTIVE_CODE, DecodeResult, invalid_format, record_gate, slice_fields

LAYOUT = (
    ("first_blank", 17),
    ("reel_sequence_number", 2),
    ("bank_abbreviation", 3),
    ("mid_blank", 7),
    ("user_preferred_specification", 26),
    ("user_id_number", 6),
    ("description", 12),
    ("date", 6),
    ("last_blank", 40),
)

BLANK_FIELDS = ("first_blank", "last_blank", "mid_blank")
CONTENT_FIELDS = (
    "reel_sequence_number",
    "bank_abbreviation",
    "user_preferred_specification",
    "user_id_number",
    "description",
)


@dataclass(frozen=True)
class DescriptiveRecord:
    """Header fields, kept verbatim."""

    reel_sequence_number: str
    bank_abbreviation: str
    user_preferred_specification: str
    user_id_number: str
    description: str
    date: str

    def as_tuple(self) -> tuple[str, str, str, str, str, str]:
        return (
            self.reel_sequence_number,
            self.bank_abbreviation,
            self.user_preferred_specification,
            self.user_id_number,
            self.description,
            self.date,
        )


def decode_descriptive_record(entry: object) -> DecodeResult:
    gate_error = record_gate(entry, DESCRIPTIVE_CODE)
    if gate_error is not None:
        return DecodeResult(error=gate_error)

    fields = slice_fields(entry, LAYOUT)
    errors: list[str] = []

    errors.extend(name for name in BLANK_FIELDS if not is_blank(fields[name]))
    errors.extend(name for name in CONTENT_FIELDS if is_blank(fields[name]))
    if is_blank(fields["date"]) or not valid_date(fields["date"]):
        errors.append("date")

    if errors:
        return invalid_format(errors)

    record = DescriptiveRecord(
        reel_sequence_number=fields["reel_sequence_number"],
        bank_abbreviation=fields["bank_abbreviation"],
        user_preferred_specification=fields["user_preferred_specification"],
        user_id_number=fields["user_id_number"],
        description=fields["description"],
        date=fields["date"],
    )
    return DecodeResult(record=record)


__all__ = ["DescriptiveRecord", "decode_descriptive_record"]
