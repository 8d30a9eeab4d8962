"""Decoder for the detail (type 1) record.

Layout after the record code (1-based positions):
- 2-8     BSB (NNN-NNN)
- 9-17    account number, right justified
- 18      indicator
- 19-20   transaction code
- 21-30   amount in cents
- 31-62   title of account
- 63-80   lodgement reference
- 81-87   trace BSB
- 88-96   trace account number
- 97-112  name of remitter
- 113-120 amount of withholding tax
"""
from __future__ import annotations

from dataclasses import dataclass

from .codes import Indicator, TransactionCode, resolve_indicator, resolve_transaction_code
from .fields import is_blank, parse_nonneg_int, valid_bsb
from .utils import DETAIL_CODE, DecodeResult, invalid_format, record_gate, slice_fields

LAYOUT = (
    ("bsb", 7),
    ("account_number", 9),
    ("indicator", 1),
    ("transaction_code", 2),
    ("amount", 10),
    ("account_name", 32),
    ("reference", 18),
    ("trace_bsb", 7),
    ("trace_account_number", 9),
    ("remitter_name", 16),
    ("withheld_tax", 8),
)


@dataclass(frozen=True)
class DetailRecord:
    bsb: str
    account_number: str
    indicator: Indicator
    transaction_code: TransactionCode
    amount: int
    account_name: str
    reference: str
    trace_bsb: str
    trace_account_number: str
    remitter_name: str
    withheld_tax: int


def _trim(fields: dict[str, str]) -> None:
    fields["reference"] = fields["reference"].rstrip(" ")
    fields["trace_account_number"] = fields["trace_account_number"].lstrip(" ")
    fields["remitter_name"] = fields["remitter_name"].rstrip(" ")
    fields["account_number"] = fields["account_number"].lstrip(" ")
    fields["account_name"] = fields["account_name"].rstrip(" ")


def decode_detail_record(entry: object) -> DecodeResult:
    gate_error = record_gate(entry, DETAIL_CODE)
    if gate_error is not None:
        return DecodeResult(error=gate_error)

    fields = slice_fields(entry, LAYOUT)
    _trim(fields)

    indicator = resolve_indicator(fields["indicator"])
    transaction_code = resolve_transaction_code(fields["transaction_code"])
    amount = parse_nonneg_int(fields["amount"])
    withheld_tax = parse_nonneg_int(fields["withheld_tax"])

    checks = (
        ("bsb", valid_bsb(fields["bsb"])),
        ("account_number", not is_blank(fields["account_number"])),
        ("indicator", indicator is not None),
        ("transaction_code", transaction_code is not None),
        ("amount", amount is not None),
        ("account_name", not is_blank(fields["account_name"])),
        ("reference", not is_blank(fields["reference"])),
        ("trace_bsb", valid_bsb(fields["trace_bsb"])),
        ("trace_account_number", not is_blank(fields["trace_account_number"])),
        ("remitter_name", not is_blank(fields["remitter_name"])),
        ("withheld_tax", withheld_tax is not None),
    )
    errors = [name for name, passed in checks if not passed]
    if errors:
        return invalid_format(errors)

    record = DetailRecord(
        bsb=fields["bsb"],
        account_number=fields["account_number"],
        indicator=indicator,
        transaction_code=transaction_code,
        amount=amount,
        account_name=fields["account_name"],
        reference=fields["reference"],
        trace_bsb=fields["trace_bsb"],
        trace_account_number=fields["trace_account_number"],
        remitter_name=fields["remitter_name"],
        withheld_tax=withheld_tax,
    )
    return DecodeResult(record=record)


__all__ = ["DetailRecord", "decode_detail_record"]
