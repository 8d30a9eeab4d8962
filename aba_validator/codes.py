"""Indicator and transaction code tables for detail records.

Codes follow the Cemtex/ABA direct entry layout:
https://www.cemtexaba.com/aba-format/cemtex-aba-file-format-details
"""
from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class Indicator(str, Enum):
    """Detail record indicator (position 18)."""

    BLANK = "blank"
    NEW_BANK = "new_bank"
    DIVIDEND_RESIDENT_COUNTRY_DOUBLE_TAX = "dividend_resident_country_double_tax"
    DIVIDEND_NON_RESIDENT = "dividend_non_resident"
    INTEREST_NON_RESIDENTS = "interest_non_residents"


class TransactionCode(str, Enum):
    """Detail record transaction code (positions 19-20)."""

    EXTERNALLY_INITIATED_DEBIT = "externally_initiated_debit"
    EXTERNALLY_INITIATED_CREDIT = "externally_initiated_credit"
    AUSTRALIAN_GOVERNMENT_SECURITY_INTEREST = "australian_government_security_interest"
    FAMILY_ALLOWANCE = "family_allowance"
    PAY = "pay"
    PENSION = "pension"
    ALLOTMENT = "allotment"
    DIVIDEND = "dividend"
    DEBENTURE_NOTE_INTEREST = "debenture_note_interest"


INDICATOR_CODES: dict[str, Indicator] = {
    " ": Indicator.BLANK,
    "N": Indicator.NEW_BANK,
    "W": Indicator.DIVIDEND_RESIDENT_COUNTRY_DOUBLE_TAX,
    "X": Indicator.DIVIDEND_NON_RESIDENT,
    "Y": Indicator.INTEREST_NON_RESIDENTS,
}

TRANSACTION_CODES: dict[str, TransactionCode] = {
    "13": TransactionCode.EXTERNALLY_INITIATED_DEBIT,
    "50": TransactionCode.EXTERNALLY_INITIATED_CREDIT,
    "51": TransactionCode.AUSTRALIAN_GOVERNMENT_SECURITY_INTEREST,
    "52": TransactionCode.FAMILY_ALLOWANCE,
    "53": TransactionCode.PAY,
    "54": TransactionCode.PENSION,
    "55": TransactionCode.ALLOTMENT,
    "56": TransactionCode.DIVIDEND,
    "57": TransactionCode.DEBENTURE_NOTE_INTEREST,
}

TRANSACTION_CODE_DESCRIPTIONS: dict[TransactionCode, str] = {
    TransactionCode.EXTERNALLY_INITIATED_DEBIT: "Externally initiated debit items",
    TransactionCode.EXTERNALLY_INITIATED_CREDIT: (
        "Externally initiated credit items with the exception of those bearing Transaction Codes"
    ),
    TransactionCode.AUSTRALIAN_GOVERNMENT_SECURITY_INTEREST: "Australian Government Security Interest",
    TransactionCode.FAMILY_ALLOWANCE: "Family Allowance",
    TransactionCode.PAY: "Pay",
    TransactionCode.PENSION: "Pension",
    TransactionCode.ALLOTMENT: "Allotment",
    TransactionCode.DIVIDEND: "Dividend",
    TransactionCode.DEBENTURE_NOTE_INTEREST: "Debenture/Note Interest",
}


def resolve_indicator(code: str) -> Optional[Indicator]:
    """Map the raw indicator character, ``None`` when it is not a known code."""

    return INDICATOR_CODES.get(code)


def resolve_transaction_code(code: str) -> Optional[TransactionCode]:
    """Map the raw two-character code, ``None`` when it is not a known code."""

    return TRANSACTION_CODES.get(code)


def transaction_code_description(code: Union[str, int, TransactionCode]) -> Optional[str]:
    """Human-readable description for a transaction code.

    Accepts the raw code (``"53"``), its integer form (``53``) or the
    resolved :class:`TransactionCode`. Returns ``None`` for anything else.
    """

    if isinstance(code, TransactionCode):
        resolved: Optional[TransactionCode] = code
    elif isinstance(code, bool):
        resolved = None
    elif isinstance(code, int):
        resolved = resolve_transaction_code(f"{code:02d}") if code >= 0 else None
    elif isinstance(code, str):
        resolved = resolve_transaction_code(code)
    else:
        resolved = None

    if resolved is None:
        return None
    return TRANSACTION_CODE_DESCRIPTIONS[resolved]


__all__ = [
    "INDICATOR_CODES",
    "Indicator",
    "TRANSACTION_CODES",
    "TRANSACTION_CODE_DESCRIPTIONS",
    "TransactionCode",
    "resolve_indicator",
    "resolve_transaction_code",
    "transaction_code_description",
]
