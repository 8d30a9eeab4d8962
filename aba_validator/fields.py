"""Field-level checks shared by the record decoders."""
from __future__ import annotations

from typing import Optional
import datetime as _dt
import re

BSB_PATTERN = re.compile(r"[0-9]{3}[ -][0-9]{3}")


def exact_length(value: str, length: int) -> bool:
    return len(value) == length


def is_blank(value: str) -> bool:
    """True when every character is a space; an empty string counts as blank."""

    return all(char == " " for char in value)


def _is_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def valid_date(value: str) -> bool:
    """Check a DDMMYY value against the calendar."""

    if len(value) != 6 or not _is_digits(value):
        return False
    try:
        _dt.datetime.strptime(value, "%d%m%y")
    except ValueError:
        return False
    return True


def valid_bsb(value: str) -> bool:
    """BSB is three digits, a space or hyphen, three digits."""

    return BSB_PATTERN.fullmatch(value) is not None


def parse_nonneg_int(value: str) -> Optional[int]:
    if not _is_digits(value):
        return None
    return int(value)


__all__ = [
    "exact_length",
    "is_blank",
    "parse_nonneg_int",
    "valid_bsb",
    "valid_date",
]
