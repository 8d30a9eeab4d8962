"""Record type classification by leading character."""
from __future__ import annotations

from .utils import DESCRIPTIVE_CODE, DETAIL_CODE, FILE_TOTAL_CODE, RecordKind

_KINDS = {
    DESCRIPTIVE_CODE: RecordKind.DESCRIPTIVE,
    DETAIL_CODE: RecordKind.DETAIL,
    FILE_TOTAL_CODE: RecordKind.FILE_TOTAL,
}


def classify(line: object) -> RecordKind:
    """Return the record kind for ``line`` without checking its length."""

    if not isinstance(line, str) or not line:
        return RecordKind.UNKNOWN
    return _KINDS.get(line[0], RecordKind.UNKNOWN)


__all__ = ["classify"]
