import pytest

from aba_validator.classifier import classify
from aba_validator.utils import RecordKind

from aba_lines import make_detail, make_header, make_trailer


def test_classify_known_records() -> None:
    assert classify(make_header()) is RecordKind.DESCRIPTIVE
    assert classify(make_detail()) is RecordKind.DETAIL
    assert classify(make_trailer()) is RecordKind.FILE_TOTAL


@pytest.mark.parametrize("line", ["2" + " " * 119, "9", " 0", "", "\n", "X" * 120])
def test_classify_unknown_records(line: str) -> None:
    assert classify(line) is RecordKind.UNKNOWN


def test_classify_ignores_length() -> None:
    assert classify("0") is RecordKind.DESCRIPTIVE
    assert classify("1short") is RecordKind.DETAIL
    assert classify("7" * 500) is RecordKind.FILE_TOTAL


def test_classify_non_text_is_unknown() -> None:
    assert classify(None) is RecordKind.UNKNOWN
    assert classify(b"0" * 120) is RecordKind.UNKNOWN
