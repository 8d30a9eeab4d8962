from aba_validator.file_total_record import FileTotalRecord, decode_file_total_record
from aba_validator.utils import ErrorKind

from aba_lines import make_header, make_trailer


def test_gate_errors() -> None:
    assert decode_file_total_record(1).error.kind is ErrorKind.INVALID_INPUT
    assert decode_file_total_record("11").error.kind is ErrorKind.INCORRECT_LENGTH
    assert decode_file_total_record(make_header()).error.kind is ErrorKind.INCORRECT_STARTING_CODE


def test_decodes_balanced_trailer() -> None:
    line = make_trailer(record_count="000000")

    result = decode_file_total_record(line)

    assert result.ok
    assert result.record == FileTotalRecord(net_total=0, total_credit=35389, total_debit=35389, record_count=0)


def test_bad_filler_and_net_total_mismatch() -> None:
    line = make_trailer(bsb_filler="999 999", total_debit="0000035388", record_count="000000")

    result = decode_file_total_record(line)

    assert result.error.kind is ErrorKind.INVALID_FORMAT
    assert result.error.fields == ("bsb_filler", "net_total_mismatch")


def test_blank_trailer_skips_cross_checks() -> None:
    result = decode_file_total_record("7" + " " * 119)

    assert result.error.fields == ("bsb_filler", "net_total", "total_credit", "total_debit", "record_count")


def test_records_mismatch_against_running_count() -> None:
    line = make_trailer(bsb_filler="999 999", total_debit="0000035388", record_count="000002")

    result = decode_file_total_record(line)

    assert result.error.fields == ("bsb_filler", "net_total_mismatch", "records_mismatch")


def test_record_count_cross_check() -> None:
    line = make_trailer(
        net_total="0000035389",
        total_credit="0000035389",
        total_debit="0000000000",
        record_count="000002",
    )

    assert decode_file_total_record(line, 3).error.fields == ("records_mismatch",)
    assert decode_file_total_record(line, 2).record == FileTotalRecord(
        net_total=35389, total_credit=35389, total_debit=0, record_count=2
    )


def test_net_total_check_needs_all_three_totals() -> None:
    line = make_trailer(net_total="0000000001", total_debit="          ")

    result = decode_file_total_record(line, 2)

    assert result.error.fields == ("total_debit",)


def test_padding_must_be_blank() -> None:
    line = make_trailer()
    line = line[:8] + "0" * 12 + line[20:50] + "-" * 24 + line[74:80] + "x" + line[81:]

    result = decode_file_total_record(line, 2)

    assert result.error.fields == ("first_blank", "last_blank", "mid_blank")
