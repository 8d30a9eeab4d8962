from aba_validator.codes import Indicator, TransactionCode
from aba_validator.detail_record import DetailRecord, decode_detail_record
from aba_validator.utils import ErrorKind

from aba_lines import make_detail, make_trailer


def test_gate_errors() -> None:
    assert decode_detail_record(1).error.kind is ErrorKind.INVALID_INPUT
    assert decode_detail_record("11").error.kind is ErrorKind.INCORRECT_LENGTH
    assert decode_detail_record(make_trailer()).error.kind is ErrorKind.INCORRECT_STARTING_CODE


def test_decodes_detail_record() -> None:
    line = make_detail(
        bsb="032-898",
        account_number="0-2345678",
        indicator="N",
        code="13",
        account_name="money",
        reference="Batch payment",
    )

    result = decode_detail_record(line)

    assert result.ok
    assert result.record == DetailRecord(
        bsb="032-898",
        account_number="0-2345678",
        indicator=Indicator.NEW_BANK,
        transaction_code=TransactionCode.EXTERNALLY_INITIATED_DEBIT,
        amount=35389,
        account_name="money",
        reference="Batch payment",
        trace_bsb="040-404",
        trace_account_number="12345678",
        remitter_name="test",
        withheld_tax=0,
    )


def test_trims_only_the_padding_side() -> None:
    line = make_detail(
        account_number="12345678",
        account_name=" money",
        reference=" Batch payment",
        trace_account_number="12345678",
        remitter_name=" test",
    )

    record = decode_detail_record(line).record

    assert record.account_number == "12345678"
    assert record.account_name == " money"
    assert record.reference == " Batch payment"
    assert record.trace_account_number == "12345678"
    assert record.remitter_name == " test"


def test_space_separated_bsb_is_accepted() -> None:
    result = decode_detail_record(make_detail(bsb="032 898", trace_bsb="040 404"))

    assert result.ok
    assert result.record.bsb == "032 898"
    assert result.record.trace_bsb == "040 404"


def test_blank_detail_reports_all_ten_fields() -> None:
    result = decode_detail_record("1" + " " * 119)

    assert result.error.kind is ErrorKind.INVALID_FORMAT
    assert result.error.fields == (
        "bsb",
        "account_number",
        "transaction_code",
        "amount",
        "account_name",
        "reference",
        "trace_bsb",
        "trace_account_number",
        "remitter_name",
        "withheld_tax",
    )


def test_unknown_codes_are_reported() -> None:
    result = decode_detail_record(make_detail(indicator="Z", code="99"))

    assert result.error.fields == ("indicator", "transaction_code")


def test_every_indicator_and_transaction_code_resolves() -> None:
    for indicator, expected in {" ": Indicator.BLANK, "W": Indicator.DIVIDEND_RESIDENT_COUNTRY_DOUBLE_TAX,
                                "X": Indicator.DIVIDEND_NON_RESIDENT, "Y": Indicator.INTEREST_NON_RESIDENTS}.items():
        assert decode_detail_record(make_detail(indicator=indicator)).record.indicator is expected

    for code in ("13", "50", "51", "52", "53", "54", "55", "56", "57"):
        assert decode_detail_record(make_detail(code=code)).ok


def test_amounts_must_be_unsigned_digits() -> None:
    assert decode_detail_record(make_detail(amount="00000353A9")).error.fields == ("amount",)
    assert decode_detail_record(make_detail(amount="-000035389")).error.fields == ("amount",)
    assert decode_detail_record(make_detail(amount="     35389")).error.fields == ("amount",)
    assert decode_detail_record(make_detail(withheld_tax="")).error.fields == ("withheld_tax",)


def test_large_amount_is_not_bounded() -> None:
    result = decode_detail_record(make_detail(amount="9999999999", withheld_tax="99999999"))

    assert result.record.amount == 9999999999
    assert result.record.withheld_tax == 99999999


def test_invalid_bsb_and_trace_bsb() -> None:
    result = decode_detail_record(make_detail(bsb="0404404", trace_bsb="040/404"))

    assert result.error.fields == ("bsb", "trace_bsb")
