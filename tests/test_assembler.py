from aba_validator.assembler import AssembledRecords, RecordFilter, assemble, check_order, project
from aba_validator.processor import RecordOutcome
from aba_validator.utils import ErrorKind, RecordKind


def outcome(kind: RecordKind, line: int) -> RecordOutcome:
    return RecordOutcome(kind=kind, line_number=line)


def ordered() -> list[RecordOutcome]:
    return [
        outcome(RecordKind.DESCRIPTIVE, 1),
        outcome(RecordKind.DETAIL, 2),
        outcome(RecordKind.DETAIL, 3),
        outcome(RecordKind.FILE_TOTAL, 4),
    ]


def test_empty_file_has_no_content() -> None:
    assert check_order([]).kind is ErrorKind.NO_CONTENT


def test_detail_first_is_out_of_order() -> None:
    outcomes = [outcome(RecordKind.DETAIL, 1), outcome(RecordKind.DESCRIPTIVE, 2), outcome(RecordKind.FILE_TOTAL, 3)]

    error = check_order(outcomes)

    assert error.kind is ErrorKind.INCORRECT_ORDER_DETECTED
    assert error.line_number == 1


def test_missing_trailer_is_out_of_order() -> None:
    outcomes = [outcome(RecordKind.DESCRIPTIVE, 1), outcome(RecordKind.DETAIL, 2)]

    error = check_order(outcomes)

    assert error.kind is ErrorKind.INCORRECT_ORDER_DETECTED
    assert error.line_number == 2


def test_header_only_is_out_of_order() -> None:
    assert check_order([outcome(RecordKind.DESCRIPTIVE, 1)]).kind is ErrorKind.INCORRECT_ORDER_DETECTED


def test_ordered_records_pass() -> None:
    assert check_order(ordered()) is None


def test_assemble_and_project() -> None:
    outcomes = ordered()

    assembled = assemble(outcomes)

    assert assembled == AssembledRecords(header=outcomes[0], details=(outcomes[1], outcomes[2]), trailer=outcomes[3])
    assert project(assembled, RecordFilter.ALL) is assembled
    assert project(assembled, RecordFilter.DESCRIPTIVE_RECORD) is outcomes[0]
    assert project(assembled, RecordFilter.DETAIL_RECORD) == (outcomes[1], outcomes[2])
    assert project(assembled, RecordFilter.FILE_RECORD) is outcomes[3]


def test_assemble_without_details() -> None:
    outcomes = [outcome(RecordKind.DESCRIPTIVE, 1), outcome(RecordKind.FILE_TOTAL, 2)]

    assert assemble(outcomes).details == ()
