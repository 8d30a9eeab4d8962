"""Single-pass streaming validation of ABA record lines.

Lines are folded in file order through :func:`step`, which takes the current
:class:`StreamState` and returns a new one together with the decoded outcome
for that line. Structural problems (a second header, a second trailer or an
unknown record type) come back as ``StepResult.halt`` and stop the pass with
no partial result. Field-level problems only mark the outcome as invalid.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional
import logging

from .classifier import classify
from .descriptive_record import decode_descriptive_record
from .detail_record import decode_detail_record
from .file_total_record import decode_file_total_record
from .utils import AbaError, DecodeResult, ErrorKind, RecordKind, strip_newline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordOutcome:
    """Decoded (or rejected) record at a given line of the file."""

    kind: RecordKind
    line_number: int
    record: Optional[object] = None
    error: Optional[AbaError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class StreamState:
    """Running counters threaded through the fold."""

    descriptive_count: int = 0
    detail_count: int = 0
    file_total_count: int = 0
    descriptive_lines: tuple[int, ...] = ()
    file_total_lines: tuple[int, ...] = ()


@dataclass(frozen=True)
class StepResult:
    state: StreamState
    outcome: Optional[RecordOutcome] = None
    halt: Optional[AbaError] = None


@dataclass(frozen=True)
class FileResult:
    """Per-line outcomes in file order, or the error that aborted the file."""

    outcomes: tuple[RecordOutcome, ...] = ()
    error: Optional[AbaError] = None
    state: StreamState = field(default_factory=StreamState)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def invalid_outcomes(self) -> tuple[RecordOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.ok)


def _outcome(kind: RecordKind, line_number: int, decoded: DecodeResult) -> RecordOutcome:
    error = decoded.error
    if error is not None:
        error = replace(error, line_number=line_number)
    return RecordOutcome(kind=kind, line_number=line_number, record=decoded.record, error=error)


def step(state: StreamState, line_number: int, line: str) -> StepResult:
    """Advance the fold by one line."""

    kind = classify(line)
    text = strip_newline(line)

    if kind is RecordKind.DESCRIPTIVE:
        if state.descriptive_lines:
            return StepResult(
                state=state,
                halt=AbaError(ErrorKind.MULTIPLE_DESCRIPTIVE_RECORDS, line_number=line_number),
            )
        outcome = _outcome(kind, line_number, decode_descriptive_record(text))
        new_state = replace(
            state,
            descriptive_count=state.descriptive_count + 1,
            descriptive_lines=(line_number,),
        )
        return StepResult(state=new_state, outcome=outcome)

    if kind is RecordKind.DETAIL:
        outcome = _outcome(kind, line_number, decode_detail_record(text))
        return StepResult(state=replace(state, detail_count=state.detail_count + 1), outcome=outcome)

    if kind is RecordKind.FILE_TOTAL:
        if state.file_total_lines:
            return StepResult(
                state=state,
                halt=AbaError(ErrorKind.MULTIPLE_FILE_TOTAL_RECORDS, line_number=state.file_total_lines[0]),
            )
        outcome = _outcome(kind, line_number, decode_file_total_record(text, state.detail_count))
        new_state = replace(
            state,
            file_total_count=state.file_total_count + 1,
            file_total_lines=(line_number,),
        )
        return StepResult(state=new_state, outcome=outcome)

    return StepResult(
        state=state,
        halt=AbaError(
            ErrorKind.UNKNOWN_RECORD_TYPE,
            line_number=line_number,
            message=f"unrecognised record code {text[:1]!r}",
        ),
    )


def process_lines(lines: Iterable[tuple[int, str]]) -> FileResult:
    """Fold :func:`step` over ``(line_number, line)`` pairs in order."""

    state = StreamState()
    outcomes: list[RecordOutcome] = []

    for line_number, line in lines:
        result = step(state, line_number, line)
        if result.halt is not None:
            logger.warning("Validation halted: %s", result.halt.describe())
            return FileResult(error=result.halt, state=result.state)
        outcome = result.outcome
        logger.debug(
            "Line %d: %s %s",
            line_number,
            outcome.kind.value,
            "ok" if outcome.ok else outcome.error.describe(),
        )
        outcomes.append(outcome)
        state = result.state

    return FileResult(outcomes=tuple(outcomes), state=state)


__all__ = ["FileResult", "RecordOutcome", "StepResult", "StreamState", "process_lines", "step"]
