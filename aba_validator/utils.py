"""Shared types and helpers for the ABA validator."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Sequence
import json
import logging

from .fields import exact_length

RECORD_LENGTH = 120
DESCRIPTIVE_CODE = "0"
DETAIL_CODE = "1"
FILE_TOTAL_CODE = "7"


class RecordKind(str, Enum):
    """Record type selected by the leading character of a line."""

    DESCRIPTIVE = "descriptive_record"
    DETAIL = "detail_record"
    FILE_TOTAL = "file_total_record"
    UNKNOWN = "unknown"


class ErrorKind(str, Enum):
    """Every error the validator can report."""

    # I/O collaborator
    FILE_DOES_NOT_EXIST = "file_does_not_exist"
    PERMISSION_DENIED = "permission_denied"
    NO_CONTENT = "no_content"
    # record decoders
    INVALID_INPUT = "invalid_input"
    INCORRECT_LENGTH = "incorrect_length"
    INCORRECT_STARTING_CODE = "incorrect_starting_code"
    INVALID_FORMAT = "invalid_format"
    # structural, halts the stream
    MULTIPLE_DESCRIPTIVE_RECORDS = "multiple_descriptive_records"
    MULTIPLE_FILE_TOTAL_RECORDS = "multiple_file_total_records"
    UNKNOWN_RECORD_TYPE = "unknown_record_type"
    # assembler
    INCORRECT_ORDER_DETECTED = "incorrect_order_detected"
    INTERNAL_ERROR = "internal_error"


class ValidationStatus(str, Enum):
    """High-level status for a processed file."""

    OK = "OK"
    INVALID = "INVALID"
    ERROR = "ERROR"


@dataclass(frozen=True)
class AbaError:
    """Error value returned (never raised) by every stage."""

    kind: ErrorKind
    fields: tuple[str, ...] = ()
    line_number: Optional[int] = None
    message: str = ""

    def describe(self) -> str:
        text = self.kind.value
        if self.fields:
            text += " [" + ", ".join(self.fields) + "]"
        if self.line_number is not None:
            text += f" (line {self.line_number})"
        if self.message:
            text += f": {self.message}"
        return text


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of decoding a single record line."""

    record: Optional[Any] = None
    error: Optional[AbaError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def record_gate(entry: object, code: str) -> Optional[AbaError]:
    """Checks that run before any field is sliced out of a record."""

    if not isinstance(entry, str):
        return AbaError(ErrorKind.INVALID_INPUT)
    if not exact_length(entry, RECORD_LENGTH):
        return AbaError(
            ErrorKind.INCORRECT_LENGTH,
            message=f"expected {RECORD_LENGTH} characters, got {len(entry)}",
        )
    if entry[0] != code:
        return AbaError(ErrorKind.INCORRECT_STARTING_CODE, message=f"expected '{code}', got '{entry[0]}'")
    return None


def slice_fields(entry: str, layout: Sequence[tuple[str, int]]) -> dict[str, str]:
    """Cut the fixed-width fields after the record code, in layout order."""

    fields: dict[str, str] = {}
    offset = 1
    for name, width in layout:
        fields[name] = entry[offset : offset + width]
        offset += width
    return fields


def invalid_format(violations: Sequence[str]) -> DecodeResult:
    return DecodeResult(error=AbaError(ErrorKind.INVALID_FORMAT, fields=tuple(violations)))


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logger when the CLI runs."""

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def ensure_reports_dir(base_dir: Path) -> Path:
    """Ensure that the reports directory exists."""

    reports_dir = base_dir / "reports"
    reports_dir.mkdir(parents=True, exist_ok=True)
    return reports_dir


def strip_bom(data: bytes) -> bytes:
    """Remove UTF-8 BOM when present."""

    bom = b"\xef\xbb\xbf"
    if data.startswith(bom):
        return data[len(bom) :]
    return data


def strip_newline(line: str) -> str:
    """Drop a single trailing line terminator (LF or CRLF)."""

    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def write_text(path: Path, content: str) -> None:
    """Persist text content to disk ensuring parent directories exist."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def write_json(path: Path, payload: dict) -> None:
    """Persist JSON content to disk with UTF-8 encoding."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, ensure_ascii=False)


__all__ = [
    "AbaError",
    "DESCRIPTIVE_CODE",
    "DETAIL_CODE",
    "DecodeResult",
    "ErrorKind",
    "FILE_TOTAL_CODE",
    "RECORD_LENGTH",
    "RecordKind",
    "ValidationStatus",
    "configure_logging",
    "ensure_reports_dir",
    "invalid_format",
    "record_gate",
    "slice_fields",
    "strip_bom",
    "strip_newline",
    "write_json",
    "write_text",
]
