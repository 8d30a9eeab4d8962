"""Open ABA files and stream their lines for validation."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union
import logging
import os

from .utils import AbaError, ErrorKind, strip_bom

logger = logging.getLogger(__name__)

NumberedLines = Iterator[tuple[int, str]]


@dataclass
class ReadResult:
    """Lazy line source for a file, or the reason it cannot be read."""

    lines: Optional[NumberedLines]
    path: Path
    error: Optional[AbaError] = None


class LineReader:
    """Check a path and expose its lines as 1-indexed text."""

    encoding = "utf-8"
    fallback_encoding = "latin-1"

    def open(self, file_path: Union[str, Path]) -> ReadResult:
        path = Path(file_path).expanduser()

        if not path.exists() or path.is_dir():
            logger.info("File not found: %s", path)
            return ReadResult(
                lines=None,
                path=path,
                error=AbaError(ErrorKind.FILE_DOES_NOT_EXIST, message=str(path)),
            )
        if not os.access(path, os.R_OK):
            logger.info("File not readable: %s", path)
            return ReadResult(
                lines=None,
                path=path,
                error=AbaError(ErrorKind.PERMISSION_DENIED, message=str(path)),
            )
        try:
            size = path.stat().st_size
        except PermissionError as exc:
            return ReadResult(
                lines=None,
                path=path,
                error=AbaError(ErrorKind.PERMISSION_DENIED, message=str(exc)),
            )
        if size == 0:
            return ReadResult(lines=None, path=path, error=AbaError(ErrorKind.NO_CONTENT, message=str(path)))

        logger.info("Reading ABA file %s", path)
        return ReadResult(lines=self._iter_lines(path), path=path)

    def _iter_lines(self, path: Path) -> NumberedLines:
        with path.open("rb") as handle:
            for index, raw in enumerate(handle, start=1):
                if index == 1:
                    raw = strip_bom(raw)
                yield index, self._decode(raw, index)

    def _decode(self, raw: bytes, index: int) -> str:
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as exc:
            logger.debug("Line %d is not %s (%s); decoding as %s", index, self.encoding, exc, self.fallback_encoding)
            return raw.decode(self.fallback_encoding)


__all__ = ["LineReader", "NumberedLines", "ReadResult"]
