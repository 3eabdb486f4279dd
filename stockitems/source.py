"""
Reading tokenized rows from stock item CSV input.

Responsibilities:
- encoding detection (charset-normalizer), so a BOM or a legacy code page
  never reaches the header check
- blank-line skipping and line tracking for diagnostics
"""

from __future__ import annotations

import codecs
import csv
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, TextIO

from charset_normalizer import from_bytes

from .rules import ENCODING_SAMPLE_BYTES

log = logging.getLogger(__name__)

_UTF8_NAMES = ("utf_8", "utf8", "ascii")


def _is_utf8(raw: bytes, complete: bool) -> bool:
    try:
        codecs.getincrementaldecoder("utf-8")().decode(raw, final=complete)
    except UnicodeDecodeError:
        return False
    return True


def detect_encoding(raw: bytes, complete: bool = True) -> str:
    """
    Best-effort encoding for raw CSV bytes.

    - Bytes that decode as UTF-8 are UTF-8; charset-normalizer is only asked
      otherwise. With complete=False the bytes are a leading sample of a
      larger file, and a multi-byte sequence cut off at the end is allowed.
    - No detection result: assume UTF-8.
    - UTF-8 (and its ASCII subset) decode as utf-8-sig, so a leading BOM is
      dropped rather than glued onto "item id".
    """
    if not raw or _is_utf8(raw, complete):
        return "utf-8-sig"

    match = from_bytes(raw).best()
    detected = match.encoding if match is not None else "utf-8"

    if detected.lower().replace("-", "_") in _UTF8_NAMES:
        return "utf-8-sig"
    return detected


class RecordReader:
    """Row source over a text stream; yields lists of field strings."""

    def __init__(self, stream: TextIO) -> None:
        self._reader = csv.reader(stream)

    @property
    def line_num(self) -> int:
        return self._reader.line_num

    def next_row(self) -> Optional[List[str]]:
        """Next non-blank row, or None at end of input."""
        for row in self._reader:
            if row:
                return row
        return None


@contextmanager
def open_source(path: Path, encoding: str = "auto") -> Iterator[RecordReader]:
    if encoding == "auto":
        with path.open("rb") as fb:
            sample = fb.read(ENCODING_SAMPLE_BYTES)
        encoding = detect_encoding(sample, complete=len(sample) < ENCODING_SAMPLE_BYTES)
        log.debug("detected encoding %s for %s", encoding, path)

    with path.open("r", newline="", encoding=encoding) as f:
        yield RecordReader(f)
