from __future__ import annotations

from typing import List, Sequence

from .errors import SchemaError
from .rules import EXPECTED_HEADER
from .source import RecordReader


def verify_header(row: Sequence[str]) -> None:
    """Check that a header row names the expected columns, in order."""
    if len(row) != len(EXPECTED_HEADER):
        raise SchemaError(
            f"expected {len(EXPECTED_HEADER)} columns in the CSV header; "
            f"saw {len(row)} fields on the first line"
        )

    for i, expected in enumerate(EXPECTED_HEADER):
        if row[i] == expected:
            continue
        if i == 0:
            raise SchemaError(
                f"CSV header doesn't match the expected format: expected the "
                f"first field to be '{expected}' but got '{row[i]}'"
            )
        raise SchemaError(
            f"CSV header doesn't match the expected format: expected field "
            f"'{expected}' after '{EXPECTED_HEADER[i - 1]}', not '{row[i]}'"
        )


def read_header(source: RecordReader) -> List[str]:
    row = source.next_row()
    if row is None:
        raise SchemaError("input is empty; expected a header row")
    verify_header(row)
    return row
