import io

import pytest

from stockitems.errors import SchemaError
from stockitems.rules import EXPECTED_HEADER
from stockitems.schema import read_header, verify_header
from stockitems.source import RecordReader


def test_expected_header_passes():
    verify_header(list(EXPECTED_HEADER))


def test_missing_column():
    header = [c for c in EXPECTED_HEADER if c != "price_type"]
    with pytest.raises(SchemaError, match="expected 12 columns"):
        verify_header(header)


def test_reordered_columns_name_previous_field():
    header = list(EXPECTED_HEADER)
    header[2], header[3] = header[3], header[2]
    with pytest.raises(SchemaError) as info:
        verify_header(header)
    message = str(info.value)
    assert "'price'" in message
    assert "after 'description'" in message
    assert "not 'cost'" in message


def test_wrong_first_field():
    header = ["id"] + list(EXPECTED_HEADER[1:])
    with pytest.raises(SchemaError, match="expected the first field to be 'item id' but got 'id'"):
        verify_header(header)


def test_read_header_on_empty_input():
    with pytest.raises(SchemaError, match="empty"):
        read_header(RecordReader(io.StringIO("")))


def test_read_header_skips_blank_lines():
    text = "\n" + ",".join(EXPECTED_HEADER) + "\n"
    assert read_header(RecordReader(io.StringIO(text, newline=""))) == list(EXPECTED_HEADER)
