"""
Streaming CSV -> JSON conversion.

The header is checked once, then rows are decoded, serialized and written one
at a time; only the current item is ever held in memory. The first bad row
aborts the run. Whatever was already written stays written.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from .decode import read_item
from .jsonout import dumps
from .rules import JSON_INDENT, OUTPUT_ENCODING
from .schema import read_header
from .source import RecordReader, open_source

log = logging.getLogger(__name__)


def convert_stream(source: RecordReader, out: TextIO) -> int:
    """Write the JSON array for every record in `source`; return the count."""
    read_header(source)

    out.write("[")
    written = 0
    while True:
        item = read_item(source)
        if item is None:
            break

        if written:
            out.write(",")
        out.write("\n" + JSON_INDENT + dumps(item.to_json(), level=1))
        written += 1
        log.info("Item %10d: %-50s converted", item.id, item.description)

    out.write("\n]\n" if written else "]\n")
    return written


def convert_file(src: Path, dst: Path, encoding: str = "auto") -> int:
    log.info("Reading from CSV file %s", src)
    log.info("Writing to JSON file %s", dst)

    with open_source(src, encoding=encoding) as source:
        with dst.open("w", encoding=OUTPUT_ENCODING, newline="\n") as out:
            count = convert_stream(source, out)

    log.info("done: %d items converted", count)
    return count
