from __future__ import annotations

import argparse
import csv
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .convert import convert_file
from .errors import StockDataError


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Convert a stock item CSV file to a JSON array, one record at a time."
    )
    p.add_argument("src", help="Path to the stock item CSV file")
    p.add_argument("dst", help="Path to write the JSON output to")
    p.add_argument(
        "--verbose",
        action="store_true",
        default=_env_flag("STOCKITEMS_VERBOSE"),
        help="Log progress for every converted item to stderr",
    )
    p.add_argument(
        "--encoding",
        default=os.getenv("STOCKITEMS_ENCODING", "auto"),
        help="Input encoding; 'auto' detects it from the start of the file (default: auto)",
    )
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    level = logging.INFO if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    try:
        convert_file(Path(args.src), Path(args.dst), encoding=args.encoding)
    except (StockDataError, OSError, csv.Error, UnicodeError, LookupError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
