"""
Exact dollar amounts as integer cents.

Prices are kept as a count of cents so that no value ever goes through a
binary float on its way from CSV text to JSON output.
"""

from __future__ import annotations

from decimal import Decimal
from typing import NewType, Optional

from .errors import MonetaryValueError
from .rules import INT64_MAX, INT64_MIN

Cents = NewType("Cents", int)


def _digits(text: str) -> bool:
    # str.isdigit() also accepts superscripts and other unicode digits
    return text.isascii() and text.isdigit()


def parse_monetary(text: str) -> Optional[Cents]:
    """
    Parse a dollar string such as "-$1.99" into cents (-199).

    Rules:
    - Empty text means "no value" and returns None.
    - A leading "-" marks a negative amount; a "$" after it is optional,
      since some data has plain decimal amounts.
    - At most one decimal point. The dollar part may be empty (".25").
    - When a decimal point is present it must be followed by exactly two
      cent digits.
    """
    if not text:
        return None

    rest = text
    negative = False
    if rest.startswith("-"):
        negative = True
        rest = rest[1:]
    if rest.startswith("$"):
        rest = rest[1:]

    parts = rest.split(".")
    if len(parts) > 2:
        raise MonetaryValueError(
            "too many decimal points in currency value", value=text
        )

    dollar_text = parts[0]
    cent_text = parts[1] if len(parts) == 2 else None

    if not dollar_text and cent_text is None:
        raise MonetaryValueError("no digits in currency value", value=text)

    dollars = 0
    if dollar_text:
        if not _digits(dollar_text):
            raise MonetaryValueError(
                f"couldn't parse dollar part '{dollar_text}' of currency value",
                value=text,
            )
        dollars = int(dollar_text)

    cents = 0
    if cent_text is not None:
        if len(cent_text) != 2 or not _digits(cent_text):
            raise MonetaryValueError(
                f"cent part '{cent_text}' of currency value must be exactly two digits (00-99)",
                value=text,
            )
        cents = int(cent_text)

    amount = dollars * 100 + cents
    if negative:
        amount = -amount
    if not INT64_MIN <= amount <= INT64_MAX:
        raise MonetaryValueError(
            "currency value is out of range for a 64-bit cent amount", value=text
        )
    return Cents(amount)


def format_monetary(cents: int) -> str:
    """Format cents as a dollar amount: no currency symbol, two cent digits."""
    sign = "-" if cents < 0 else ""
    dollars, rem = divmod(abs(cents), 100)
    return f"{sign}{dollars}.{rem:02d}"


def monetary_literal(cents: Optional[int]) -> Optional[Decimal]:
    """JSON hook: a Decimal whose text is exactly format_monetary(cents)."""
    if cents is None:
        return None
    return Decimal(format_monetary(cents))
