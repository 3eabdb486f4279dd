"""
Decoding one CSV data row into a validated StockItem.

Columns are positional:

    0 item id            (required integer)
    1 description        (any text)
    2 price, 3 cost      (optional dollar amounts)
    4 price_type         (system | open)
    5 quantity_on_hand   (optional integer, only read when the column exists)
    6.. modifier name / price pairs, up to four

Every field is parsed and checked before the StockItem is built, so a caller
never sees a partially populated item.
"""

from __future__ import annotations

import re
from typing import Iterator, List, Optional, Sequence

from .errors import StructuralError
from .models import Modifier, PriceType, StockItem
from .money import Cents, parse_monetary
from .rules import (
    EXPECTED_HEADER,
    INT64_MAX,
    INT64_MIN,
    MAX_MODIFIERS,
    MIN_STOCK_ITEM_FIELDS,
    MODIFIERS_START_INDEX,
    QUANTITY_FIELD_INDEX,
)
from .source import RecordReader

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_int64(text: str, field: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise StructuralError(f"invalid integer for {field}", field=field, value=text)
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise StructuralError(
            f"{field} is out of range for a 64-bit integer", field=field, value=text
        )
    return value


def parse_quantity(text: str) -> Optional[int]:
    if not text:
        return None
    return parse_int64(text, "quantity_on_hand")


def parse_monetary_field(text: str, field: str) -> Optional[Cents]:
    try:
        return parse_monetary(text)
    except StructuralError as exc:
        exc.add_context(field=field, value=text)
        raise


def modifier_from_strings(name: str, price_text: str, number: int) -> Optional[Modifier]:
    """
    Build modifier `number` (1-based) from its name and price columns.

    An empty name with an empty price is an unused slot and returns None.
    """
    name_field = f"modifier_{number}_name"
    price_field = f"modifier_{number}_price"

    price = parse_monetary_field(price_text, price_field)

    if not name:
        if price is None:
            return None
        raise StructuralError(
            f"modifier #{number} has a price but no name",
            field=name_field,
            value=name,
        )

    if price is None:
        raise StructuralError(
            f"no cents found in price for modifier '{name}'; a named modifier needs a price",
            field=price_field,
            value=price_text,
        )

    return Modifier(name=name, price=price)


def decode_modifiers(row: Sequence[str], item_id: int) -> List[Modifier]:
    modifiers: List[Modifier] = []
    for slot in range(MAX_MODIFIERS):
        name_idx = MODIFIERS_START_INDEX + slot * 2
        if name_idx >= len(row):
            # row ends before this slot: simply fewer modifiers
            break
        if name_idx + 1 >= len(row):
            raise StructuralError(
                f"stock item {item_id}'s modifier #{slot + 1} (name: '{row[name_idx]}') "
                "has only one of its two fields; expected both or neither",
                item_id=item_id,
            )
        modifier = modifier_from_strings(row[name_idx], row[name_idx + 1], slot + 1)
        if modifier is not None:
            modifiers.append(modifier)
    return modifiers


def decode_record(row: Sequence[str]) -> StockItem:
    """Parse one data row; raise StructuralError if any field is invalid."""
    if len(row) < MIN_STOCK_ITEM_FIELDS:
        raise StructuralError(
            f"stock item has too few fields ({len(row)}); expected at least "
            f"{MIN_STOCK_ITEM_FIELDS} (up to {EXPECTED_HEADER[MIN_STOCK_ITEM_FIELDS - 1]})"
        )

    item_id = parse_int64(row[0], EXPECTED_HEADER[0])

    try:
        price = parse_monetary_field(row[2], "price")
        cost = parse_monetary_field(row[3], "cost")
        price_type = PriceType.from_text(row[4])

        quantity = None
        if len(row) > QUANTITY_FIELD_INDEX:
            quantity = parse_quantity(row[QUANTITY_FIELD_INDEX])

        modifiers = decode_modifiers(row, item_id)
    except StructuralError as exc:
        exc.add_context(item_id=item_id)
        raise

    return StockItem(
        id=item_id,
        description=row[1],
        price=price,
        cost=cost,
        price_type=price_type,
        quantity_on_hand=quantity,
        modifiers=modifiers,
    )


def read_item(source: RecordReader) -> Optional[StockItem]:
    """Decode the next data row; None means end of input, not an error."""
    row = source.next_row()
    if row is None:
        return None
    try:
        return decode_record(row)
    except StructuralError as exc:
        exc.add_context(line=source.line_num)
        raise


def iter_items(source: RecordReader) -> Iterator[StockItem]:
    while True:
        item = read_item(source)
        if item is None:
            return
        yield item
