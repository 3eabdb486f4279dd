"""
Fixed conversion rules.

Column layout, field limits and output formatting for stock item conversion.
"""

EXPECTED_HEADER = (
    "item id",
    "description",
    "price",
    "cost",
    "price_type",
    "quantity_on_hand",
    "modifier_1_name",
    "modifier_1_price",
    "modifier_2_name",
    "modifier_2_price",
    "modifier_3_name",
    "modifier_3_price",
)

MIN_STOCK_ITEM_FIELDS = 5  # up to and including price_type
QUANTITY_FIELD_INDEX = 5
MODIFIERS_START_INDEX = 6
MAX_MODIFIERS = 4

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

JSON_INDENT = "    "
OUTPUT_ENCODING = "utf-8"
ENCODING_SAMPLE_BYTES = 64 * 1024
