"""
Indented JSON text for converted records.

The standard json module can only write a Decimal as a number by going through
float, which would turn "0.80" into 0.8. This writer walks the dumped structure itself and defers to
json.dumps for every scalar except Decimal, which it writes verbatim.
"""

from __future__ import annotations

import json
from decimal import Decimal
from enum import Enum
from typing import Any

from .rules import JSON_INDENT


def dumps(value: Any, level: int = 0, indent: str = JSON_INDENT) -> str:
    """
    Serialize value as JSON, nested containers indented one step per level.

    `level` is the depth the value starts at, so the closing bracket lines up
    with the line the caller wrote the opening bracket on.
    """
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"cannot write non-finite number {value}")
        return str(value)
    if isinstance(value, Enum):
        value = value.value

    if isinstance(value, dict):
        if not value:
            return "{}"
        pad = indent * (level + 1)
        members = [
            f"{pad}{json.dumps(str(k), ensure_ascii=False)}: {dumps(v, level + 1, indent)}"
            for k, v in value.items()
        ]
        return "{\n" + ",\n".join(members) + "\n" + indent * level + "}"

    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        pad = indent * (level + 1)
        elements = [f"{pad}{dumps(v, level + 1, indent)}" for v in value]
        return "[\n" + ",\n".join(elements) + "\n" + indent * level + "]"

    return json.dumps(value, ensure_ascii=False)
