from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_serializer

from .errors import StructuralError
from .money import Cents, monetary_literal
from .rules import INT64_MAX, INT64_MIN, MAX_MODIFIERS


class PriceType(str, Enum):
    SYSTEM = "system"
    OPEN = "open"

    @classmethod
    def from_text(cls, text: str) -> "PriceType":
        for member in cls:
            if member.value == text:
                return member
        raise StructuralError(
            f"invalid price_type value '{text}'; expected one of: "
            + ", ".join(m.value for m in cls),
            field="price_type",
            value=text,
        )


class Modifier(BaseModel):
    name: str = Field(min_length=1)
    price: Cents

    @field_serializer("price")
    def serialize_money(self, value: int) -> Optional[Decimal]:
        return monetary_literal(value)


class StockItem(BaseModel):
    """
    One inventory record.

    Money fields dump as Decimal literals ("0.80" stays "0.80"); write them
    with jsonout.dumps, which emits Decimals as bare JSON numbers.
    """

    id: int = Field(ge=INT64_MIN, le=INT64_MAX)
    description: str = ""
    price: Optional[Cents] = None
    cost: Optional[Cents] = None
    price_type: PriceType
    quantity_on_hand: Optional[int] = Field(default=None, ge=INT64_MIN, le=INT64_MAX)
    modifiers: List[Modifier] = Field(default_factory=list, max_length=MAX_MODIFIERS)

    @field_serializer("price", "cost")
    def serialize_money(self, value: Optional[int]) -> Optional[Decimal]:
        return monetary_literal(value)

    @field_serializer("price_type")
    def serialize_price_type(self, value: PriceType) -> str:
        return value.value

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(mode="python")


class HealthResponse(BaseModel):
    ok: bool = True


class ConversionFailure(BaseModel):
    issue: str
    message: str
    line: Optional[int] = None
    field: Optional[str] = None
    value: Optional[str] = None
    item_id: Optional[int] = None
