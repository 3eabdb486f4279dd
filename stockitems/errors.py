from __future__ import annotations

from typing import Optional


class StockDataError(Exception):
    """Base class for conversion failures."""


class SchemaError(StockDataError):
    """Header row does not match the expected columns."""


class StructuralError(StockDataError):
    """A data row cannot be decoded into a stock item."""

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Optional[str] = None,
        item_id: Optional[int] = None,
        line: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value
        self.item_id = item_id
        self.line = line

    def add_context(
        self,
        *,
        field: Optional[str] = None,
        value: Optional[str] = None,
        item_id: Optional[int] = None,
        line: Optional[int] = None,
    ) -> "StructuralError":
        # Context closest to the failure wins; outer callers only fill gaps.
        if self.field is None:
            self.field = field
        if self.value is None:
            self.value = value
        if self.item_id is None:
            self.item_id = item_id
        if self.line is None:
            self.line = line
        return self

    def __str__(self) -> str:
        context = []
        if self.line is not None:
            context.append(f"line {self.line}")
        if self.item_id is not None:
            context.append(f"item {self.item_id}")
        if self.field is not None:
            context.append(f"field '{self.field}'")
        if self.value is not None:
            context.append(f"value '{self.value}'")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


class MonetaryValueError(StructuralError):
    """Monetary text is not a valid dollar amount."""
