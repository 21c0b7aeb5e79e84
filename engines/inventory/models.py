"""
Shopfloor Inventory Engine — Stock Item Records
=================================================
StockItem is the committed, immutable record; StockItemDraft is the
mutable scratch copy behind the add/edit form.

Derived values (total_value, low_stock) are properties over the
calculator, never stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import ClassVar, Optional, Tuple

from core.calculations.derived import as_amount, is_low_stock, stock_value


@dataclass(frozen=True)
class StockItem:
    """
    Fields:
        name:         Display name ("Raw Cotton")
        category:     Stock category from configuration
        quantity:     On-hand quantity, in `unit`
        unit:         Unit of measure from configuration
        price:        Price per unit
        min_stock:    Reorder threshold
        last_updated: Stamped on every successful submit
        record_id:    Assigned by the store on create
    """
    name: str
    category: str
    quantity: float
    unit: str
    price: float
    min_stock: float
    last_updated: date
    record_id: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.last_updated, date):
            raise ValueError("last_updated must be a date.")

    @property
    def total_value(self):
        return stock_value(self.quantity, self.price)

    @property
    def low_stock(self) -> bool:
        return is_low_stock(self.quantity, self.min_stock)

    def to_dict(self) -> dict:
        return {
            "record_id": self.record_id,
            "name": self.name,
            "category": self.category,
            "quantity": self.quantity,
            "unit": self.unit,
            "price": self.price,
            "min_stock": self.min_stock,
            "last_updated": self.last_updated.isoformat(),
            "total_value": self.total_value,
            "low_stock": self.low_stock,
        }


@dataclass
class StockItemDraft:
    NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ("quantity", "price", "min_stock")
    REQUIRED_NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ("quantity", "price", "min_stock")

    name: str = ""
    category: str = ""
    quantity: float = 0
    unit: str = ""
    price: float = 0
    min_stock: float = 0

    @classmethod
    def from_record(cls, record: StockItem) -> StockItemDraft:
        return cls(
            name=record.name,
            category=record.category,
            quantity=record.quantity,
            unit=record.unit,
            price=record.price,
            min_stock=record.min_stock,
        )

    @property
    def total_value(self):
        return stock_value(as_amount(self.quantity), as_amount(self.price))

    @property
    def low_stock(self) -> bool:
        return is_low_stock(as_amount(self.quantity), as_amount(self.min_stock))

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "category": self.category,
            "quantity": self.quantity,
            "unit": self.unit,
            "price": self.price,
            "min_stock": self.min_stock,
            "total_value": self.total_value,
            "low_stock": self.low_stock,
        }
