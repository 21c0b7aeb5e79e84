"""
Shopfloor Procurement Engine — Raw Material Purchase Records
==============================================================
One record per purchase of raw material from a supplier, with the
payment position against it:

    remaining_amount = total_amount - amount_paid
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import ClassVar, Optional, Tuple

from core.calculations.derived import as_amount, material_remaining


@dataclass(frozen=True)
class RawMaterial:
    name: str
    supplier: str
    purchase_date: date
    quantity: float
    unit: str
    total_amount: float
    amount_paid: float
    category: str
    record_id: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.purchase_date, date):
            raise ValueError("purchase_date must be a date.")

    @property
    def remaining_amount(self):
        return material_remaining(self.total_amount, self.amount_paid)

    @property
    def fully_paid(self) -> bool:
        return self.remaining_amount <= 0

    def to_dict(self) -> dict:
        return {
            "record_id": self.record_id,
            "name": self.name,
            "supplier": self.supplier,
            "purchase_date": self.purchase_date.isoformat(),
            "quantity": self.quantity,
            "unit": self.unit,
            "total_amount": self.total_amount,
            "amount_paid": self.amount_paid,
            "remaining_amount": self.remaining_amount,
            "category": self.category,
        }


@dataclass
class RawMaterialDraft:
    NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ("quantity", "total_amount", "amount_paid")
    REQUIRED_NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ("quantity", "total_amount")
    DATE_FIELDS: ClassVar[Tuple[str, ...]] = ("purchase_date",)

    name: str = ""
    supplier: str = ""
    purchase_date: Optional[date] = None
    quantity: float = 0
    unit: str = ""
    total_amount: float = 0
    amount_paid: float = 0
    category: str = ""

    @classmethod
    def from_record(cls, record: RawMaterial) -> RawMaterialDraft:
        return cls(
            name=record.name,
            supplier=record.supplier,
            purchase_date=record.purchase_date,
            quantity=record.quantity,
            unit=record.unit,
            total_amount=record.total_amount,
            amount_paid=record.amount_paid,
            category=record.category,
        )

    @property
    def remaining_amount(self):
        return material_remaining(as_amount(self.total_amount), self.amount_paid)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "supplier": self.supplier,
            "purchase_date": (
                self.purchase_date.isoformat() if self.purchase_date else None
            ),
            "quantity": self.quantity,
            "unit": self.unit,
            "total_amount": self.total_amount,
            "amount_paid": self.amount_paid,
            "remaining_amount": self.remaining_amount,
            "category": self.category,
        }
