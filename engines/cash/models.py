"""
Shopfloor Cash Engine — Daily Expense Records
===============================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import ClassVar, Optional, Tuple


@dataclass(frozen=True)
class Expense:
    """
    Fields:
        date:           Day the money went out
        category:       Expense category from configuration
        description:    Free text ("Electricity Bill")
        amount:         Amount spent
        payment_method: Cash / Bank Transfer / UPI / ...
        bill_number:    Supplier's bill or receipt reference, optional
        record_id:      Assigned by the store on create
    """
    date: date
    category: str
    description: str
    amount: float
    payment_method: str
    bill_number: Optional[str] = None
    record_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "record_id": self.record_id,
            "date": self.date.isoformat(),
            "category": self.category,
            "description": self.description,
            "amount": self.amount,
            "payment_method": self.payment_method,
            "bill_number": self.bill_number,
        }


@dataclass
class ExpenseDraft:
    NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ("amount",)
    DATE_FIELDS: ClassVar[Tuple[str, ...]] = ("date",)

    date: Optional[date] = None
    category: str = ""
    description: str = ""
    amount: float = 0
    payment_method: str = ""
    bill_number: Optional[str] = None

    @classmethod
    def from_record(cls, record: Expense) -> ExpenseDraft:
        return cls(
            date=record.date,
            category=record.category,
            description=record.description,
            amount=record.amount,
            payment_method=record.payment_method,
            bill_number=record.bill_number,
        )

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat() if self.date else None,
            "category": self.category,
            "description": self.description,
            "amount": self.amount,
            "payment_method": self.payment_method,
            "bill_number": self.bill_number,
        }
