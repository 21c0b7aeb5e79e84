"""
Shopfloor Billing Engine — Bill Records
=========================================
Customer invoices with GST.

RULES (NON-NEGOTIABLE):
- line amount = quantity x rate, per item
- subtotal    = sum of line amounts
- gst_amount  = subtotal x gst_rate / 100
- total       = subtotal + gst_amount
- A bill always carries at least one line item.
- Totals are derived from the items on every read. They are never
  stored next to the items, so the two cannot disagree.

Bill / BillLineItem are committed and immutable.
BillDraft / BillLineItemDraft are the form's scratch copies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Tuple

from core.calculations.derived import BillTotals, as_amount, bill_totals, line_amount
from core.records.errors import InvariantViolation


# ══════════════════════════════════════════════════════════════
# ENUMS
# ══════════════════════════════════════════════════════════════

class BillStatus(Enum):
    """Payment-status lifecycle of a bill."""
    DRAFT = "Draft"
    SENT = "Sent"
    PAID = "Paid"
    OVERDUE = "Overdue"


# ══════════════════════════════════════════════════════════════
# COMMITTED RECORDS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class BillLineItem:
    item_id: str
    name: str
    quantity: float
    unit: str
    rate: float

    @property
    def amount(self):
        return line_amount(self.quantity, self.rate)

    def to_dict(self) -> dict:
        return {
            "item_id": self.item_id,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "rate": self.rate,
            "amount": self.amount,
        }


@dataclass(frozen=True)
class Bill:
    """
    Fields:
        bill_number:      Generated once when the create form opens
        customer_name:    Billed party
        customer_address: Billing address
        customer_gstn:    Customer's GST number
        date:             Issue date
        due_date:         Payment due date
        items:            Ordered line items, owned by this bill only
        gst_rate:         Flat GST percentage (one of the configured slabs)
        status:           Draft | Sent | Paid | Overdue
        record_id:        Assigned by the store on create
    """
    bill_number: str
    customer_name: str
    customer_address: str
    customer_gstn: str
    date: date
    due_date: date
    items: Tuple[BillLineItem, ...]
    gst_rate: float
    status: BillStatus = BillStatus.DRAFT
    record_id: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            raise TypeError("items must be a tuple of BillLineItem.")
        if not self.items:
            raise InvariantViolation(
                "BILL_HAS_LINE_ITEMS",
                f"bill '{self.bill_number}' must keep at least one line item.",
            )
        if not isinstance(self.status, BillStatus):
            raise ValueError("status must be BillStatus enum.")

    @property
    def totals(self) -> BillTotals:
        return bill_totals((item.amount for item in self.items), self.gst_rate)

    @property
    def subtotal(self):
        return self.totals.subtotal

    @property
    def gst_amount(self):
        return self.totals.gst_amount

    @property
    def total_amount(self):
        return self.totals.total_amount

    def to_dict(self) -> dict:
        """Fully computed export shape; printers render it as is."""
        totals = self.totals
        return {
            "record_id": self.record_id,
            "bill_number": self.bill_number,
            "customer_name": self.customer_name,
            "customer_address": self.customer_address,
            "customer_gstn": self.customer_gstn,
            "date": self.date.isoformat(),
            "due_date": self.due_date.isoformat(),
            "items": [item.to_dict() for item in self.items],
            "subtotal": totals.subtotal,
            "gst_rate": self.gst_rate,
            "gst_amount": totals.gst_amount,
            "total_amount": totals.total_amount,
            "status": self.status.value,
        }


# ══════════════════════════════════════════════════════════════
# DRAFTS
# ══════════════════════════════════════════════════════════════

@dataclass
class BillLineItemDraft:
    NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ("quantity", "rate")
    REQUIRED_NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ("quantity", "rate")
    READ_ONLY_FIELDS: ClassVar[Tuple[str, ...]] = ("item_id",)

    item_id: str
    name: str = ""
    quantity: float = 0
    unit: str = ""
    rate: float = 0

    @classmethod
    def from_record(cls, item: BillLineItem) -> BillLineItemDraft:
        return cls(
            item_id=item.item_id,
            name=item.name,
            quantity=item.quantity,
            unit=item.unit,
            rate=item.rate,
        )

    @property
    def amount(self):
        return line_amount(as_amount(self.quantity), as_amount(self.rate))

    def freeze(self) -> BillLineItem:
        return BillLineItem(
            item_id=self.item_id,
            name=self.name.strip(),
            quantity=self.quantity,
            unit=self.unit,
            rate=self.rate,
        )

    def to_dict(self) -> dict:
        return {
            "item_id": self.item_id,
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "rate": self.rate,
            "amount": self.amount,
        }


@dataclass
class BillDraft:
    NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ("gst_rate",)
    DATE_FIELDS: ClassVar[Tuple[str, ...]] = ("date", "due_date")
    ENUM_FIELDS: ClassVar[Dict[str, type]] = {"status": BillStatus}
    # items change only through LineItemEditor
    READ_ONLY_FIELDS: ClassVar[Tuple[str, ...]] = ("items",)

    bill_number: str = ""
    customer_name: str = ""
    customer_address: str = ""
    customer_gstn: str = ""
    date: Optional[date] = None
    due_date: Optional[date] = None
    gst_rate: float = 0
    status: BillStatus = BillStatus.DRAFT
    items: List[BillLineItemDraft] = field(default_factory=list)

    @classmethod
    def from_record(cls, bill: Bill) -> BillDraft:
        return cls(
            bill_number=bill.bill_number,
            customer_name=bill.customer_name,
            customer_address=bill.customer_address,
            customer_gstn=bill.customer_gstn,
            date=bill.date,
            due_date=bill.due_date,
            gst_rate=bill.gst_rate,
            status=bill.status,
            items=[BillLineItemDraft.from_record(item) for item in bill.items],
        )

    @property
    def totals(self) -> BillTotals:
        return bill_totals((item.amount for item in self.items), self.gst_rate)

    @property
    def subtotal(self):
        return self.totals.subtotal

    @property
    def gst_amount(self):
        return self.totals.gst_amount

    @property
    def total_amount(self):
        return self.totals.total_amount

    def to_dict(self) -> dict:
        totals = self.totals
        return {
            "bill_number": self.bill_number,
            "customer_name": self.customer_name,
            "customer_address": self.customer_address,
            "customer_gstn": self.customer_gstn,
            "date": self.date.isoformat() if self.date else None,
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "items": [item.to_dict() for item in self.items],
            "subtotal": totals.subtotal,
            "gst_rate": self.gst_rate,
            "gst_amount": totals.gst_amount,
            "total_amount": totals.total_amount,
            "status": self.status.value,
        }
