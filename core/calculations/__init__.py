"""
Shopfloor Core Calculations — Public API
==========================================
Pure derived-field functions shared by every screen.
"""

from core.calculations.derived import (
    BillTotals,
    as_amount,
    bill_subtotal,
    bill_total,
    bill_totals,
    is_low_stock,
    line_amount,
    material_remaining,
    salary_earned,
    salary_remaining,
    stock_value,
    tax_amount,
)

__all__ = [
    "BillTotals",
    "as_amount",
    "bill_subtotal",
    "bill_total",
    "bill_totals",
    "is_low_stock",
    "line_amount",
    "material_remaining",
    "salary_earned",
    "salary_remaining",
    "stock_value",
    "tax_amount",
]
