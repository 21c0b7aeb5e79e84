"""
Shopfloor Derived-Field Calculator
====================================
Every dependent value on a record is computed here, from its
declared inputs, and nowhere else.

RULES:
- Pure and deterministic: no clock, no store, no mutation.
- Arithmetic stays in the numeric type of the inputs. There is
  no rounding pass; presentation formats, the core never rounds.
- Tax is a flat percentage: subtotal * rate / 100.

Drafts and records expose these through read-only properties, so a
derived value is recomputed on every read and can never go stale.
"""

from __future__ import annotations

from typing import Iterable, NamedTuple


def as_amount(value):
    """A blank form input (None) counts as 0 in a live draft preview."""
    return 0 if value is None else value


# ══════════════════════════════════════════════════════════════
# BILLING
# ══════════════════════════════════════════════════════════════

def line_amount(quantity, rate):
    """Amount of one bill line: quantity x rate."""
    return quantity * rate


def bill_subtotal(amounts: Iterable):
    """Sum of line amounts. An empty iterable sums to 0."""
    return sum(amounts, 0)


def tax_amount(subtotal, rate):
    """Flat percentage tax. rate=0 yields exactly 0."""
    return subtotal * rate / 100


def bill_total(subtotal, tax):
    return subtotal + tax


class BillTotals(NamedTuple):
    subtotal: object
    gst_amount: object
    total_amount: object


def bill_totals(amounts: Iterable, gst_rate) -> BillTotals:
    """Subtotal, GST and grand total from the line amounts in one pass."""
    subtotal = bill_subtotal(amounts)
    gst = tax_amount(subtotal, gst_rate)
    return BillTotals(
        subtotal=subtotal,
        gst_amount=gst,
        total_amount=bill_total(subtotal, gst),
    )


# ══════════════════════════════════════════════════════════════
# WORKERS
# ══════════════════════════════════════════════════════════════

def salary_earned(days_worked, daily_wage):
    return days_worked * daily_wage


def salary_remaining(earned, salary_paid):
    """Can go negative when a worker was overpaid; that is reported, not clamped."""
    return earned - salary_paid


# ══════════════════════════════════════════════════════════════
# RAW MATERIALS
# ══════════════════════════════════════════════════════════════

def material_remaining(total_amount, amount_paid):
    return total_amount - amount_paid


# ══════════════════════════════════════════════════════════════
# STOCK
# ══════════════════════════════════════════════════════════════

def stock_value(quantity, price):
    return quantity * price


def is_low_stock(quantity, min_stock) -> bool:
    """At or below the reorder threshold counts as low."""
    return quantity <= min_stock
