"""
Shopfloor Billing — Bill Numbering
====================================
Bill numbers look like "INV-123456": the configured prefix plus the
last six digits of the current epoch milliseconds.

Doctrine:
- Time is passed in through a Clock, never read here directly.
- A number is generated once, when the create form opens. Edits
  keep whatever number the bill already has.
- Numbers are not checked for uniqueness. Two forms opened within
  the same millisecond would share one.
"""

from __future__ import annotations

from core.time.clock import Clock, epoch_millis

BILL_NUMBER_DIGITS = 6


def generate_bill_number(clock: Clock, prefix: str = "INV") -> str:
    if not prefix or not prefix.strip():
        raise ValueError("bill number prefix must be non-empty.")
    stamp = str(epoch_millis(clock))[-BILL_NUMBER_DIGITS:]
    return f"{prefix}-{stamp}"
