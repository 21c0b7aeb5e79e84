"""
Shopfloor Records — Rejection Model
=====================================
Structured reason for one rejected field of a submitted draft.

Every rejection must be:
- Deterministic (same draft → same rejections)
- Machine-readable (code)
- Human-readable (message)
- Traceable to the policy that produced it
"""

from __future__ import annotations

from dataclasses import dataclass


# ══════════════════════════════════════════════════════════════
# FIELD REJECTION (frozen explanation structure)
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class FieldRejection:
    """
    Fields:
        field:       Offending field ("customer_name", "items[1].rate").
        code:        Machine-readable code (see ReasonCode).
        message:     Human-readable explanation.
        policy_name: Name of the policy that rejected the field.
    """

    field: str
    code: str
    message: str
    policy_name: str

    def __post_init__(self):
        if not self.field or not isinstance(self.field, str):
            raise ValueError("field must be a non-empty string.")

        if not self.code or not isinstance(self.code, str):
            raise ValueError("code must be a non-empty string.")

        if not self.message or not isinstance(self.message, str):
            raise ValueError("message must be a non-empty string.")

        if not self.policy_name or not isinstance(self.policy_name, str):
            raise ValueError("policy_name must be a non-empty string.")

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "code": self.code,
            "message": self.message,
            "policy_name": self.policy_name,
        }


# ══════════════════════════════════════════════════════════════
# STANDARD REJECTION CODES
# ══════════════════════════════════════════════════════════════

class ReasonCode:
    """
    Known rejection codes. Extensible by engines.

    Convention: SCREAMING_SNAKE_CASE.
    """

    REQUIRED_FIELD_MISSING = "REQUIRED_FIELD_MISSING"
    NOT_A_NUMBER = "NOT_A_NUMBER"
    INVALID_DATE = "INVALID_DATE"
    UNKNOWN_FIELD = "UNKNOWN_FIELD"
    NEGATIVE_VALUE = "NEGATIVE_VALUE"
    INVALID_CHOICE = "INVALID_CHOICE"
    AMOUNT_PAID_EXCEEDS_TOTAL = "AMOUNT_PAID_EXCEEDS_TOTAL"
    NO_LINE_ITEMS = "NO_LINE_ITEMS"
    NOT_A_LIST = "NOT_A_LIST"
    UNKNOWN_FILTER = "UNKNOWN_FILTER"
