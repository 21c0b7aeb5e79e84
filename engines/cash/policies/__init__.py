"""Shopfloor Cash Engine - policies."""

from __future__ import annotations

from typing import List

from core.config.rules import DashboardConfig
from core.records.rejection import FieldRejection
from core.records.validation import (
    invalid_choice,
    missing_fields,
    negative_fields,
    raise_if_rejected,
)
from engines.cash.models import ExpenseDraft

EXPENSE_REQUIRED_FIELDS = ("date", "category", "description", "payment_method")


def expense_required_fields_policy(draft: ExpenseDraft) -> List[FieldRejection]:
    return missing_fields(
        draft, EXPENSE_REQUIRED_FIELDS,
        policy_name="expense_required_fields_policy",
    )


def expense_amount_non_negative_policy(draft: ExpenseDraft) -> List[FieldRejection]:
    return negative_fields(
        draft, ("amount",),
        policy_name="expense_amount_non_negative_policy",
    )


def expense_choices_policy(
    draft: ExpenseDraft, config: DashboardConfig,
) -> List[FieldRejection]:
    return (
        invalid_choice(draft, "category", config.expense_categories,
                       policy_name="expense_choices_policy")
        + invalid_choice(draft, "payment_method", config.payment_methods,
                         policy_name="expense_choices_policy")
    )


def validate_expense_draft(draft: ExpenseDraft, config: DashboardConfig) -> None:
    raise_if_rejected(
        "Expense",
        expense_required_fields_policy(draft)
        + expense_amount_non_negative_policy(draft)
        + expense_choices_policy(draft, config),
    )
