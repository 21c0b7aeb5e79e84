"""
Shopfloor Inventory Engine — Policies
=======================================
Submit-time validation for stock item drafts.
Each policy returns the FieldRejections it found (empty when clean).
"""

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
from engines.inventory.models import StockItemDraft

STOCK_ITEM_REQUIRED_FIELDS = ("name", "category", "quantity", "unit", "price", "min_stock")
STOCK_ITEM_NON_NEGATIVE_FIELDS = ("quantity", "price", "min_stock")


def stock_item_required_fields_policy(draft: StockItemDraft) -> List[FieldRejection]:
    return missing_fields(
        draft,
        STOCK_ITEM_REQUIRED_FIELDS,
        policy_name="stock_item_required_fields_policy",
    )


def stock_item_amounts_non_negative_policy(draft: StockItemDraft) -> List[FieldRejection]:
    return negative_fields(
        draft,
        STOCK_ITEM_NON_NEGATIVE_FIELDS,
        policy_name="stock_item_amounts_non_negative_policy",
    )


def stock_item_choices_policy(
    draft: StockItemDraft, config: DashboardConfig,
) -> List[FieldRejection]:
    return (
        invalid_choice(draft, "category", config.stock_categories,
                       policy_name="stock_item_choices_policy")
        + invalid_choice(draft, "unit", config.stock_units,
                         policy_name="stock_item_choices_policy")
    )


def validate_stock_item_draft(draft: StockItemDraft, config: DashboardConfig) -> None:
    raise_if_rejected(
        "StockItem",
        stock_item_required_fields_policy(draft)
        + stock_item_amounts_non_negative_policy(draft)
        + stock_item_choices_policy(draft, config),
    )
