"""Shopfloor Billing Engine - policies."""

from __future__ import annotations

from typing import List

from core.config.rules import DashboardConfig
from core.records.rejection import FieldRejection, ReasonCode
from core.records.validation import (
    invalid_choice,
    missing_fields,
    negative_fields,
    raise_if_rejected,
)
from engines.billing.models import BillDraft

BILL_REQUIRED_FIELDS = (
    "bill_number",
    "customer_name",
    "customer_address",
    "customer_gstn",
    "date",
    "due_date",
    "status",
)
LINE_ITEM_REQUIRED_FIELDS = ("name", "quantity", "unit", "rate")


def bill_required_fields_policy(draft: BillDraft) -> List[FieldRejection]:
    return missing_fields(
        draft, BILL_REQUIRED_FIELDS,
        policy_name="bill_required_fields_policy",
    )


def bill_gst_rate_policy(draft: BillDraft, config: DashboardConfig) -> List[FieldRejection]:
    rejections = negative_fields(
        draft, ("gst_rate",), policy_name="bill_gst_rate_policy",
    )
    if rejections:
        return rejections
    if draft.gst_rate not in config.gst_rates:
        return [FieldRejection(
            field="gst_rate",
            code=ReasonCode.INVALID_CHOICE,
            message=(
                f"gst_rate {draft.gst_rate} is not a configured GST slab "
                f"{list(config.gst_rates)}."
            ),
            policy_name="bill_gst_rate_policy",
        )]
    return []


def bill_has_line_items_policy(draft: BillDraft) -> List[FieldRejection]:
    if draft.items:
        return []
    return [FieldRejection(
        field="items",
        code=ReasonCode.NO_LINE_ITEMS,
        message="a bill needs at least one line item.",
        policy_name="bill_has_line_items_policy",
    )]


def bill_line_items_policy(draft: BillDraft, config: DashboardConfig) -> List[FieldRejection]:
    rejections: List[FieldRejection] = []
    for index, item in enumerate(draft.items):
        prefix = f"items[{index}]."
        rejections += missing_fields(
            item, LINE_ITEM_REQUIRED_FIELDS,
            policy_name="bill_line_items_policy", prefix=prefix,
        )
        rejections += negative_fields(
            item, ("quantity", "rate"),
            policy_name="bill_line_items_policy", prefix=prefix,
        )
        rejections += invalid_choice(
            item, "unit", config.bill_units,
            policy_name="bill_line_items_policy", prefix=prefix,
        )
    return rejections


def validate_bill_draft(draft: BillDraft, config: DashboardConfig) -> None:
    raise_if_rejected(
        "Bill",
        bill_required_fields_policy(draft)
        + bill_gst_rate_policy(draft, config)
        + bill_has_line_items_policy(draft)
        + bill_line_items_policy(draft, config),
    )
