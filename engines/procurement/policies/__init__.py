"""
Shopfloor Procurement Engine — Policies
=========================================
Payment against a purchase may never exceed the purchase total.
"""

from __future__ import annotations

from typing import List

from core.config.rules import DashboardConfig
from core.records.rejection import FieldRejection, ReasonCode
from core.records.validation import (
    invalid_choice,
    is_finite_number,
    missing_fields,
    negative_fields,
    raise_if_rejected,
)
from engines.procurement.models import RawMaterialDraft

MATERIAL_REQUIRED_FIELDS = (
    "name", "supplier", "purchase_date", "quantity", "total_amount", "category", "unit",
)
MATERIAL_NON_NEGATIVE_FIELDS = ("quantity", "total_amount", "amount_paid")


def material_required_fields_policy(draft: RawMaterialDraft) -> List[FieldRejection]:
    return missing_fields(
        draft, MATERIAL_REQUIRED_FIELDS,
        policy_name="material_required_fields_policy",
    )


def material_amounts_non_negative_policy(draft: RawMaterialDraft) -> List[FieldRejection]:
    return negative_fields(
        draft, MATERIAL_NON_NEGATIVE_FIELDS,
        policy_name="material_amounts_non_negative_policy",
    )


def amount_paid_within_total_policy(draft: RawMaterialDraft) -> List[FieldRejection]:
    # Blank or non-finite amounts are reported by the other policies.
    if not (is_finite_number(draft.amount_paid) and is_finite_number(draft.total_amount)):
        return []
    if draft.amount_paid > draft.total_amount:
        return [FieldRejection(
            field="amount_paid",
            code=ReasonCode.AMOUNT_PAID_EXCEEDS_TOTAL,
            message=(
                f"amount_paid {draft.amount_paid} exceeds "
                f"total_amount {draft.total_amount}."
            ),
            policy_name="amount_paid_within_total_policy",
        )]
    return []


def material_choices_policy(
    draft: RawMaterialDraft, config: DashboardConfig,
) -> List[FieldRejection]:
    return (
        invalid_choice(draft, "category", config.material_categories,
                       policy_name="material_choices_policy")
        + invalid_choice(draft, "unit", config.material_units,
                         policy_name="material_choices_policy")
    )


def validate_material_draft(draft: RawMaterialDraft, config: DashboardConfig) -> None:
    raise_if_rejected(
        "RawMaterial",
        material_required_fields_policy(draft)
        + material_amounts_non_negative_policy(draft)
        + amount_paid_within_total_policy(draft)
        + material_choices_policy(draft, config),
    )
