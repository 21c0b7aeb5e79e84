"""
Shopfloor Procurement Engine — Raw Materials Screen Service
=============================================================
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from core.config.rules import ConfigStore
from core.records.filtering import FilterSpec
from core.records.identity import IdProvider
from core.records.screen import ScreenService
from engines.procurement.models import RawMaterial, RawMaterialDraft
from engines.procurement.policies import validate_material_draft

logger = logging.getLogger("shopfloor.procurement")

MATERIAL_FILTER_SPEC = FilterSpec(
    entity="RawMaterial",
    text_fields=("name", "supplier", "category"),
    categorical_fields=("category", "supplier"),
)


class RawMaterialSchema:
    entity = "RawMaterial"

    def __init__(self, *, config_store: ConfigStore):
        self._config_store = config_store

    def new_draft(self) -> RawMaterialDraft:
        return RawMaterialDraft()

    def draft_from_record(self, record: RawMaterial) -> RawMaterialDraft:
        return RawMaterialDraft.from_record(record)

    def validate(self, draft: RawMaterialDraft) -> None:
        validate_material_draft(draft, self._config_store.get_config())

    def build_record(self, draft: RawMaterialDraft, *, record_id: Optional[str]) -> RawMaterial:
        return RawMaterial(
            name=draft.name.strip(),
            supplier=draft.supplier.strip(),
            purchase_date=draft.purchase_date,
            quantity=draft.quantity,
            unit=draft.unit,
            total_amount=draft.total_amount,
            amount_paid=draft.amount_paid,
            category=draft.category,
            record_id=record_id,
        )


@dataclass(frozen=True)
class PurchaseSummary:
    total_purchase_value: float
    total_paid: float
    total_pending: float

    def to_dict(self) -> dict:
        return {
            "total_purchase_value": self.total_purchase_value,
            "total_paid": self.total_paid,
            "total_pending": self.total_pending,
        }


class RawMaterialService(ScreenService[RawMaterial, RawMaterialDraft]):
    def __init__(
        self,
        *,
        config_store: ConfigStore,
        id_provider: Optional[IdProvider] = None,
    ):
        super().__init__(
            schema=RawMaterialSchema(config_store=config_store),
            filter_spec=MATERIAL_FILTER_SPEC,
            id_provider=id_provider,
        )

    def summary(self) -> PurchaseSummary:
        """Spans every material, whatever the current filter."""
        materials = self.all_records()
        return PurchaseSummary(
            total_purchase_value=sum((m.total_amount for m in materials), 0),
            total_paid=sum((m.amount_paid for m in materials), 0),
            total_pending=sum((m.remaining_amount for m in materials), 0),
        )

    def _on_committed(self, record: RawMaterial) -> None:
        if not record.fully_paid:
            logger.info(
                f"RawMaterial '{record.record_id}' from {record.supplier}: "
                f"{record.remaining_amount} still owed"
            )
