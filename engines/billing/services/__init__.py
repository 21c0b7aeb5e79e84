"""
Shopfloor Billing Engine — Bills Screen Service
=================================================
Create/edit customer bills, edit their line items, search them,
and summarise paid vs pending amounts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from core.config.rules import ConfigStore
from core.records.filtering import FilterSpec
from core.records.identity import IdProvider, UuidIdProvider
from core.records.lifecycle import RecordLifecycleController
from core.records.screen import ScreenService
from core.time.clock import Clock, today
from engines.billing.editor import LineItemEditor
from engines.billing.models import (
    Bill,
    BillDraft,
    BillLineItemDraft,
    BillStatus,
)
from engines.billing.numbering import generate_bill_number
from engines.billing.policies import validate_bill_draft

logger = logging.getLogger("shopfloor.billing")

BILL_FILTER_SPEC = FilterSpec(
    entity="Bill",
    text_fields=("bill_number", "customer_name"),
    categorical_fields=("status",),
)


class BillSchema:
    entity = "Bill"

    def __init__(
        self,
        *,
        clock: Clock,
        config_store: ConfigStore,
        item_id_provider: IdProvider,
    ):
        self._clock = clock
        self._config_store = config_store
        self._item_ids = item_id_provider

    def new_draft(self) -> BillDraft:
        config = self._config_store.get_config()
        return BillDraft(
            bill_number=generate_bill_number(self._clock, config.bill_number_prefix),
            date=today(self._clock),
            gst_rate=config.default_gst_rate,
            status=BillStatus.DRAFT,
            items=[BillLineItemDraft(
                item_id=self._item_ids.new_id(),
                quantity=1,
                unit=config.default_bill_unit,
            )],
        )

    def draft_from_record(self, record: Bill) -> BillDraft:
        return BillDraft.from_record(record)

    def validate(self, draft: BillDraft) -> None:
        validate_bill_draft(draft, self._config_store.get_config())

    def build_record(self, draft: BillDraft, *, record_id: Optional[str]) -> Bill:
        return Bill(
            bill_number=draft.bill_number.strip(),
            customer_name=draft.customer_name.strip(),
            customer_address=draft.customer_address.strip(),
            customer_gstn=draft.customer_gstn.strip(),
            date=draft.date,
            due_date=draft.due_date,
            items=tuple(item.freeze() for item in draft.items),
            gst_rate=draft.gst_rate,
            status=draft.status,
            record_id=record_id,
        )


@dataclass(frozen=True)
class BillingSummary:
    total_amount: float
    paid_amount: float
    pending_amount: float
    count: int

    def to_dict(self) -> dict:
        return {
            "total_amount": self.total_amount,
            "paid_amount": self.paid_amount,
            "pending_amount": self.pending_amount,
            "count": self.count,
        }


class BillingService(ScreenService[Bill, BillDraft]):
    def __init__(
        self,
        *,
        clock: Clock,
        config_store: ConfigStore,
        id_provider: Optional[IdProvider] = None,
        item_id_provider: Optional[IdProvider] = None,
    ):
        self._item_ids = item_id_provider or UuidIdProvider()
        self._config_store = config_store
        super().__init__(
            schema=BillSchema(
                clock=clock,
                config_store=config_store,
                item_id_provider=self._item_ids,
            ),
            filter_spec=BILL_FILTER_SPEC,
            id_provider=id_provider,
        )

    # ── line items on the open draft ──────────────────────────

    def editor(self) -> LineItemEditor:
        """Editor bound to the currently open draft (InvariantViolation if none)."""
        return self._editor_for(self.controller.draft)

    def _editor_for(self, draft: BillDraft) -> LineItemEditor:
        return LineItemEditor(
            draft,
            id_provider=self._item_ids,
            default_unit=self._config_store.get_config().default_bill_unit,
        )

    def add_item(self) -> BillLineItemDraft:
        return self.editor().add_item()

    def remove_item(self, index: int) -> BillLineItemDraft:
        return self.editor().remove_item(index)

    def update_item(self, index: int, field: str, value: Any) -> BillLineItemDraft:
        return self.editor().update_item(index, field, value)

    # ── reads ─────────────────────────────────────────────────

    def blank_draft(self) -> BillDraft:
        """What a freshly opened create form would show. Opens nothing."""
        return self._schema.new_draft()

    def export(self, record_id: str) -> dict:
        return self.get(record_id).to_dict()

    def summary(self, criteria: Optional[Mapping[str, Any]] = None) -> BillingSummary:
        """total_amount follows the filtered view; paid/pending span every bill."""
        visible = self.records(criteria)
        bills = self.all_records()
        return BillingSummary(
            total_amount=sum((b.total_amount for b in visible), 0),
            paid_amount=sum(
                (b.total_amount for b in bills if b.status == BillStatus.PAID), 0
            ),
            pending_amount=sum(
                (b.total_amount for b in bills if b.status == BillStatus.SENT), 0
            ),
            count=len(visible),
        )

    def set_status(self, record_id: str, status: Any) -> Bill:
        return self.update(record_id, {"status": status})

    def _apply_values(
        self,
        controller: RecordLifecycleController[Bill, BillDraft],
        values: Mapping[str, Any],
    ) -> None:
        remaining = dict(values)
        if "items" in remaining:
            self._editor_for(controller.draft).replace_items(remaining.pop("items"))
        super()._apply_values(controller, remaining)

    def _on_committed(self, record: Bill) -> None:
        logger.info(
            f"Bill {record.bill_number} saved: {record.status.value}, "
            f"total {record.total_amount}"
        )
