"""
Shopfloor Billing — Line Item Editor
======================================
Add / remove / edit line items on an open BillDraft.

RULES (NON-NEGOTIABLE):
- A bill draft keeps at least one line item. Removing the last one
  raises InvariantViolation and leaves the list unchanged.
- Each new item gets a fresh identity; identities are never reused.
- An item's amount is derived (quantity x rate) and cannot be set.
- Bill totals are properties of the draft, so every edit here is
  reflected in them immediately.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Mapping, Sequence, Tuple

from core.records.errors import InvariantViolation, ValidationError
from core.records.identity import IdProvider
from core.records.rejection import FieldRejection, ReasonCode
from core.records.validation import assign_field
from engines.billing.models import BillDraft, BillLineItemDraft

logger = logging.getLogger("shopfloor.billing")

LINE_ITEM_ENTITY = "BillLineItem"


class LineItemEditor:
    def __init__(self, draft: BillDraft, *, id_provider: IdProvider, default_unit: str):
        self._draft = draft
        self._id_provider = id_provider
        self._default_unit = default_unit

    @property
    def items(self) -> Tuple[BillLineItemDraft, ...]:
        return tuple(self._draft.items)

    def new_item(self, *, quantity=0, rate=0) -> BillLineItemDraft:
        """A detached item with a fresh identity and the default unit."""
        return BillLineItemDraft(
            item_id=self._id_provider.new_id(),
            name="",
            quantity=quantity,
            unit=self._default_unit,
            rate=rate,
        )

    def add_item(self) -> BillLineItemDraft:
        item = self.new_item()
        self._draft.items.append(item)
        logger.debug(f"line item '{item.item_id}' added to bill draft")
        return item

    def remove_item(self, index: int) -> BillLineItemDraft:
        if len(self._draft.items) <= 1:
            raise InvariantViolation(
                "BILL_HAS_LINE_ITEMS",
                "a bill must keep at least one line item.",
            )
        self._check_index(index)
        removed = self._draft.items.pop(index)
        logger.debug(f"line item '{removed.item_id}' removed from bill draft")
        return removed

    def update_item(self, index: int, field: str, value: Any) -> BillLineItemDraft:
        self._check_index(index)
        item = self._draft.items[index]
        assign_field(item, field, value, entity=LINE_ITEM_ENTITY)
        return item

    def replace_items(self, rows: Sequence[Mapping[str, Any]]) -> Tuple[BillLineItemDraft, ...]:
        """
        Swap in a whole item list at once (request/response callers).

        Rows carrying a known item_id keep it; other rows get a fresh
        identity. The draft is only touched when every row coerces.
        """
        if isinstance(rows, (str, bytes)) or not isinstance(rows, Sequence):
            raise ValidationError(LINE_ITEM_ENTITY, [FieldRejection(
                field="items",
                code=ReasonCode.NOT_A_LIST,
                message="items must be a list of line items.",
                policy_name="bill_items_must_be_list_policy",
            )])
        if not rows:
            raise ValidationError(LINE_ITEM_ENTITY, [FieldRejection(
                field="items",
                code=ReasonCode.NO_LINE_ITEMS,
                message="a bill needs at least one line item.",
                policy_name="bill_has_line_items_policy",
            )])

        known = {item.item_id for item in self._draft.items}
        replacement = []
        for index, row in enumerate(rows):
            if not isinstance(row, Mapping):
                raise ValidationError(LINE_ITEM_ENTITY, [FieldRejection(
                    field=f"items[{index}]",
                    code=ReasonCode.NOT_A_LIST,
                    message="each line item must be an object.",
                    policy_name="bill_items_must_be_list_policy",
                )])
            item_id = row.get("item_id")
            if item_id not in known:
                item_id = self._id_provider.new_id()
            item = BillLineItemDraft(item_id=item_id, unit=self._default_unit)
            for field, value in row.items():
                if field in ("item_id", "amount"):
                    continue
                try:
                    assign_field(item, field, value, entity=LINE_ITEM_ENTITY)
                except ValidationError as exc:
                    raise ValidationError(LINE_ITEM_ENTITY, [
                        dataclasses.replace(r, field=f"items[{index}].{r.field}")
                        for r in exc.rejections
                    ]) from exc
            replacement.append(item)

        self._draft.items[:] = replacement
        return tuple(replacement)

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError("line item index must be an int.")
        if not 0 <= index < len(self._draft.items):
            raise IndexError(
                f"line item index {index} out of range "
                f"(bill has {len(self._draft.items)} items)."
            )
