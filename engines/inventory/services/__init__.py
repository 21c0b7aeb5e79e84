"""
Shopfloor Inventory Engine — Stock Screen Service
===================================================
Add/edit stock items, search them, and flag low stock.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from core.config.rules import ConfigStore
from core.records.filtering import FilterSpec
from core.records.identity import IdProvider
from core.records.screen import ScreenService
from core.time.clock import Clock, today
from engines.inventory.models import StockItem, StockItemDraft
from engines.inventory.policies import validate_stock_item_draft

logger = logging.getLogger("shopfloor.inventory")

STOCK_FILTER_SPEC = FilterSpec(
    entity="StockItem",
    text_fields=("name", "category"),
    categorical_fields=("category",),
)


class StockItemSchema:
    entity = "StockItem"

    def __init__(self, *, clock: Clock, config_store: ConfigStore):
        self._clock = clock
        self._config_store = config_store

    def new_draft(self) -> StockItemDraft:
        return StockItemDraft()

    def draft_from_record(self, record: StockItem) -> StockItemDraft:
        return StockItemDraft.from_record(record)

    def validate(self, draft: StockItemDraft) -> None:
        validate_stock_item_draft(draft, self._config_store.get_config())

    def build_record(self, draft: StockItemDraft, *, record_id: Optional[str]) -> StockItem:
        # lastUpdated moves on every submit, whether or not a field changed.
        return StockItem(
            name=draft.name.strip(),
            category=draft.category,
            quantity=draft.quantity,
            unit=draft.unit,
            price=draft.price,
            min_stock=draft.min_stock,
            last_updated=today(self._clock),
            record_id=record_id,
        )


@dataclass(frozen=True)
class StockSummary:
    item_count: int
    total_value: float
    low_stock_items: Tuple[StockItem, ...]

    @property
    def low_stock_count(self) -> int:
        return len(self.low_stock_items)

    def to_dict(self) -> dict:
        return {
            "item_count": self.item_count,
            "total_value": self.total_value,
            "low_stock_count": self.low_stock_count,
            "low_stock_items": [item.record_id for item in self.low_stock_items],
        }


class StockService(ScreenService[StockItem, StockItemDraft]):
    def __init__(
        self,
        *,
        clock: Clock,
        config_store: ConfigStore,
        id_provider: Optional[IdProvider] = None,
    ):
        super().__init__(
            schema=StockItemSchema(clock=clock, config_store=config_store),
            filter_spec=STOCK_FILTER_SPEC,
            id_provider=id_provider,
        )

    def low_stock(self) -> Tuple[StockItem, ...]:
        return tuple(item for item in self.all_records() if item.low_stock)

    def summary(self, criteria: Optional[Mapping[str, Any]] = None) -> StockSummary:
        items = self.records(criteria)
        return StockSummary(
            item_count=len(items),
            total_value=sum((item.total_value for item in items), 0),
            low_stock_items=tuple(item for item in items if item.low_stock),
        )

    def _on_committed(self, record: StockItem) -> None:
        if record.low_stock:
            logger.warning(
                f"StockItem '{record.record_id}' ({record.name}) is low: "
                f"{record.quantity} {record.unit} <= min {record.min_stock}"
            )
