"""
Shopfloor Cash Engine — Expenses Screen Service
=================================================
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from core.config.rules import ConfigStore
from core.records.filtering import FilterSpec
from core.records.identity import IdProvider
from core.records.screen import ScreenService
from core.time.clock import Clock, today
from engines.cash.models import Expense, ExpenseDraft
from engines.cash.policies import validate_expense_draft

logger = logging.getLogger("shopfloor.cash")

EXPENSE_FILTER_SPEC = FilterSpec(
    entity="Expense",
    text_fields=("description", "category"),
    categorical_fields=("date", "category", "payment_method"),
)

DEFAULT_PAYMENT_METHOD = "Cash"


class ExpenseSchema:
    entity = "Expense"

    def __init__(self, *, clock: Clock, config_store: ConfigStore):
        self._clock = clock
        self._config_store = config_store

    def new_draft(self) -> ExpenseDraft:
        methods = self._config_store.get_config().payment_methods
        return ExpenseDraft(
            date=today(self._clock),
            payment_method=(
                DEFAULT_PAYMENT_METHOD if DEFAULT_PAYMENT_METHOD in methods else ""
            ),
        )

    def draft_from_record(self, record: Expense) -> ExpenseDraft:
        return ExpenseDraft.from_record(record)

    def validate(self, draft: ExpenseDraft) -> None:
        validate_expense_draft(draft, self._config_store.get_config())

    def build_record(self, draft: ExpenseDraft, *, record_id: Optional[str]) -> Expense:
        bill_number = (draft.bill_number or "").strip() or None
        return Expense(
            date=draft.date,
            category=draft.category,
            description=draft.description.strip(),
            amount=draft.amount,
            payment_method=draft.payment_method,
            bill_number=bill_number,
            record_id=record_id,
        )


@dataclass(frozen=True)
class ExpenseSummary:
    total: float
    todays_total: float
    count: int

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "todays_total": self.todays_total,
            "count": self.count,
        }


class ExpenseService(ScreenService[Expense, ExpenseDraft]):
    def __init__(
        self,
        *,
        clock: Clock,
        config_store: ConfigStore,
        id_provider: Optional[IdProvider] = None,
    ):
        super().__init__(
            schema=ExpenseSchema(clock=clock, config_store=config_store),
            filter_spec=EXPENSE_FILTER_SPEC,
            id_provider=id_provider,
        )
        self._clock = clock

    def summary(self, criteria: Optional[Mapping[str, Any]] = None) -> ExpenseSummary:
        """total follows the filtered view; todays_total always spans every expense."""
        visible = self.records(criteria)
        current_day = today(self._clock)
        return ExpenseSummary(
            total=sum((e.amount for e in visible), 0),
            todays_total=sum(
                (e.amount for e in self.all_records() if e.date == current_day), 0
            ),
            count=len(visible),
        )

    def _on_committed(self, record: Expense) -> None:
        logger.info(
            f"Expense '{record.record_id}' recorded: {record.amount} "
            f"({record.category}, {record.payment_method})"
        )
