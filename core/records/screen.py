"""
Shopfloor Records — Screen Service Base
=========================================
Wires one entity's store, lifecycle controller and filter spec
together. Every engine's screen service derives from this.

The store is created here and held exclusively: nothing outside
the screen service gets a writable handle to it.

One-shot create/update (the HTTP path) runs on its own throwaway
controller, so concurrent requests never share a draft and never
disturb the interactive form session. Every store write happens
under the service's write lock.
"""

from __future__ import annotations

import threading
from typing import Any, Generic, Mapping, Optional, Tuple, TypeVar

from core.records.filtering import FilterSpec, filter_records
from core.records.identity import IdProvider
from core.records.lifecycle import RecordLifecycleController, RecordSchema
from core.records.store import EntityStore

R = TypeVar("R")
D = TypeVar("D")


class ScreenService(Generic[R, D]):
    def __init__(
        self,
        *,
        schema: RecordSchema[R, D],
        filter_spec: FilterSpec,
        id_provider: Optional[IdProvider] = None,
    ):
        self._schema = schema
        self._filter_spec = filter_spec
        self._store: EntityStore[R] = EntityStore(schema.entity, id_provider)
        self._controller: RecordLifecycleController[R, D] = RecordLifecycleController(
            store=self._store,
            schema=schema,
        )
        self._write_lock = threading.Lock()

    @property
    def entity(self) -> str:
        return self._schema.entity

    @property
    def controller(self) -> RecordLifecycleController[R, D]:
        return self._controller

    @property
    def filter_spec(self) -> FilterSpec:
        return self._filter_spec

    # ── reads ─────────────────────────────────────────────────

    def get(self, record_id: str) -> R:
        return self._store.get(record_id)

    def all_records(self) -> Tuple[R, ...]:
        return self._store.list()

    def records(self, criteria: Optional[Mapping[str, Any]] = None) -> Tuple[R, ...]:
        """Filtered view, re-evaluated on every call."""
        return filter_records(self._store.list(), criteria, self._filter_spec)

    # ── form session (delegates) ──────────────────────────────

    def open_create(self) -> D:
        return self._controller.open_create()

    def open_edit(self, record_id: str) -> D:
        return self._controller.open_edit(record_id)

    def set_field(self, field: str, value: Any) -> D:
        return self._controller.set_field(field, value)

    def submit(self) -> R:
        with self._write_lock:
            record = self._controller.submit()
        self._on_committed(record)
        return record

    def cancel(self) -> None:
        self._controller.cancel()

    # ── one-shot submits (request/response callers) ───────────

    def create(self, values: Mapping[str, Any]) -> R:
        """Open a create form, apply values, submit. Nothing is kept on failure."""
        controller = self._one_shot_controller()
        with self._write_lock:
            controller.open_create()
            record = self._fill_and_submit(controller, values)
        self._on_committed(record)
        return record

    def update(self, record_id: str, values: Mapping[str, Any]) -> R:
        """Open an edit form for record_id, apply values, submit."""
        controller = self._one_shot_controller()
        with self._write_lock:
            controller.open_edit(record_id)
            record = self._fill_and_submit(controller, values)
        self._on_committed(record)
        return record

    def seed(self, records) -> Tuple[R, ...]:
        with self._write_lock:
            return self._store.seed(records)

    def _on_committed(self, record: R) -> None:
        """Hook for screens that react to a commit (logging, alerts)."""

    def _one_shot_controller(self) -> RecordLifecycleController[R, D]:
        return RecordLifecycleController(store=self._store, schema=self._schema)

    def _apply_values(
        self, controller: RecordLifecycleController[R, D], values: Mapping[str, Any],
    ) -> None:
        for field, value in values.items():
            controller.set_field(field, value)

    def _fill_and_submit(
        self, controller: RecordLifecycleController[R, D], values: Mapping[str, Any],
    ) -> R:
        self._apply_values(controller, values)
        return controller.submit()
