"""
Shopfloor Records — Record Lifecycle Controller
=================================================
One controller per screen. It owns the in-progress Draft and decides,
on submit, whether the draft creates a record or replaces one.

States:
    IDLE      No form open.
    CREATING  Draft has no identity; submit appends a new record.
    EDITING   Draft is bound to an existing identity; submit replaces
              that record and keeps its identity.

Doctrine:
- A draft is a value copy. Editing it never touches the store.
- The store only ever sees validated, fully derived records.
- Cancel discards the draft unconditionally.
- A failed submit leaves both the store and the draft untouched.
"""

from __future__ import annotations

import dataclasses
import logging
from enum import Enum
from typing import Any, Generic, Optional, Protocol, TypeVar

from core.records.errors import InvariantViolation, ValidationError
from core.records.store import EntityStore
from core.records.validation import assign_field

logger = logging.getLogger("shopfloor.lifecycle")

R = TypeVar("R")
D = TypeVar("D")


class LifecycleMode(Enum):
    IDLE = "IDLE"
    CREATING = "CREATING"
    EDITING = "EDITING"


class RecordSchema(Protocol[R, D]):
    """
    Per-entity knowledge the controller needs.

    build_record receives the bound identity when editing and None
    when creating; the store assigns identities, never the schema.
    """

    entity: str

    def new_draft(self) -> D:
        ...

    def draft_from_record(self, record: R) -> D:
        ...

    def validate(self, draft: D) -> None:
        ...

    def build_record(self, draft: D, *, record_id: Optional[str]) -> R:
        ...


class RecordLifecycleController(Generic[R, D]):
    def __init__(self, *, store: EntityStore[R], schema: RecordSchema[R, D]):
        self._store = store
        self._schema = schema
        self._mode = LifecycleMode.IDLE
        self._draft: Optional[D] = None
        self._bound_id: Optional[str] = None

    @property
    def mode(self) -> LifecycleMode:
        return self._mode

    @property
    def draft(self) -> D:
        if self._draft is None:
            raise InvariantViolation(
                "NO_OPEN_DRAFT",
                f"no {self._schema.entity} form is open.",
            )
        return self._draft

    @property
    def bound_id(self) -> Optional[str]:
        return self._bound_id

    # ── transitions ───────────────────────────────────────────

    def open_create(self) -> D:
        self._draft = self._schema.new_draft()
        self._bound_id = None
        self._mode = LifecycleMode.CREATING
        logger.debug(f"{self._schema.entity} create form opened")
        return self._draft

    def open_edit(self, record_id: str) -> D:
        record = self._store.get(record_id)
        self._draft = self._schema.draft_from_record(record)
        self._bound_id = record_id
        self._mode = LifecycleMode.EDITING
        logger.debug(f"{self._schema.entity} '{record_id}' edit form opened")
        return self._draft

    def set_field(self, field: str, value: Any) -> D:
        """Apply one form edit to the open draft."""
        draft = self.draft
        assign_field(draft, field, value, entity=self._schema.entity)
        return draft

    def submit(self) -> R:
        draft = self.draft
        try:
            self._schema.validate(draft)
        except ValidationError as exc:
            logger.warning(f"{self._schema.entity} submit rejected: {list(exc.fields)}")
            raise

        if self._mode == LifecycleMode.EDITING:
            record = self._schema.build_record(draft, record_id=self._bound_id)
            patch = {
                f.name: getattr(record, f.name)
                for f in dataclasses.fields(record)
                if f.name != "record_id"
            }
            committed = self._store.update(self._bound_id, patch)
        else:
            record = self._schema.build_record(draft, record_id=None)
            committed = self._store.create(record)

        logger.info(
            f"{self._schema.entity} '{committed.record_id}' committed "
            f"from {self._mode.value.lower()} form"
        )
        self._reset()
        return committed

    def cancel(self) -> None:
        if self._mode != LifecycleMode.IDLE:
            logger.debug(f"{self._schema.entity} form cancelled")
        self._reset()

    def _reset(self) -> None:
        self._draft = None
        self._bound_id = None
        self._mode = LifecycleMode.IDLE
