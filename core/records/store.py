"""
Shopfloor Records — Entity Store
==================================
In-memory, ordered collection of committed records for ONE entity type.

RULES:
- Only fully committed records live here; drafts never do.
- Insertion order is preserved; updates replace in place.
- Identity is assigned on create and never changes afterwards.
- There is no delete for top-level records.
- Updating an unknown identity is an error, never a silent no-op.

Each screen owns exactly one store; nothing else writes to it.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Dict, Generic, Iterable, List, Optional, Tuple, TypeVar

from core.records.errors import InvariantViolation, RecordNotFound
from core.records.identity import IdProvider, UuidIdProvider

logger = logging.getLogger("shopfloor.records")

R = TypeVar("R")


class EntityStore(Generic[R]):
    """
    Ordered store of frozen record dataclasses carrying a `record_id`.

    Records are immutable; create/update hand back the new value
    that now lives in the store.
    """

    def __init__(self, entity: str, id_provider: Optional[IdProvider] = None):
        if not entity or not isinstance(entity, str):
            raise ValueError("entity must be a non-empty string.")
        self._entity = entity
        self._id_provider = id_provider or UuidIdProvider()
        # record_id → position in _records
        self._index: Dict[str, int] = {}
        self._records: List[R] = []

    @property
    def entity(self) -> str:
        return self._entity

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._index

    # ── writes ────────────────────────────────────────────────

    def create(self, record: R) -> R:
        """Assign a fresh identity and append."""
        if getattr(record, "record_id", None) is not None:
            raise InvariantViolation(
                "IDENTITY_ASSIGNED_ON_CREATE",
                f"{self._entity} record already carries id "
                f"'{record.record_id}'.",
            )
        record_id = self._id_provider.new_id()
        if record_id in self._index:
            raise InvariantViolation(
                "IDENTITY_UNIQUE",
                f"id provider reissued '{record_id}' for {self._entity}.",
            )
        created = dataclasses.replace(record, record_id=record_id)
        self._index[record_id] = len(self._records)
        self._records.append(created)
        logger.info(f"{self._entity} '{record_id}' created")
        return created

    def update(self, record_id: str, patch: dict) -> R:
        """Replace the record matching record_id with patched values."""
        position = self._index.get(record_id)
        if position is None:
            logger.warning(f"{self._entity} '{record_id}' not found on update")
            raise RecordNotFound(self._entity, record_id)
        if "record_id" in patch and patch["record_id"] != record_id:
            raise InvariantViolation(
                "IDENTITY_IMMUTABLE",
                f"{self._entity} '{record_id}' cannot be re-identified.",
            )
        current = self._records[position]
        updated = dataclasses.replace(current, **patch)
        self._records[position] = updated
        logger.info(
            f"{self._entity} '{record_id}' updated "
            f"({', '.join(sorted(patch)) or 'no fields'})"
        )
        return updated

    def seed(self, records: Iterable[R]) -> Tuple[R, ...]:
        """Bulk create, in order. Used for demo data."""
        return tuple(self.create(record) for record in records)

    # ── reads ─────────────────────────────────────────────────

    def get(self, record_id: str) -> R:
        record = self.find(record_id)
        if record is None:
            raise RecordNotFound(self._entity, record_id)
        return record

    def find(self, record_id: str) -> Optional[R]:
        position = self._index.get(record_id)
        if position is None:
            return None
        return self._records[position]

    def list(self) -> Tuple[R, ...]:
        return tuple(self._records)
