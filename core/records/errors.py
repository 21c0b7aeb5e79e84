"""
Shopfloor Records — Errors
============================
Error types for stores, drafts and submits.

All of them are local to the operation that raised them: the
store and every draft are left exactly as they were.
"""

from __future__ import annotations

from typing import Iterable, Tuple


class RecordError(Exception):
    """Base error for record operations."""
    pass


class RecordNotFound(RecordError):
    """No record with this identity exists in the entity's store."""

    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        super().__init__(
            f"{entity} '{record_id}' not found."
        )


class InvariantViolation(RecordError):
    """An operation would break a structural rule of a record or store."""

    def __init__(self, invariant: str, detail: str):
        self.invariant = invariant
        self.detail = detail
        super().__init__(f"{invariant}: {detail}")


class ValidationError(RecordError):
    """
    A submitted draft failed validation.

    Carries every FieldRejection found in one pass, so the form
    can flag all offending fields at once.
    """

    def __init__(self, entity: str, rejections: Iterable):
        self.entity = entity
        self.rejections: Tuple = tuple(rejections)
        if not self.rejections:
            raise ValueError("ValidationError requires at least one rejection.")
        summary = "; ".join(
            f"{r.field}: {r.message}" for r in self.rejections
        )
        super().__init__(f"{entity} rejected: {summary}")

    @property
    def fields(self) -> Tuple[str, ...]:
        """Offending field names, in the order they were found, without repeats."""
        seen = []
        for rejection in self.rejections:
            if rejection.field not in seen:
                seen.append(rejection.field)
        return tuple(seen)

    def to_dict(self) -> dict:
        return {
            "entity": self.entity,
            "fields": list(self.fields),
            "rejections": [r.to_dict() for r in self.rejections],
        }
