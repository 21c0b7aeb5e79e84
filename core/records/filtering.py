"""
Shopfloor Records — Filter/Search Engine
==========================================
Pure predicate evaluation over a record collection.

    filter_records(records, criteria, spec) -> tuple

- Never mutates or reorders the input.
- "search" is a case-insensitive substring match against ANY of the
  FilterSpec's text fields.
- Every other criterion is an exact match on a categorical field.
- All active criteria are AND-combined.
- An empty or absent criterion matches everything.

Nothing here caches: callers re-run it on every criteria change and
every store change, so the visible subset can never go stale.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Tuple

from core.records.errors import ValidationError
from core.records.rejection import FieldRejection, ReasonCode

logger = logging.getLogger("shopfloor.records")

SEARCH_KEY = "search"


@dataclass(frozen=True)
class FilterSpec:
    """Which fields a screen searches and which it filters exactly."""

    entity: str
    text_fields: Tuple[str, ...]
    categorical_fields: Tuple[str, ...] = ()

    def __post_init__(self):
        if not self.text_fields:
            raise ValueError("text_fields must name at least one field.")
        if SEARCH_KEY in self.categorical_fields:
            raise ValueError(f"'{SEARCH_KEY}' is reserved for free-text search.")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _categorical_key(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def active_criteria(criteria: Optional[Mapping[str, Any]], spec: FilterSpec) -> dict:
    """
    Drop blank criteria and reject keys the screen does not filter on.
    """
    active = {}
    unknown = []
    for key, value in (criteria or {}).items():
        if key != SEARCH_KEY and key not in spec.categorical_fields:
            unknown.append(key)
            continue
        if _is_blank(value):
            continue
        active[key] = value
    if unknown:
        raise ValidationError(
            spec.entity,
            [
                FieldRejection(
                    field=key,
                    code=ReasonCode.UNKNOWN_FILTER,
                    message=f"{spec.entity} cannot be filtered by '{key}'.",
                    policy_name="filter_keys_must_be_declared_policy",
                )
                for key in unknown
            ],
        )
    return active


def matches(record: Any, criteria: Mapping[str, Any], spec: FilterSpec) -> bool:
    """Evaluate already-normalised criteria against one record."""
    term = criteria.get(SEARCH_KEY)
    if term is not None:
        needle = str(term).strip().lower()
        haystack = (
            str(getattr(record, name, "") or "").lower()
            for name in spec.text_fields
        )
        if not any(needle in text for text in haystack):
            return False
    for name, expected in criteria.items():
        if name == SEARCH_KEY:
            continue
        if _categorical_key(getattr(record, name, None)) != _categorical_key(expected):
            return False
    return True


def filter_records(
    records: Iterable[Any],
    criteria: Optional[Mapping[str, Any]],
    spec: FilterSpec,
) -> Tuple[Any, ...]:
    active = active_criteria(criteria, spec)
    collection = tuple(records)
    if not active:
        return collection
    visible = tuple(record for record in collection if matches(record, active, spec))
    logger.debug(
        f"{spec.entity} filter {sorted(active)} kept {len(visible)}/{len(collection)}"
    )
    return visible
