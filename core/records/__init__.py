"""
Shopfloor Core Records — Public API
=====================================
Generic record management shared by every screen:

    store       — ordered in-memory collection per entity
    identity    — opaque id generation
    filtering   — pure search/filter views
    lifecycle   — create-vs-edit draft sessions
    validation  — field coercion and reusable checks
    errors      — RecordNotFound / InvariantViolation / ValidationError
"""

from core.records.errors import (
    InvariantViolation,
    RecordError,
    RecordNotFound,
    ValidationError,
)
from core.records.filtering import FilterSpec, filter_records
from core.records.identity import IdProvider, SequentialIdProvider, UuidIdProvider
from core.records.lifecycle import (
    LifecycleMode,
    RecordLifecycleController,
    RecordSchema,
)
from core.records.rejection import FieldRejection, ReasonCode
from core.records.store import EntityStore

__all__ = [
    "EntityStore",
    "FieldRejection",
    "FilterSpec",
    "IdProvider",
    "InvariantViolation",
    "LifecycleMode",
    "ReasonCode",
    "RecordError",
    "RecordLifecycleController",
    "RecordNotFound",
    "RecordSchema",
    "SequentialIdProvider",
    "UuidIdProvider",
    "ValidationError",
    "filter_records",
]
