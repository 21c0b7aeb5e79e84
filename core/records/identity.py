"""
Shopfloor Records — Identity Providers
========================================
Record identities are opaque, unique strings. They are assigned
once, on create, and never reused or recomputed on edit.
"""

from __future__ import annotations

import itertools
import uuid
from typing import Protocol


class IdProvider(Protocol):
    def new_id(self) -> str:
        ...


class UuidIdProvider:
    def new_id(self) -> str:
        return str(uuid.uuid4())


class SequentialIdProvider:
    """
    Monotonic counter ids ("1", "2", ...), optionally prefixed.

    Deterministic, which makes it the provider of choice in tests
    and for demo seed data.
    """

    def __init__(self, prefix: str = "", start: int = 1):
        if start < 1:
            raise ValueError("start must be >= 1.")
        self._prefix = prefix
        self._counter = itertools.count(start)

    def new_id(self) -> str:
        return f"{self._prefix}{next(self._counter)}"
