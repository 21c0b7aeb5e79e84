"""
Shopfloor HTTP API - Contracts
==============================
Framework-agnostic request/response DTOs for the dashboard endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

SCREEN_STOCK = "stock"
SCREEN_WORKERS = "workers"
SCREEN_MATERIALS = "materials"
SCREEN_EXPENSES = "expenses"
SCREEN_BILLS = "bills"

SCREENS = frozenset({
    SCREEN_STOCK,
    SCREEN_WORKERS,
    SCREEN_MATERIALS,
    SCREEN_EXPENSES,
    SCREEN_BILLS,
})


def _check_screen(screen: str) -> None:
    if screen not in SCREENS:
        raise ValueError(f"screen must be one of {sorted(SCREENS)}.")


@dataclass(frozen=True)
class ScreenReadRequest:
    screen: str
    criteria: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        _check_screen(self.screen)
        if not isinstance(self.criteria, dict):
            raise ValueError("criteria must be dict.")


@dataclass(frozen=True)
class RecordCreateHttpRequest:
    screen: str
    values: dict[str, Any]

    def __post_init__(self):
        _check_screen(self.screen)
        if not isinstance(self.values, dict):
            raise ValueError("values must be dict.")


@dataclass(frozen=True)
class RecordUpdateHttpRequest:
    screen: str
    record_id: str
    values: dict[str, Any]

    def __post_init__(self):
        _check_screen(self.screen)
        if not self.record_id or not isinstance(self.record_id, str):
            raise ValueError("record_id must be a non-empty string.")
        if not isinstance(self.values, dict):
            raise ValueError("values must be dict.")


@dataclass(frozen=True)
class AttendanceHttpRequest:
    worker_id: str
    days_worked: Any = 0
    salary_paid: Any = 0
    advance: Any = 0

    def __post_init__(self):
        if not self.worker_id or not isinstance(self.worker_id, str):
            raise ValueError("worker_id must be a non-empty string.")

    def values(self) -> dict[str, Any]:
        return {
            "worker_id": self.worker_id,
            "days_worked": self.days_worked,
            "salary_paid": self.salary_paid,
            "advance": self.advance,
        }


@dataclass(frozen=True)
class HttpApiErrorBody:
    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": dict(self.details),
        }


@dataclass(frozen=True)
class HttpApiResponse:
    ok: bool
    data: Any = None
    error: Optional[HttpApiErrorBody] = None

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            return {"ok": True, "data": self.data}
        if self.error is None:
            raise ValueError("error must be set when ok is False.")
        return {"ok": False, "error": self.error.to_dict()}
