"""
Shopfloor HR Engine — Workers Screen Service
==============================================
Two flows share one worker store:

- the worker form (full create/edit through the lifecycle controller)
- the attendance form, which only replaces days worked, salary paid
  and advance on an existing worker
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from core.records.filtering import FilterSpec
from core.records.identity import IdProvider
from core.records.screen import ScreenService
from core.records.validation import assign_field
from engines.hr.models import AttendanceEntry, Worker, WorkerDraft
from engines.hr.policies import validate_attendance_entry, validate_worker_draft

logger = logging.getLogger("shopfloor.hr")

WORKER_FILTER_SPEC = FilterSpec(
    entity="Worker",
    text_fields=("name", "position"),
    categorical_fields=("position",),
)


class WorkerSchema:
    entity = "Worker"

    def new_draft(self) -> WorkerDraft:
        return WorkerDraft()

    def draft_from_record(self, record: Worker) -> WorkerDraft:
        return WorkerDraft.from_record(record)

    def validate(self, draft: WorkerDraft) -> None:
        validate_worker_draft(draft)

    def build_record(self, draft: WorkerDraft, *, record_id: Optional[str]) -> Worker:
        return Worker(
            name=draft.name.strip(),
            position=draft.position.strip(),
            daily_wage=draft.daily_wage,
            phone_number=draft.phone_number.strip(),
            join_date=draft.join_date,
            total_days_worked=draft.total_days_worked,
            salary_paid=draft.salary_paid,
            advance=draft.advance,
            record_id=record_id,
        )


@dataclass(frozen=True)
class WorkforceSummary:
    headcount: int
    total_salary_earned: float
    total_salary_paid: float
    total_remaining: float
    total_advance: float

    def to_dict(self) -> dict:
        return {
            "headcount": self.headcount,
            "total_salary_earned": self.total_salary_earned,
            "total_salary_paid": self.total_salary_paid,
            "total_remaining": self.total_remaining,
            "total_advance": self.total_advance,
        }


class WorkerService(ScreenService[Worker, WorkerDraft]):
    def __init__(self, *, id_provider: Optional[IdProvider] = None):
        super().__init__(
            schema=WorkerSchema(),
            filter_spec=WORKER_FILTER_SPEC,
            id_provider=id_provider,
        )

    # ── attendance ────────────────────────────────────────────

    def attendance_entry(self, values: Mapping[str, Any]) -> AttendanceEntry:
        """Build a coerced attendance form from raw input values."""
        entry = AttendanceEntry()
        for field, value in values.items():
            assign_field(entry, field, value, entity="Attendance")
        return entry

    def preview_attendance(self, values: Mapping[str, Any]) -> dict:
        entry = self.attendance_entry(values)
        return entry.preview(self.get(entry.worker_id))

    def record_attendance(self, values: Mapping[str, Any]) -> Worker:
        entry = self.attendance_entry(values)
        validate_attendance_entry(entry)
        with self._write_lock:
            updated = self._store.update(entry.worker_id, entry.to_patch())
        logger.info(
            f"Attendance for Worker '{updated.record_id}': "
            f"{updated.total_days_worked} days, remaining {updated.remaining_salary}"
        )
        return updated

    # ── summary ───────────────────────────────────────────────

    def summary(self, criteria: Optional[Mapping[str, Any]] = None) -> WorkforceSummary:
        workers = self.records(criteria)
        return WorkforceSummary(
            headcount=len(workers),
            total_salary_earned=sum((w.total_salary_earned for w in workers), 0),
            total_salary_paid=sum((w.salary_paid for w in workers), 0),
            total_remaining=sum((w.remaining_salary for w in workers), 0),
            total_advance=sum((w.advance for w in workers), 0),
        )
