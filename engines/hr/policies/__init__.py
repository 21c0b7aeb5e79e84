"""
Shopfloor HR Engine — Policies
================================
"""

from __future__ import annotations

from typing import List

from core.records.rejection import FieldRejection
from core.records.validation import missing_fields, negative_fields, raise_if_rejected
from engines.hr.models import AttendanceEntry, WorkerDraft

WORKER_REQUIRED_FIELDS = ("name", "position", "daily_wage", "phone_number", "join_date")
WORKER_NON_NEGATIVE_FIELDS = ("daily_wage", "total_days_worked", "salary_paid", "advance")
ATTENDANCE_NON_NEGATIVE_FIELDS = ("days_worked", "salary_paid", "advance")


def worker_required_fields_policy(draft: WorkerDraft) -> List[FieldRejection]:
    return missing_fields(
        draft, WORKER_REQUIRED_FIELDS,
        policy_name="worker_required_fields_policy",
    )


def worker_amounts_non_negative_policy(draft: WorkerDraft) -> List[FieldRejection]:
    return negative_fields(
        draft, WORKER_NON_NEGATIVE_FIELDS,
        policy_name="worker_amounts_non_negative_policy",
    )


def attendance_required_fields_policy(entry: AttendanceEntry) -> List[FieldRejection]:
    return missing_fields(
        entry, ("worker_id", "days_worked"),
        policy_name="attendance_required_fields_policy",
    )


def attendance_amounts_non_negative_policy(entry: AttendanceEntry) -> List[FieldRejection]:
    return negative_fields(
        entry, ATTENDANCE_NON_NEGATIVE_FIELDS,
        policy_name="attendance_amounts_non_negative_policy",
    )


def validate_worker_draft(draft: WorkerDraft) -> None:
    raise_if_rejected(
        "Worker",
        worker_required_fields_policy(draft)
        + worker_amounts_non_negative_policy(draft),
    )


def validate_attendance_entry(entry: AttendanceEntry) -> None:
    raise_if_rejected(
        "Attendance",
        attendance_required_fields_policy(entry)
        + attendance_amounts_non_negative_policy(entry),
    )
