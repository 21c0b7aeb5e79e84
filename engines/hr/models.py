"""
Shopfloor HR Engine — Worker and Attendance Records
=====================================================
Wage arithmetic lives in the calculator; these types only hold
the primary inputs and expose the derived figures as properties:

    total_salary_earned = total_days_worked * daily_wage
    remaining_salary    = total_salary_earned - salary_paid
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import ClassVar, Optional, Tuple

from core.calculations.derived import as_amount, salary_earned, salary_remaining


def _iso(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class Worker:
    name: str
    position: str
    daily_wage: float
    phone_number: str
    join_date: date
    total_days_worked: float = 0
    salary_paid: float = 0
    advance: float = 0
    record_id: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.join_date, date):
            raise ValueError("join_date must be a date.")

    @property
    def total_salary_earned(self):
        return salary_earned(self.total_days_worked, self.daily_wage)

    @property
    def remaining_salary(self):
        return salary_remaining(self.total_salary_earned, self.salary_paid)

    def to_dict(self) -> dict:
        return {
            "record_id": self.record_id,
            "name": self.name,
            "position": self.position,
            "daily_wage": self.daily_wage,
            "phone_number": self.phone_number,
            "join_date": self.join_date.isoformat(),
            "total_days_worked": self.total_days_worked,
            "total_salary_earned": self.total_salary_earned,
            "salary_paid": self.salary_paid,
            "remaining_salary": self.remaining_salary,
            "advance": self.advance,
        }


@dataclass
class WorkerDraft:
    NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = (
        "daily_wage", "total_days_worked", "salary_paid", "advance",
    )
    REQUIRED_NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ("daily_wage",)
    DATE_FIELDS: ClassVar[Tuple[str, ...]] = ("join_date",)

    name: str = ""
    position: str = ""
    daily_wage: float = 0
    phone_number: str = ""
    join_date: Optional[date] = None
    total_days_worked: float = 0
    salary_paid: float = 0
    advance: float = 0

    @classmethod
    def from_record(cls, record: Worker) -> WorkerDraft:
        return cls(
            name=record.name,
            position=record.position,
            daily_wage=record.daily_wage,
            phone_number=record.phone_number,
            join_date=record.join_date,
            total_days_worked=record.total_days_worked,
            salary_paid=record.salary_paid,
            advance=record.advance,
        )

    @property
    def total_salary_earned(self):
        return salary_earned(self.total_days_worked, as_amount(self.daily_wage))

    @property
    def remaining_salary(self):
        return salary_remaining(self.total_salary_earned, self.salary_paid)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "position": self.position,
            "daily_wage": self.daily_wage,
            "phone_number": self.phone_number,
            "join_date": _iso(self.join_date),
            "total_days_worked": self.total_days_worked,
            "total_salary_earned": self.total_salary_earned,
            "salary_paid": self.salary_paid,
            "remaining_salary": self.remaining_salary,
            "advance": self.advance,
        }


@dataclass
class AttendanceEntry:
    """
    Attendance form: replaces a worker's day count, payout and advance.

    Everything else on the worker (name, wage, phone...) is left as is.
    """
    NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ("days_worked", "salary_paid", "advance")
    REQUIRED_NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ("days_worked",)

    worker_id: str = ""
    days_worked: float = 0
    salary_paid: float = 0
    advance: float = 0

    def preview(self, worker: Worker) -> dict:
        """Earned/remaining the form shows before submit."""
        earned = salary_earned(as_amount(self.days_worked), worker.daily_wage)
        return {
            "worker_id": worker.record_id,
            "daily_wage": worker.daily_wage,
            "days_worked": self.days_worked,
            "total_salary_earned": earned,
            "salary_paid": self.salary_paid,
            "remaining_salary": salary_remaining(earned, self.salary_paid),
            "advance": self.advance,
        }

    def to_patch(self) -> dict:
        return {
            "total_days_worked": self.days_worked,
            "salary_paid": self.salary_paid,
            "advance": self.advance,
        }
