"""
Shopfloor Records — Field Coercion and Validation Helpers
===========================================================
The presentation layer hands over raw input-control values
(strings or numbers). This module turns them into typed draft
values and provides the reusable checks engine policies build on.

Coercion happens on every field edit; validation happens on submit.
"""

from __future__ import annotations

import dataclasses
import math
import re
from datetime import date, datetime
from enum import Enum
from typing import Any, Iterable, List, Optional, Sequence

from core.records.errors import ValidationError
from core.records.rejection import FieldRejection, ReasonCode

_INT_PATTERN = re.compile(r"^[+-]?\d+$")


# ══════════════════════════════════════════════════════════════
# COERCION
# ══════════════════════════════════════════════════════════════

def _reject(entity: str, field: str, code: str, message: str, policy_name: str):
    raise ValidationError(
        entity,
        [FieldRejection(field=field, code=code, message=message, policy_name=policy_name)],
    )


def coerce_number(value: Any, *, entity: str, field: str):
    """
    int/float pass through; strings become int when integral, else float.
    A blank string (or None) reads as None, like an emptied number input.
    NaN and infinities are not numbers here.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        _reject(entity, field, ReasonCode.NOT_A_NUMBER,
                f"{field} must be a number.", "field_must_be_numeric_policy")
    number = None
    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if _INT_PATTERN.match(text):
            number = int(text)
        else:
            try:
                number = float(text)
            except ValueError:
                pass
    if number is None or not is_finite_number(number):
        _reject(entity, field, ReasonCode.NOT_A_NUMBER,
                f"{field} must be a finite number, got {value!r}.",
                "field_must_be_numeric_policy")
    return number


def is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def coerce_date(value: Any, *, entity: str, field: str) -> Optional[date]:
    """ISO 'YYYY-MM-DD' strings and date/datetime values; blank reads as None."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
    _reject(entity, field, ReasonCode.INVALID_DATE,
            f"{field} must be an ISO date (YYYY-MM-DD), got {value!r}.",
            "field_must_be_date_policy")


def assign_field(draft: Any, field: str, value: Any, *, entity: str) -> None:
    """
    Set one editable field on a draft, coercing by the draft's declared
    NUMERIC_FIELDS / DATE_FIELDS / ENUM_FIELDS. A blank numeric input
    becomes 0 unless the field is in REQUIRED_NUMERIC_FIELDS, where it
    stays None for the required-field check. Derived values are
    properties, not fields, so they are rejected here.
    """
    editable = {f.name for f in dataclasses.fields(draft)} - set(
        getattr(draft, "READ_ONLY_FIELDS", ())
    )
    if field not in editable:
        _reject(entity, field, ReasonCode.UNKNOWN_FIELD,
                f"'{field}' is not an editable {entity} field.",
                "field_must_be_editable_policy")

    if field in getattr(draft, "NUMERIC_FIELDS", ()):
        value = coerce_number(value, entity=entity, field=field)
        if value is None and field not in getattr(draft, "REQUIRED_NUMERIC_FIELDS", ()):
            value = 0
    elif field in getattr(draft, "DATE_FIELDS", ()):
        value = coerce_date(value, entity=entity, field=field)
    elif field in getattr(draft, "ENUM_FIELDS", {}):
        enum_type = draft.ENUM_FIELDS[field]
        if not isinstance(value, enum_type):
            try:
                value = enum_type(value)
            except ValueError:
                _reject(entity, field, ReasonCode.INVALID_CHOICE,
                        f"{field} must be one of "
                        f"{[member.value for member in enum_type]}.",
                        "field_must_be_valid_choice_policy")
    elif value is not None and not isinstance(value, str):
        value = str(value)
    setattr(draft, field, value)


# ══════════════════════════════════════════════════════════════
# CHECKS (used by engine policies)
# ══════════════════════════════════════════════════════════════

def missing_fields(
    obj: Any, fields: Sequence[str], *, policy_name: str, prefix: str = "",
) -> List[FieldRejection]:
    rejections = []
    for name in fields:
        value = getattr(obj, name, None)
        if value is None or (isinstance(value, str) and not value.strip()):
            rejections.append(FieldRejection(
                field=f"{prefix}{name}",
                code=ReasonCode.REQUIRED_FIELD_MISSING,
                message=f"{name} is required.",
                policy_name=policy_name,
            ))
    return rejections


def negative_fields(
    obj: Any, fields: Sequence[str], *, policy_name: str, prefix: str = "",
) -> List[FieldRejection]:
    rejections = []
    for name in fields:
        value = getattr(obj, name, None)
        if value is None:
            continue
        if not is_finite_number(value):
            rejections.append(FieldRejection(
                field=f"{prefix}{name}",
                code=ReasonCode.NOT_A_NUMBER,
                message=f"{name} must be a finite number.",
                policy_name=policy_name,
            ))
        elif value < 0:
            rejections.append(FieldRejection(
                field=f"{prefix}{name}",
                code=ReasonCode.NEGATIVE_VALUE,
                message=f"{name} must be >= 0, got {value}.",
                policy_name=policy_name,
            ))
    return rejections


def invalid_choice(
    obj: Any, field: str, choices: Iterable, *, policy_name: str, prefix: str = "",
) -> List[FieldRejection]:
    value = getattr(obj, field, None)
    if value is None or (isinstance(value, str) and not value.strip()):
        # Missing values are reported by the required-field policy.
        return []
    allowed = tuple(choices)
    key = value.value if isinstance(value, Enum) else value
    if key in allowed:
        return []
    return [FieldRejection(
        field=f"{prefix}{field}",
        code=ReasonCode.INVALID_CHOICE,
        message=f"{field} '{key}' is not one of {list(allowed)}.",
        policy_name=policy_name,
    )]


def raise_if_rejected(entity: str, rejections: Iterable[FieldRejection]) -> None:
    collected = list(rejections)
    if collected:
        raise ValidationError(entity, collected)
