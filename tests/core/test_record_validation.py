"""
Tests for core.records.validation — coercion and reusable checks.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import ClassVar, Dict, Optional, Tuple

import pytest

from core.records.errors import ValidationError
from core.records.validation import (
    assign_field,
    coerce_date,
    coerce_number,
    invalid_choice,
    missing_fields,
    negative_fields,
    raise_if_rejected,
)


class Size(Enum):
    SMALL = "S"
    LARGE = "L"


@dataclass
class BoxDraft:
    NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ("weight", "padding")
    REQUIRED_NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ("weight",)
    DATE_FIELDS: ClassVar[Tuple[str, ...]] = ("packed_on",)
    ENUM_FIELDS: ClassVar[Dict[str, type]] = {"size": Size}
    READ_ONLY_FIELDS: ClassVar[Tuple[str, ...]] = ("serial",)

    label: str = ""
    weight: float = 0
    padding: float = 0
    packed_on: Optional[date] = None
    size: Size = Size.SMALL
    serial: str = "fixed"

    @property
    def double_weight(self):
        return self.weight * 2


class TestCoerceNumber:
    def test_integral_string_becomes_int(self):
        value = coerce_number("42", entity="Box", field="weight")
        assert value == 42 and isinstance(value, int)

    def test_decimal_string_becomes_float(self):
        assert coerce_number("2.5", entity="Box", field="weight") == 2.5

    def test_blank_reads_as_none(self):
        assert coerce_number("", entity="Box", field="weight") is None
        assert coerce_number(None, entity="Box", field="weight") is None

    def test_numbers_pass_through(self):
        assert coerce_number(7.25, entity="Box", field="weight") == 7.25

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError) as exc:
            coerce_number("abc", entity="Box", field="weight")
        assert exc.value.fields == ("weight",)
        assert exc.value.rejections[0].code == "NOT_A_NUMBER"

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            coerce_number(True, entity="Box", field="weight")

    @pytest.mark.parametrize(
        "value", ["nan", "NaN", "inf", "-inf", "1e400", float("nan"), float("inf")],
    )
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValidationError) as exc:
            coerce_number(value, entity="Box", field="weight")
        assert exc.value.fields == ("weight",)
        assert exc.value.rejections[0].code == "NOT_A_NUMBER"

    def test_huge_integral_string_stays_int(self):
        assert coerce_number("1" * 400, entity="Box", field="weight") == int("1" * 400)


class TestCoerceDate:
    def test_iso_string(self):
        assert coerce_date("2024-12-26", entity="Box", field="d") == date(2024, 12, 26)

    def test_datetime_truncates(self):
        assert coerce_date(datetime(2024, 1, 2, 3, 4), entity="Box", field="d") == date(2024, 1, 2)

    def test_blank_is_none(self):
        assert coerce_date("", entity="Box", field="d") is None

    def test_bad_date_rejected(self):
        with pytest.raises(ValidationError) as exc:
            coerce_date("26/12/2024", entity="Box", field="d")
        assert exc.value.rejections[0].code == "INVALID_DATE"


class TestAssignField:
    def test_coerces_by_declaration(self):
        draft = BoxDraft()
        assign_field(draft, "weight", "3", entity="Box")
        assign_field(draft, "packed_on", "2024-12-25", entity="Box")
        assign_field(draft, "size", "L", entity="Box")
        assert draft.weight == 3
        assert draft.packed_on == date(2024, 12, 25)
        assert draft.size is Size.LARGE

    def test_text_stays_text(self):
        draft = BoxDraft()
        assign_field(draft, "label", 123, entity="Box")
        assert draft.label == "123"

    def test_invalid_enum_rejected(self):
        draft = BoxDraft()
        with pytest.raises(ValidationError) as exc:
            assign_field(draft, "size", "XL", entity="Box")
        assert exc.value.rejections[0].code == "INVALID_CHOICE"
        assert draft.size is Size.SMALL

    def test_derived_property_not_settable(self):
        draft = BoxDraft()
        with pytest.raises(ValidationError) as exc:
            assign_field(draft, "double_weight", 10, entity="Box")
        assert exc.value.rejections[0].code == "UNKNOWN_FIELD"

    def test_read_only_field_not_settable(self):
        draft = BoxDraft()
        with pytest.raises(ValidationError):
            assign_field(draft, "serial", "other", entity="Box")
        assert draft.serial == "fixed"

    def test_failed_coercion_leaves_value(self):
        draft = BoxDraft(weight=5)
        with pytest.raises(ValidationError):
            assign_field(draft, "weight", "heavy", entity="Box")
        assert draft.weight == 5

    def test_blank_optional_number_reads_as_zero(self):
        draft = BoxDraft(padding=4)
        assign_field(draft, "padding", "  ", entity="Box")
        assert draft.padding == 0

    def test_blank_required_number_stays_missing(self):
        draft = BoxDraft(weight=5)
        assign_field(draft, "weight", "", entity="Box")
        assert draft.weight is None
        rejections = missing_fields(draft, ("weight",), policy_name="p")
        assert rejections[0].code == "REQUIRED_FIELD_MISSING"

    def test_nan_not_assigned(self):
        draft = BoxDraft(weight=5)
        with pytest.raises(ValidationError):
            assign_field(draft, "weight", float("nan"), entity="Box")
        assert draft.weight == 5


class TestChecks:
    def test_missing_fields_with_prefix(self):
        draft = BoxDraft(label="  ")
        rejections = missing_fields(
            draft, ("label", "packed_on"), policy_name="p", prefix="items[0].",
        )
        assert [r.field for r in rejections] == ["items[0].label", "items[0].packed_on"]

    def test_negative_fields(self):
        rejections = negative_fields(BoxDraft(weight=-1), ("weight",), policy_name="p")
        assert rejections[0].code == "NEGATIVE_VALUE"
        assert negative_fields(BoxDraft(weight=0), ("weight",), policy_name="p") == []

    def test_non_finite_is_not_a_number(self):
        for value in (float("nan"), float("inf"), float("-inf")):
            rejections = negative_fields(BoxDraft(weight=value), ("weight",), policy_name="p")
            assert [r.code for r in rejections] == ["NOT_A_NUMBER"]

    def test_invalid_choice_skips_blank(self):
        assert invalid_choice(BoxDraft(), "label", ("a",), policy_name="p") == []
        rejections = invalid_choice(BoxDraft(label="b"), "label", ("a",), policy_name="p")
        assert rejections[0].code == "INVALID_CHOICE"

    def test_raise_if_rejected_collects_everything(self):
        draft = BoxDraft(weight=-1)
        with pytest.raises(ValidationError) as exc:
            raise_if_rejected(
                "Box",
                missing_fields(draft, ("label",), policy_name="p")
                + negative_fields(draft, ("weight",), policy_name="p"),
            )
        assert exc.value.fields == ("label", "weight")

    def test_nothing_to_raise(self):
        raise_if_rejected("Box", [])
