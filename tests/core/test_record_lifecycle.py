"""
Tests for core.records.lifecycle — create-vs-edit draft sessions.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

import pytest

from core.records.errors import InvariantViolation, RecordNotFound, ValidationError
from core.records.identity import SequentialIdProvider
from core.records.lifecycle import LifecycleMode, RecordLifecycleController
from core.records.rejection import FieldRejection
from core.records.store import EntityStore


@dataclass(frozen=True)
class Crate:
    label: str
    count: int
    record_id: Optional[str] = None


@dataclass
class CrateDraft:
    NUMERIC_FIELDS: ClassVar[Tuple[str, ...]] = ("count",)

    label: str = ""
    count: int = 0


class CrateSchema:
    entity = "Crate"

    def new_draft(self):
        return CrateDraft()

    def draft_from_record(self, record):
        return CrateDraft(label=record.label, count=record.count)

    def validate(self, draft):
        if not draft.label:
            raise ValidationError("Crate", [FieldRejection(
                field="label", code="REQUIRED_FIELD_MISSING",
                message="label is required.", policy_name="crate_label_policy",
            )])

    def build_record(self, draft, *, record_id):
        return Crate(label=draft.label, count=draft.count, record_id=record_id)


def _controller():
    store = EntityStore("Crate", SequentialIdProvider())
    return store, RecordLifecycleController(store=store, schema=CrateSchema())


class TestModes:
    def test_starts_idle_without_draft(self):
        _, controller = _controller()
        assert controller.mode == LifecycleMode.IDLE
        with pytest.raises(InvariantViolation):
            controller.draft

    def test_open_create(self):
        _, controller = _controller()
        draft = controller.open_create()
        assert controller.mode == LifecycleMode.CREATING
        assert controller.bound_id is None
        assert draft == CrateDraft()

    def test_open_edit_copies_record(self):
        store, controller = _controller()
        store.create(Crate(label="a", count=1))
        draft = controller.open_edit("1")
        assert controller.mode == LifecycleMode.EDITING
        assert controller.bound_id == "1"
        assert draft == CrateDraft(label="a", count=1)

    def test_open_edit_unknown(self):
        _, controller = _controller()
        with pytest.raises(RecordNotFound):
            controller.open_edit("404")
        assert controller.mode == LifecycleMode.IDLE


class TestSubmit:
    def test_create_appends(self):
        store, controller = _controller()
        controller.open_create()
        controller.set_field("label", "a")
        controller.set_field("count", "3")
        crate = controller.submit()
        assert crate == Crate(label="a", count=3, record_id="1")
        assert controller.mode == LifecycleMode.IDLE
        assert len(store) == 1

    def test_edit_replaces_and_keeps_identity(self):
        store, controller = _controller()
        store.create(Crate(label="a", count=1))
        store.create(Crate(label="b", count=2))
        controller.open_edit("1")
        controller.set_field("count", 10)
        crate = controller.submit()
        assert crate == Crate(label="a", count=10, record_id="1")
        assert [c.record_id for c in store.list()] == ["1", "2"]
        assert len(store) == 2

    def test_edit_without_changes_is_idempotent(self):
        store, controller = _controller()
        store.create(Crate(label="a", count=1))
        before = store.list()
        controller.open_edit("1")
        controller.submit()
        assert store.list() == before

    def test_draft_edits_never_touch_store(self):
        store, controller = _controller()
        store.create(Crate(label="a", count=1))
        controller.open_edit("1")
        controller.set_field("label", "changed")
        assert store.get("1").label == "a"

    def test_failed_submit_keeps_draft_and_store(self):
        store, controller = _controller()
        controller.open_create()
        controller.set_field("count", 4)
        with pytest.raises(ValidationError):
            controller.submit()
        assert len(store) == 0
        assert controller.mode == LifecycleMode.CREATING
        assert controller.draft.count == 4

    def test_submit_without_form(self):
        _, controller = _controller()
        with pytest.raises(InvariantViolation):
            controller.submit()


class TestCancel:
    def test_cancel_discards_draft(self):
        store, controller = _controller()
        controller.open_create()
        controller.set_field("label", "a")
        controller.cancel()
        assert controller.mode == LifecycleMode.IDLE
        assert len(store) == 0

    def test_cancel_when_idle_is_noop(self):
        _, controller = _controller()
        controller.cancel()
        assert controller.mode == LifecycleMode.IDLE
