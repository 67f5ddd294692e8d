"""Unit tests for BaseModel and ActivatableModel.

The abstract classes are exercised through ``Customer``, the simplest
concrete model that inherits both.
"""

from __future__ import annotations

import uuid

import pytest
from freezegun import freeze_time

from modules.core.models import ActivatableManager, ActivatableQuerySet
from modules.customers.models import Customer

pytestmark = pytest.mark.unit


def _make(cpf: str = "11144477735", **overrides) -> Customer:
    return Customer.objects.create(cpf=cpf, name=overrides.pop("name", "Ana"), **overrides)


# ---------------------------------------------------------------------------
# BaseModel tests
# ---------------------------------------------------------------------------


class TestBaseModel:
    """Tests for UUIDv7 PK and timestamp behaviour."""

    def test_id_is_uuid_version_7(self):
        obj = _make()
        assert isinstance(obj.id, uuid.UUID)
        assert obj.id.version == 7

    def test_ids_are_unique_and_time_ordered(self):
        a = _make(cpf="11144477735")
        b = _make(cpf="52998224725")
        assert a.id != b.id
        assert str(a.id) < str(b.id)

    def test_id_is_not_editable(self):
        assert Customer._meta.get_field("id").editable is False

    def test_timestamps_set_on_create(self):
        obj = _make()
        assert obj.created_at is not None
        assert obj.updated_at is not None

    def test_save_with_update_fields_refreshes_updated_at(self):
        with freeze_time("2025-01-01 10:00:00") as frozen:
            obj = _make()
            original_updated = obj.updated_at
            original_created = obj.created_at
            frozen.tick(60)
            obj.name = "Ana Maria"
            obj.save(update_fields=["name"])
        obj.refresh_from_db()
        assert obj.updated_at > original_updated
        assert obj.created_at == original_created


# ---------------------------------------------------------------------------
# ActivatableModel tests
# ---------------------------------------------------------------------------


class TestActivatableModel:
    def test_new_instance_is_active(self):
        assert _make().is_active is True

    def test_deactivate_persists_flag(self):
        obj = _make()
        assert obj.deactivate() is True
        obj.refresh_from_db()
        assert obj.is_active is False

    def test_deactivate_is_idempotent(self):
        obj = _make(is_active=False)
        assert obj.deactivate() is False
        obj.refresh_from_db()
        assert obj.is_active is False

    def test_activate_restores_flag(self):
        obj = _make(is_active=False)
        assert obj.activate() is True
        obj.refresh_from_db()
        assert obj.is_active is True

    def test_activate_on_active_is_noop(self):
        with freeze_time("2025-01-01 10:00:00") as frozen:
            obj = _make()
            before = obj.updated_at
            frozen.tick(60)
            assert obj.activate() is False
        obj.refresh_from_db()
        assert obj.updated_at == before

    def test_deactivate_only_writes_activation_columns(self):
        obj = _make(name="Original")
        Customer.objects.filter(pk=obj.pk).update(name="Changed elsewhere")
        obj.deactivate()
        obj.refresh_from_db()
        assert obj.name == "Changed elsewhere"
        assert obj.is_active is False

    def test_deactivated_row_still_exists(self):
        obj = _make()
        obj.deactivate()
        assert Customer.objects.filter(pk=obj.pk).exists()

    def test_delete_removes_row(self):
        obj = _make()
        pk = obj.pk
        obj.delete()
        assert not Customer.objects.filter(pk=pk).exists()


class TestActivatableQuerySet:
    def test_manager_and_queryset_types(self):
        assert isinstance(Customer.objects, ActivatableManager)
        assert isinstance(Customer.objects.all(), ActivatableQuerySet)

    def test_active_and_inactive_partition(self):
        on = _make(cpf="11144477735")
        off = _make(cpf="52998224725", is_active=False)

        assert list(Customer.objects.active()) == [on]
        assert list(Customer.objects.inactive()) == [off]
        assert Customer.objects.filter(pk=off.pk).active().count() == 0
