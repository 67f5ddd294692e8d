"""Tests for the ``seed_data`` management command."""

from __future__ import annotations

import random
from io import StringIO

import pytest
from django.core.management import call_command

from modules.customers.models import Customer
from modules.products.models import Product

pytestmark = pytest.mark.unit


def _seed(*args) -> str:
    out = StringIO()
    call_command("seed_data", *args, stdout=out)
    return out.getvalue()


class TestSeedData:
    def test_populates_registry(self):
        output = _seed()
        assert "customers=6" in output
        assert "products=6" in output
        assert Customer.objects.count() == 6
        assert Product.objects.count() == 6

    def test_seeds_inactive_records(self):
        _seed()
        assert Customer.objects.inactive().count() == 2
        assert Product.objects.inactive().count() == 1

    def test_cpfs_are_stored_normalised(self):
        _seed()
        assert Customer.objects.filter(cpf="52998224725").exists()

    def test_leaves_global_random_state_alone(self):
        random.seed(7)
        before = random.getstate()
        _seed()
        assert random.getstate() == before

    def test_stock_is_reproducible(self):
        _seed()
        first = dict(Product.objects.values_list("code", "stock"))
        _seed("--clear")
        assert dict(Product.objects.values_list("code", "stock")) == first

    def test_is_idempotent(self):
        _seed()
        output = _seed()
        assert "customers=0" in output
        assert Customer.objects.count() == 6

    def test_clear_removes_existing_records(self):
        _seed()
        Customer.objects.create(cpf="00000000191", name="Extra")
        _seed("--clear")
        assert not Customer.objects.filter(cpf="00000000191").exists()
        assert Customer.objects.count() == 6
