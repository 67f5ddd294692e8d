"""Unit tests for the Product model."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError

from modules.products.models import Product, ProductStatus, normalize_code

pytestmark = pytest.mark.unit


def _make_product(**overrides) -> Product:
    defaults = {
        "code": "PRD-001",
        "name": "Widget",
        "price": Decimal("10.00"),
        "stock": 5,
        "status": ProductStatus.ACTIVE,
    }
    defaults.update(overrides)
    return Product.objects.create(**defaults)


class TestNormalizeCode:
    def test_strips_and_uppercases(self):
        assert normalize_code("  prd-01 ") == "PRD-01"


class TestCreation:
    def test_defaults(self):
        product = Product.objects.create(code="A1", name="Thing", price=Decimal("1.00"))
        assert product.status == ProductStatus.ACTIVE
        assert product.stock == 0
        assert product.description == ""
        assert product.is_active is True

    def test_code_normalised_on_save(self):
        product = _make_product(code="prd-abc")
        assert product.code == "PRD-ABC"

    def test_save_does_not_log(self, caplog):
        with caplog.at_level(logging.INFO):
            _make_product()
        records = [r for r in caplog.records if r.name.startswith("modules.products")]
        assert records == []

    def test_code_unique_case_insensitively(self):
        _make_product(code="PRD-001")
        with pytest.raises(IntegrityError):
            _make_product(code="prd-001")

    def test_zero_price_allowed(self):
        product = _make_product(price=Decimal("0.00"))
        product.full_clean()
        assert product.price == Decimal("0.00")

    def test_negative_price_rejected_by_validation(self):
        product = Product(code="NEG", name="Neg", price=Decimal("-1.00"))
        with pytest.raises(ValidationError) as excinfo:
            product.full_clean()
        assert "price" in excinfo.value.message_dict

    def test_negative_price_rejected_by_database(self):
        with pytest.raises(IntegrityError):
            _make_product(price=Decimal("-0.01"))

    def test_str(self):
        assert str(_make_product()) == "PRD-001 - Widget"


class TestAvailability:
    @pytest.mark.parametrize(
        "status,expected",
        [
            (ProductStatus.ACTIVE, True),
            (ProductStatus.PROMOTIONAL, True),
            (ProductStatus.INACTIVE, False),
            (ProductStatus.DISCONTINUED, False),
        ],
    )
    def test_by_status(self, status, expected):
        assert _make_product(status=status).is_available_for_sale is expected

    def test_out_of_stock(self):
        assert _make_product(stock=0).is_available_for_sale is False

    def test_deactivated(self):
        product = _make_product()
        product.deactivate()
        assert product.is_available_for_sale is False

    def test_status_independent_of_activation(self):
        product = _make_product(status=ProductStatus.PROMOTIONAL)
        product.deactivate()
        product.refresh_from_db()
        assert product.status == ProductStatus.PROMOTIONAL
