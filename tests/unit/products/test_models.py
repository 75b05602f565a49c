"""Unit tests for the Product model.

Covers:
- Valid creation and defaults.
- Price > 0 validation (application + DB constraint).
- Availability toggle.
- Default ordering and __str__.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestProductCreation:
    def test_create_product_with_valid_data(self):
        p = Product.objects.create(name="Widget", price=Decimal("19.99"))
        assert isinstance(p.pk, int)
        assert p.name == "Widget"
        assert p.price == Decimal("19.99")

    def test_availability_defaults_to_true(self):
        p = Product.objects.create(name="Widget", price=Decimal("19.99"))
        p.refresh_from_db()
        assert p.availability is True

    def test_table_name(self):
        assert Product._meta.db_table == "products"


class TestProductPrice:
    @pytest.mark.parametrize("price", [Decimal("0"), Decimal("-1.50")])
    def test_full_clean_rejects_non_positive_price(self, price):
        product = Product(name="Widget", price=price)
        with pytest.raises(ValidationError) as exc_info:
            product.full_clean()
        assert "price" in exc_info.value.message_dict

    def test_full_clean_rejects_empty_name(self):
        product = Product(name="", price=Decimal("1.00"))
        with pytest.raises(ValidationError) as exc_info:
            product.full_clean()
        assert "name" in exc_info.value.message_dict

    def test_database_rejects_non_positive_price(self):
        with pytest.raises(IntegrityError):
            with transaction.atomic():
                Product.objects.create(name="Widget", price=Decimal("0.00"))


class TestToggleAvailability:
    def test_toggle_flips_and_returns_new_value(self):
        product = Product(name="Widget", price=Decimal("1.00"), availability=True)
        assert product.toggle_availability() is False
        assert product.availability is False
        assert product.toggle_availability() is True

    def test_toggle_does_not_persist(self):
        product = Product.objects.create(name="Widget", price=Decimal("1.00"))
        product.toggle_availability()
        product.refresh_from_db()
        assert product.availability is True


class TestProductDisplay:
    def test_default_ordering_is_newest_first(self):
        first = Product.objects.create(name="First", price=Decimal("1.00"))
        second = Product.objects.create(name="Second", price=Decimal("1.00"))
        assert list(Product.objects.all()) == [second, first]

    def test_str(self):
        product = Product.objects.create(name="Widget", price=Decimal("1.00"))
        assert str(product) == f"#{product.pk} - Widget"
