"""Unit tests for ProductService.

Covers:
- list_products / get_product: delegation and not-found.
- create_product: fields passed to the repository.
- update_product: full replacement, not found.
- toggle_availability: flip only, not found.
- delete_product: happy path, not found.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.services import ProductService

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_repo():
    repo = MagicMock()
    repo.save.side_effect = lambda p: p
    return repo


@pytest.fixture()
def service(mock_repo):
    return ProductService(repository=mock_repo)


def _product(**overrides) -> Product:
    defaults = {"id": 1, "name": "Widget", "price": Decimal("19.99"), "availability": True}
    defaults.update(overrides)
    return Product(**defaults)


# ===========================================================================
# Queries
# ===========================================================================


class TestQueries:
    def test_list_delegates(self, service, mock_repo):
        mock_repo.list_all.return_value = [_product()]
        assert len(service.list_products()) == 1
        mock_repo.list_all.assert_called_once_with()

    def test_get_product(self, service, mock_repo):
        product = _product()
        mock_repo.get_by_id.return_value = product
        assert service.get_product(1) is product
        mock_repo.get_by_id.assert_called_once_with(1)

    def test_get_missing_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound) as exc_info:
            service.get_product(42)
        assert exc_info.value.product_id == 42


# ===========================================================================
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_passes_dto_fields(self, service, mock_repo):
        created = _product(name="Mouse", price=Decimal("500.00"))
        mock_repo.create.return_value = created

        result = service.create_product(CreateProductDTO(name="Mouse", price=500))

        assert result is created
        mock_repo.create.assert_called_once_with(
            name="Mouse", price=Decimal("500.00"), availability=True
        )


# ===========================================================================
# update_product
# ===========================================================================


class TestUpdateProduct:
    def test_replaces_every_field(self, service, mock_repo):
        existing = _product()
        mock_repo.get_by_id.return_value = existing

        dto = UpdateProductDTO(name="Curved", price="300", availability=False)
        product = service.update_product(1, dto)

        assert product.name == "Curved"
        assert product.price == Decimal("300.00")
        assert product.availability is False
        mock_repo.save.assert_called_once_with(existing)

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        dto = UpdateProductDTO(name="Curved", price=1, availability=True)
        with pytest.raises(ProductNotFound):
            service.update_product(99, dto)
        mock_repo.save.assert_not_called()


# ===========================================================================
# toggle_availability
# ===========================================================================


class TestToggleAvailability:
    @pytest.mark.parametrize("initial", [True, False])
    def test_flips(self, service, mock_repo, initial):
        existing = _product(availability=initial)
        mock_repo.get_by_id.return_value = existing

        product = service.toggle_availability(1)

        assert product.availability is (not initial)
        assert product.name == "Widget"
        assert product.price == Decimal("19.99")
        mock_repo.save.assert_called_once_with(existing)

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound):
            service.toggle_availability(5)
        mock_repo.save.assert_not_called()


# ===========================================================================
# delete_product
# ===========================================================================


class TestDeleteProduct:
    def test_success(self, service, mock_repo):
        existing = _product()
        mock_repo.get_by_id.return_value = existing
        service.delete_product(1)
        mock_repo.delete.assert_called_once_with(existing)

    def test_not_found(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None
        with pytest.raises(ProductNotFound):
            service.delete_product(1)
        mock_repo.delete.assert_not_called()
