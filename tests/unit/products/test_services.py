"""Unit tests for ProductService.

Covers:
- create_product: persists with availability defaulting to True.
- update_product: overwrites every field, not found.
- toggle_availability: read-then-negate, not found.
- get_product / list_products / delete_product.
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
# create_product
# ===========================================================================


class TestCreateProduct:
    def test_success(self, service, mock_repo):
        dto = CreateProductDTO(name="Widget", price=Decimal("19.99"))
        product = service.create_product(dto)

        assert product.name == "Widget"
        assert product.price == Decimal("19.99")
        assert product.availability is True
        mock_repo.save.assert_called_once_with(product)


# ===========================================================================
# update_product
# ===========================================================================


class TestUpdateProduct:
    def test_overwrites_every_field(self, service, mock_repo):
        mock_repo.get_by_id.return_value = _product()

        dto = UpdateProductDTO(name="Gadget", price=Decimal("5.00"), availability=False)
        product = service.update_product("1", dto)

        assert product.name == "Gadget"
        assert product.price == Decimal("5.00")
        assert product.availability is False
        mock_repo.save.assert_called_once()

    def test_not_found_raises_before_saving(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        dto = UpdateProductDTO(name="Ghost", price=1, availability=True)
        with pytest.raises(ProductNotFound):
            service.update_product("2000", dto)
        mock_repo.save.assert_not_called()


# ===========================================================================
# toggle_availability
# ===========================================================================


class TestToggleAvailability:
    @pytest.mark.parametrize("initial", [True, False])
    def test_negates_stored_value(self, service, mock_repo, initial):
        mock_repo.get_by_id.return_value = _product(availability=initial)

        product = service.toggle_availability("1")

        assert product.availability is (not initial)
        mock_repo.save.assert_called_once_with(product)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.toggle_availability("2000")
        mock_repo.save.assert_not_called()


# ===========================================================================
# get_product / list_products
# ===========================================================================


class TestQueries:
    def test_get_success(self, service, mock_repo):
        existing = _product()
        mock_repo.get_by_id.return_value = existing

        assert service.get_product("1") is existing
        mock_repo.get_by_id.assert_called_once_with("1")

    def test_get_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.get_product("2000")

    def test_list_delegates_to_repo(self, service, mock_repo):
        products = [_product(id=2), _product(id=1)]
        mock_repo.list.return_value = products

        assert service.list_products() == products
        mock_repo.list.assert_called_once_with()


# ===========================================================================
# delete_product
# ===========================================================================


class TestDeleteProduct:
    def test_success(self, service, mock_repo):
        existing = _product()
        mock_repo.get_by_id.return_value = existing

        service.delete_product("1")

        mock_repo.delete.assert_called_once_with(existing)

    def test_not_found_raises(self, service, mock_repo):
        mock_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFound):
            service.delete_product("2000")
        mock_repo.delete.assert_not_called()
