"""Unit tests for Product serializers.

Covers:
- Output field sets for detail and list representations.
- Finding counts produced by each route's rule serializer.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.models import Product
from modules.products.serializers import (
    AVAILABILITY_NOT_BOOLEAN,
    INVALID_ID,
    NAME_REQUIRED,
    NAME_TOO_LONG,
    PRICE_NOT_NUMERIC,
    PRICE_NOT_POSITIVE,
    PRICE_NOT_POSITIVE_ON_UPDATE,
    PRICE_OUT_OF_RANGE,
    PRICE_REQUIRED,
    CreateProductRules,
    ProductIdRules,
    ProductListSerializer,
    ProductSerializer,
    UpdateProductRules,
)

pytestmark = pytest.mark.unit


def _errors(serializer) -> dict:
    assert not serializer.is_valid()
    return {field: [str(m) for m in messages] for field, messages in serializer.errors.items()}


# ===========================================================================
# Output
# ===========================================================================


class TestOutputSerializers:
    def test_detail_fields(self):
        assert set(ProductSerializer().fields) == {
            "id",
            "name",
            "price",
            "availability",
            "createdAt",
            "updatedAt",
        }

    def test_list_fields(self):
        assert set(ProductListSerializer().fields) == {"id", "name", "price"}

    def test_serializes_product(self):
        product = Product.objects.create(name="Widget", price=Decimal("19.99"))
        data = ProductSerializer(product).data
        assert data["id"] == product.id
        assert data["name"] == "Widget"
        assert data["price"] == Decimal("19.99")
        assert data["availability"] is True
        assert data["createdAt"]


# ===========================================================================
# Rules
# ===========================================================================


class TestProductIdRules:
    def test_integer_id_passes(self):
        assert ProductIdRules(data={"id": "12"}).is_valid()

    def test_non_integer_id(self):
        assert _errors(ProductIdRules(data={"id": "abc"})) == {"id": [INVALID_ID]}


class TestCreateProductRules:
    def test_valid(self):
        assert CreateProductRules(data={"name": "Widget", "price": 10}).is_valid()

    def test_empty_body(self):
        assert _errors(CreateProductRules(data={})) == {
            "name": [NAME_REQUIRED],
            "price": [PRICE_NOT_NUMERIC, PRICE_REQUIRED, PRICE_NOT_POSITIVE],
        }

    def test_zero_price(self):
        errors = _errors(CreateProductRules(data={"name": "Widget", "price": 0}))
        assert errors == {"price": [PRICE_NOT_POSITIVE]}

    def test_text_price(self):
        errors = _errors(CreateProductRules(data={"name": "Widget", "price": "hola"}))
        assert errors == {"price": [PRICE_NOT_NUMERIC, PRICE_NOT_POSITIVE]}

    def test_empty_string_price(self):
        errors = _errors(CreateProductRules(data={"name": "Widget", "price": ""}))
        assert len(errors["price"]) == 3

    def test_name_longer_than_column(self):
        errors = _errors(CreateProductRules(data={"name": "x" * 101, "price": 10}))
        assert errors == {"name": [NAME_TOO_LONG]}

    def test_name_at_column_limit(self):
        assert CreateProductRules(data={"name": "x" * 100, "price": 10}).is_valid()

    @pytest.mark.parametrize("price", [0.001, "12.345", 123456789012, "123456789"])
    def test_price_that_does_not_fit_the_column(self, price):
        errors = _errors(CreateProductRules(data={"name": "Widget", "price": price}))
        assert errors == {"price": [PRICE_OUT_OF_RANGE]}

    def test_largest_storable_price(self):
        assert CreateProductRules(data={"name": "Widget", "price": "99999999.99"}).is_valid()


class TestUpdateProductRules:
    def test_valid(self):
        data = {"name": "Widget", "price": "10", "availability": "false"}
        assert UpdateProductRules(data=data).is_valid()

    def test_empty_body(self):
        assert _errors(UpdateProductRules(data={})) == {
            "name": [NAME_REQUIRED],
            "price": [PRICE_NOT_NUMERIC, PRICE_REQUIRED, PRICE_NOT_POSITIVE_ON_UPDATE],
            "availability": [AVAILABILITY_NOT_BOOLEAN],
        }

    def test_name_and_price_limits(self):
        data = {"name": "x" * 101, "price": 0.001, "availability": True}
        assert _errors(UpdateProductRules(data=data)) == {
            "name": [NAME_TOO_LONG],
            "price": [PRICE_OUT_OF_RANGE],
        }
