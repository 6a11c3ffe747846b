"""Product DRF serializers.

Output serializers render the Product resource; the ``*Rules`` serializers
declare the per-route request checks consumed by
``modules.core.validation.validate_input``.  Field declaration order is the
order findings are reported in.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.core.validation import (
    Check,
    RuleField,
    fits_decimal,
    is_boolean,
    is_int,
    is_non_empty_string,
    is_numeric,
    is_positive,
    max_length,
    not_empty,
)
from modules.products.models import (
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    Product,
)

INVALID_ID = "ID No Válido"
NAME_REQUIRED = "El Nombre del Producto No Puede ir Vacío"
NAME_TOO_LONG = f"El Nombre del Producto No Puede Superar {NAME_MAX_LENGTH} Caracteres"
PRICE_NOT_NUMERIC = "Valor No Valido"
PRICE_REQUIRED = "El Precio del Producto No Puede ir Vacío"
PRICE_NOT_POSITIVE = "Valor Negativo - No Valido"
PRICE_NOT_POSITIVE_ON_UPDATE = "Valor Negativo - Valor Nulo - No Valido"
PRICE_OUT_OF_RANGE = (
    f"Valor Fuera de Rango - Máximo {PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES} "
    f"Enteros y {PRICE_DECIMAL_PLACES} Decimales"
)
AVAILABILITY_NOT_BOOLEAN = "Valor Para Disponibilidad No Válido"


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


class ProductSerializer(serializers.ModelSerializer):
    """Full Product representation."""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Product
        fields = ["id", "name", "price", "availability", "createdAt", "updatedAt"]
        read_only_fields = ["id"]


class ProductListSerializer(serializers.ModelSerializer):
    """List item: timestamps and availability are left out."""

    class Meta:
        model = Product
        fields = ["id", "name", "price"]
        read_only_fields = fields


# ---------------------------------------------------------------------------
# Request rules
# ---------------------------------------------------------------------------


class ProductIdRules(serializers.Serializer):
    id = RuleField(validators=[Check(is_int, INVALID_ID)])


class CreateProductRules(serializers.Serializer):
    name = RuleField(
        validators=[
            Check(is_non_empty_string, NAME_REQUIRED),
            Check(max_length(NAME_MAX_LENGTH), NAME_TOO_LONG),
        ]
    )
    price = RuleField(
        validators=[
            Check(is_numeric, PRICE_NOT_NUMERIC),
            Check(not_empty, PRICE_REQUIRED),
            Check(is_positive, PRICE_NOT_POSITIVE),
            Check(fits_decimal(PRICE_MAX_DIGITS, PRICE_DECIMAL_PLACES), PRICE_OUT_OF_RANGE),
        ]
    )


class UpdateProductRules(serializers.Serializer):
    name = RuleField(
        validators=[
            Check(is_non_empty_string, NAME_REQUIRED),
            Check(max_length(NAME_MAX_LENGTH), NAME_TOO_LONG),
        ]
    )
    price = RuleField(
        validators=[
            Check(is_numeric, PRICE_NOT_NUMERIC),
            Check(not_empty, PRICE_REQUIRED),
            Check(is_positive, PRICE_NOT_POSITIVE_ON_UPDATE),
            Check(fits_decimal(PRICE_MAX_DIGITS, PRICE_DECIMAL_PLACES), PRICE_OUT_OF_RANGE),
        ]
    )
    availability = RuleField(validators=[Check(is_boolean, AVAILABILITY_NOT_BOOLEAN)])
