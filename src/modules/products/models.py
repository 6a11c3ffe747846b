"""Product model.

Rules implemented here:
- Price must be greater than zero (``clean`` + DB check constraint).
- ``availability`` starts as ``True`` and is only flipped by ``toggle_availability``
  outside of a full update.
- Deletion is physical; ids come from an auto-increment key and are never reused.
"""

from __future__ import annotations

from decimal import Decimal

import structlog
from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import BaseModel

logger = structlog.get_logger(__name__)

NAME_MAX_LENGTH = 100
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2


class Product(BaseModel):
    name = models.CharField(max_length=NAME_MAX_LENGTH)
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    availability = models.BooleanField(default=True)

    class Meta:
        db_table = "products"
        ordering = ["-id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": "Price must be greater than zero."})

    # ------------------------------------------------------------------
    # State transitions
    # ------------------------------------------------------------------

    def toggle_availability(self) -> bool:
        """Negate the current availability and return the new value."""
        self.availability = not self.availability
        return self.availability

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "product_created",
                product_id=self.id,
                name=self.name,
            )

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
