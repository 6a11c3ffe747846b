"""Django ORM implementation of the Product repository.

Methods return ``None`` for missing rows instead of raising; the Service
Layer decides how a missing entity becomes an API response.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str | int) -> Optional[Product]:
        """Retrieve a product by primary key, ``None`` when no row matches."""
        return Product.objects.filter(pk=id).first()

    def list(self) -> List[Product]:
        return list(Product.objects.order_by("-id"))

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info("product.saved", product_id=entity.id)
        return entity

    @transaction.atomic
    def delete(self, entity: Product) -> None:
        """Hard-delete ``entity``; its id is not handed out again."""
        product_id = entity.id
        entity.delete()
        logger.info("product.hard_deleted", product_id=product_id)
