"""Product service layer (Use Cases).

Orchestrates the Product lifecycle, delegating persistence to the injected
``IProductRepository``.

Every use case that targets an existing product looks it up by primary key
first and raises ``ProductNotFound`` before touching it, so lookup and
mutation are never folded into one storage call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.products.exceptions import ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        product = Product(name=dto.name, price=dto.price)
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def update_product(self, id: str | int, dto: UpdateProductDTO) -> Product:
        """Overwrite name, price and availability.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_product(id)

        product.name = dto.name
        product.price = dto.price
        product.availability = dto.availability

        product = self._repo.save(product)
        logger.info("product.updated", product_id=product.id)
        return product

    @transaction.atomic
    def toggle_availability(self, id: str | int) -> Product:
        """Flip availability from its stored value.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_product(id)
        availability = product.toggle_availability()
        product = self._repo.save(product)
        logger.info(
            "product.availability_toggled",
            product_id=product.id,
            availability=availability,
        )
        return product

    @transaction.atomic
    def delete_product(self, id: str | int) -> None:
        """Permanently remove a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_product(id)
        self._repo.delete(product)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product, newest id first."""
        return self._repo.list()

    def get_product(self, id: str | int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(f"Product {id} not found.")
        return product
