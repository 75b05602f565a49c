"""Product service layer (Use Cases).

Orchestrates the Product use-cases, delegating persistence to the
injected ``IProductRepository``.  Every mutation re-reads the record
first; nothing is cached between calls.

Business rules enforced here:
- A missing product raises ``ProductNotFound``.
- Price must be greater than zero (validated by DTO, backed by the DB).
- The availability toggle touches nothing but ``availability``.
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
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product, newest first."""
        return self._repo.list_all()

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            logger.info("product.not_found", product_id=id)
            raise ProductNotFound(id)
        return product

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        product = self._repo.create(
            name=dto.name,
            price=dto.price,
            availability=dto.availability,
        )
        logger.info("product.created", product_id=product.pk)
        return product

    @transaction.atomic
    def update_product(self, id: int, dto: UpdateProductDTO) -> Product:
        """Replace name, price and availability of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_product(id)

        product.name = dto.name
        product.price = dto.price
        product.availability = dto.availability

        product = self._repo.save(product)
        logger.info("product.updated", product_id=id)
        return product

    @transaction.atomic
    def toggle_availability(self, id: int) -> Product:
        """Flip ``availability`` of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_product(id)
        availability = product.toggle_availability()
        product = self._repo.save(product)
        logger.info(
            "product.availability_toggled",
            product_id=id,
            availability=availability,
        )
        return product

    @transaction.atomic
    def delete_product(self, id: int) -> None:
        """Permanently delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_product(id)
        self._repo.delete(product)
        logger.info("product.deleted", product_id=id)
