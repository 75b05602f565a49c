"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Lookups follow the Null Object pattern: a missing product is returned
as ``None`` and the Service Layer decides how to report it.  Database
errors are not caught here.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

import structlog

from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key, or ``None``."""
        return Product.objects.filter(pk=id).first()

    def list_all(self) -> List[Product]:
        """Every product, newest id first."""
        return list(Product.objects.order_by("-id"))

    @transaction.atomic
    def create(self, *, name: str, price: Decimal, availability: bool = True) -> Product:
        """Insert a product; ``id`` and timestamps come from the store."""
        product = Product.objects.create(
            name=name, price=price, availability=availability
        )
        logger.info("product.inserted", product_id=product.pk)
        return product

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Write the in-memory state of an existing product back."""
        entity.save()
        logger.info("product.saved", product_id=entity.pk)
        return entity

    @transaction.atomic
    def delete(self, entity: Product) -> bool:
        """Hard-delete ``entity``.

        Returns ``True`` if a row was removed, ``False`` if it was
        already gone.
        """
        product_id = entity.pk
        deleted, _ = Product.objects.filter(pk=product_id).delete()
        logger.info("product.removed", product_id=product_id, rows=deleted)
        return deleted > 0
