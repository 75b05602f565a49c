"""Product repository interface.

Extends ``IRepository[Product]`` with record creation.
"""

from __future__ import annotations

from abc import abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def create(self, *, name: str, price: Decimal, availability: bool = True) -> Product:
        """Insert a new product; the store assigns its id."""
