"""Product domain exceptions.

Raised by the Service Layer; the API layer (Views) catches them and
translates them into HTTP responses.
"""

from __future__ import annotations

NOT_FOUND_MESSAGE = "Product not found"


class ProductNotFound(Exception):
    """The requested product does not exist."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found.")
        self.product_id = product_id
