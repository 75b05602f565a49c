"""Product model.

Rules enforced here:
- Price must be greater than zero (validator + database CHECK constraint).
- ``availability`` defaults to ``True`` and is a plain on/off flag.
- Deletion is physical; there is no tombstone.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import TimestampedModel


class Product(TimestampedModel):
    """The catalogue item.

    ``id`` is an auto-incrementing integer assigned by the store on
    insert; it is never reused or changed.
    """

    name = models.CharField(max_length=255)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
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
        if not self.name:
            raise ValidationError({"name": "Name must not be empty."})
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": "Price must be greater than zero."})

    # ------------------------------------------------------------------
    # Behaviour
    # ------------------------------------------------------------------

    def toggle_availability(self) -> bool:
        """Flip ``availability`` in memory and return the new value."""
        self.availability = not self.availability
        return self.availability

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"#{self.pk} - {self.name}"
