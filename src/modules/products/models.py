"""Product model.

The catalog has a single entity.  Identifiers are integers assigned by
the database on insert and never change afterwards; every other field is
freely replaceable through an update.  Deletion is physical.
"""

from __future__ import annotations

import structlog

from django.core.exceptions import ValidationError
from django.db import models

logger = structlog.get_logger(__name__)


class Product(models.Model):
    """Catalog product.

    ``price`` is a plain non-negative integer in whatever currency unit
    the catalog uses.  ``image`` holds a URL or any other reference.
    """

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255)
    maker = models.CharField(max_length=255)
    price = models.PositiveIntegerField()
    image = models.TextField(blank=True, default="")

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.price is not None and self.price < 0:
            raise ValidationError({"price": "Price cannot be negative."})

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
                maker=self.maker,
            )

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} ({self.maker})"
