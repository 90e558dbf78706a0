"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising, and ``delete_by_id`` is a no-op for unknown IDs.
The Service Layer decides how to report a missing entity.
"""

from __future__ import annotations

from typing import List, Optional

import structlog

from django.core.exceptions import ValidationError
from django.db import transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def list(self) -> List[Product]:
        """Return all products in the model's default ordering."""
        return list(Product.objects.all())

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def exists_by_id(self, id: int) -> bool:
        try:
            return Product.objects.filter(id=id).exists()
        except (ValueError, TypeError, ValidationError):
            return False

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (insert or overwrite) a product."""
        entity.save()
        logger.info(
            "product.saved",
            product_id=entity.id,
            name=entity.name,
        )
        return entity

    @transaction.atomic
    def delete_by_id(self, id: int) -> None:
        """Hard-delete the product with ``id``, if any."""
        try:
            deleted, _ = Product.objects.filter(id=id).delete()
        except (ValueError, TypeError, ValidationError):
            return
        if deleted:
            logger.info("product.deleted", product_id=id)
