"""In-memory implementation of the Product repository.

Keeps products in a dict keyed by ID and hands out sequential IDs
starting at 1, mirroring an auto-increment column.  Entities are copied
on the way in and out, so a caller mutating a returned ``Product`` does
not change stored state until it calls ``save``.

Nothing here touches the database: ``Product`` instances are only used
as plain value holders.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import structlog

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def _clone(product: Product) -> Product:
    values = {
        field.attname: getattr(product, field.attname)
        for field in Product._meta.concrete_fields
    }
    return Product(**values)


class ProductInMemoryRepository(IProductRepository):
    """Dict-backed Product repository."""

    def __init__(self) -> None:
        self._rows: Dict[int, Product] = {}
        self._next_id = 1

    def list(self) -> List[Product]:
        return [_clone(self._rows[key]) for key in sorted(self._rows)]

    def get_by_id(self, id: int) -> Optional[Product]:
        product = self._rows.get(id)
        if product is None:
            return None
        return _clone(product)

    def exists_by_id(self, id: int) -> bool:
        return id in self._rows

    def save(self, entity: Product) -> Product:
        if entity.id is None:
            entity.id = self._next_id
        self._next_id = max(self._next_id, entity.id + 1)
        self._rows[entity.id] = _clone(entity)
        logger.debug("product.saved", product_id=entity.id, backend="memory")
        return _clone(entity)

    def delete_by_id(self, id: int) -> None:
        if self._rows.pop(id, None) is not None:
            logger.debug("product.deleted", product_id=id, backend="memory")
