"""Product repository interface.

Specialises ``IRepository[Product]`` for the catalog.  The service layer
only ever talks to this contract, so the Django ORM implementation and
the in-memory one are interchangeable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""
