"""Product service layer (Use Cases).

Orchestrates the catalog use-cases, delegating persistence to the
injected ``IProductRepository`` and returning ``ProductOutputDTO``
instances to callers.

Every mutating use-case reads (or checks existence) before acting, so a
missing product is reported as ``ProductNotFound`` instead of silently
turning into a zero-row update or delete.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.products.dtos import ProductOutputDTO
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
    def create_product(self, dto: CreateProductDTO) -> ProductOutputDTO:
        """Persist a new product built from ``dto``."""
        product = Product(
            name=dto.name,
            maker=dto.maker,
            price=dto.price,
            image=dto.image,
        )
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id)
        return ProductOutputDTO.from_entity(product)

    @transaction.atomic
    def update_product(self, id: int, dto: UpdateProductDTO) -> ProductOutputDTO:
        """Replace name, maker, price and image of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        log = logger.bind(product_id=id)

        product.name = dto.name
        product.maker = dto.maker
        product.price = dto.price
        product.image = dto.image

        product = self._repo.save(product)
        log.info("product.updated")
        return ProductOutputDTO.from_entity(product)

    @transaction.atomic
    def delete_product(self, id: int) -> None:
        """Delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        if not self._repo.exists_by_id(id):
            logger.warning("product.not_found", product_id=id, action="delete")
            raise ProductNotFound(id)
        self._repo.delete_by_id(id)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[ProductOutputDTO]:
        """Return every stored product."""
        return [ProductOutputDTO.from_entity(p) for p in self._repo.list()]

    def get_product(self, id: int) -> ProductOutputDTO:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        logger.info("product.retrieved", product_id=id)
        return ProductOutputDTO.from_entity(product)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: int) -> Product:
        product = self._repo.get_by_id(id)
        if product is None:
            logger.warning("product.not_found", product_id=id)
            raise ProductNotFound(id)
        return product
