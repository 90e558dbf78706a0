import logging

import pytest

from modules.products.dtos import CreateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.repositories.memory_repository import ProductInMemoryRepository
from modules.products.services import ProductService


def _messages(caplog) -> list[str]:
    return [record.getMessage() for record in caplog.records]


class TestServiceLogging:
    def test_create_logs_product_created(self, caplog):
        service = ProductService(repository=ProductInMemoryRepository())
        with caplog.at_level(logging.INFO):
            product = service.create_product(
                CreateProductDTO(name="product1", maker="maker1", price=1)
            )
        assert any(
            "product.created" in m and str(product.id) in m for m in _messages(caplog)
        )

    def test_missing_product_logs_warning(self, caplog):
        service = ProductService(repository=ProductInMemoryRepository())
        with caplog.at_level(logging.WARNING):
            with pytest.raises(ProductNotFound):
                service.delete_product(-1)
        assert any("product.not_found" in m for m in _messages(caplog))


class TestRequestLogging:
    def test_request_lifecycle_logged(self, client, caplog):
        with caplog.at_level(logging.INFO):
            client.get("/products")
        messages = _messages(caplog)
        assert any("request_started" in m for m in messages)
        assert any("request_finished" in m and "200" in m for m in messages)
