"""Product domain exceptions.

Raised by the Service Layer and never recovered there.  The API layer
(Views) catches them and translates them into HTTP responses.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """No stored product has the requested identifier."""

    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found.")
