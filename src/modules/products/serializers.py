"""Product DRF serializer.

Only describes the resource shape for the OpenAPI schema.  Request
parsing goes through the Pydantic DTOs in ``dtos.py`` and responses are
rendered from ``ProductOutputDTO``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read/write serializer for the Product resource."""

    class Meta:
        model = Product
        fields = ["id", "name", "maker", "price", "image"]
        read_only_fields = ["id"]
