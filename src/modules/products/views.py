"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into appropriate
HTTP status codes; the view never swallows generic exceptions.
"""

from __future__ import annotations

from typing import Any, Mapping

from drf_spectacular.utils import extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


def _not_found(exc: ProductNotFound) -> Response:
    return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)


def _bad_request(exc: Exception) -> Response:
    return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)


def _payload(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError("Request body must be a JSON object.")
    return dict(data.items())


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    permission_classes = [AllowAny]
    lookup_value_regex = r"-?\d+"
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(responses=ProductSerializer(many=True))
    def list(self, request: Request) -> Response:
        """GET /products"""
        products = self._service.list_products()
        return Response([p.model_dump() for p in products])

    @extend_schema(responses=ProductSerializer)
    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /products/{pk}"""
        try:
            product = self._service.get_product(int(pk))
        except ProductNotFound as exc:
            return _not_found(exc)
        return Response(product.model_dump())

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(request=ProductSerializer, responses={201: ProductSerializer})
    def create(self, request: Request) -> Response:
        """POST /products"""
        try:
            dto = CreateProductDTO.model_validate(_payload(request.data))
        except (PydanticValidationError, ValueError) as exc:
            return _bad_request(exc)

        product = self._service.create_product(dto)
        return Response(product.model_dump(), status=status.HTTP_201_CREATED)

    @extend_schema(request=ProductSerializer, responses=ProductSerializer)
    def update(self, request: Request, pk: str) -> Response:
        """PUT /products/{pk}

        Full replace: name, maker, price and image are all required.
        """
        try:
            dto = UpdateProductDTO.model_validate(_payload(request.data))
        except (PydanticValidationError, ValueError) as exc:
            return _bad_request(exc)

        try:
            product = self._service.update_product(int(pk), dto)
        except ProductNotFound as exc:
            return _not_found(exc)
        return Response(product.model_dump())

    @extend_schema(request=ProductSerializer, responses=ProductSerializer)
    def partial_update(self, request: Request, pk: str) -> Response:
        """PATCH /products/{pk}, same full-replace semantics as PUT."""
        return self.update(request, pk)

    @extend_schema(responses={204: None})
    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /products/{pk}"""
        try:
            self._service.delete_product(int(pk))
        except ProductNotFound as exc:
            return _not_found(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)
