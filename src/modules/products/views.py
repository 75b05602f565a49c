"""Product API views.

Exposes the ``ProductService`` over HTTP using DRF ``APIView``s.  Every
method is guarded by the route's rule chains from ``validators.py``;
a request only reaches the method body once its params and body pass.

Domain exceptions are caught and translated into HTTP status codes.
Database errors are left to the project exception handler.
"""

from __future__ import annotations

from typing import Any, Type, TypeVar

from drf_spectacular.utils import OpenApiParameter, extend_schema
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.exceptions import RequestValidationError
from modules.core.validation import read_body, validate_request
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import NOT_FOUND_MESSAGE, ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    ErrorSerializer,
    MessageEnvelopeSerializer,
    ProductEnvelopeSerializer,
    ProductListEnvelopeSerializer,
    ProductSerializer,
    ProductWriteSerializer,
    ValidationErrorsSerializer,
)
from modules.products.services import ProductService
from modules.products.validators import (
    CREATE_PRODUCT_RULES,
    PRODUCT_ID_RULES,
    UPDATE_PRODUCT_RULES,
)

DELETED_MESSAGE = "Product deleted"

DTO = TypeVar("DTO", bound=BaseModel)

ID_PARAMETER = OpenApiParameter(
    "id", int, OpenApiParameter.PATH, description="The product ID"
)


def _build_dto(dto_class: Type[DTO], payload: Any) -> DTO:
    """Narrow a rule-checked body into ``dto_class``."""
    if not isinstance(payload, dict):
        payload = {}
    try:
        return dto_class.model_validate(payload)
    except PydanticValidationError as exc:
        raise RequestValidationError.from_pydantic(exc) from exc


def _not_found() -> Response:
    return Response({"error": NOT_FOUND_MESSAGE}, status=status.HTTP_404_NOT_FOUND)


def _envelope(product, status_code: int = status.HTTP_200_OK) -> Response:
    return Response({"data": ProductSerializer(product).data}, status=status_code)


class _ProductView(APIView):
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())


class ProductCollectionView(_ProductView):
    """``/api/products``: list and create."""

    @extend_schema(
        summary="List products",
        tags=["Products"],
        responses={200: ProductListEnvelopeSerializer},
    )
    def get(self, request: Request) -> Response:
        products = self._service.list_products()
        return Response({"data": ProductSerializer(products, many=True).data})

    @extend_schema(
        summary="Create a product",
        tags=["Products"],
        request=ProductWriteSerializer,
        responses={201: ProductEnvelopeSerializer, 400: ValidationErrorsSerializer},
    )
    @validate_request(*CREATE_PRODUCT_RULES)
    def post(self, request: Request) -> Response:
        dto = _build_dto(CreateProductDTO, read_body(request))
        product = self._service.create_product(dto)
        return _envelope(product, status.HTTP_201_CREATED)


class ProductDetailView(_ProductView):
    """``/api/products/<id>``: retrieve, replace, toggle and delete."""

    @extend_schema(
        summary="Get a product by id",
        tags=["Products"],
        parameters=[ID_PARAMETER],
        responses={
            200: ProductEnvelopeSerializer,
            400: ValidationErrorsSerializer,
            404: ErrorSerializer,
        },
    )
    @validate_request(*PRODUCT_ID_RULES)
    def get(self, request: Request, id: str) -> Response:
        try:
            product = self._service.get_product(int(id))
        except ProductNotFound:
            return _not_found()
        return _envelope(product)

    @extend_schema(
        summary="Replace a product",
        tags=["Products"],
        parameters=[ID_PARAMETER],
        request=ProductWriteSerializer,
        responses={
            200: ProductEnvelopeSerializer,
            400: ValidationErrorsSerializer,
            404: ErrorSerializer,
        },
    )
    @validate_request(*UPDATE_PRODUCT_RULES)
    def put(self, request: Request, id: str) -> Response:
        dto = _build_dto(UpdateProductDTO, read_body(request))
        try:
            product = self._service.update_product(int(id), dto)
        except ProductNotFound:
            return _not_found()
        return _envelope(product)

    @extend_schema(
        summary="Toggle product availability",
        description="Flips availability; the request body is ignored.",
        tags=["Products"],
        parameters=[ID_PARAMETER],
        request=None,
        responses={
            200: ProductEnvelopeSerializer,
            400: ValidationErrorsSerializer,
            404: ErrorSerializer,
        },
    )
    @validate_request(*PRODUCT_ID_RULES)
    def patch(self, request: Request, id: str) -> Response:
        try:
            product = self._service.toggle_availability(int(id))
        except ProductNotFound:
            return _not_found()
        return _envelope(product)

    @extend_schema(
        summary="Delete a product",
        tags=["Products"],
        parameters=[ID_PARAMETER],
        responses={
            200: MessageEnvelopeSerializer,
            400: ValidationErrorsSerializer,
            404: ErrorSerializer,
        },
    )
    @validate_request(*PRODUCT_ID_RULES)
    def delete(self, request: Request, id: str) -> Response:
        try:
            self._service.delete_product(int(id))
        except ProductNotFound:
            return _not_found()
        return Response({"data": DELETED_MESSAGE})
