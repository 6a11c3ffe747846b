"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Each handler
is guarded by ``validate_input`` so it only ever sees input that passed the
route's rules; ``ProductNotFound`` is translated into a 404 here and any
other exception is left to the global exception handler.
"""

from __future__ import annotations

from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    extend_schema,
    extend_schema_view,
    inline_serializer,
)
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.validation import validate_input
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.exceptions import ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    CreateProductRules,
    ProductIdRules,
    ProductListSerializer,
    ProductSerializer,
    UpdateProductRules,
)
from modules.products.services import ProductService

NOT_FOUND_MESSAGE = "Producto No Encontrado"
DELETED_MESSAGE = "Producto Eliminado Correctamente"

_product_response = inline_serializer(
    name="ProductResponse", fields={"data": ProductSerializer()}
)
_product_list_response = inline_serializer(
    name="ProductListResponse", fields={"data": ProductListSerializer(many=True)}
)
_product_input = inline_serializer(
    name="ProductInput",
    fields={
        "name": serializers.CharField(),
        "price": serializers.DecimalField(max_digits=10, decimal_places=2),
    },
)
_product_update_input = inline_serializer(
    name="ProductUpdateInput",
    fields={
        "name": serializers.CharField(),
        "price": serializers.DecimalField(max_digits=10, decimal_places=2),
        "availability": serializers.BooleanField(),
    },
)
_id_parameter = OpenApiParameter(
    "id", int, OpenApiParameter.PATH, description="The product ID"
)
_bad_request = OpenApiResponse(description="Bad Request - Invalid ID or input data")
_not_found = OpenApiResponse(description="Product Not Found")


@extend_schema_view(
    list=extend_schema(
        summary="Get a list of products",
        responses={200: _product_list_response},
    ),
    retrieve=extend_schema(
        summary="Get a product by ID",
        parameters=[_id_parameter],
        responses={200: _product_response, 400: _bad_request, 404: _not_found},
    ),
    create=extend_schema(
        summary="Creates a new product",
        request=_product_input,
        responses={201: _product_response, 400: _bad_request},
    ),
    update=extend_schema(
        summary="Updates a product with user input",
        parameters=[_id_parameter],
        request=_product_update_input,
        responses={200: _product_response, 400: _bad_request, 404: _not_found},
    ),
    partial_update=extend_schema(
        summary="Toggle product availability",
        parameters=[_id_parameter],
        request=None,
        responses={200: _product_response, 400: _bad_request, 404: _not_found},
    ),
    destroy=extend_schema(
        summary="Deletes a product by a given ID",
        parameters=[_id_parameter],
        responses={
            200: inline_serializer(
                name="ProductDeletedResponse",
                fields={"data": serializers.CharField(default=DELETED_MESSAGE)},
            ),
            400: _bad_request,
            404: _not_found,
        },
    ),
)
@extend_schema(tags=["Products"])
class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).  All ORM
    access goes through the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    lookup_url_kwarg = "id"
    lookup_value_regex = "[^/]+"

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def _not_found(self) -> Response:
        return Response(
            {"error": NOT_FOUND_MESSAGE},
            status=status.HTTP_404_NOT_FOUND,
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response({"data": ProductListSerializer(products, many=True).data})

    @validate_input(params=ProductIdRules)
    def retrieve(self, request: Request, id: str) -> Response:
        """GET /api/products/{id}"""
        try:
            product = self._service.get_product(id)
        except ProductNotFound:
            return self._not_found()
        return Response({"data": ProductSerializer(product).data})

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @validate_input(body=CreateProductRules)
    def create(self, request: Request) -> Response:
        """POST /api/products"""
        data = request.data
        dto = CreateProductDTO(name=data.get("name"), price=data.get("price"))
        product = self._service.create_product(dto)
        return Response(
            {"data": ProductSerializer(product).data},
            status=status.HTTP_201_CREATED,
        )

    @validate_input(params=ProductIdRules, body=UpdateProductRules)
    def update(self, request: Request, id: str) -> Response:
        """PUT /api/products/{id}"""
        data = request.data
        dto = UpdateProductDTO(
            name=data.get("name"),
            price=data.get("price"),
            availability=data.get("availability"),
        )
        try:
            product = self._service.update_product(id, dto)
        except ProductNotFound:
            return self._not_found()
        return Response({"data": ProductSerializer(product).data})

    @validate_input(params=ProductIdRules)
    def partial_update(self, request: Request, id: str) -> Response:
        """PATCH /api/products/{id}: flips availability, body is ignored."""
        try:
            product = self._service.toggle_availability(id)
        except ProductNotFound:
            return self._not_found()
        return Response({"data": ProductSerializer(product).data})

    @validate_input(params=ProductIdRules)
    def destroy(self, request: Request, id: str) -> Response:
        """DELETE /api/products/{id}"""
        try:
            self._service.delete_product(id)
        except ProductNotFound:
            return self._not_found()
        return Response({"data": DELETED_MESSAGE})
