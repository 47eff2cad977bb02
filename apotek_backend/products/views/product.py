# products/views/product.py

"""
ADMIN PRODUCT VIEWSET

Purpose:
- Admin panel product management (list/create/retrieve/update/delete)

Rules:
- list: search + category-name filter ("Semua Kategori" = no filter), paginated {data, meta}
- create/update: categories by name (connect-or-create); update replaces categories
- writes answer {message, data} like the rest of the admin panel
"""

from __future__ import annotations

import logging

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema, extend_schema_view
from rest_framework import status, viewsets
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from products.filters import ProductFilter
from products.models import Product
from products.pagination import CatalogPagination
from products.serializers import AdminProductSerializer

logger = logging.getLogger(__name__)


@extend_schema_view(
    list=extend_schema(
        tags=["Admin"],
        parameters=[
            OpenApiParameter("search", str, OpenApiParameter.QUERY, required=False),
            OpenApiParameter(
                "category",
                str,
                OpenApiParameter.QUERY,
                required=False,
                description='Category name; "Semua Kategori" disables the filter.',
            ),
            OpenApiParameter("page", int, OpenApiParameter.QUERY, required=False),
            OpenApiParameter("limit", int, OpenApiParameter.QUERY, required=False),
        ],
    ),
    create=extend_schema(tags=["Admin"]),
    retrieve=extend_schema(tags=["Admin"], responses={200: AdminProductSerializer, 404: OpenApiResponse()}),
    update=extend_schema(tags=["Admin"]),
    partial_update=extend_schema(tags=["Admin"]),
    destroy=extend_schema(tags=["Admin"]),
)
class AdminProductViewSet(viewsets.ModelViewSet):
    """
    Admin product endpoints.

    No authentication (the admin panel is expected to sit behind
    infrastructure-level access control).
    """

    serializer_class = AdminProductSerializer
    permission_classes = [AllowAny]
    pagination_class = CatalogPagination
    filterset_class = ProductFilter

    def get_queryset(self):
        return Product.objects.prefetch_related("categories").order_by("-created_at", "-id")

    def get_object(self):
        obj = self.get_queryset().filter(pk=self.kwargs["pk"]).first()
        if obj is None:
            raise NotFound("Produk tidak ditemukan")
        return obj

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = serializer.save()

        logger.info(
            "Admin created product",
            extra={"product_id": product.id, "product_name": product.name},
        )
        return Response(
            {
                "message": "Produk berhasil ditambahkan",
                "data": self.get_serializer(product).data,
            },
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        product = serializer.save()

        logger.info(
            "Admin updated product",
            extra={"product_id": product.id, "partial": partial},
        )
        return Response(
            {
                "message": "Produk berhasil diperbarui",
                "data": self.get_serializer(product).data,
            },
            status=status.HTTP_200_OK,
        )

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        product_id = instance.id
        instance.delete()

        logger.info("Admin deleted product", extra={"product_id": product_id})
        return Response({"message": "Produk berhasil dihapus"}, status=status.HTTP_200_OK)
