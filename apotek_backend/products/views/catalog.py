# products/views/catalog.py
"""
PUBLIC CATALOG (STOREFRONT)

GET /api/public/products/?category=&search=&page=&limit=
GET /api/public/products/<id>/

Rules:
- AllowAny (public)
- Newest first, paginated {data, meta}
- Backend is source of truth for prices (effective_price)

Security hardening:
- Throttle to reduce scraping/abuse
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import generics
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.throttling import AnonRateThrottle

from products.filters import ProductFilter
from products.models import Product
from products.pagination import CatalogPagination
from products.serializers import PublicProductDetailSerializer, PublicProductSerializer


class PublicCatalogThrottle(AnonRateThrottle):
    scope = "public_catalog"


class PublicProductListView(generics.ListAPIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]
    serializer_class = PublicProductSerializer
    pagination_class = CatalogPagination
    filterset_class = ProductFilter

    def get_queryset(self):
        return Product.objects.prefetch_related("categories").order_by("-created_at", "-id")

    @extend_schema(
        tags=["Public"],
        parameters=[
            OpenApiParameter("category", str, OpenApiParameter.QUERY, required=False),
            OpenApiParameter("search", str, OpenApiParameter.QUERY, required=False),
            OpenApiParameter("page", int, OpenApiParameter.QUERY, required=False),
            OpenApiParameter("limit", int, OpenApiParameter.QUERY, required=False),
        ],
        responses={
            200: PublicProductSerializer(many=True),
            404: OpenApiResponse(description="Page out of range"),
            429: OpenApiResponse(description="Rate limited"),
        },
        description="Public product catalog (AllowAny), newest first.",
    )
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)


class PublicProductDetailView(generics.RetrieveAPIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]
    serializer_class = PublicProductDetailSerializer
    queryset = Product.objects.prefetch_related("categories")

    def get_object(self):
        obj = self.get_queryset().filter(pk=self.kwargs["pk"]).first()
        if obj is None:
            raise NotFound("Produk tidak ditemukan")
        return obj

    @extend_schema(
        tags=["Public"],
        responses={
            200: PublicProductDetailSerializer,
            404: OpenApiResponse(description="Product not found"),
            429: OpenApiResponse(description="Rate limited"),
        },
        description="Single product for the storefront detail page.",
    )
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)
