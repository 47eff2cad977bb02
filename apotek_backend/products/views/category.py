# products/views/category.py

"""
ADMIN CATEGORY VIEWSET

Policy:
- list ordered by name, each row carries product_count
- create/update: 409 when another category already has the name
- delete: 409 while products are still attached
"""

from __future__ import annotations

import logging

from django.db.models import Count
from drf_spectacular.utils import OpenApiResponse, extend_schema, extend_schema_view
from rest_framework import status, viewsets
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from products.models import Category
from products.serializers import CategorySerializer

logger = logging.getLogger(__name__)


def conflict_response(message: str):
    return Response({"detail": message}, status=status.HTTP_409_CONFLICT)


@extend_schema_view(
    list=extend_schema(tags=["Admin"]),
    create=extend_schema(tags=["Admin"], responses={201: CategorySerializer, 409: OpenApiResponse()}),
    retrieve=extend_schema(tags=["Admin"]),
    update=extend_schema(tags=["Admin"], responses={200: CategorySerializer, 409: OpenApiResponse()}),
    partial_update=extend_schema(tags=["Admin"], responses={200: CategorySerializer, 409: OpenApiResponse()}),
    destroy=extend_schema(tags=["Admin"], responses={200: OpenApiResponse(), 409: OpenApiResponse()}),
)
class AdminCategoryViewSet(viewsets.ModelViewSet):
    serializer_class = CategorySerializer
    permission_classes = [AllowAny]
    pagination_class = None

    def get_queryset(self):
        return Category.objects.annotate(product_count=Count("products")).order_by("name")

    def get_object(self):
        obj = self.get_queryset().filter(pk=self.kwargs["pk"]).first()
        if obj is None:
            raise NotFound("Kategori tidak ditemukan")
        return obj

    def _name_taken(self, name: str, *, exclude_id=None) -> bool:
        qs = Category.objects.filter(name=name)
        if exclude_id is not None:
            qs = qs.exclude(pk=exclude_id)
        return qs.exists()

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        name = serializer.validated_data["name"]
        if self._name_taken(name):
            return conflict_response("Kategori dengan nama tersebut sudah ada")

        category = serializer.save()
        logger.info("Admin created category", extra={"category_id": category.id, "category_name": name})
        return Response(
            {"message": "Kategori berhasil ditambahkan", "data": self.get_serializer(category).data},
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        name = serializer.validated_data.get("name")
        if name is not None and self._name_taken(name, exclude_id=instance.pk):
            return conflict_response("Kategori dengan nama tersebut sudah ada")

        serializer.save()
        logger.info("Admin updated category", extra={"category_id": instance.id})
        return Response(
            {"message": "Kategori berhasil diperbarui", "data": self.get_serializer(self.get_object()).data},
            status=status.HTTP_200_OK,
        )

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        attached = instance.products.count()
        if attached > 0:
            return conflict_response(
                f"Tidak dapat menghapus kategori yang memiliki {attached} produk. "
                "Hapus atau pindahkan produk terlebih dahulu."
            )

        category_id = instance.id
        instance.delete()
        logger.info("Admin deleted category", extra={"category_id": category_id})
        return Response({"message": "Kategori berhasil dihapus"}, status=status.HTTP_200_OK)
