# products/serializers/product.py

"""
PRODUCT SERIALIZERS

Purpose:
- PublicProductSerializer: storefront list/detail (read-only)
- AdminProductSerializer: admin panel CRUD, categories addressed by name

Category rules (admin writes):
- categories is a list of names
- unknown names are created on the fly (connect-or-create)
- update replaces the whole category set when categories is supplied
"""

from __future__ import annotations

from decimal import Decimal

from django.db import transaction
from rest_framework import serializers

from products.models import DEFAULT_UNIT, Category, Product


# =====================================================
# READ SIDE
# =====================================================

class PublicProductSerializer(serializers.ModelSerializer):
    """
    Storefront product payload.

    GUARANTEES:
    - effective_price is server-owned (discount applied when present)
    - unit is never blank ("porsi" fallback)
    """

    effective_price = serializers.DecimalField(
        max_digits=12, decimal_places=2, read_only=True
    )
    category = serializers.CharField(source="primary_category", read_only=True)
    category_names = serializers.SerializerMethodField(read_only=True)
    is_low_stock = serializers.BooleanField(read_only=True)
    is_out_of_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "discount_price",
            "effective_price",
            "stock",
            "unit",
            "description",
            "is_new_arrival",
            "media_url",
            "rating",
            "review_count",
            "category",
            "category_names",
            "is_low_stock",
            "is_out_of_stock",
            "created_at",
        ]
        read_only_fields = fields

    def get_category_names(self, obj) -> list[str]:
        return [c.name for c in obj.categories.all()]

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["unit"] = data.get("unit") or DEFAULT_UNIT
        data["rating"] = data.get("rating") or 0
        data["review_count"] = data.get("review_count") or 0
        return data


class PublicProductDetailSerializer(PublicProductSerializer):
    """Detail view: blank descriptions render as "-"."""

    def to_representation(self, instance):
        data = super().to_representation(instance)
        data["description"] = data.get("description") or "-"
        return data


# =====================================================
# WRITE SIDE (ADMIN PANEL)
# =====================================================

class AdminProductSerializer(serializers.ModelSerializer):
    categories = serializers.ListField(
        child=serializers.CharField(max_length=255, allow_blank=False),
        write_only=True,
        allow_empty=False,
    )
    category_names = serializers.SerializerMethodField(read_only=True)
    category = serializers.CharField(source="primary_category", read_only=True)
    effective_price = serializers.DecimalField(
        max_digits=12, decimal_places=2, read_only=True
    )

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "discount_price",
            "effective_price",
            "stock",
            "unit",
            "description",
            "is_new_arrival",
            "media_url",
            "rating",
            "review_count",
            "categories",
            "category",
            "category_names",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "effective_price", "created_at", "updated_at"]
        extra_kwargs = {
            "unit": {"required": False, "allow_blank": True},
            "description": {"required": False, "allow_blank": True},
            "media_url": {"required": False, "allow_null": True, "allow_blank": True},
        }

    def get_category_names(self, obj) -> list[str]:
        return [c.name for c in obj.categories.all()]

    # -----------------------------
    # FIELD VALIDATION
    # -----------------------------
    def validate_name(self, value):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("Nama produk wajib diisi")
        return v

    def validate_price(self, value):
        if value is None or value < 0:
            raise serializers.ValidationError("Harga tidak boleh negatif")
        return value

    def validate_categories(self, value):
        names = []
        for raw in value:
            name = (raw or "").strip()
            if name and name not in names:
                names.append(name)
        if not names:
            raise serializers.ValidationError("Minimal satu kategori wajib diisi")
        return names

    def validate_unit(self, value):
        return (value or "").strip() or DEFAULT_UNIT

    def validate_media_url(self, value):
        return value or None

    def validate(self, attrs):
        price = attrs.get("price", getattr(self.instance, "price", None))
        discount = attrs.get(
            "discount_price", getattr(self.instance, "discount_price", None)
        )

        # A zero discount means "no discount"
        if "discount_price" in attrs and discount is not None and discount <= 0:
            attrs["discount_price"] = None
            discount = None

        if discount is not None and price is not None and Decimal(discount) > Decimal(price):
            raise serializers.ValidationError(
                {"discount_price": "Harga diskon tidak boleh melebihi harga normal"}
            )
        return attrs

    # -----------------------------
    # CATEGORY CONNECT-OR-CREATE
    # -----------------------------
    @staticmethod
    def _resolve_categories(names: list[str]) -> list[Category]:
        out = []
        for name in names:
            obj, _ = Category.objects.get_or_create(name=name)
            out.append(obj)
        return out

    @transaction.atomic
    def create(self, validated_data):
        names = validated_data.pop("categories")
        product = Product.objects.create(**validated_data)
        product.categories.set(self._resolve_categories(names))
        return product

    @transaction.atomic
    def update(self, instance, validated_data):
        names = validated_data.pop("categories", None)

        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save()

        if names is not None:
            instance.categories.set(self._resolve_categories(names))

        return instance
