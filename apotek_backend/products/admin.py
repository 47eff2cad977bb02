# products/admin.py
"""
=====================================================
PATH: products/admin.py
=====================================================

Django admin for the catalog.

The REST admin panel (/api/admin/...) is the primary management surface;
this is the staff fallback.
"""

from __future__ import annotations

from django.contrib import admin

from products.models import Category, Product


# =====================================================
# CATEGORY
# =====================================================

@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "product_total", "created_at")
    search_fields = ("name",)
    ordering = ("name",)

    def product_total(self, obj):
        return obj.products.count()

    product_total.short_description = "Products"


# =====================================================
# PRODUCT
# =====================================================

@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "price",
        "discount_price",
        "stock",
        "unit",
        "stock_status",
        "is_new_arrival",
        "created_at",
    )
    list_filter = ("is_new_arrival", "categories", "created_at")
    search_fields = ("name",)
    ordering = ("-created_at",)
    filter_horizontal = ("categories",)
    readonly_fields = ("created_at", "updated_at")

    def stock_status(self, obj):
        if obj.is_out_of_stock:
            return "❌ OUT"
        if obj.is_low_stock:
            return "⚠ LOW"
        return "OK"

    stock_status.short_description = "Stock Status"
