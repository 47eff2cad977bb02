# checkout/admin.py
"""
=====================================================
PATH: checkout/admin.py
=====================================================

Orders are append-only: staff may only move the status along.
"""

from __future__ import annotations

from django.contrib import admin

from checkout.models import Order


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = (
        "order_no",
        "customer_name",
        "area_name",
        "delivery_option",
        "payment_method",
        "total_amount",
        "status",
        "created_at",
    )
    list_filter = ("status", "delivery_option", "payment_method", "created_at")
    search_fields = ("order_no", "customer_name", "area_name")
    ordering = ("-created_at",)

    readonly_fields = (
        "order_no",
        "owner_key",
        "idempotency_key",
        "customer_name",
        "area_name",
        "delivery_option",
        "notes",
        "payment_method",
        "lines_snapshot",
        "customer_snapshot",
        "subtotal_amount",
        "delivery_fee",
        "total_amount",
        "message",
        "created_at",
    )

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
