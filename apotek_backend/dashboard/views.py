# dashboard/views.py
"""
ADMIN OVERVIEW

GET /api/admin/overview/

Counts:
- total_products
- pending_orders
- low_stock      (0 < stock <= LOW_STOCK_THRESHOLD)
- out_of_stock   (stock == 0)

Plus the most recent orders for the overview table.
"""

from __future__ import annotations

from django.conf import settings
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from checkout.models import Order
from checkout.serializers import OrderSerializer
from products.models import Product

RECENT_ORDER_LIMIT = 5


class AdminOverviewView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Admin"],
        responses={
            200: OpenApiResponse(
                description="{totals: {total_products, pending_orders, low_stock, out_of_stock}, recent_orders}"
            )
        },
    )
    def get(self, request):
        threshold = int(getattr(settings, "LOW_STOCK_THRESHOLD", 10))

        totals = {
            "total_products": Product.objects.count(),
            "pending_orders": Order.objects.filter(status=Order.Status.PENDING).count(),
            "low_stock": Product.objects.filter(stock__gt=0, stock__lte=threshold).count(),
            "out_of_stock": Product.objects.filter(stock=0).count(),
        }
        recent = Order.objects.order_by("-created_at", "-id")[:RECENT_ORDER_LIMIT]

        return Response(
            {
                "totals": totals,
                "low_stock_threshold": threshold,
                "recent_orders": OrderSerializer(recent, many=True).data,
            },
            status=status.HTTP_200_OK,
        )
