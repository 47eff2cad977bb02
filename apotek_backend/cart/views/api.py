# cart/views/api.py

"""
CART API VIEWS

Purpose:
- Session-scoped visitor cart (no login)
- Add/update/remove/clear lines (server-owned pricing snapshot on add)

Hard rules:
- Product data is snapshotted from the catalog on add; the client never sends prices.
- Every mutation persists the full cart to the visitor session before responding.
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from cart.serializers import (
    AddCartItemInputSerializer,
    CartSerializer,
    UpdateCartItemInputSerializer,
)
from cart.services.cart_store import MAX_LINE_QUANTITY, CartStore
from cart.services.storage import SessionStorage
from products.models import Product


class CartThrottle(AnonRateThrottle):
    scope = "public_catalog"


# =====================================================
# API ERROR NORMALIZATION
# =====================================================

def error_response(*, code: str, message: str, http_status: int):
    return Response(
        {"error": {"code": code, "message": message}},
        status=http_status,
    )


# =====================================================
# HELPERS
# =====================================================

def get_cart_store(request) -> CartStore:
    """Loaded cart for the visitor behind `request`."""
    store = CartStore(SessionStorage(request.session))
    store.load()
    return store


def _cart_response(store: CartStore, http_status: int = status.HTTP_200_OK):
    return Response(CartSerializer(store).data, status=http_status)


# =====================================================
# VIEWS
# =====================================================

class CartView(APIView):
    """
    GET    /api/cart/   current cart
    DELETE /api/cart/   clear cart
    """

    permission_classes = [AllowAny]
    throttle_classes = [CartThrottle]

    @extend_schema(tags=["Cart"], responses={200: CartSerializer})
    def get(self, request):
        return _cart_response(get_cart_store(request))

    @extend_schema(tags=["Cart"], responses={200: CartSerializer})
    def delete(self, request):
        store = get_cart_store(request)
        store.clear()
        return _cart_response(store)


class CartItemsView(APIView):
    """
    POST /api/cart/items/   {product_id, quantity}
    """

    permission_classes = [AllowAny]
    throttle_classes = [CartThrottle]

    @extend_schema(
        tags=["Cart"],
        request=AddCartItemInputSerializer,
        responses={
            201: CartSerializer,
            400: OpenApiResponse(description="Invalid input, product out of stock or quantity limit"),
            404: OpenApiResponse(description="Product not found"),
        },
    )
    def post(self, request):
        ser = AddCartItemInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        product = (
            Product.objects.prefetch_related("categories")
            .filter(pk=ser.validated_data["product_id"])
            .first()
        )
        if product is None:
            return error_response(
                code="product_not_found",
                message="Produk tidak ditemukan",
                http_status=status.HTTP_404_NOT_FOUND,
            )
        if product.is_out_of_stock:
            return error_response(
                code="out_of_stock",
                message="Stok produk habis",
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        store = get_cart_store(request)
        existing = store.find_line(product.id)
        in_cart = existing.quantity if existing else 0
        if in_cart + ser.validated_data["quantity"] > MAX_LINE_QUANTITY:
            return error_response(
                code="quantity_limit",
                message=f"Jumlah maksimal per produk adalah {MAX_LINE_QUANTITY}",
                http_status=status.HTTP_400_BAD_REQUEST,
            )

        store.add_item(product, ser.validated_data["quantity"])
        return _cart_response(store, status.HTTP_201_CREATED)


class CartItemDetailView(APIView):
    """
    PATCH  /api/cart/items/<product_id>/   {quantity}   (<= 0 removes)
    DELETE /api/cart/items/<product_id>/
    """

    permission_classes = [AllowAny]
    throttle_classes = [CartThrottle]

    @extend_schema(
        tags=["Cart"],
        request=UpdateCartItemInputSerializer,
        responses={200: CartSerializer, 404: OpenApiResponse(description="Line not in cart")},
    )
    def patch(self, request, product_id: int):
        ser = UpdateCartItemInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        store = get_cart_store(request)
        if not store.is_in_cart(product_id):
            return error_response(
                code="not_in_cart",
                message="Produk tidak ada di keranjang",
                http_status=status.HTTP_404_NOT_FOUND,
            )

        store.set_quantity(product_id, ser.validated_data["quantity"])
        return _cart_response(store)

    @extend_schema(tags=["Cart"], responses={200: CartSerializer})
    def delete(self, request, product_id: int):
        store = get_cart_store(request)
        store.remove_item(product_id)
        return _cart_response(store)
