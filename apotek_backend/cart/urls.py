# cart/urls.py

"""
CART URLS

Base path (mounted in backend/urls.py):
    /api/cart/
"""

from django.urls import path

from cart.views import CartItemDetailView, CartItemsView, CartView

urlpatterns = [
    path("", CartView.as_view(), name="cart"),
    path("items/", CartItemsView.as_view(), name="cart-items"),
    path("items/<int:product_id>/", CartItemDetailView.as_view(), name="cart-item-detail"),
]
