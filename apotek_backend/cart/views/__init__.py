# cart/views/__init__.py

from .api import CartItemDetailView, CartItemsView, CartView, get_cart_store

__all__ = [
    "CartItemDetailView",
    "CartItemsView",
    "CartView",
    "get_cart_store",
]
