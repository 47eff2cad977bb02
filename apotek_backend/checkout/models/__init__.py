"""
PATH: checkout/models/__init__.py

Checkout models export surface.
"""

from .order import Order

__all__ = ["Order"]
