"""
PATH: products/models/__init__.py

Products models export surface.
"""

from .category import Category
from .product import DEFAULT_UNIT, Product

__all__ = [
    "Category",
    "DEFAULT_UNIT",
    "Product",
]
