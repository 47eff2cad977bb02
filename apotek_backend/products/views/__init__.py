# products/views/__init__.py

"""
Products views package exports.

Purpose:
- Central export point for url/router imports.
"""

from .catalog import PublicProductDetailView, PublicProductListView
from .category import AdminCategoryViewSet
from .product import AdminProductViewSet

__all__ = [
    "AdminCategoryViewSet",
    "AdminProductViewSet",
    "PublicProductDetailView",
    "PublicProductListView",
]
