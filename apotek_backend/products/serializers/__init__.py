# products/serializers/__init__.py

from .category import CategorySerializer
from .product import (
    AdminProductSerializer,
    PublicProductDetailSerializer,
    PublicProductSerializer,
)

__all__ = [
    "AdminProductSerializer",
    "CategorySerializer",
    "PublicProductDetailSerializer",
    "PublicProductSerializer",
]
