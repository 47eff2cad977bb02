# products/apps.py

"""
PRODUCTS APP CONFIG

Catalog module:
- Category + Product models
- Public catalog browsing
- Admin panel product/category management
"""

from django.apps import AppConfig


class ProductsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "products"
    verbose_name = "Catalog"
