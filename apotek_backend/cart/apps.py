# cart/apps.py

"""
CART APP CONFIG

Visitor cart module:
- Pricing utilities
- Session-backed cart store (no database tables)
- Cart API
"""

from django.apps import AppConfig


class CartConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "cart"
    verbose_name = "Visitor Cart"
