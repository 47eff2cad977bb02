# checkout/apps.py

"""
CHECKOUT APP CONFIG

Storefront checkout module:
- Delivery cost calculator + reference data
- Checkout history (session)
- Order composer (order log + WhatsApp hand-off)
"""

from django.apps import AppConfig


class CheckoutConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "checkout"
    verbose_name = "Storefront Checkout"
