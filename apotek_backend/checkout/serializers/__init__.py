# checkout/serializers/__init__.py

from .checkout import (
    CheckoutHistoryQuerySerializer,
    CheckoutInputSerializer,
    OrderSerializer,
    QuoteInputSerializer,
)

__all__ = [
    "CheckoutHistoryQuerySerializer",
    "CheckoutInputSerializer",
    "OrderSerializer",
    "QuoteInputSerializer",
]
