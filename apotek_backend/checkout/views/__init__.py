# checkout/views/__init__.py

from .api import (
    AreaSearchView,
    CheckoutHistoryView,
    CheckoutOptionsView,
    CheckoutQuoteView,
    CheckoutSubmitView,
)

__all__ = [
    "AreaSearchView",
    "CheckoutHistoryView",
    "CheckoutOptionsView",
    "CheckoutQuoteView",
    "CheckoutSubmitView",
]
