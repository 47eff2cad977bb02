# checkout/urls.py
"""
PUBLIC CHECKOUT URLS

Base path (mounted in backend/urls.py):
    /api/public/checkout/
"""

from __future__ import annotations

from django.urls import path

from checkout.views import (
    AreaSearchView,
    CheckoutHistoryView,
    CheckoutOptionsView,
    CheckoutQuoteView,
    CheckoutSubmitView,
)

urlpatterns = [
    path("", CheckoutSubmitView.as_view(), name="public-checkout"),
    path("options/", CheckoutOptionsView.as_view(), name="public-checkout-options"),
    path("areas/", AreaSearchView.as_view(), name="public-checkout-areas"),
    path("quote/", CheckoutQuoteView.as_view(), name="public-checkout-quote"),
    path("history/", CheckoutHistoryView.as_view(), name="public-checkout-history"),
]
