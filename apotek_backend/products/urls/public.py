# products/urls/public.py

"""
PUBLIC CATALOG URLS

Base path (mounted in backend/urls.py):
    /api/public/products/
"""

from django.urls import path

from products.views import PublicProductDetailView, PublicProductListView

urlpatterns = [
    path("", PublicProductListView.as_view(), name="public-product-list"),
    path("<int:pk>/", PublicProductDetailView.as_view(), name="public-product-detail"),
]
