# products/urls/admin.py

"""
ADMIN PANEL CATALOG URLS

Base path (mounted in backend/urls.py):
    /api/admin/

Routes:
    /api/admin/products/            list/create
    /api/admin/products/<id>/       retrieve/update/delete
    /api/admin/categories/          list/create
    /api/admin/categories/<id>/     retrieve/update/delete
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from products.views import AdminCategoryViewSet, AdminProductViewSet

router = DefaultRouter()

router.register(r"categories", AdminCategoryViewSet, basename="admin-categories")
router.register(r"products", AdminProductViewSet, basename="admin-products")

urlpatterns = [
    path("", include(router.urls)),
]
