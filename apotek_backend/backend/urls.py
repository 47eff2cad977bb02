# backend/urls.py
"""
PROJECT URLS

All API routes live under /api/

Storefront endpoints (AllowAny, throttled):
- /api/public/products/...   catalog browsing
- /api/cart/...              session cart
- /api/public/checkout/...   delivery quote, order submission, history

Administrative panel:
- /api/admin/...             product/category management + overview

Operational:
- /api/health/            DB ping (503 when the database is unreachable)
- /api/docs/, /api/redoc/ OpenAPI UIs over /api/schema/
- Django admin site at ADMIN_PATH (env), kept off the /api/admin/ panel prefix
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.contrib import admin
from django.db import connections
from django.db.utils import DatabaseError, OperationalError
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.utils import extend_schema
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)
from rest_framework import serializers, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

logger = logging.getLogger(__name__)


# ------------------ API ROOT (PUBLIC) ------------------
@extend_schema(
    responses={
        200: {
            "type": "object",
            "properties": {
                "message": {"type": "string"},
                "docs": {"type": "object"},
                "modules": {"type": "object"},
            },
        }
    },
)
@api_view(["GET"])
@permission_classes([AllowAny])
def api_root(request):
    return Response(
        {
            "message": f"{settings.STORE_NAME} storefront API is running",
            "docs": {
                "swagger": "/api/docs/",
                "redoc": "/api/redoc/",
                "schema": "/api/schema/",
            },
            "modules": {
                "catalog": "/api/public/products/",
                "cart": "/api/cart/",
                "checkout": "/api/public/checkout/",
                "admin_products": "/api/admin/products/",
                "admin_categories": "/api/admin/categories/",
                "admin_overview": "/api/admin/overview/",
            },
        }
    )


# ------------------ HEALTH CHECK (PUBLIC) ------------------
class HealthSerializer(serializers.Serializer):
    status = serializers.CharField()
    db = serializers.CharField()
    error = serializers.CharField(required=False)


@extend_schema(responses={200: HealthSerializer, 503: HealthSerializer})
@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    """
    App is up and the default database answers `SELECT 1`.
    Orders and visitor sessions both live in that database.
    """
    try:
        with connections["default"].cursor() as cursor:
            cursor.execute("SELECT 1;")
            cursor.fetchone()
    except DatabaseError as exc:
        db_state = "down" if isinstance(exc, OperationalError) else "unknown"
        logger.error("Health check failed: database %s", db_state, exc_info=True)
        return Response(
            {"status": "degraded", "db": db_state, "error": str(exc)},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return Response({"status": "ok", "db": "ok"})


# ------------------ DJANGO ADMIN SITE ------------------
# /api/admin/ is the storefront admin panel API; the Django admin site
# (orders, catalog) mounts at ADMIN_PATH.
ADMIN_PATH = getattr(settings, "ADMIN_PATH", "admin/")
if not ADMIN_PATH.endswith("/"):
    ADMIN_PATH = f"{ADMIN_PATH}/"


# ------------------ API ROUTES (ALL UNDER /api/) ------------------
api_urlpatterns = [
    path("", api_root, name="api-root"),
    path("health/", health_check, name="health-check"),
    # OpenAPI / Swagger
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
    # Storefront
    path("public/products/", include("products.urls.public")),
    path("cart/", include("cart.urls")),
    path("public/checkout/", include("checkout.urls")),
    # Administrative panel
    path("admin/", include("products.urls.admin")),
    path("admin/", include("dashboard.urls")),
]

urlpatterns = [
    path(ADMIN_PATH, admin.site.urls),
    path("", RedirectView.as_view(url="/api/docs/", permanent=False), name="root"),
    path("api/", include(api_urlpatterns)),
]
