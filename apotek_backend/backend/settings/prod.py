# backend/settings/prod.py
"""
PATH: backend/settings/prod.py

PRODUCTION SETTINGS (storefront deployment)

Startup refuses to continue when:
- SECRET_KEY is missing or still the dev placeholder
- ALLOWED_HOSTS is empty
- DATABASE_URL is missing or points at SQLite (orders + sessions need Postgres)
- storefront origins (CORS / CSRF) are missing, plain http, or localhost

The cart and checkout history ride on the session cookie, so the cookie is
Secure and its SameSite policy is configurable for a storefront hosted on
another origin.
"""

from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured

from .base import *  # noqa: F403
from .base import BASE_DIR, MIDDLEWARE, env

DEBUG = False


def _required(name: str, value):
    if not value:
        raise ImproperlyConfigured(f"{name} must be set in production.")
    return value


def _storefront_origins(name: str) -> list[str]:
    origins = _required(name, env.list(name, default=[]))
    for origin in origins:
        if origin.startswith("http://"):
            raise ImproperlyConfigured(f"{name} must only list https:// origins ({origin}).")
        if "localhost" in origin or "127.0.0.1" in origin:
            raise ImproperlyConfigured(f"{name} must not list local origins ({origin}).")
    return origins


# ----------------------------
# Secrets / hosts
# ----------------------------
SECRET_KEY = _required("SECRET_KEY", (env("SECRET_KEY", default="") or "").strip())
if SECRET_KEY == "dev-insecure-change-me":
    raise ImproperlyConfigured("SECRET_KEY is still the development placeholder.")

ALLOWED_HOSTS = _required("ALLOWED_HOSTS", env.list("ALLOWED_HOSTS", default=[]))

# ----------------------------
# Database
# ----------------------------
_database_url = _required("DATABASE_URL", (env("DATABASE_URL", default="") or "").strip())
if _database_url.startswith("sqlite"):
    raise ImproperlyConfigured("DATABASE_URL must point at Postgres in production.")

DATABASES = {"default": env.db("DATABASE_URL")}
DATABASES["default"]["CONN_MAX_AGE"] = env.int("DB_CONN_MAX_AGE", default=60)

# ----------------------------
# Static files (Django admin assets, API docs)
# ----------------------------
STATIC_ROOT = env("STATIC_ROOT", default=str(BASE_DIR / "staticfiles"))
MIDDLEWARE.insert(1, "whitenoise.middleware.WhiteNoiseMiddleware")
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

# ----------------------------
# TLS behind the proxy
# ----------------------------
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", default=True)
SECURE_HSTS_SECONDS = env.int("SECURE_HSTS_SECONDS", default=3600)
SECURE_HSTS_INCLUDE_SUBDOMAINS = env.bool("SECURE_HSTS_INCLUDE_SUBDOMAINS", default=True)
SECURE_HSTS_PRELOAD = env.bool("SECURE_HSTS_PRELOAD", default=False)

SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_REFERRER_POLICY = "same-origin"
SECURE_CROSS_ORIGIN_OPENER_POLICY = "same-origin"
X_FRAME_OPTIONS = "DENY"

# ----------------------------
# Cookies (session = visitor cart)
# ----------------------------
SESSION_COOKIE_SECURE = True
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = env("SESSION_COOKIE_SAMESITE", default="None")

CSRF_COOKIE_SECURE = True
CSRF_COOKIE_HTTPONLY = True
CSRF_COOKIE_SAMESITE = "Lax"

# ----------------------------
# Storefront / admin panel origins
# ----------------------------
CORS_ALLOWED_ORIGINS = _storefront_origins("CORS_ALLOWED_ORIGINS")
CSRF_TRUSTED_ORIGINS = _storefront_origins("CSRF_TRUSTED_ORIGINS")
CORS_ALLOW_CREDENTIALS = True
