# checkout/views/api.py
"""
PUBLIC CHECKOUT (STOREFRONT)

GET    /api/public/checkout/options/?area=<name>
GET    /api/public/checkout/areas/?q=<text>
POST   /api/public/checkout/quote/
POST   /api/public/checkout/
GET    /api/public/checkout/history/?list=names|areas|all
DELETE /api/public/checkout/history/?list=names|areas|all

Rules:
- AllowAny; cart + history live in the visitor session
- Totals are computed server-side from the session cart
- idempotency_key is scoped to the visitor session
- Errors: {"error": {"code", "message", ...}}

Security hardening:
- Submission is throttled (public_write) because it's a write endpoint (abuse target)
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from cart.services.storage import SessionStorage
from cart.views.api import get_cart_store
from checkout.data import AREAS, PAYMENT_METHODS, get_delivery_options
from checkout.serializers import (
    CheckoutHistoryQuerySerializer,
    CheckoutInputSerializer,
    QuoteInputSerializer,
)
from checkout.services.delivery import (
    delivery_options_for,
    express_available,
    find_area,
    quote,
    search_areas,
)
from checkout.services.exceptions import (
    CheckoutValidationError,
    EmptyCartError,
    IdempotencyConflictError,
    OrderPersistenceError,
)
from checkout.services.forms import CheckoutForm
from checkout.services.history import CheckoutHistoryStore
from checkout.services.order_composer import OrderComposer
from checkout.services.order_log import DatabaseOrderLog


class PublicCatalogThrottle(AnonRateThrottle):
    scope = "public_catalog"


class PublicWriteThrottle(AnonRateThrottle):
    scope = "public_write"


# =====================================================
# API ERROR NORMALIZATION
# =====================================================

def error_response(*, code: str, message: str, http_status: int, **extra):
    body = {"code": code, "message": message}
    body.update(extra)
    return Response({"error": body}, status=http_status)


def _history_for(request) -> CheckoutHistoryStore:
    return CheckoutHistoryStore(SessionStorage(request.session))


def _visitor_key(request) -> str:
    """Session key of the visitor; creates the session when it does not exist yet."""
    if not request.session.session_key:
        request.session.save()
    return request.session.session_key


# =====================================================
# OPTIONS / AREAS / QUOTE
# =====================================================

class CheckoutOptionsView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(
        tags=["Checkout"],
        parameters=[
            OpenApiParameter(
                name="area",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Selected area name; adds a per-option fee preview.",
            ),
        ],
        responses={200: OpenApiResponse(description="Areas, delivery options and payment methods")},
    )
    def get(self, request):
        options = get_delivery_options()
        area = find_area(request.query_params.get("area"))

        return Response(
            {
                "areas": [a.to_dict() for a in AREAS],
                "delivery_options": delivery_options_for(area, options),
                "express_available": express_available(options),
                "payment_methods": [m.to_dict() for m in PAYMENT_METHODS],
            },
            status=status.HTTP_200_OK,
        )


class AreaSearchView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(
        tags=["Checkout"],
        parameters=[
            OpenApiParameter(
                name="q",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Case-insensitive area name search.",
            ),
        ],
        responses={200: OpenApiResponse(description="Matching areas, recently used first")},
    )
    def get(self, request):
        history = _history_for(request)
        areas = search_areas(request.query_params.get("q"), history.areas)
        recent = set(history.areas)
        return Response(
            [dict(a.to_dict(), recent=a.name in recent) for a in areas],
            status=status.HTTP_200_OK,
        )


class CheckoutQuoteView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(
        tags=["Checkout"],
        request=QuoteInputSerializer,
        responses={200: OpenApiResponse(description="Delivery fee + total for the session cart")},
    )
    def post(self, request):
        ser = QuoteInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        cart = get_cart_store(request)
        q = quote(
            cart.subtotal(),
            ser.validated_data["area_name"],
            ser.validated_data["delivery_option_id"],
        )
        return Response(q.to_dict(), status=status.HTTP_200_OK)


# =====================================================
# SUBMIT
# =====================================================

class CheckoutSubmitView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicWriteThrottle]

    @extend_schema(
        tags=["Checkout"],
        request=CheckoutInputSerializer,
        responses={
            201: OpenApiResponse(description="Order placed: {order, message, dispatch}"),
            200: OpenApiResponse(description="Idempotent replay of an existing order"),
            400: OpenApiResponse(description="Empty cart or validation error"),
            409: OpenApiResponse(description="Idempotency key already used for a different cart"),
            429: OpenApiResponse(description="Rate limited"),
            503: OpenApiResponse(description="Order could not be saved (retry)"),
        },
        description="Submit the session cart as an order and get the WhatsApp hand-off link.",
    )
    def post(self, request):
        ser = CheckoutInputSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        composer = OrderComposer(
            cart=get_cart_store(request),
            history=_history_for(request),
            order_log=DatabaseOrderLog(),
            owner_key=_visitor_key(request),
        )

        try:
            result = composer.submit(CheckoutForm.from_raw(ser.validated_data))
        except EmptyCartError as exc:
            return error_response(
                code="empty_cart",
                message=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
            )
        except CheckoutValidationError as exc:
            return error_response(
                code="validation_error",
                message=str(exc),
                http_status=status.HTTP_400_BAD_REQUEST,
                fields=exc.errors,
            )
        except IdempotencyConflictError as exc:
            return error_response(
                code="idempotency_conflict",
                message=str(exc),
                http_status=status.HTTP_409_CONFLICT,
            )
        except OrderPersistenceError as exc:
            return error_response(
                code="order_persistence_failed",
                message=str(exc),
                http_status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )

        return Response(
            {
                "order": result.order.to_dict(),
                "message": result.message,
                "dispatch": result.dispatch.to_dict(),
                "replayed": result.replayed,
            },
            status=status.HTTP_200_OK if result.replayed else status.HTTP_201_CREATED,
        )


# =====================================================
# HISTORY
# =====================================================

class CheckoutHistoryView(APIView):
    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]

    @extend_schema(
        tags=["Checkout"],
        parameters=[CheckoutHistoryQuerySerializer],
        responses={200: OpenApiResponse(description="{names, areas}")},
    )
    def get(self, request):
        q = CheckoutHistoryQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        which = q.validated_data["list"]

        history = _history_for(request)
        payload = {}
        if which in ("names", "all"):
            payload["names"] = history.names
        if which in ("areas", "all"):
            payload["areas"] = history.areas
        return Response(payload, status=status.HTTP_200_OK)

    @extend_schema(
        tags=["Checkout"],
        parameters=[CheckoutHistoryQuerySerializer],
        responses={200: OpenApiResponse(description="History after clearing")},
    )
    def delete(self, request):
        q = CheckoutHistoryQuerySerializer(data=request.query_params)
        q.is_valid(raise_exception=True)
        which = q.validated_data["list"]

        history = _history_for(request)
        if which == "names":
            history.clear_names()
        elif which == "areas":
            history.clear_areas()
        else:
            history.clear_all()

        return Response({"names": history.names, "areas": history.areas}, status=status.HTTP_200_OK)
