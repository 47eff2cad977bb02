# checkout/serializers/checkout.py

"""
CHECKOUT SERIALIZERS

Transport shape only. Business rules (known area, known options, express
coercion, Indonesian error messages) live in checkout.services.
"""

from rest_framework import serializers

from checkout.models import Order


# =====================================================
# INPUT
# =====================================================

class QuoteInputSerializer(serializers.Serializer):
    area_name = serializers.CharField(required=False, allow_blank=True, default="")
    delivery_option_id = serializers.CharField(required=False, allow_blank=True, default="regular")


class CheckoutInputSerializer(serializers.Serializer):
    customer_name = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)
    area_name = serializers.CharField(required=False, allow_blank=True, default="", max_length=100)
    delivery_option_id = serializers.CharField(required=False, allow_blank=True, max_length=32)
    notes = serializers.CharField(required=False, allow_blank=True, default="")
    payment_method_id = serializers.CharField(required=False, allow_blank=True, max_length=32)
    idempotency_key = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=64)


class CheckoutHistoryQuerySerializer(serializers.Serializer):
    list = serializers.ChoiceField(choices=["names", "areas", "all"], required=False, default="all")


# =====================================================
# OUTPUT
# =====================================================

class OrderSerializer(serializers.ModelSerializer):
    """Read-only view of a persisted order."""

    class Meta:
        model = Order
        fields = [
            "id",
            "order_no",
            "customer_name",
            "area_name",
            "delivery_option",
            "notes",
            "payment_method",
            "lines_snapshot",
            "subtotal_amount",
            "delivery_fee",
            "total_amount",
            "status",
            "message",
            "created_at",
        ]
        read_only_fields = fields
