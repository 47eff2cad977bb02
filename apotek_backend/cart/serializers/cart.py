# cart/serializers/cart.py

"""
CART SERIALIZERS

Purpose:
- Render the session cart in a frontend-friendly shape.
- Keep money + totals server-derived (single source of truth).
"""

from rest_framework import serializers

from cart.services.cart_store import MAX_LINE_QUANTITY
from cart.services.pricing import format_price


# =====================================================
# INPUT
# =====================================================

class AddCartItemInputSerializer(serializers.Serializer):
    product_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1, max_value=MAX_LINE_QUANTITY, default=1)


class UpdateCartItemInputSerializer(serializers.Serializer):
    # 0 (or less) removes the line
    quantity = serializers.IntegerField(max_value=MAX_LINE_QUANTITY)


# =====================================================
# OUTPUT
# =====================================================

class CartLineSerializer(serializers.Serializer):
    product_id = serializers.IntegerField()
    name = serializers.CharField()
    unit_price = serializers.DecimalField(max_digits=12, decimal_places=2)
    list_price = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    discount_price = serializers.DecimalField(max_digits=12, decimal_places=2, allow_null=True)
    image_ref = serializers.CharField(allow_null=True)
    unit = serializers.CharField(allow_blank=True)
    stock_available = serializers.IntegerField()
    category = serializers.CharField(allow_blank=True)
    quantity = serializers.IntegerField()
    line_total = serializers.DecimalField(max_digits=20, decimal_places=2)
    line_total_display = serializers.SerializerMethodField()
    added_at = serializers.CharField(allow_blank=True)

    def get_line_total_display(self, obj) -> str:
        return format_price(obj.line_total)


class CartSerializer(serializers.Serializer):
    """
    Serializes a loaded CartStore.

    Guarantees:
    - item_count counts units, not lines
    - subtotal = sum(unit_price * quantity)
    """

    items = serializers.SerializerMethodField()
    item_count = serializers.SerializerMethodField()
    subtotal = serializers.SerializerMethodField()
    subtotal_display = serializers.SerializerMethodField()

    def get_items(self, store) -> list[dict]:
        return CartLineSerializer(store.lines, many=True).data

    def get_item_count(self, store) -> int:
        return store.item_count()

    def get_subtotal(self, store) -> str:
        return str(store.subtotal())

    def get_subtotal_display(self, store) -> str:
        return format_price(store.subtotal())
