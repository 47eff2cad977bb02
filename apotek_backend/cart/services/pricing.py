# cart/services/pricing.py

"""
PRICING UTILITIES

Money is Decimal end-to-end (2dp, half-up); display strings are whole Rupiah.

    format_price(45000)  -> "Rp 45.000"
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

TWOPLACES = Decimal("0.01")
ZERO = Decimal("0.00")


def money(v) -> Decimal:
    if v is None or v == "":
        return ZERO
    return Decimal(str(v)).quantize(TWOPLACES, rounding=ROUND_HALF_UP)


def effective_price(price, discount_price=None) -> Decimal:
    """Discount price when present and positive, otherwise the list price."""
    discount = money(discount_price) if discount_price not in (None, "") else None
    if discount is not None and discount > ZERO:
        return discount
    return money(price)


def line_total(unit_price, quantity: int) -> Decimal:
    return money(money(unit_price) * int(quantity))


def format_price(amount) -> str:
    value = money(amount).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    grouped = f"{abs(int(value)):,}".replace(",", ".")
    return f"{sign}Rp {grouped}"
