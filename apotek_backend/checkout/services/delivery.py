# checkout/services/delivery.py

"""
DELIVERY COST CALCULATOR

Rules:
- No area selected -> fee 0.
- "secepatnya" (express) charges the area's express_cost INSTEAD of the
  regular cost; the two are never added.
- When express is globally unavailable, a "secepatnya" selection is
  treated as "regular"; so is an unknown option id.
- total = subtotal + delivery fee (no tax, no extra discounts).
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Sequence

from cart.services.pricing import ZERO, money
from checkout.data import AREAS, EXPRESS, REGULAR, get_delivery_options
from checkout.types import DeliveryArea, DeliveryOption

FEE_LABEL_EXPRESS = "Biaya Express"
FEE_LABEL_REGULAR = "Ongkos Kirim"


def find_area(name: str | None, areas: Iterable[DeliveryArea] = AREAS) -> DeliveryArea | None:
    target = (name or "").strip()
    if not target:
        return None
    for area in areas:
        if area.name == target:
            return area
    return None


def find_option(option_id: str | None, options: Iterable[DeliveryOption]) -> DeliveryOption | None:
    for option in options:
        if option.id == option_id:
            return option
    return None


def express_available(options: Iterable[DeliveryOption]) -> bool:
    express = find_option(EXPRESS, options)
    return bool(express and express.available)


def effective_delivery_option(option_id: str, options: Sequence[DeliveryOption]) -> str:
    """Unknown ids and an unavailable express choice both fall back to regular."""
    if find_option(option_id, options) is None:
        return REGULAR
    if option_id == EXPRESS and not express_available(options):
        return REGULAR
    return option_id


def resolve_delivery_fee(area: DeliveryArea | None, option_id: str) -> Decimal:
    if area is None:
        return ZERO
    if option_id == EXPRESS:
        return money(area.express_cost)
    return money(area.regular_cost)


def fee_label(option_id: str) -> str:
    return FEE_LABEL_EXPRESS if option_id == EXPRESS else FEE_LABEL_REGULAR


@dataclass(frozen=True)
class DeliveryQuote:
    area: DeliveryArea | None
    delivery_option_id: str
    delivery_fee: Decimal
    subtotal: Decimal
    total: Decimal
    fee_label: str

    def to_dict(self) -> dict:
        return {
            "area": self.area.to_dict() if self.area else None,
            "delivery_option_id": self.delivery_option_id,
            "delivery_fee": str(self.delivery_fee),
            "subtotal": str(self.subtotal),
            "total": str(self.total),
            "fee_label": self.fee_label,
        }


def quote(
    subtotal,
    area_name: str | None,
    option_id: str | None,
    options: Sequence[DeliveryOption] | None = None,
    areas: Iterable[DeliveryArea] = AREAS,
) -> DeliveryQuote:
    """
    Checkout cost for the current selection.

    delivery_option_id in the result is the EFFECTIVE option (express
    coerced to regular when unavailable, unknown ids to regular).
    """
    options = get_delivery_options() if options is None else options
    area = find_area(area_name, areas)
    effective = effective_delivery_option(option_id or REGULAR, options)
    fee = resolve_delivery_fee(area, effective)
    sub = money(subtotal)

    return DeliveryQuote(
        area=area,
        delivery_option_id=effective,
        delivery_fee=fee,
        subtotal=sub,
        total=money(sub + fee),
        fee_label=fee_label(effective),
    )


def delivery_options_for(
    area: DeliveryArea | None,
    options: Sequence[DeliveryOption] | None = None,
) -> list[dict]:
    """
    Delivery selector rows: availability plus the fee each option would
    charge for `area` (None when no area is selected yet).
    """
    options = get_delivery_options() if options is None else options
    rows = []
    for option in options:
        row = option.to_dict()
        row["fee"] = str(resolve_delivery_fee(area, option.id)) if area else None
        rows.append(row)
    return rows


def search_areas(
    query: str | None,
    history: Sequence[str] = (),
    areas: Sequence[DeliveryArea] = AREAS,
) -> list[DeliveryArea]:
    """
    Area selector ordering: recently used areas first, then the rest.

    - blank query: history areas in history order, then the remaining
      areas in reference order
    - otherwise: case-insensitive substring match; history matches first,
      both groups in reference order
    """
    term = (query or "").strip().lower()

    if not term:
        recent = [a for a in (find_area(name, areas) for name in history) if a is not None]
        rest = [a for a in areas if a.name not in history]
        return recent + rest

    matches = [a for a in areas if term in a.name.lower()]
    recent = [a for a in matches if a.name in history]
    rest = [a for a in matches if a.name not in history]
    return recent + rest
