# checkout/services/forms.py

"""
CHECKOUT FORM + VALIDATION

Validation order (first failure is reported first):
1. customer_name blank       -> "Nama wajib diisi"
2. area_name not a known area -> "Pilih daerah tujuan"
3. delivery option missing    -> "Pilih waktu pengiriman"
4. payment method unknown     -> "Pilih metode pembayaran"

Defaults when the field is absent: delivery "regular", payment "cod".
An explicitly blank value is NOT defaulted (it fails validation).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Sequence

from checkout.data import AREAS, COD, PAYMENT_METHODS, REGULAR, get_delivery_options
from checkout.services.delivery import effective_delivery_option, find_area, find_option
from checkout.types import DeliveryArea, DeliveryOption, PaymentMethod

MSG_NAME_REQUIRED = "Nama wajib diisi"
MSG_AREA_REQUIRED = "Pilih daerah tujuan"
MSG_DELIVERY_REQUIRED = "Pilih waktu pengiriman"
MSG_PAYMENT_REQUIRED = "Pilih metode pembayaran"


def _clean(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


@dataclass(frozen=True)
class CheckoutForm:
    customer_name: str
    area_name: str
    delivery_option_id: str = REGULAR
    notes: str = ""
    payment_method_id: str = COD
    idempotency_key: str | None = None

    @staticmethod
    def from_raw(raw: dict) -> "CheckoutForm":
        return CheckoutForm(
            customer_name=_clean(raw.get("customer_name")),
            area_name=_clean(raw.get("area_name")),
            delivery_option_id=_clean(raw["delivery_option_id"]) if "delivery_option_id" in raw else REGULAR,
            notes=_clean(raw.get("notes")),
            payment_method_id=_clean(raw["payment_method_id"]) if "payment_method_id" in raw else COD,
            idempotency_key=_clean(raw.get("idempotency_key")) or None,
        )

    def normalized(self, options: Sequence[DeliveryOption]) -> "CheckoutForm":
        return replace(
            self,
            delivery_option_id=effective_delivery_option(self.delivery_option_id, options),
        )

    def to_dict(self) -> dict:
        return {
            "customer_name": self.customer_name,
            "area_name": self.area_name,
            "delivery_option_id": self.delivery_option_id,
            "notes": self.notes,
            "payment_method_id": self.payment_method_id,
        }


@dataclass(frozen=True)
class ValidationResult:
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_checkout_form(
    form: CheckoutForm,
    areas: Sequence[DeliveryArea] = AREAS,
    options: Sequence[DeliveryOption] | None = None,
    payment_methods: Sequence[PaymentMethod] = PAYMENT_METHODS,
) -> ValidationResult:
    options = get_delivery_options() if options is None else options
    errors: dict[str, str] = {}

    if not form.customer_name.strip():
        errors["customer_name"] = MSG_NAME_REQUIRED

    if find_area(form.area_name, areas) is None:
        errors["area_name"] = MSG_AREA_REQUIRED

    # An unavailable express choice is coerced later, not rejected.
    if not form.delivery_option_id or find_option(form.delivery_option_id, options) is None:
        errors["delivery_option_id"] = MSG_DELIVERY_REQUIRED

    if not any(m.id == form.payment_method_id for m in payment_methods):
        errors["payment_method_id"] = MSG_PAYMENT_REQUIRED

    return ValidationResult(errors=errors)
