# checkout/data.py

"""
CHECKOUT REFERENCE DATA

Static, not user-mutable. Costs are whole Rupiah.

Express availability is a global switch (settings.EXPRESS_DELIVERY_ENABLED);
when it is off, "secepatnya" is still listed but marked unavailable.
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings

from checkout.types import DeliveryArea, DeliveryOption, PaymentMethod

REGULAR = "regular"
EXPRESS = "secepatnya"

COD = "cod"
TRANSFER = "transfer"


def _area(name: str, regular: int, express: int) -> DeliveryArea:
    return DeliveryArea(name=name, regular_cost=Decimal(regular), express_cost=Decimal(express))


AREAS: tuple[DeliveryArea, ...] = (
    _area("Krandegan", 0, 5000),
    _area("Sukorame", 5000, 7000),
    _area("Melis", 5000, 8000),
    _area("Karanganyar", 8000, 10000),
    _area("Widoro", 8000, 12000),
    _area("Ngadirenggo", 10000, 15000),
    _area("Ngetal", 10000, 15000),
    _area("Wonocoyo", 12000, 18000),
    _area("Bendorejo", 12000, 20000),
)

PAYMENT_METHODS: tuple[PaymentMethod, ...] = (
    PaymentMethod(id=COD, name="Bayar di Tempat (COD)", description="Bayar saat barang diterima"),
    PaymentMethod(id=TRANSFER, name="Transfer Bank", description="Transfer ke rekening apotek"),
)


def get_delivery_options(*, express_enabled: bool | None = None) -> tuple[DeliveryOption, ...]:
    if express_enabled is None:
        express_enabled = bool(getattr(settings, "EXPRESS_DELIVERY_ENABLED", True))

    return (
        DeliveryOption(id=REGULAR, name="Regular", description="Pengiriman standar", available=True),
        DeliveryOption(
            id=EXPRESS,
            name="Secepatnya",
            description="Prioritas pengiriman cepat",
            available=express_enabled,
        ),
    )
