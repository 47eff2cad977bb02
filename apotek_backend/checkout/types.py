# checkout/types.py

"""
CHECKOUT REFERENCE TYPES

Immutable value objects for the static checkout reference data
(delivery areas, delivery options, payment methods).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DeliveryArea:
    name: str
    regular_cost: Decimal
    express_cost: Decimal

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "regular_cost": str(self.regular_cost),
            "express_cost": str(self.express_cost),
        }


@dataclass(frozen=True)
class DeliveryOption:
    id: str
    name: str
    description: str
    available: bool = True

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PaymentMethod:
    id: str
    name: str
    description: str

    def to_dict(self) -> dict:
        return asdict(self)
