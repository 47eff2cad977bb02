# cart/services/cart_store.py

"""
CART STORE (VISITOR CART)

Purpose:
- Hold the visitor's cart lines and persist them under "apotek-cart".
- All transitions go through apply_command() (pure); CartStore.dispatch()
  applies a command and writes the full collection back to storage.

Hard rules:
- At most one line per product_id; re-adding sums quantities.
- A line never survives with quantity <= 0.
- unit_price is snapshotted at add time (discount applied); later catalog
  price changes do not touch existing lines.
- Loading never raises: missing or corrupt data yields an empty cart.
- The API never stores a line above MAX_LINE_QUANTITY; a stored line above
  it is treated as corrupt.

Stored shape (JSON array, one object per line):
    {"id", "name", "price", "originalPrice", "discountPrice", "mediaUrl",
     "unit", "stock", "category", "quantity", "addedAt"}
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import Union

from django.utils import timezone

from cart.services.pricing import ZERO, effective_price, line_total, money
from cart.services.storage import KeyValueStorage

logger = logging.getLogger(__name__)

CART_STORAGE_KEY = "apotek-cart"

# Upper bound for one line; keeps line totals inside the money columns.
MAX_LINE_QUANTITY = 9999


# =====================================================
# LINE SNAPSHOT
# =====================================================

@dataclass(frozen=True)
class CartLine:
    product_id: int
    name: str
    unit_price: Decimal
    quantity: int
    list_price: Decimal | None = None
    discount_price: Decimal | None = None
    image_ref: str | None = None
    unit: str = ""
    stock_available: int = 0
    category: str = ""
    added_at: str = ""

    @property
    def line_total(self) -> Decimal:
        return line_total(self.unit_price, self.quantity)

    def to_dict(self) -> dict:
        return {
            "id": self.product_id,
            "name": self.name,
            "price": str(self.unit_price),
            "originalPrice": str(self.list_price) if self.list_price is not None else None,
            "discountPrice": str(self.discount_price) if self.discount_price is not None else None,
            "mediaUrl": self.image_ref,
            "unit": self.unit,
            "stock": self.stock_available,
            "category": self.category,
            "quantity": self.quantity,
            "addedAt": self.added_at,
        }

    @staticmethod
    def from_dict(raw: dict) -> "CartLine":
        """
        Parse one stored line. Raises ValueError on anything malformed.
        """
        if not isinstance(raw, dict):
            raise ValueError("cart line must be an object")

        product_id = raw.get("id")
        if isinstance(product_id, bool) or not isinstance(product_id, (int, str)):
            raise ValueError("cart line id is missing")
        try:
            product_id = int(product_id)
        except ValueError:
            raise ValueError("cart line id must be an integer") from None

        quantity = raw.get("quantity")
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise ValueError("cart line quantity must be an integer")
        if quantity > MAX_LINE_QUANTITY:
            raise ValueError("cart line quantity is out of range")

        try:
            unit_price = money(raw.get("price"))
            list_price = money(raw["originalPrice"]) if raw.get("originalPrice") not in (None, "") else None
            discount_price = money(raw["discountPrice"]) if raw.get("discountPrice") not in (None, "") else None
        except (InvalidOperation, TypeError):
            raise ValueError("cart line prices must be numeric") from None

        stock = raw.get("stock") or 0
        if isinstance(stock, bool) or not isinstance(stock, int):
            stock = 0

        return CartLine(
            product_id=product_id,
            name=str(raw.get("name") or ""),
            unit_price=unit_price,
            quantity=quantity,
            list_price=list_price,
            discount_price=discount_price,
            image_ref=raw.get("mediaUrl") or None,
            unit=str(raw.get("unit") or ""),
            stock_available=stock,
            category=str(raw.get("category") or ""),
            added_at=str(raw.get("addedAt") or ""),
        )


# =====================================================
# COMMANDS
# =====================================================

@dataclass(frozen=True)
class AddItem:
    line: CartLine


@dataclass(frozen=True)
class SetQuantity:
    product_id: int
    quantity: int


@dataclass(frozen=True)
class RemoveItem:
    product_id: int


@dataclass(frozen=True)
class Clear:
    pass


CartCommand = Union[AddItem, SetQuantity, RemoveItem, Clear]


def apply_command(lines: tuple[CartLine, ...], command: CartCommand) -> tuple[CartLine, ...]:
    """
    Pure cart transition. Never mutates `lines`.
    """
    if isinstance(command, AddItem):
        incoming = command.line
        if any(line.product_id == incoming.product_id for line in lines):
            out = tuple(
                replace(line, quantity=line.quantity + incoming.quantity)
                if line.product_id == incoming.product_id
                else line
                for line in lines
            )
        else:
            out = tuple(lines) + (incoming,)

    elif isinstance(command, SetQuantity):
        if command.quantity <= 0:
            return apply_command(lines, RemoveItem(command.product_id))
        out = tuple(
            replace(line, quantity=command.quantity)
            if line.product_id == command.product_id
            else line
            for line in lines
        )

    elif isinstance(command, RemoveItem):
        out = tuple(line for line in lines if line.product_id != command.product_id)

    elif isinstance(command, Clear):
        out = ()

    else:
        raise TypeError(f"Unknown cart command: {command!r}")

    return tuple(line for line in out if line.quantity > 0)


def parse_cart(payload: str | None) -> tuple[CartLine, ...]:
    """
    Decode the stored JSON array. Raises ValueError when malformed.
    """
    if payload is None or payload == "":
        return ()
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as exc:
        raise ValueError(f"cart payload is not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise ValueError("cart payload must be a JSON array")

    lines: tuple[CartLine, ...] = ()
    for raw in data:
        # duplicate ids collapse into one line
        lines = apply_command(lines, AddItem(CartLine.from_dict(raw)))
    return lines


def snapshot_from_product(product, quantity: int = 1, *, now=None) -> CartLine:
    """
    Build a CartLine from a catalog Product (model instance or anything
    with the same attributes).
    """
    now = now or timezone.now()
    discount = getattr(product, "discount_price", None)
    return CartLine(
        product_id=int(product.id),
        name=product.name,
        unit_price=effective_price(product.price, discount),
        quantity=int(quantity),
        list_price=money(product.price),
        discount_price=money(discount) if discount not in (None, "") else None,
        image_ref=getattr(product, "media_url", None) or None,
        unit=getattr(product, "unit", "") or "",
        stock_available=int(getattr(product, "stock", 0) or 0),
        category=getattr(product, "primary_category", "") or "",
        added_at=now.isoformat(),
    )


# =====================================================
# STORE
# =====================================================

class CartStore:
    """
    Visitor cart bound to a KeyValueStorage.

    Usage:
        store = CartStore(SessionStorage(request.session))
        store.load()
        store.add_item(product, 2)
    """

    def __init__(self, storage: KeyValueStorage, key: str = CART_STORAGE_KEY):
        self.storage = storage
        self.key = key
        self._lines: tuple[CartLine, ...] = ()
        self.last_write_ok = True

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return self._lines

    def load(self) -> tuple[CartLine, ...]:
        try:
            self._lines = parse_cart(self.storage.read(self.key))
        except ValueError:
            logger.warning("Discarding unreadable cart payload", extra={"storage_key": self.key}, exc_info=True)
            self._lines = ()
        return self._lines

    def dispatch(self, command: CartCommand) -> tuple[CartLine, ...]:
        self._lines = apply_command(self._lines, command)
        self.persist()
        return self._lines

    def persist(self) -> bool:
        payload = json.dumps([line.to_dict() for line in self._lines])
        self.last_write_ok = self.storage.write(self.key, payload)
        if not self.last_write_ok:
            logger.warning("Cart write failed; keeping in-memory cart", extra={"storage_key": self.key})
        return self.last_write_ok

    # -----------------------------
    # Mutations
    # -----------------------------
    def add_item(self, product, quantity: int = 1) -> tuple[CartLine, ...]:
        return self.dispatch(AddItem(snapshot_from_product(product, quantity)))

    def add_line(self, line: CartLine) -> tuple[CartLine, ...]:
        return self.dispatch(AddItem(line))

    def set_quantity(self, product_id: int, quantity: int) -> tuple[CartLine, ...]:
        return self.dispatch(SetQuantity(int(product_id), int(quantity)))

    def remove_item(self, product_id: int) -> tuple[CartLine, ...]:
        return self.dispatch(RemoveItem(int(product_id)))

    def clear(self) -> tuple[CartLine, ...]:
        return self.dispatch(Clear())

    # -----------------------------
    # Queries
    # -----------------------------
    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines)

    def subtotal(self) -> Decimal:
        total = ZERO
        for line in self._lines:
            total += line.line_total
        return money(total)

    def find_line(self, product_id: int) -> CartLine | None:
        for line in self._lines:
            if line.product_id == int(product_id):
                return line
        return None

    def is_in_cart(self, product_id: int) -> bool:
        return self.find_line(product_id) is not None

    def is_empty(self) -> bool:
        return not self._lines
