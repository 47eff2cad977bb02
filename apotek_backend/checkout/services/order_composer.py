# checkout/services/order_composer.py

"""
ORDER COMPOSER (APPLICATION SERVICE)

Purpose:
- Turn the visitor's cart + checkout form into an order record, a rendered
  WhatsApp message and a dispatch hand-off, then empty the cart.

Submission steps:
1. Idempotent replay: an idempotency_key this visitor already used returns
   the stored order, provided the cart is empty or still holds exactly the
   lines of that order (then it is cleared). A different cart under the same
   key -> IdempotencyConflictError; nothing is mutated.
2. Empty cart -> EmptyCartError (nothing mutated).
3. Validate the form and the order total -> CheckoutValidationError (no order,
   cart and history untouched).
4. Normalize the delivery option; record name + area in checkout history.
5. Build the record (snapshot of lines, customer, totals, status "pending").
6. Render the message, then append the record to the order log
   (OrderPersistenceError leaves the cart intact).
7. Dispatch the message.
8. Clear the cart.

Hard rules:
- Money values are computed server-side from the cart snapshot.
- express fee REPLACES the regular fee (see checkout.services.delivery).
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal
from typing import Protocol, Sequence

from django.conf import settings
from django.utils import timezone

from cart.services.cart_store import CartLine, CartStore
from cart.services.pricing import format_price
from checkout.data import AREAS, PAYMENT_METHODS, get_delivery_options
from checkout.services.delivery import fee_label as delivery_fee_label
from checkout.services.delivery import find_option, quote
from checkout.services.dispatch import DispatchResult, WhatsAppDispatcher
from checkout.services.exceptions import (
    CheckoutValidationError,
    EmptyCartError,
    IdempotencyConflictError,
)
from checkout.services.forms import CheckoutForm, validate_checkout_form
from checkout.services.history import CheckoutHistoryStore
from checkout.types import DeliveryArea, DeliveryOption, PaymentMethod

logger = logging.getLogger(__name__)

STATUS_PENDING = "pending"

# Largest total the order log can store (DecimalField max_digits=14).
MAX_ORDER_AMOUNT = Decimal("999999999999.99")
MSG_TOTAL_TOO_LARGE = "Total pesanan melebihi batas"


def generate_order_no(now: datetime | None = None) -> str:
    """ORD-<epoch millis>-<4 uppercase hex>."""
    now = now or timezone.now()
    millis = int(now.timestamp() * 1000)
    return f"ORD-{millis}-{secrets.token_hex(2).upper()}"


# =====================================================
# RECORD
# =====================================================

@dataclass(frozen=True)
class OrderRecord:
    order_no: str
    lines: tuple[CartLine, ...]
    customer: CheckoutForm
    subtotal: Decimal
    delivery_fee: Decimal
    total: Decimal
    status: str
    created_at: datetime
    message: str = ""
    owner_key: str = ""

    def to_dict(self) -> dict:
        return {
            "order_no": self.order_no,
            "lines": [line.to_dict() for line in self.lines],
            "customer": self.customer.to_dict(),
            "subtotal": str(self.subtotal),
            "delivery_fee": str(self.delivery_fee),
            "total": str(self.total),
            "status": self.status,
            "created_at": self.created_at.isoformat(),
        }


class OrderLog(Protocol):
    def append(self, record: OrderRecord) -> OrderRecord: ...

    def find_by_idempotency_key(self, owner_key: str, key: str) -> OrderRecord | None: ...


def _line_signature(lines: Sequence[CartLine]) -> list[tuple]:
    return sorted((line.product_id, line.quantity, line.unit_price) for line in lines)


@dataclass(frozen=True)
class CheckoutResult:
    order: OrderRecord
    message: str
    dispatch: DispatchResult
    replayed: bool = False


# =====================================================
# MESSAGE
# =====================================================

def render_order_message(
    record: OrderRecord,
    *,
    store_name: str,
    delivery_option_label: str,
    payment_method_label: str,
    fee_label: str,
) -> str:
    """
    Deterministic order summary for the fulfillment contact.
    """
    customer = record.customer
    local_created = timezone.localtime(record.created_at) if timezone.is_aware(record.created_at) else record.created_at
    date_str = f"{local_created.day}/{local_created.month}/{local_created.year}"

    product_lines = "\n".join(
        f"• {line.name} ({line.quantity}x) - {format_price(line.line_total)}"
        for line in record.lines
    )
    fee_display = "GRATIS" if record.delivery_fee == 0 else format_price(record.delivery_fee)
    notes_line = f"Catatan: {customer.notes}" if customer.notes else ""

    return (
        f"*PESANAN BARU - {store_name}*\n"
        "\n"
        "*Detail Pesanan:*\n"
        f"Order ID: {record.order_no}\n"
        f"Tanggal: {date_str}\n"
        "\n"
        "*Pelanggan:*\n"
        f"Nama: {customer.customer_name}\n"
        f"Daerah: {customer.area_name}\n"
        f"Waktu Pengiriman: {delivery_option_label}\n"
        f"{notes_line}\n"
        "\n"
        "*Produk yang dipesan:*\n"
        f"{product_lines}\n"
        "\n"
        "*Ringkasan:*\n"
        f"Subtotal: {format_price(record.subtotal)}\n"
        f"{fee_label}: {fee_display}\n"
        f"Total: {format_price(record.total)}\n"
        "\n"
        f"Metode Bayar: {payment_method_label}\n"
        "\n"
        "Mohon konfirmasi pesanan ini. Terima kasih! 🙏"
    )


# =====================================================
# COMPOSER
# =====================================================

class OrderComposer:
    def __init__(
        self,
        *,
        cart: CartStore,
        history: CheckoutHistoryStore,
        order_log: OrderLog,
        dispatcher: WhatsAppDispatcher | None = None,
        store_name: str | None = None,
        areas: Sequence[DeliveryArea] = AREAS,
        options: Sequence[DeliveryOption] | None = None,
        payment_methods: Sequence[PaymentMethod] = PAYMENT_METHODS,
        clock=timezone.now,
        owner_key: str = "",
    ):
        self.cart = cart
        self.history = history
        self.order_log = order_log
        self.dispatcher = dispatcher or WhatsAppDispatcher()
        self.store_name = store_name or getattr(settings, "STORE_NAME", "TRENGGALEK APOTEK")
        self.areas = areas
        self.options = get_delivery_options() if options is None else options
        self.payment_methods = payment_methods
        self.clock = clock
        self.owner_key = owner_key

    def _labels(self, form: CheckoutForm) -> tuple[str, str]:
        option = find_option(form.delivery_option_id, self.options)
        method = next((m for m in self.payment_methods if m.id == form.payment_method_id), None)
        return (
            option.name if option else form.delivery_option_id,
            method.name if method else form.payment_method_id,
        )

    def render(self, record: OrderRecord) -> str:
        option_label, payment_label = self._labels(record.customer)
        return render_order_message(
            record,
            store_name=self.store_name,
            delivery_option_label=option_label,
            payment_method_label=payment_label,
            fee_label=delivery_fee_label(record.customer.delivery_option_id),
        )

    def _replay(self, form: CheckoutForm) -> CheckoutResult | None:
        existing = self.order_log.find_by_idempotency_key(self.owner_key, form.idempotency_key)
        if existing is None:
            return None

        if not self.cart.is_empty():
            if _line_signature(self.cart.lines) != _line_signature(existing.lines):
                raise IdempotencyConflictError("Kunci pesanan sudah dipakai untuk keranjang lain")
            self.cart.clear()

        logger.info(
            "Checkout replayed for idempotency key",
            extra={"order_no": existing.order_no},
        )
        message = existing.message or self.render(existing)
        return CheckoutResult(
            order=existing,
            message=message,
            dispatch=self.dispatcher.dispatch(message),
            replayed=True,
        )

    def submit(self, form: CheckoutForm) -> CheckoutResult:
        # 1) idempotent replay (this visitor's orders only)
        if form.idempotency_key:
            replayed = self._replay(form)
            if replayed is not None:
                return replayed

        # 2) empty cart
        if self.cart.is_empty():
            raise EmptyCartError("Keranjang kosong")

        # 3) validation
        result = validate_checkout_form(form, self.areas, self.options, self.payment_methods)
        if not result.ok:
            raise CheckoutValidationError(result.errors)

        q = quote(self.cart.subtotal(), form.area_name, form.delivery_option_id, self.options, self.areas)
        if q.total > MAX_ORDER_AMOUNT:
            raise CheckoutValidationError({"total": MSG_TOTAL_TOO_LARGE})

        # 4) normalize + history
        form = form.normalized(self.options)
        self.history.record_name(form.customer_name)
        self.history.record_area(form.area_name)

        # 5) record
        now = self.clock()
        record = OrderRecord(
            order_no=generate_order_no(now),
            lines=tuple(self.cart.lines),
            customer=form,
            subtotal=q.subtotal,
            delivery_fee=q.delivery_fee,
            total=q.total,
            status=STATUS_PENDING,
            created_at=now,
            owner_key=self.owner_key,
        )

        # 6) render + persist
        record = replace(record, message=self.render(record))
        record = self.order_log.append(record)

        logger.info(
            "Order created",
            extra={
                "order_no": record.order_no,
                "line_count": len(record.lines),
                "total": str(record.total),
            },
        )

        # 7) dispatch
        dispatch = self.dispatcher.dispatch(record.message)

        # 8) clear
        self.cart.clear()

        return CheckoutResult(order=record, message=record.message, dispatch=dispatch)
