# checkout/services/order_log.py

"""
ORDER LOG (DATABASE)

Append-only persistence for composed orders.

Failure policy:
- any database/validation failure -> OrderPersistenceError (retryable)
- the write happens inside its own atomic block, so a failure leaves no
  partial row behind
"""

from __future__ import annotations

import logging

from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction

from cart.services.cart_store import CartLine
from checkout.models import Order
from checkout.services.exceptions import OrderPersistenceError
from checkout.services.forms import CheckoutForm
from checkout.services.order_composer import OrderRecord

logger = logging.getLogger(__name__)


def record_from_order(order: Order) -> OrderRecord:
    snapshot = dict(order.customer_snapshot or {})
    customer = CheckoutForm(
        customer_name=order.customer_name,
        area_name=order.area_name,
        delivery_option_id=order.delivery_option,
        notes=order.notes,
        payment_method_id=order.payment_method,
        idempotency_key=order.idempotency_key or snapshot.get("idempotency_key"),
    )
    return OrderRecord(
        order_no=order.order_no,
        lines=tuple(CartLine.from_dict(raw) for raw in order.lines_snapshot),
        customer=customer,
        subtotal=order.subtotal_amount,
        delivery_fee=order.delivery_fee,
        total=order.total_amount,
        status=order.status,
        created_at=order.created_at,
        message=order.message,
        owner_key=order.owner_key,
    )


class DatabaseOrderLog:
    def append(self, record: OrderRecord) -> OrderRecord:
        customer = record.customer
        try:
            with transaction.atomic():
                order = Order.objects.create(
                    order_no=record.order_no,
                    owner_key=record.owner_key,
                    idempotency_key=customer.idempotency_key,
                    customer_name=customer.customer_name,
                    area_name=customer.area_name,
                    delivery_option=customer.delivery_option_id,
                    notes=customer.notes,
                    payment_method=customer.payment_method_id,
                    lines_snapshot=[line.to_dict() for line in record.lines],
                    customer_snapshot=customer.to_dict(),
                    subtotal_amount=record.subtotal,
                    delivery_fee=record.delivery_fee,
                    total_amount=record.total,
                    status=record.status,
                    message=record.message,
                    created_at=record.created_at,
                )
        except (DatabaseError, ValidationError) as exc:
            logger.exception(
                "Order persistence failed",
                extra={"order_no": record.order_no},
            )
            raise OrderPersistenceError("Pesanan gagal disimpan, silakan coba lagi") from exc

        return record_from_order(order)

    def find_by_idempotency_key(self, owner_key: str, key: str) -> OrderRecord | None:
        order = Order.objects.filter(owner_key=owner_key, idempotency_key=key).first()
        if order is None:
            return None
        return record_from_order(order)
