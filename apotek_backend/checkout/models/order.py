# checkout/models/order.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models


class Order(models.Model):
    """
    Append-only storefront order record.

    Written once by the order composer at checkout. Lines and customer
    details are snapshots (JSON) so later catalog edits never rewrite
    history. Staff may move status forward from the Django admin.
    """

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        CONFIRMED = "confirmed", "Confirmed"
        COMPLETED = "completed", "Completed"
        CANCELLED = "cancelled", "Cancelled"

    order_no = models.CharField(max_length=40, unique=True, db_index=True)

    # Visitor session that placed the order; idempotency keys are scoped to it.
    owner_key = models.CharField(max_length=64, blank=True, default="", db_index=True)
    idempotency_key = models.CharField(max_length=64, null=True, blank=True, default=None)

    customer_name = models.CharField(max_length=255)
    area_name = models.CharField(max_length=100)
    delivery_option = models.CharField(max_length=32)
    notes = models.TextField(blank=True, default="")
    payment_method = models.CharField(max_length=32)

    lines_snapshot = models.JSONField(default=list)
    customer_snapshot = models.JSONField(default=dict)

    subtotal_amount = models.DecimalField(max_digits=14, decimal_places=2)
    delivery_fee = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    total_amount = models.DecimalField(max_digits=14, decimal_places=2)

    status = models.CharField(
        max_length=16,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True,
    )

    message = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(db_index=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        constraints = [
            models.UniqueConstraint(
                fields=["owner_key", "idempotency_key"],
                name="checkout_order_owner_idempotency_uniq",
            ),
        ]

    def __str__(self):
        return f"{self.order_no} ({self.customer_name})"

    def clean(self):
        if not self.lines_snapshot:
            raise ValidationError({"lines_snapshot": "An order needs at least one line"})

        if self.subtotal_amount is not None and self.delivery_fee is not None and self.total_amount is not None:
            expected = Decimal(self.subtotal_amount) + Decimal(self.delivery_fee)
            if Decimal(self.total_amount) != expected:
                raise ValidationError({"total_amount": "total must equal subtotal + delivery fee"})

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)
