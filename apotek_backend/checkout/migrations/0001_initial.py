"""
======================================================
PATH: checkout/migrations/0001_initial.py
======================================================
MIGRATION: STOREFRONT ORDERS (append-only order log)
"""

from __future__ import annotations

from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "order_no",
                    models.CharField(db_index=True, max_length=40, unique=True),
                ),
                (
                    "idempotency_key",
                    models.CharField(
                        blank=True, default=None, max_length=64, null=True, unique=True
                    ),
                ),
                ("customer_name", models.CharField(max_length=255)),
                ("area_name", models.CharField(max_length=100)),
                ("delivery_option", models.CharField(max_length=32)),
                ("notes", models.TextField(blank=True, default="")),
                ("payment_method", models.CharField(max_length=32)),
                ("lines_snapshot", models.JSONField(default=list)),
                ("customer_snapshot", models.JSONField(default=dict)),
                (
                    "subtotal_amount",
                    models.DecimalField(decimal_places=2, max_digits=14),
                ),
                (
                    "delivery_fee",
                    models.DecimalField(
                        decimal_places=2, default=Decimal("0.00"), max_digits=12
                    ),
                ),
                (
                    "total_amount",
                    models.DecimalField(decimal_places=2, max_digits=14),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("confirmed", "Confirmed"),
                            ("completed", "Completed"),
                            ("cancelled", "Cancelled"),
                        ],
                        db_index=True,
                        default="pending",
                        max_length=16,
                    ),
                ),
                ("message", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(db_index=True)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
