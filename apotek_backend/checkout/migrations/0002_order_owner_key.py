"""
======================================================
PATH: checkout/migrations/0002_order_owner_key.py
======================================================
MIGRATION: idempotency keys scoped to the visitor session
"""

from __future__ import annotations

from django.db import migrations, models


class Migration(migrations.Migration):
    dependencies = [
        ("checkout", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="order",
            name="owner_key",
            field=models.CharField(blank=True, db_index=True, default="", max_length=64),
        ),
        migrations.AlterField(
            model_name="order",
            name="idempotency_key",
            field=models.CharField(blank=True, default=None, max_length=64, null=True),
        ),
        migrations.AddConstraint(
            model_name="order",
            constraint=models.UniqueConstraint(
                fields=("owner_key", "idempotency_key"),
                name="checkout_order_owner_idempotency_uniq",
            ),
        ),
    ]
