# products/models/product.py

from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models

from .category import Category

DEFAULT_UNIT = "porsi"


class Product(models.Model):
    """
    Represents a sellable catalog product.

    PRICING:
    - price is the list price (whole Rupiah, stored as decimal)
    - discount_price, when set and > 0, is what the customer pays

    STOCK:
    - stock is a plain counter maintained by the admin panel
    - checkout does NOT decrement it (no inventory reconciliation)
    """

    name = models.CharField(max_length=255, db_index=True)

    price = models.DecimalField(max_digits=12, decimal_places=2)
    discount_price = models.DecimalField(
        max_digits=12, decimal_places=2, null=True, blank=True
    )

    stock = models.PositiveIntegerField(default=0)
    unit = models.CharField(max_length=32, default=DEFAULT_UNIT)
    description = models.TextField(blank=True, default="")

    is_new_arrival = models.BooleanField(default=False)
    media_url = models.URLField(max_length=500, null=True, blank=True)

    rating = models.FloatField(default=0)
    review_count = models.PositiveIntegerField(default=0)

    categories = models.ManyToManyField(
        Category,
        related_name="products",
        blank=True,
    )

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} ({self.unit})"

    def clean(self):
        if self.price is None or Decimal(self.price) < 0:
            raise ValidationError({"price": "Price cannot be negative"})

        if self.discount_price is not None:
            if Decimal(self.discount_price) < 0:
                raise ValidationError({"discount_price": "Discount price cannot be negative"})
            if Decimal(self.discount_price) > Decimal(self.price):
                raise ValidationError(
                    {"discount_price": "Discount price cannot exceed the list price"}
                )

        if not (self.unit or "").strip():
            self.unit = DEFAULT_UNIT

    def save(self, *args, **kwargs):
        self.full_clean()
        return super().save(*args, **kwargs)

    # -----------------------------
    # Derived values
    # -----------------------------
    @property
    def effective_price(self) -> Decimal:
        from cart.services.pricing import effective_price

        return effective_price(self.price, self.discount_price)

    @property
    def has_discount(self) -> bool:
        return self.effective_price < Decimal(self.price)

    @property
    def primary_category(self) -> str:
        """First category name (storefront badge). Empty when uncategorized."""
        names = [c.name for c in self.categories.all()]
        return names[0] if names else ""

    @property
    def is_out_of_stock(self) -> bool:
        return int(self.stock or 0) <= 0

    @property
    def is_low_stock(self) -> bool:
        threshold = int(getattr(settings, "LOW_STOCK_THRESHOLD", 10))
        return 0 < int(self.stock or 0) <= threshold
