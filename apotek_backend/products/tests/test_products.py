# products/tests/test_products.py

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import IntegrityError
from django.test import TestCase, override_settings

from products.models import Category, Product


class ProductModelTests(TestCase):
    """
    Product model tests.

    GUARANTEES:
    - Products can be created with storefront defaults
    - Pricing is sane (no negative price, discount never above list price)
    - Stock badges follow LOW_STOCK_THRESHOLD
    """

    def test_product_creation_defaults(self):
        """A minimal product gets the storefront defaults."""
        product = Product.objects.create(name="Vitamin C 1000mg", price=Decimal("45000"))

        self.assertEqual(product.unit, "porsi")
        self.assertEqual(product.stock, 0)
        self.assertFalse(product.is_new_arrival)
        self.assertIsNone(product.discount_price)

    def test_negative_price_is_rejected(self):
        with self.assertRaises(ValidationError):
            Product.objects.create(name="Broken", price=Decimal("-1"))

    def test_discount_above_list_price_is_rejected(self):
        with self.assertRaises(ValidationError):
            Product.objects.create(
                name="Odd discount",
                price=Decimal("10000"),
                discount_price=Decimal("12000"),
            )

    def test_effective_price_prefers_discount(self):
        product = Product.objects.create(
            name="Obat Batuk",
            price=Decimal("18000"),
            discount_price=Decimal("15000"),
        )
        self.assertEqual(product.effective_price, Decimal("15000.00"))
        self.assertTrue(product.has_discount)

    def test_zero_discount_means_list_price(self):
        product = Product.objects.create(
            name="Madu",
            price=Decimal("55000"),
            discount_price=Decimal("0"),
        )
        self.assertEqual(product.effective_price, Decimal("55000.00"))
        self.assertFalse(product.has_discount)

    def test_primary_category_is_first_by_name(self):
        product = Product.objects.create(name="Minyak Kayu Putih", price=Decimal("22000"))
        product.categories.add(
            Category.objects.create(name="Perawatan Tubuh"),
            Category.objects.create(name="Ibu & Anak"),
        )
        self.assertEqual(product.primary_category, "Ibu & Anak")

    def test_primary_category_blank_when_uncategorized(self):
        product = Product.objects.create(name="Plain", price=Decimal("1000"))
        self.assertEqual(product.primary_category, "")

    @override_settings(LOW_STOCK_THRESHOLD=10)
    def test_stock_badges(self):
        out = Product.objects.create(name="Out", price=Decimal("1000"), stock=0)
        low = Product.objects.create(name="Low", price=Decimal("1000"), stock=10)
        plenty = Product.objects.create(name="Plenty", price=Decimal("1000"), stock=11)

        self.assertTrue(out.is_out_of_stock)
        self.assertFalse(out.is_low_stock)
        self.assertTrue(low.is_low_stock)
        self.assertFalse(plenty.is_low_stock)
        self.assertFalse(plenty.is_out_of_stock)

    def test_product_string_representation(self):
        product = Product.objects.create(name="Cough Syrup", price=Decimal("500"), unit="botol")
        self.assertIn("Cough Syrup", str(product))


class CategoryModelTests(TestCase):
    def test_category_name_must_be_unique(self):
        Category.objects.create(name="Vitamin")

        with self.assertRaises(IntegrityError):
            Category.objects.create(name="Vitamin")
