# products/tests/test_catalog_api.py

"""
PUBLIC CATALOG API TESTS

Run with:
    python manage.py test products -v 2
"""

from __future__ import annotations

from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from products.models import Category, Product


class PublicCatalogListTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.url = reverse("public-product-list")

        self.vitamins = Category.objects.create(name="Vitamin & Suplemen")
        self.medicine = Category.objects.create(name="Obat Bebas")

        for i in range(12):
            p = Product.objects.create(name=f"Vitamin Batch {i:02d}", price=Decimal("10000"), stock=5)
            p.categories.add(self.vitamins)

        self.paracetamol = Product.objects.create(
            name="Paracetamol 500mg",
            price=Decimal("12000"),
            discount_price=Decimal("10000"),
            stock=40,
        )
        self.paracetamol.categories.add(self.medicine)

    def test_default_page_is_ten_newest_first(self):
        res = self.client.get(self.url)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data["data"]), 10)
        self.assertEqual(
            res.data["meta"],
            {"page": 1, "pageSize": 10, "totalCount": 13, "totalPages": 2},
        )
        # newest product first
        self.assertEqual(res.data["data"][0]["name"], "Paracetamol 500mg")

    def test_limit_and_page(self):
        res = self.client.get(self.url, {"limit": 5, "page": 3})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data["data"]), 3)
        self.assertEqual(res.data["meta"]["page"], 3)
        self.assertEqual(res.data["meta"]["pageSize"], 5)
        self.assertEqual(res.data["meta"]["totalPages"], 3)

    def test_search_is_case_insensitive(self):
        res = self.client.get(self.url, {"search": "PARACET"})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["meta"]["totalCount"], 1)
        row = res.data["data"][0]
        self.assertEqual(row["name"], "Paracetamol 500mg")
        self.assertEqual(Decimal(row["effective_price"]), Decimal("10000"))
        self.assertEqual(row["category"], "Obat Bebas")

    def test_category_filter(self):
        res = self.client.get(self.url, {"category": "Vitamin & Suplemen", "limit": 50})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["meta"]["totalCount"], 12)
        self.assertTrue(all(r["category"] == "Vitamin & Suplemen" for r in res.data["data"]))


class PublicCatalogDetailTests(TestCase):
    def setUp(self):
        self.client = APIClient()

    def test_detail_applies_display_defaults(self):
        product = Product.objects.create(name="Kapas", price=Decimal("5000"), description="")

        res = self.client.get(reverse("public-product-detail", args=[product.id]))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["unit"], "porsi")
        self.assertEqual(res.data["description"], "-")
        self.assertEqual(res.data["rating"], 0)
        self.assertEqual(res.data["review_count"], 0)

    def test_unknown_product_is_404(self):
        res = self.client.get(reverse("public-product-detail", args=[99999]))

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(str(res.data["detail"]), "Produk tidak ditemukan")
