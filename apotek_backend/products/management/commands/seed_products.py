# products/management/commands/seed_products.py

from django.core.management.base import BaseCommand
from django.db import transaction

from products.models import Category, Product


class Command(BaseCommand):
    help = "Seed storefront categories and products (idempotent by product name)"

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding catalog..."))

        # -------------------------------
        # CATEGORIES
        # -------------------------------
        categories = [
            "Obat Bebas",
            "Vitamin & Suplemen",
            "Perawatan Tubuh",
            "Ibu & Anak",
            "Makanan & Minuman",
        ]

        category_objs = {}
        for name in categories:
            obj, _ = Category.objects.get_or_create(name=name)
            category_objs[name] = obj

        # -------------------------------
        # PRODUCTS
        # (name, category, price, discount_price, stock, unit)
        # -------------------------------
        products_data = [
            ("Paracetamol 500mg", "Obat Bebas", 12000, None, 40, "strip"),
            ("Obat Batuk Sirup 60ml", "Obat Bebas", 18000, 15000, 25, "botol"),
            ("Vitamin C 1000mg", "Vitamin & Suplemen", 45000, None, 30, "botol"),
            ("Minyak Kayu Putih 60ml", "Perawatan Tubuh", 22000, 20000, 8, "botol"),
            ("Susu Formula 400g", "Ibu & Anak", 95000, None, 12, "kaleng"),
            ("Madu Murni 250ml", "Makanan & Minuman", 55000, 49000, 0, "botol"),
        ]

        created_count = 0
        for name, cat, price, discount, stock, unit in products_data:
            product, created = Product.objects.get_or_create(
                name=name,
                defaults={
                    "price": price,
                    "discount_price": discount,
                    "stock": stock,
                    "unit": unit,
                    "is_new_arrival": stock > 20,
                },
            )
            product.categories.add(category_objs[cat])
            created_count += int(created)

        self.stdout.write(
            self.style.SUCCESS(f"✅ Catalog seeded successfully ({created_count} new products).")
        )
