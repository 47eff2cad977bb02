# products/filters.py

"""
CATALOG FILTERS (django-filter)

- search:   case-insensitive substring of the product name
- category: exact category name; the admin table's "Semua Kategori"
            (all categories) sentinel disables the filter
"""

from __future__ import annotations

import django_filters

from products.models import Product

ALL_CATEGORIES = "Semua Kategori"


class ProductFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(method="filter_search")
    category = django_filters.CharFilter(method="filter_category")

    class Meta:
        model = Product
        fields = ["search", "category"]

    def filter_search(self, queryset, name, value):
        term = (value or "").strip()
        if not term:
            return queryset
        return queryset.filter(name__icontains=term)

    def filter_category(self, queryset, name, value):
        category = (value or "").strip()
        if not category or category == ALL_CATEGORIES:
            return queryset
        return queryset.filter(categories__name=category).distinct()
