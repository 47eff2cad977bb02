# products/models/category.py

from django.db import models


class Category(models.Model):
    """
    Catalog category.

    Rules:
    - name is unique (admin create/update returns 409 on duplicates)
    - a category with products attached cannot be deleted
    """

    name = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name
