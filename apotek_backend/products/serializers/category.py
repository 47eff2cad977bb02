# products/serializers/category.py

from rest_framework import serializers

from products.models import Category


class CategorySerializer(serializers.ModelSerializer):
    """
    Category serializer (admin panel).

    Rules:
    - name is writable and trimmed
    - uniqueness is checked by the view (409, not 400)
    - product_count comes from a queryset annotation when present
    """

    name = serializers.CharField(required=True, allow_blank=False, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    product_count = serializers.SerializerMethodField(read_only=True)

    class Meta:
        model = Category
        fields = ["id", "name", "description", "product_count", "created_at", "updated_at"]
        read_only_fields = ["id", "product_count", "created_at", "updated_at"]

    def validate_name(self, value: str):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("name cannot be blank")
        return v

    def get_product_count(self, obj) -> int:
        annotated = getattr(obj, "product_count", None)
        if annotated is not None:
            return int(annotated)
        return obj.products.count()
