"""Product DRF serializers for API output.

Input validation lives in the Pydantic DTOs of ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    available_for_sale = serializers.BooleanField(
        source="is_available_for_sale", read_only=True
    )

    class Meta:
        model = Product
        fields = [
            "id",
            "code",
            "name",
            "description",
            "price",
            "stock",
            "status",
            "is_active",
            "available_for_sale",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "is_active", "created_at", "updated_at"]
