"""Product DRF serializers for API output and the OpenAPI schema.

Input is checked by the rule chains in ``validators.py`` and narrowed
into the Pydantic DTOs from ``dtos.py``; these serializers only render
responses.  The envelope serializers exist for schema generation.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, coerce_to_string=False
    )

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "availability",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProductWriteSerializer(serializers.Serializer):
    name = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    availability = serializers.BooleanField(required=False)


class ProductEnvelopeSerializer(serializers.Serializer):
    data = ProductSerializer()


class ProductListEnvelopeSerializer(serializers.Serializer):
    data = ProductSerializer(many=True)


class MessageEnvelopeSerializer(serializers.Serializer):
    data = serializers.CharField()


class ErrorSerializer(serializers.Serializer):
    error = serializers.CharField()


class FieldErrorSerializer(serializers.Serializer):
    type = serializers.CharField()
    value = serializers.JSONField(required=False)
    msg = serializers.CharField()
    path = serializers.CharField()
    location = serializers.ChoiceField(choices=["params", "body"])


class ValidationErrorsSerializer(serializers.Serializer):
    errors = FieldErrorSerializer(many=True)
