"""DRF serializers describing the Product wire format for OpenAPI.

Validation and conversion happen in the pydantic DTOs (``dtos.py``);
these serializers only feed ``drf-spectacular`` so the generated schema
matches what the views actually accept and return.
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers


class ProductRequestSerializer(serializers.Serializer):
    name = serializers.CharField(min_length=3, max_length=255)
    description = serializers.CharField(
        max_length=1000, required=False, allow_null=True
    )
    category = serializers.CharField(min_length=2, max_length=100)
    subcategory = serializers.CharField(max_length=100, required=False, allow_null=True)
    sellerName = serializers.CharField(min_length=2, max_length=255)
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0.01"), coerce_to_string=False
    )
    quantity = serializers.IntegerField(min_value=0)


class ProductResponseSerializer(ProductRequestSerializer):
    id = serializers.IntegerField(read_only=True)
    createdAt = serializers.DateTimeField(read_only=True)
    updatedAt = serializers.DateTimeField(read_only=True)


class ErrorResponseSerializer(serializers.Serializer):
    status = serializers.IntegerField()
    message = serializers.CharField()
    details = serializers.CharField()
    timestamp = serializers.DateTimeField()
    path = serializers.CharField()
