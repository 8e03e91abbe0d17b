"""Serializers for reviews.

The write serializer only checks shape and the rating range; the
review is stored by the service layer.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Review


class ReviewSerializer(serializers.ModelSerializer):
    placeId = serializers.CharField(source="place_id", read_only=True)

    class Meta:
        model = Review
        fields = ["id", "placeId", "rating", "text", "date"]
        read_only_fields = fields


class ReviewCreateSerializer(serializers.Serializer):
    placeId = serializers.CharField(max_length=64)
    rating = serializers.IntegerField()
    text = serializers.CharField(required=False, allow_blank=True, allow_null=True, default="")

    def validate_rating(self, value: int) -> int:  # type: ignore
        if value < 1 or value > 5:
            raise serializers.ValidationError("Rating must be between 1 and 5", code="invalid_rating")
        return value

    def validate_text(self, value: str | None) -> str:  # type: ignore
        return value or ""
