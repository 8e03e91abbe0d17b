"""Serializers for the place domain (camelCase wire names)."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Place


class PlaceSerializer(serializers.ModelSerializer):
    """Place document as returned to the browser client."""

    owner = serializers.ReadOnlyField(source="owner_id")
    extraInfo = serializers.CharField(source="extra_info", read_only=True)
    checkIn = serializers.CharField(source="check_in", read_only=True)
    checkOut = serializers.CharField(source="check_out", read_only=True)
    maxGuests = serializers.IntegerField(source="max_guests", read_only=True, allow_null=True)
    price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        coerce_to_string=False,
        read_only=True,
        allow_null=True,
    )

    class Meta:
        model = Place
        fields = [
            "id",
            "owner",
            "title",
            "address",
            "photos",
            "description",
            "perks",
            "extraInfo",
            "checkIn",
            "checkOut",
            "maxGuests",
            "price",
        ]
        read_only_fields = fields
