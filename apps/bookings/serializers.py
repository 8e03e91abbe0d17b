"""Serializers for the booking domain (camelCase wire names)."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.places.serializers import PlaceSerializer

from .models import Booking


class BookingSerializer(serializers.ModelSerializer):
    """Booking document with the place referenced by id."""

    place = serializers.ReadOnlyField(source="place_id")
    user = serializers.ReadOnlyField(source="user_id")
    checkIn = serializers.DateField(source="check_in", read_only=True)
    checkOut = serializers.DateField(source="check_out", read_only=True)
    numberOfGuests = serializers.IntegerField(source="number_of_guests", read_only=True)
    price = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        coerce_to_string=False,
        read_only=True,
        allow_null=True,
    )

    class Meta:
        model = Booking
        fields = [
            "id",
            "place",
            "user",
            "checkIn",
            "checkOut",
            "numberOfGuests",
            "name",
            "phone",
            "price",
        ]
        read_only_fields = fields


class BookingWithPlaceSerializer(BookingSerializer):
    """Booking document embedding the full place object."""

    place = PlaceSerializer(read_only=True)
