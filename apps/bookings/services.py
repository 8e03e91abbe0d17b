"""Domain services for booking workflows."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Mapping, Optional

from apps.places.models import Place
from apps.users.permissions import require_ownership
from apps.users.sessions import Claims
from shared.application.uow import PersistenceBoundary
from shared.domain.errors import InvalidInput, NotFound
from shared.domain.value_objects import (
    is_missing,
    parse_day,
    parse_positive_int,
    parse_price,
    parse_text,
)

from .models import Booking

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("place", "checkIn", "checkOut", "name", "phone")


@dataclass(frozen=True)
class BookingRequest:
    place_id: int
    check_in: date
    check_out: date
    number_of_guests: int
    name: str
    phone: str
    price: Optional[Decimal]


def parse_booking_request(data: Mapping[str, Any]) -> BookingRequest:
    """Validate a booking payload without touching the database.

    Order: required fields, price, then the shape of the remaining values.
    Check-out is not required to follow check-in and overlapping stays are
    not detected.
    """
    if not isinstance(data, Mapping):
        raise InvalidInput("invalid_input", "Request body must be a JSON object")
    if any(is_missing(data.get(key)) for key in REQUIRED_FIELDS):
        raise InvalidInput("missing_fields", "All booking fields are required")

    price = parse_price(data.get("price"))

    place_id = data.get("place")
    try:
        place_id = int(str(place_id).strip())
    except (TypeError, ValueError):
        raise InvalidInput("invalid_place", "Place does not exist")

    return BookingRequest(
        place_id=place_id,
        check_in=parse_day(data.get("checkIn"), "checkIn"),
        check_out=parse_day(data.get("checkOut"), "checkOut"),
        number_of_guests=parse_positive_int(data.get("numberOfGuests"), "numberOfGuests", default=1),
        name=parse_text(data.get("name"), "name").strip(),
        phone=parse_text(data.get("phone"), "phone").strip(),
        price=price,
    )


def create_booking(claims: Claims, data: Mapping[str, Any]) -> Booking:
    request = parse_booking_request(data)
    with PersistenceBoundary("booking_failed", "Failed to create booking"):
        if not Place.objects.filter(pk=request.place_id).exists():
            raise InvalidInput("invalid_place", "Place does not exist")
        booking = Booking.objects.create(user_id=claims.id, **asdict(request))
    logger.info("User %s booked place %s (booking %s)", claims.id, booking.place_id, booking.pk)
    return booking


def list_user_bookings(claims: Claims) -> list[Booking]:
    """Caller's bookings with their place loaded for inline embedding."""
    with PersistenceBoundary("fetch_failed", "Failed to fetch bookings"):
        return list(Booking.objects.filter(user_id=claims.id).select_related("place").order_by("id"))


def cancel_booking(claims: Claims, booking_id: Any) -> None:
    """Delete a booking created by the caller."""
    with PersistenceBoundary("cancel_failed", "Failed to cancel booking"):
        try:
            booking = Booking.objects.select_for_update().get(pk=int(booking_id))
        except (Booking.DoesNotExist, TypeError, ValueError):
            raise NotFound("not_found", "Booking not found")
        require_ownership(booking.user_id, claims, "You can only cancel your own bookings")
        booking.delete()
    logger.info("User %s cancelled booking %s", claims.id, booking_id)
