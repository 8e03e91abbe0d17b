"""Place repository operations: create, full update, lookup and search."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional

from apps.users.permissions import require_ownership
from apps.users.sessions import Claims
from shared.application.uow import PersistenceBoundary
from shared.domain.errors import InvalidInput, NotFound
from shared.domain.value_objects import (
    is_missing,
    parse_positive_int,
    parse_price,
    parse_text,
    parse_text_list,
)

from .filters import PlaceFilterSet
from .models import Place

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlaceFields:
    """Every writable place field. Updates overwrite all of them."""

    title: str
    address: str
    photos: list[str]
    description: str
    perks: list[str]
    extra_info: str
    check_in: str
    check_out: str
    max_guests: Optional[int]
    price: Optional[Decimal]


def parse_place_fields(data: Mapping[str, Any], *, require_id: bool = False) -> PlaceFields:
    """Validate a place payload as sent by the browser client (camelCase keys)."""
    if not isinstance(data, Mapping):
        raise InvalidInput("invalid_input", "Request body must be a JSON object")
    required = ("id", "title", "address") if require_id else ("title", "address")
    if any(is_missing(data.get(key)) for key in required):
        message = "ID, title, and address are required" if require_id else "Title and address are required"
        raise InvalidInput("missing_fields", message)

    price = parse_price(data.get("price"))

    return PlaceFields(
        title=parse_text(data.get("title"), "title").strip(),
        address=parse_text(data.get("address"), "address").strip(),
        photos=parse_text_list(data.get("addedPhotos"), "addedPhotos"),
        description=parse_text(data.get("description"), "description"),
        perks=parse_text_list(data.get("perks"), "perks"),
        extra_info=parse_text(data.get("extraInfo"), "extraInfo"),
        check_in=parse_text(data.get("checkIn"), "checkIn"),
        check_out=parse_text(data.get("checkOut"), "checkOut"),
        max_guests=parse_positive_int(data.get("maxGuests"), "maxGuests"),
        price=price,
    )


def create_place(claims: Claims, data: Mapping[str, Any]) -> Place:
    fields = parse_place_fields(data)
    with PersistenceBoundary("create_failed", "Failed to create place"):
        place = Place.objects.create(owner_id=claims.id, **asdict(fields))
    logger.info("User %s created place %s", claims.id, place.pk)
    return place


def get_place(place_id: Any) -> Place:
    with PersistenceBoundary("fetch_failed", "Failed to fetch place"):
        try:
            return Place.objects.get(pk=int(place_id))
        except (Place.DoesNotExist, TypeError, ValueError):
            raise NotFound("not_found", "Place not found")


def update_place(claims: Claims, data: Mapping[str, Any]) -> Place:
    """Replace every field of an owned place.

    Fields omitted by the caller are reset to empty values, not kept.
    """
    fields = parse_place_fields(data, require_id=True)
    place = get_place(data.get("id"))
    require_ownership(place.owner_id, claims, "You can only edit your own places")

    with PersistenceBoundary("update_failed", "Failed to update place"):
        for name, value in asdict(fields).items():
            setattr(place, name, value)
        place.save()
    logger.info("User %s updated place %s", claims.id, place.pk)
    return place


def search_places(query: str | None = None) -> list[Place]:
    """All places in creation order, narrowed by ``query`` when it is not blank."""
    filterset = PlaceFilterSet({"search": query or ""}, queryset=Place.objects.order_by("id"))
    with PersistenceBoundary("fetch_failed", "Failed to fetch places"):
        return list(filterset.qs)


def list_user_places(claims: Claims) -> list[Place]:
    with PersistenceBoundary("fetch_failed", "Failed to fetch your places"):
        return list(Place.objects.owned_by(claims.id).order_by("id"))
