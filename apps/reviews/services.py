"""Review repository operations. None of them check who the caller is."""

from __future__ import annotations

import logging

from shared.application.uow import PersistenceBoundary

from .models import Review

logger = logging.getLogger(__name__)


def create_review(place_id: str, rating: int, text: str = "") -> Review:
    with PersistenceBoundary("create_failed", "Failed to create review"):
        review = Review.objects.create(place_id=place_id, rating=rating, text=text)
    logger.info("Review %s posted for place %s", review.pk, place_id)
    return review


def list_place_reviews(place_id: str) -> list[Review]:
    """Reviews for ``place_id``, newest first."""
    with PersistenceBoundary("fetch_failed", "Failed to fetch reviews"):
        return list(Review.objects.filter(place_id=place_id).order_by("-date", "-id"))


def delete_review(review_id: str) -> None:
    """Delete by id. Unknown or malformed ids are a no-op."""
    if not str(review_id).isdigit():
        return
    with PersistenceBoundary("delete_failed", "Failed to delete review"):
        deleted, _ = Review.objects.filter(pk=int(review_id)).delete()
    if deleted:
        logger.info("Review %s deleted", review_id)
