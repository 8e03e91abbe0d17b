"""Models for the review domain.

``place_id`` is stored as the raw identifier the client sent. It is not
a foreign key, so reviews may reference places that do not exist.
"""

from __future__ import annotations

from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Review(models.Model):
    """Rating and comment left for a place."""

    place_id = models.CharField(max_length=64, db_index=True)
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)],
        help_text=_("Rating from 1 to 5"),
    )
    text = models.TextField(blank=True, default="")
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        verbose_name = _("Review")
        verbose_name_plural = _("Reviews")
        ordering = ["-date", "-id"]

    def __str__(self) -> str:
        return f"Review {self.pk} for place {self.place_id} (Rating: {self.rating})"
