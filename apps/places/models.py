"""Place domain models for Airnest.

A place is a listing created by a user, who becomes its owner. Only the
owner may change it and there is no delete path. Photos are kept as an
ordered list of upload filenames.
"""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.db.models import Q  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class PlaceQuerySet(models.QuerySet):
    def owned_by(self, user_id):
        return self.filter(owner_id=user_id)

    def search(self, query: str | None):
        """Case-insensitive substring match on title, address or description."""
        term = (query or "").strip()
        if not term:
            return self
        return self.filter(
            Q(title__icontains=term) | Q(address__icontains=term) | Q(description__icontains=term)
        )


class Place(models.Model):
    """Listing available for booking."""

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="places",
    )
    title = models.TextField()
    address = models.TextField()
    photos = models.JSONField(default=list, blank=True)
    description = models.TextField(blank=True, default="")
    perks = models.JSONField(default=list, blank=True)
    extra_info = models.TextField(blank=True, default="")
    check_in = models.TextField(blank=True, default="")
    check_out = models.TextField(blank=True, default="")
    max_guests = models.PositiveIntegerField(null=True, blank=True)
    price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        null=True,
        blank=True,
        help_text=_("Price per night."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PlaceQuerySet.as_manager()

    class Meta:
        verbose_name = _("Place")
        verbose_name_plural = _("Places")
        ordering = ["id"]

    def __str__(self) -> str:
        return self.title
