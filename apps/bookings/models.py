"""Booking domain models for Airnest."""

from __future__ import annotations

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Booking(models.Model):
    """Reservation of a place by a user.

    The price is the amount quoted by the client at booking time; it is
    not recomputed from the nightly rate.
    """

    place = models.ForeignKey(
        "places.Place",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    check_in = models.DateField()
    check_out = models.DateField()
    number_of_guests = models.PositiveIntegerField(default=1)
    name = models.TextField()
    phone = models.TextField()
    price = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["id"]
        indexes = [
            models.Index(fields=["user", "check_in"], name="booking_user_checkin_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking {self.pk} of place {self.place_id} by {self.user_id}"
