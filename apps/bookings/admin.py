"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "place",
        "user",
        "check_in",
        "check_out",
        "number_of_guests",
        "price",
        "created_at",
    )
    list_filter = ("check_in", "check_out")
    search_fields = ("place__title", "user__email", "name", "phone")
    raw_id_fields = ("place", "user")
    readonly_fields = ("created_at",)
