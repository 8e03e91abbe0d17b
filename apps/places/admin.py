"""Admin registrations for the places domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Place


@admin.register(Place)
class PlaceAdmin(admin.ModelAdmin):
    list_display = ("title", "address", "owner", "max_guests", "price", "created_at")
    list_filter = ("created_at",)
    search_fields = ("title", "address", "description", "owner__email")
    raw_id_fields = ("owner",)
    readonly_fields = ("created_at", "updated_at")
