from django.contrib import admin

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("id", "place_id", "rating", "date")
    list_filter = ("rating",)
    search_fields = ("place_id", "text")
