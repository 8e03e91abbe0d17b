"""URL routing for the booking domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import BookingCollectionView, BookingDetailView

app_name = "bookings"

urlpatterns = [
    path("bookings", BookingCollectionView.as_view(), name="collection"),
    path("bookings/<str:pk>", BookingDetailView.as_view(), name="detail"),
]
