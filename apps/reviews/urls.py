"""URL routing for the reviews domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import ReviewCollectionView, ReviewDetailView

app_name = "reviews"

urlpatterns = [
    path("api/reviews", ReviewCollectionView.as_view(), name="collection"),
    path("api/reviews/<str:pk>", ReviewDetailView.as_view(), name="detail"),
]
