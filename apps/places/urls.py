"""URL routing for the places domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import (
    PlaceCollectionView,
    PlaceDetailView,
    UploadByLinkView,
    UploadView,
    UserPlacesView,
)

app_name = "places"

urlpatterns = [
    path("places", PlaceCollectionView.as_view(), name="collection"),
    path("places/<str:pk>", PlaceDetailView.as_view(), name="detail"),
    path("user-places", UserPlacesView.as_view(), name="user-places"),
    path("upload", UploadView.as_view(), name="upload"),
    path("upload-by-link", UploadByLinkView.as_view(), name="upload-by-link"),
]
