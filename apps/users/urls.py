"""URL declarations for the users app."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import HealthView, LoginView, LogoutView, ProfileView, RegisterView

app_name = "users"

urlpatterns = [
    path("test", HealthView.as_view(), name="health"),
    path("register", RegisterView.as_view(), name="register"),
    path("login", LoginView.as_view(), name="login"),
    path("profile", ProfileView.as_view(), name="profile"),
    path("logout", LogoutView.as_view(), name="logout"),
]
