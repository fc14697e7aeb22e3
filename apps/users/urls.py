"""URL declarations for the users app (own profile)."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import ProfileView

urlpatterns = [
    path("", ProfileView.as_view(), name="profile"),
]
