"""URL routing for the slot registry."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import ParkingSlotViewSet

router = DefaultRouter()
router.register(r"", ParkingSlotViewSet, basename="slot")

urlpatterns = [
    path("", include(router.urls)),
]
