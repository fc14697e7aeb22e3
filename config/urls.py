"""URL configuration for ParkBoard project.

The `urlpatterns` list routes URLs to views. It includes both Django admin
and application‑level routers provided by Django Rest Framework and each app.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore

from apps.bookings.views import AdminBookingListView
from apps.core.views import healthz

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    path('healthz/', healthz, name='healthz'),
    # Application URLs
    path('api/v1/auth/', include(('apps.users.auth_urls', 'auth'), namespace='auth')),
    path('api/v1/profile/', include('apps.users.urls')),
    path('api/v1/slots/', include('apps.slots.urls')),
    path('api/v1/bookings/', include('apps.bookings.urls')),
    path('api/v1/admin/bookings/', AdminBookingListView.as_view(), name='admin-booking-list'),
    path('api/v1/schema/', SpectacularAPIView.as_view(), name='schema'),
]
