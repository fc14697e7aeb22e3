"""API views for the booking domain."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import generics, mixins, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.communities.tenancy import TenantScopedViewMixin
from shared.domain.errors import reject_immutable_fields

from . import services
from .filters import BookingFilterSet
from .models import Booking
from .serializers import BookingCreateSerializer, BookingSerializer


class BookingViewSet(TenantScopedViewMixin, mixins.ListModelMixin, viewsets.GenericViewSet):
    """Bookings where the caller is the renter or the slot owner.

    `PATCH` only cancels: the body must be ``{"status": "cancelled"}``.
    """

    serializer_class = BookingSerializer
    queryset = Booking.objects.none()
    filter_backends = [DjangoFilterBackend]
    filterset_class = BookingFilterSet
    http_method_names = ["get", "post", "patch", "head", "options"]

    def get_serializer_class(self):  # type: ignore
        if self.action == "create":
            return BookingCreateSerializer
        return BookingSerializer

    def get_queryset(self):  # type: ignore
        if self.is_schema_view():
            return Booking.objects.none()
        return services.list_bookings(self.tenant)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = services.create_booking(
            serializer.validated_data["slot_id"],
            serializer.validated_data["start_time"],
            serializer.validated_data["end_time"],
            self.tenant,
        )
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):  # type: ignore
        booking = services.get_booking(pk, self.tenant)
        return Response(BookingSerializer(booking).data)

    def partial_update(self, request, pk=None):  # type: ignore
        reject_immutable_fields(request.data, services.IMMUTABLE_BOOKING_FIELDS)
        booking = services.cancel_booking(pk, request.data.get("status"), self.tenant)
        return Response(BookingSerializer(booking).data, status=status.HTTP_200_OK)


class AdminBookingListView(TenantScopedViewMixin, generics.ListAPIView):
    """Every booking of the caller's community; community admins only."""

    serializer_class = BookingSerializer
    queryset = Booking.objects.none()
    filter_backends = [DjangoFilterBackend]
    filterset_class = BookingFilterSet

    def get_queryset(self):  # type: ignore
        if self.is_schema_view():
            return Booking.objects.none()
        return services.admin_bookings(self.tenant)
