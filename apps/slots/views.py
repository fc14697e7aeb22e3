"""Slot API views."""

from __future__ import annotations

from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import mixins, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.bookings.services import quote_booking
from apps.communities.tenancy import TenantScopedViewMixin
from shared.domain.errors import reject_immutable_fields

from . import services
from .filters import ParkingSlotFilterSet
from .models import ParkingSlot
from .serializers import AvailabilityQuerySerializer, ParkingSlotSerializer, ParkingSlotWriteSerializer

TRUE_VALUES = {"1", "true", "yes", "on"}


class ParkingSlotViewSet(
    TenantScopedViewMixin,
    mixins.ListModelMixin,
    viewsets.GenericViewSet,
):
    """Slots of the caller's community.

    - `list` returns active slots; `?mine=true` returns the caller's own
      non-deleted slots instead
    - writes go through `apps.slots.services`
    - `availability` quotes a window without booking it
    """

    serializer_class = ParkingSlotSerializer
    queryset = ParkingSlot.objects.none()
    filter_backends = [DjangoFilterBackend]
    filterset_class = ParkingSlotFilterSet
    http_method_names = ["get", "post", "patch", "delete", "head", "options"]

    def get_queryset(self):  # type: ignore
        if self.is_schema_view():
            return ParkingSlot.objects.none()
        qs = services.slots_in_community(self.tenant).select_related("owner")
        if self.request.query_params.get("mine", "").lower() in TRUE_VALUES:
            return qs.filter(owner_id=self.tenant.user_id).exclude(status=ParkingSlot.Status.DELETED)
        return qs.filter(status=ParkingSlot.Status.ACTIVE)

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = ParkingSlotWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        slot = services.create_slot(serializer.validated_data, self.tenant)
        return Response(ParkingSlotSerializer(slot).data, status=status.HTTP_201_CREATED)

    def retrieve(self, request, pk=None):  # type: ignore
        slot = services.get_slot(pk, self.tenant)
        return Response(ParkingSlotSerializer(slot).data)

    def partial_update(self, request, pk=None):  # type: ignore
        reject_immutable_fields(request.data, services.IMMUTABLE_SLOT_FIELDS)
        serializer = ParkingSlotWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        changes = {key: value for key, value in serializer.validated_data.items() if key in request.data}
        slot = services.update_slot(pk, changes, self.tenant)
        return Response(ParkingSlotSerializer(slot).data)

    def destroy(self, request, pk=None):  # type: ignore
        services.soft_delete_slot(pk, self.tenant)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["get"])
    def availability(self, request, pk=None):  # type: ignore
        """Whether the window is bookable and what it would cost."""
        slot = services.get_slot(pk, self.tenant)
        query = AvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        quote = quote_booking(
            slot,
            query.validated_data["start_time"],
            query.validated_data["end_time"],
            self.tenant,
        )
        return Response(quote)
