"""Own-profile API view."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.communities.tenancy import TenantScopedViewMixin
from shared.domain.errors import reject_immutable_fields

from .serializers import ProfileUpdateSerializer, UserSerializer

User = get_user_model()

IMMUTABLE_PROFILE_FIELDS = (
    "email",
    "unit_number",
    "community",
    "community_code",
    "role",
    "id",
)


class ProfileView(TenantScopedViewMixin, APIView):
    """Read and edit the caller's own profile.

    Email, unit number, community and role are fixed at signup; sending any
    of them is rejected rather than ignored.
    """

    def get_object(self):  # type: ignore
        return User.objects.select_related("community").get(pk=self.tenant.user_id)

    def get(self, request):  # type: ignore
        return Response(UserSerializer(self.get_object()).data)

    def patch(self, request):  # type: ignore
        reject_immutable_fields(request.data, IMMUTABLE_PROFILE_FIELDS)
        user = self.get_object()
        serializer = ProfileUpdateSerializer(user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(UserSerializer(user).data, status=status.HTTP_200_OK)
