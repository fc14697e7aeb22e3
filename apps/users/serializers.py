"""Serializers for user-related API endpoints."""

from __future__ import annotations

from django.contrib.auth import get_user_model  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.communities.models import Community

User = get_user_model()


class CommunityShortSerializer(serializers.ModelSerializer):
    """Short community representation embedded in user responses."""

    class Meta:
        model = Community
        fields = ["code", "name", "display_name", "status"]


class UserSerializer(serializers.ModelSerializer):
    """Profile of a ParkBoard user."""

    community = CommunityShortSerializer(read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "name",
            "phone",
            "unit_number",
            "role",
            "community",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class ProfileUpdateSerializer(serializers.ModelSerializer):
    """Only contact fields are editable on the own profile."""

    class Meta:
        model = User
        fields = ["name", "phone"]
        extra_kwargs = {"name": {"required": False}, "phone": {"required": False}}

    def validate_name(self, value: str) -> str:
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name cannot be blank.")
        return value
