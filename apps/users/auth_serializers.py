"""Serializers for authentication flows (register, login)."""

from __future__ import annotations

from typing import Any

from django.contrib.auth import get_user_model  # type: ignore
from django.contrib.auth.password_validation import validate_password  # type: ignore
from django.db import transaction  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.communities.models import Community
from .models import PHONE_VALIDATOR


User = get_user_model()


class RegisterSerializer(serializers.Serializer):
    """Signup of a resident into an existing, active community.

    The role is always ``resident``; admins are promoted out of band.
    """

    email = serializers.EmailField()
    password = serializers.CharField(min_length=8, write_only=True)
    password_confirm = serializers.CharField(min_length=8, write_only=True)
    name = serializers.CharField(max_length=255)
    phone = serializers.CharField(required=False, allow_blank=True, validators=[PHONE_VALIDATOR])
    unit_number = serializers.CharField(max_length=32)
    community_code = serializers.CharField(max_length=32)

    def validate_email(self, value: str) -> str:
        if User.objects.filter(email__iexact=value).exists():
            raise serializers.ValidationError("A user with this email already exists.")
        return value

    def validate_name(self, value: str) -> str:
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name cannot be blank.")
        return value

    def validate_unit_number(self, value: str) -> str:
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Unit number cannot be blank.")
        return value

    def validate_community_code(self, value: str) -> Community:
        community = Community.objects.filter(code=value.strip()).first()
        if community is None:
            raise serializers.ValidationError("Unknown community code.")
        if not community.is_active:
            raise serializers.ValidationError("This community is not accepting new members.")
        return community

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        if attrs.get("password") != attrs.get("password_confirm"):
            raise serializers.ValidationError({"password_confirm": "Passwords do not match."})
        validate_password(attrs["password"])
        return attrs

    @transaction.atomic
    def create(self, validated_data: dict[str, Any]):  # type: ignore
        password = validated_data.pop("password")
        validated_data.pop("password_confirm", None)
        validated_data["community"] = validated_data.pop("community_code")
        return User.objects.create_user(
            password=password,
            role=User.Role.RESIDENT,
            **validated_data,
        )


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)

    def validate(self, attrs: dict[str, Any]) -> dict[str, Any]:  # type: ignore
        email = attrs.get("email", "")
        password = attrs.get("password", "")

        user = User.objects.filter(email__iexact=email).first()
        if user is None or not user.is_active or not user.check_password(password):
            raise serializers.ValidationError({"email": "Invalid email or password."})

        attrs["user"] = user
        return attrs
