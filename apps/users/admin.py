"""Admin registrations for the users domain."""

from __future__ import annotations

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils.translation import gettext_lazy as _

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    fieldsets = (
        (None, {"fields": ("email", "password")}),
        (_("Personal info"), {"fields": ("name", "phone", "unit_number")}),
        (_("Community and role"), {"fields": ("community", "role")}),
        (
            _("Permissions"),
            {"fields": ("is_active", "is_staff", "is_superuser", "groups", "user_permissions")},
        ),
        (_("Important dates"), {"fields": ("last_login", "date_joined", "created_at", "updated_at")}),
    )
    add_fieldsets = (
        (
            None,
            {
                "classes": ("wide",),
                "fields": (
                    "email",
                    "password1",
                    "password2",
                    "name",
                    "unit_number",
                    "community",
                    "role",
                ),
            },
        ),
    )
    list_display = ("email", "name", "community", "role", "unit_number", "is_active", "is_staff")
    list_filter = ("role", "community", "is_active", "is_staff")
    search_fields = ("email", "name", "phone", "unit_number")
    ordering = ("email",)
    readonly_fields = ("created_at", "updated_at", "date_joined")

    def get_readonly_fields(self, request, obj=None):  # type: ignore
        readonly = list(super().get_readonly_fields(request, obj))
        if obj is not None:
            readonly.extend(["email", "unit_number", "community"])
        return readonly
