"""Admin registration for communities."""

from __future__ import annotations

from django.contrib import admin  # type: ignore

from .models import Community


@admin.register(Community)
class CommunityAdmin(admin.ModelAdmin):
    list_display = ("code", "name", "display_name", "status", "created_at")
    list_filter = ("status",)
    search_fields = ("code", "name", "display_name")

    def get_readonly_fields(self, request, obj=None):  # type: ignore
        readonly = ["created_at", "updated_at"]
        if obj is not None:
            readonly.insert(0, "code")
        return readonly
