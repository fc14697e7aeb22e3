"""Community (tenant) model."""

from __future__ import annotations

from django.core.validators import RegexValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

COMMUNITY_CODE_VALIDATOR = RegexValidator(
    regex=r"^[A-Za-z0-9_-]{2,32}$",
    message=_("Community code must be 2-32 letters, digits, '_' or '-'."),
)


class Community(models.Model):
    """Independently operated residential community."""

    class Status(models.TextChoices):
        ACTIVE = "active", _("Active")
        INACTIVE = "inactive", _("Inactive (read-only)")

    code = models.CharField(
        max_length=32,
        primary_key=True,
        validators=[COMMUNITY_CODE_VALIDATOR],
        help_text=_("Tenant identifier; immutable once created."),
    )
    name = models.CharField(max_length=255)
    display_name = models.CharField(max_length=255, blank=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Community")
        verbose_name_plural = _("Communities")
        ordering = ["code"]
        indexes = [models.Index(fields=["status"], name="communities_status_2f7c1e_idx")]

    def __str__(self) -> str:
        return f"{self.display_name or self.name} ({self.code})"

    @property
    def is_active(self) -> bool:
        return self.status == self.Status.ACTIVE
