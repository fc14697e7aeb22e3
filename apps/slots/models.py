"""Parking slot models for ParkBoard."""

from __future__ import annotations

import uuid

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class ParkingSlot(models.Model):
    """Rentable parking space inside one community."""

    class SlotType(models.TextChoices):
        COVERED = "covered", _("Covered")
        UNCOVERED = "uncovered", _("Uncovered")
        TANDEM = "tandem", _("Tandem")

    class PricingMode(models.TextChoices):
        EXPLICIT = "explicit", _("Fixed hourly rate")
        REQUEST_QUOTE = "request_quote", _("Request a quote")

    class Status(models.TextChoices):
        ACTIVE = "active", _("Active")
        MAINTENANCE = "maintenance", _("Under maintenance")
        DELETED = "deleted", _("Deleted")

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    community = models.ForeignKey(
        "communities.Community",
        on_delete=models.PROTECT,
        related_name="slots",
        db_column="community_code",
    )
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="owned_slots",
        help_text=_("Empty for shared slots managed by community admins."),
    )
    slot_number = models.CharField(max_length=32)
    slot_type = models.CharField(max_length=20, choices=SlotType.choices, default=SlotType.UNCOVERED)
    description = models.TextField(blank=True)
    pricing_mode = models.CharField(
        max_length=20,
        choices=PricingMode.choices,
        default=PricingMode.EXPLICIT,
    )
    price_per_hour = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Parking slot")
        verbose_name_plural = _("Parking slots")
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["community", "slot_number"],
                name="slot_number_unique_per_community",
            ),
            models.CheckConstraint(
                condition=(
                    models.Q(pricing_mode="explicit", price_per_hour__gt=0)
                    | models.Q(pricing_mode="request_quote", price_per_hour__isnull=True)
                ),
                name="slot_pricing_consistent",
            ),
        ]
        indexes = [
            models.Index(fields=["community", "status"], name="slots_parki_communi_8e1f4a_idx"),
            models.Index(fields=["owner"], name="slots_parki_owner_i_3c9d27_idx"),
        ]

    def __str__(self) -> str:
        return f"Slot {self.slot_number} ({self.community_id})"

    @property
    def is_shared(self) -> bool:
        return self.owner_id is None
