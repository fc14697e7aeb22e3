"""Booking domain models for ParkBoard."""

from __future__ import annotations

import uuid
from decimal import Decimal

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from shared.domain.value_objects import TimeRange


class Booking(models.Model):
    """Reservation of a parking slot for a half-open time window."""

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        CONFIRMED = "confirmed", _("Confirmed")
        CANCELLED = "cancelled", _("Cancelled")
        COMPLETED = "completed", _("Completed")
        NO_SHOW = "no_show", _("No show")

    class PaymentStatus(models.TextChoices):
        PENDING = "pending", _("Pending")
        PAID = "paid", _("Paid")
        REFUNDED = "refunded", _("Refunded")

    ACTIVE_STATUSES = (Status.PENDING, Status.CONFIRMED)
    IRREVERSIBLE_STATUSES = (Status.COMPLETED, Status.NO_SHOW)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    slot = models.ForeignKey(
        "slots.ParkingSlot",
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    renter = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    # Copy of slot.owner at booking time. Never updated after creation.
    slot_owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="slot_bookings",
    )
    start_time = models.DateTimeField()
    end_time = models.DateTimeField()
    total_price = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        help_text=_("Computed by the server from the slot rate at booking time."),
    )
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.CONFIRMED)
    payment_status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING,
    )
    payment_reference = models.CharField(max_length=128, blank=True)
    cancelled_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-start_time"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(end_time__gt=models.F("start_time")),
                name="booking_valid_range",
            ),
            models.CheckConstraint(
                condition=models.Q(total_price__gte=0),
                name="booking_price_non_negative",
            ),
        ]
        indexes = [
            models.Index(fields=["slot", "start_time", "end_time"], name="bookings_bo_slot_id_6f2a1c_idx"),
            models.Index(fields=["renter"], name="bookings_bo_renter__4d8e90_idx"),
            models.Index(fields=["slot_owner"], name="bookings_bo_slot_ow_a1b7e2_idx"),
            models.Index(fields=["status", "end_time"], name="bookings_bo_status_c93d58_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking {self.pk} on {self.slot_id} {self.time_range}"

    @property
    def time_range(self) -> TimeRange:
        return TimeRange(self.start_time, self.end_time)

    def mark_cancelled(self) -> None:
        self.status = self.Status.CANCELLED
        self.cancelled_at = timezone.now()
        self.save(update_fields=["status", "cancelled_at", "updated_at"])
