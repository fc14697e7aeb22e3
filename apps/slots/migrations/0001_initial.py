import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("communities", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="ParkingSlot",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("slot_number", models.CharField(max_length=32)),
                (
                    "slot_type",
                    models.CharField(
                        choices=[("covered", "Covered"), ("uncovered", "Uncovered"), ("tandem", "Tandem")],
                        default="uncovered",
                        max_length=20,
                    ),
                ),
                ("description", models.TextField(blank=True)),
                (
                    "pricing_mode",
                    models.CharField(
                        choices=[("explicit", "Fixed hourly rate"), ("request_quote", "Request a quote")],
                        default="explicit",
                        max_length=20,
                    ),
                ),
                ("price_per_hour", models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[("active", "Active"), ("maintenance", "Under maintenance"), ("deleted", "Deleted")],
                        default="active",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "community",
                    models.ForeignKey(
                        db_column="community_code",
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="slots",
                        to="communities.community",
                    ),
                ),
                (
                    "owner",
                    models.ForeignKey(
                        blank=True,
                        help_text="Empty for shared slots managed by community admins.",
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="owned_slots",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Parking slot",
                "verbose_name_plural": "Parking slots",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["community", "status"], name="slots_parki_communi_8e1f4a_idx"),
                    models.Index(fields=["owner"], name="slots_parki_owner_i_3c9d27_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("community", "slot_number"),
                        name="slot_number_unique_per_community",
                    ),
                    models.CheckConstraint(
                        condition=(
                            models.Q(pricing_mode="explicit", price_per_hour__gt=0)
                            | models.Q(pricing_mode="request_quote", price_per_hour__isnull=True)
                        ),
                        name="slot_pricing_consistent",
                    ),
                ],
            },
        ),
    ]
