"""API tests for the slot registry."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.communities.models import Community
from apps.communities.tests.factories import (
    make_booking,
    make_community,
    make_slot,
    make_user,
    tomorrow_at,
)
from apps.slots.models import ParkingSlot
from apps.users.models import User


class SlotAPITestCase(APITestCase):
    def setUp(self) -> None:
        self.community = make_community("sunrise")
        self.other_community = make_community("harbor")
        self.owner = make_user(self.community)
        self.neighbour = make_user(self.community)
        self.admin = make_user(self.community, role=User.Role.ADMIN)
        self.outsider = make_user(self.other_community)
        self.list_url = reverse("slot-list")

    def detail_url(self, slot) -> str:
        return reverse("slot-detail", args=[slot.pk])


class SlotCreateTests(SlotAPITestCase):
    def test_create_assigns_owner_and_community_from_session(self) -> None:
        self.client.force_authenticate(self.owner)
        payload = {
            "slot_number": " B-12 ",
            "slot_type": "covered",
            "pricing_mode": "explicit",
            "price_per_hour": "75.50",
            "community_code": "harbor",
            "owner_id": str(self.outsider.pk),
            "status": "maintenance",
        }

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        slot = ParkingSlot.objects.get(pk=response.data["id"])
        self.assertEqual(slot.community_id, "sunrise")
        self.assertEqual(slot.owner_id, self.owner.pk)
        self.assertEqual(slot.slot_number, "B-12")
        self.assertEqual(slot.status, ParkingSlot.Status.ACTIVE)
        self.assertEqual(slot.price_per_hour, Decimal("75.50"))
        self.assertEqual(response.data["community_code"], "sunrise")

    def test_explicit_pricing_requires_positive_price(self) -> None:
        self.client.force_authenticate(self.owner)

        for price in (None, "0", "-5.00"):
            with self.subTest(price=price):
                payload = {"slot_number": "A-1", "pricing_mode": "explicit"}
                if price is not None:
                    payload["price_per_hour"] = price
                response = self.client.post(self.list_url, payload, format="json")
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(response.data["error"], "validation_error")

        self.assertFalse(ParkingSlot.objects.exists())

    def test_request_quote_forces_price_absent(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(
            self.list_url,
            {"slot_number": "Q-1", "pricing_mode": "request_quote", "price_per_hour": "99.00"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertIsNone(response.data["price_per_hour"])
        self.assertIsNone(ParkingSlot.objects.get(slot_number="Q-1").price_per_hour)

    def test_blank_slot_number_is_rejected(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(
            self.list_url, {"slot_number": "   ", "price_per_hour": "10.00"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "validation_error")

    def test_duplicate_slot_number_in_same_community(self) -> None:
        make_slot(self.neighbour, slot_number="A-1")
        self.client.force_authenticate(self.owner)

        response = self.client.post(
            self.list_url, {"slot_number": "A-1", "price_per_hour": "10.00"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "duplicate_slot_number")

    def test_same_slot_number_allowed_in_other_community(self) -> None:
        make_slot(self.outsider, slot_number="A-1")
        self.client.force_authenticate(self.owner)

        response = self.client.post(
            self.list_url, {"slot_number": "A-1", "price_per_hour": "10.00"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)

    def test_admin_can_create_shared_slot(self) -> None:
        self.client.force_authenticate(self.admin)

        response = self.client.post(
            self.list_url,
            {"slot_number": "V-1", "price_per_hour": "20.00", "shared": True},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertTrue(response.data["is_shared"])
        self.assertIsNone(ParkingSlot.objects.get(slot_number="V-1").owner_id)

    def test_resident_cannot_create_shared_slot(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.post(
            self.list_url,
            {"slot_number": "V-1", "price_per_hour": "20.00", "shared": True},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"], "forbidden")

    def test_inactive_community_is_read_only(self) -> None:
        self.community.status = Community.Status.INACTIVE
        self.community.save()
        self.client.force_authenticate(self.owner)

        response = self.client.post(
            self.list_url, {"slot_number": "A-9", "price_per_hour": "10.00"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(ParkingSlot.objects.exists())

    def test_requires_authentication(self) -> None:
        response = self.client.post(self.list_url, {"slot_number": "A-1"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_user_without_community_cannot_create(self) -> None:
        self.client.force_authenticate(make_user(None))

        response = self.client.post(
            self.list_url, {"slot_number": "A-1", "price_per_hour": "10.00"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"], "no_community_assigned")


class SlotReadTests(SlotAPITestCase):
    def test_list_shows_only_active_slots_of_own_community(self) -> None:
        visible = make_slot(self.owner)
        make_slot(self.owner, status=ParkingSlot.Status.MAINTENANCE)
        make_slot(self.owner, status=ParkingSlot.Status.DELETED)
        make_slot(self.outsider)
        self.client.force_authenticate(self.neighbour)

        response = self.client.get(self.list_url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        ids = [item["id"] for item in response.data["results"]]
        self.assertEqual(ids, [str(visible.pk)])

    def test_list_mine_returns_own_non_deleted_slots(self) -> None:
        active = make_slot(self.owner)
        maintenance = make_slot(self.owner, status=ParkingSlot.Status.MAINTENANCE)
        make_slot(self.owner, status=ParkingSlot.Status.DELETED)
        make_slot(self.neighbour)
        self.client.force_authenticate(self.owner)

        response = self.client.get(self.list_url, {"mine": "true"})

        ids = {item["id"] for item in response.data["results"]}
        self.assertEqual(ids, {str(active.pk), str(maintenance.pk)})

    def test_list_filters_by_slot_type(self) -> None:
        covered = make_slot(self.owner, slot_type=ParkingSlot.SlotType.COVERED)
        make_slot(self.owner, slot_type=ParkingSlot.SlotType.TANDEM)
        self.client.force_authenticate(self.neighbour)

        response = self.client.get(self.list_url, {"slot_type": "covered"})

        ids = [item["id"] for item in response.data["results"]]
        self.assertEqual(ids, [str(covered.pk)])

    def test_retrieve_own_community_slot(self) -> None:
        slot = make_slot(self.owner, description="Near the lobby")
        self.client.force_authenticate(self.neighbour)

        response = self.client.get(self.detail_url(slot))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["description"], "Near the lobby")
        self.assertEqual(response.data["owner_id"], self.owner.pk)

    def test_retrieve_deleted_slot_is_not_found(self) -> None:
        slot = make_slot(self.owner, status=ParkingSlot.Status.DELETED)
        self.client.force_authenticate(self.owner)

        response = self.client.get(self.detail_url(slot))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_malformed_identifier_is_rejected_before_lookup(self) -> None:
        self.client.force_authenticate(self.owner)

        response = self.client.get(reverse("slot-detail", args=["not-a-uuid"]))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "invalid_identifier")

    def test_availability_quotes_price_for_free_window(self) -> None:
        slot = make_slot(self.owner, price_per_hour=Decimal("40.00"))
        self.client.force_authenticate(self.neighbour)

        response = self.client.get(
            reverse("slot-availability", args=[slot.pk]),
            {"start_time": tomorrow_at(10).isoformat(), "end_time": tomorrow_at(12, 30).isoformat()},
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertTrue(response.data["bookable"])
        self.assertEqual(response.data["total_price"], "100.00")
        self.assertFalse(Booking.objects.exists())

    def test_availability_reports_conflict(self) -> None:
        slot = make_slot(self.owner)
        make_booking(slot, self.neighbour, tomorrow_at(10), tomorrow_at(12))
        self.client.force_authenticate(self.admin)

        response = self.client.get(
            reverse("slot-availability", args=[slot.pk]),
            {"start_time": tomorrow_at(11).isoformat(), "end_time": tomorrow_at(13).isoformat()},
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data["bookable"])
        self.assertIsNone(response.data["total_price"])


class SlotUpdateTests(SlotAPITestCase):
    def test_owner_can_update_fields(self) -> None:
        slot = make_slot(self.owner)
        self.client.force_authenticate(self.owner)

        response = self.client.patch(
            self.detail_url(slot),
            {"description": "Covered, near gate", "price_per_hour": "60.00", "status": "maintenance"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        slot.refresh_from_db()
        self.assertEqual(slot.description, "Covered, near gate")
        self.assertEqual(slot.price_per_hour, Decimal("60.00"))
        self.assertEqual(slot.status, ParkingSlot.Status.MAINTENANCE)

    def test_switching_to_request_quote_clears_price(self) -> None:
        slot = make_slot(self.owner)
        self.client.force_authenticate(self.owner)

        response = self.client.patch(
            self.detail_url(slot), {"pricing_mode": "request_quote"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        slot.refresh_from_db()
        self.assertIsNone(slot.price_per_hour)

    def test_switching_to_explicit_without_price_fails(self) -> None:
        slot = make_slot(self.owner, pricing_mode=ParkingSlot.PricingMode.REQUEST_QUOTE)
        self.client.force_authenticate(self.owner)

        response = self.client.patch(self.detail_url(slot), {"pricing_mode": "explicit"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "validation_error")

    def test_status_cannot_be_set_to_deleted(self) -> None:
        slot = make_slot(self.owner)
        self.client.force_authenticate(self.owner)

        response = self.client.patch(self.detail_url(slot), {"status": "deleted"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        slot.refresh_from_db()
        self.assertEqual(slot.status, ParkingSlot.Status.ACTIVE)

    def test_immutable_fields_are_rejected(self) -> None:
        slot = make_slot(self.owner)
        self.client.force_authenticate(self.owner)

        for payload in (
            {"community_code": "harbor"},
            {"owner_id": str(self.neighbour.pk)},
            {"owner": str(self.neighbour.pk), "description": "x"},
        ):
            with self.subTest(payload=payload):
                response = self.client.patch(self.detail_url(slot), payload, format="json")
                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertEqual(response.data["error"], "immutable_field_violation")

        slot.refresh_from_db()
        self.assertEqual(slot.community_id, "sunrise")
        self.assertEqual(slot.owner_id, self.owner.pk)
        self.assertEqual(slot.description, "")

    def test_non_owner_is_forbidden(self) -> None:
        slot = make_slot(self.owner)
        self.client.force_authenticate(self.neighbour)

        response = self.client.patch(self.detail_url(slot), {"description": "mine now"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(response.data["error"], "forbidden")

    def test_admin_can_update_any_slot_in_community(self) -> None:
        slot = make_slot(self.owner)
        self.client.force_authenticate(self.admin)

        response = self.client.patch(self.detail_url(slot), {"status": "maintenance"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

    def test_cross_tenant_update_is_not_found(self) -> None:
        slot = make_slot(self.owner)
        self.client.force_authenticate(self.outsider)

        response = self.client.patch(self.detail_url(slot), {"description": "hijack"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["error"], "not_found")

    def test_renumbering_to_taken_number_fails(self) -> None:
        make_slot(self.owner, slot_number="A-1")
        slot = make_slot(self.owner, slot_number="A-2")
        self.client.force_authenticate(self.owner)

        response = self.client.patch(self.detail_url(slot), {"slot_number": "A-1"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"], "duplicate_slot_number")


class SlotDeleteTests(SlotAPITestCase):
    def test_owner_soft_deletes_slot(self) -> None:
        slot = make_slot(self.owner)
        self.client.force_authenticate(self.owner)

        response = self.client.delete(self.detail_url(slot))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        slot.refresh_from_db()
        self.assertEqual(slot.status, ParkingSlot.Status.DELETED)

    def test_delete_blocked_by_pending_booking_ending_tomorrow(self) -> None:
        slot = make_slot(self.owner)
        make_booking(
            slot, self.neighbour, tomorrow_at(8), tomorrow_at(18), status=Booking.Status.PENDING
        )
        self.client.force_authenticate(self.owner)

        response = self.client.delete(self.detail_url(slot))

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)
        self.assertEqual(response.data["error"], "active_bookings_exist")
        slot.refresh_from_db()
        self.assertEqual(slot.status, ParkingSlot.Status.ACTIVE)

    def test_finished_and_cancelled_bookings_do_not_block_delete(self) -> None:
        slot = make_slot(self.owner)
        past_start = tomorrow_at(8) - timedelta(days=3)
        make_booking(slot, self.neighbour, past_start, past_start + timedelta(hours=2))
        make_booking(
            slot, self.neighbour, tomorrow_at(8), tomorrow_at(10), status=Booking.Status.CANCELLED
        )
        self.client.force_authenticate(self.owner)

        response = self.client.delete(self.detail_url(slot))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)

    def test_non_owner_cannot_delete(self) -> None:
        slot = make_slot(self.owner)
        self.client.force_authenticate(self.neighbour)

        response = self.client.delete(self.detail_url(slot))

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_cross_tenant_delete_is_not_found(self) -> None:
        slot = make_slot(self.owner)
        self.client.force_authenticate(self.outsider)

        response = self.client.delete(self.detail_url(slot))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        slot.refresh_from_db()
        self.assertEqual(slot.status, ParkingSlot.Status.ACTIVE)

    def test_deleted_slot_cannot_be_deleted_again(self) -> None:
        slot = make_slot(self.owner, status=ParkingSlot.Status.DELETED)
        self.client.force_authenticate(self.owner)

        response = self.client.delete(self.detail_url(slot))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
