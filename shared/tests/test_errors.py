"""Unit tests for domain errors and identifier parsing."""

from __future__ import annotations

from uuid import uuid4

from django.test import SimpleTestCase

from shared.domain.errors import (
    ImmutableFieldViolation,
    InvalidIdentifier,
    SlotUnavailable,
    ValidationFailed,
    reject_immutable_fields,
)
from shared.infrastructure.identifiers import parse_identifier


class ErrorTests(SimpleTestCase):
    def test_default_detail_and_status(self) -> None:
        exc = SlotUnavailable()

        self.assertEqual(exc.status_code, 409)
        self.assertEqual(exc.code, "slot_unavailable")
        self.assertEqual(exc.detail, SlotUnavailable.default_detail)

    def test_reject_immutable_fields_names_offenders(self) -> None:
        with self.assertRaises(ImmutableFieldViolation) as ctx:
            reject_immutable_fields({"owner_id": 1, "community_code": "x", "name": "ok"}, ("owner_id", "community_code"))

        self.assertIn("community_code, owner_id", str(ctx.exception.detail))

    def test_reject_immutable_fields_allows_clean_payload(self) -> None:
        reject_immutable_fields({"name": "ok"}, ("owner_id",))
        reject_immutable_fields(None, ("owner_id",))

    def test_reject_immutable_fields_requires_an_object(self) -> None:
        for payload in (["cancelled"], [], "cancelled"):
            with self.subTest(payload=payload):
                with self.assertRaises(ValidationFailed):
                    reject_immutable_fields(payload, ("owner_id",))


class ParseIdentifierTests(SimpleTestCase):
    def test_accepts_uuid_and_string(self) -> None:
        value = uuid4()

        self.assertEqual(parse_identifier(value), value)
        self.assertEqual(parse_identifier(str(value)), value)

    def test_rejects_malformed_values(self) -> None:
        for raw in ("", "abc", "123", None, 42):
            with self.subTest(raw=raw):
                with self.assertRaises(InvalidIdentifier):
                    parse_identifier(raw, "slot")
