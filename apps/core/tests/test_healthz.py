"""Tests for the health check endpoint."""

from __future__ import annotations

from unittest import mock

from django.db import OperationalError
from django.test import TestCase
from django.urls import reverse


class HealthzTests(TestCase):
    def test_reports_healthy_database(self) -> None:
        response = self.client.get(reverse("healthz"))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy", "database": "connected"})

    def test_reports_unreachable_database(self) -> None:
        with mock.patch("apps.core.views.connection") as connection:
            connection.cursor.side_effect = OperationalError("connection refused")
            response = self.client.get(reverse("healthz"))

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["status"], "unhealthy")

    def test_rejects_post(self) -> None:
        response = self.client.post(reverse("healthz"))

        self.assertEqual(response.status_code, 405)
