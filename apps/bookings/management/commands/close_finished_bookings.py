"""Mark active bookings whose end time has passed as completed."""

from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError  # type: ignore

from apps.bookings.services import close_finished_bookings
from shared.domain.errors import NotFound


class Command(BaseCommand):
    help = "Marks pending/confirmed bookings that have already ended as completed"

    def add_arguments(self, parser):  # type: ignore
        parser.add_argument("--community", dest="community", help="Only this community code")
        parser.add_argument(
            "--dry-run",
            action="store_true",
            dest="dry_run",
            help="Report how many bookings would be closed without changing them",
        )

    def handle(self, *args, **options):  # type: ignore
        try:
            closed = close_finished_bookings(
                community_code=options.get("community"),
                dry_run=options["dry_run"],
            )
        except NotFound as exc:
            raise CommandError(str(exc.detail)) from exc

        verb = "Would close" if options["dry_run"] else "Closed"
        for code, count in closed.items():
            self.stdout.write(f"{code}: {verb.lower()} {count} booking(s)")
        self.stdout.write(self.style.SUCCESS(f"{verb} {sum(closed.values())} booking(s) in total"))
