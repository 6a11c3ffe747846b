from __future__ import annotations

import structlog
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError

logger = structlog.get_logger(__name__)


class Command(BaseCommand):
    help = "Delete every row in the database. Requires --clear."

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Confirm that all data should be deleted.",
        )

    def handle(self, *args, **options):
        if not options["clear"]:
            self.stdout.write(
                self.style.WARNING("Nothing done. Pass --clear to delete all data.")
            )
            return

        try:
            call_command("flush", interactive=False, verbosity=0)
        except (DatabaseError, CommandError) as exc:
            logger.error("clear_data.failed", error=str(exc))
            raise CommandError(f"Could not clear data: {exc}") from exc

        logger.info("clear_data.completed")
        self.stdout.write(self.style.SUCCESS("Datos Eliminados Correctamente..."))
