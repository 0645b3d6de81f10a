from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError

from shortlinks.hooks import get_service


class Command(BaseCommand):
    help = "Delete every cached TinyURL shortlink. Run it when retiring the plugin."

    def handle(self, *args, **options):
        try:
            removed = get_service().invalidate_all()
        except DatabaseError as e:
            raise CommandError(f"Could not clear cached shortlinks: {e}")

        self.stdout.write(self.style.SUCCESS(f"Deleted {removed} cached shortlinks."))
