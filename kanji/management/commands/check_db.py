from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError

from kanji.models import Kanji


class Command(BaseCommand):
    help = "Check the database connection: count kanji and print a few samples."

    def add_arguments(self, parser):
        parser.add_argument('--limit', type=int, default=5, help='Number of sample rows to print')

    def handle(self, *args, **kwargs):
        limit = kwargs.get('limit', 5)

        try:
            count = Kanji.objects.count()
            samples = list(Kanji.objects.order_by("id").values_list("id", "kanji_char")[:limit])
        except DatabaseError as e:
            raise CommandError(f"Failed to query database: {e}")

        self.stdout.write(self.style.SUCCESS(
            f"Database connection successful! Found {count} kanji in the database."
        ))
        if samples:
            self.stdout.write("Sample kanji in database:")
            for pk, char in samples:
                self.stdout.write(f"ID: {pk}, Character: {char}")
