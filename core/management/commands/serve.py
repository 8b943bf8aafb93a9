from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError

from core.startup import StartupError, run_startup_checks


class Command(BaseCommand):
    help = "Run the startup checks, then serve on 0.0.0.0:$PORT."

    def add_arguments(self, parser):
        parser.add_argument('--skip-checks-on-start', action='store_true', help='Do not check database and templates first')

    def handle(self, *args, **kwargs):
        if not kwargs.get('skip_checks_on_start'):
            try:
                run_startup_checks()
            except StartupError as e:
                raise CommandError(str(e))

        addrport = f"0.0.0.0:{settings.PORT}"
        self.stdout.write(f"Server starting on port {settings.PORT} (APP_ENV={settings.APP_ENV})")
        call_command("runserver", addrport, use_reloader=False)
