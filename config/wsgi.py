"""
WSGI entry point.

Startup checks run before the application is handed to the server so a
missing database or a broken base template stops the worker from booting.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()

from core.startup import run_startup_checks  # noqa: E402

run_startup_checks()
