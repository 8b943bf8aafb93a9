# core/startup.py
"""
Checks that must pass before the process starts serving requests.
"""
import logging

from django.db import DatabaseError, connection
from django.template import TemplateDoesNotExist, TemplateSyntaxError
from django.template.loader import get_template

logger = logging.getLogger(__name__)

REQUIRED_TEMPLATES = (
    "base.html",
    "core/_dialog.html",
    "kanji/_kanji_list.html",
    "uploads/_file_list.html",
)


class StartupError(Exception):
    """A dependency needed to serve requests is unavailable."""
    pass


def check_database():
    try:
        connection.ensure_connection()
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as e:
        raise StartupError(f"Failed to connect to database: {e}") from e
    logger.info("Successfully connected to %s database", connection.vendor)


def check_templates():
    for name in REQUIRED_TEMPLATES:
        try:
            get_template(name)
        except (TemplateDoesNotExist, TemplateSyntaxError) as e:
            raise StartupError(f"Error parsing template {name}: {e}") from e


def run_startup_checks():
    check_templates()
    check_database()
