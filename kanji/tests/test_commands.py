from io import StringIO
from unittest import mock

from django.core.management import call_command
from django.core.management.base import CommandError
from django.db import OperationalError
from django.test import TestCase

from kanji.services import add_kanji


class CheckDbCommandTests(TestCase):
    def test_reports_count_and_samples(self):
        for char in ("一", "二", "三"):
            add_kanji(char, jlpt_level="n5")
        out = StringIO()

        call_command("check_db", "--limit", "2", stdout=out)

        output = out.getvalue()
        self.assertIn("Found 3 kanji in the database.", output)
        self.assertIn("Character: 一", output)
        self.assertIn("Character: 二", output)
        self.assertNotIn("Character: 三", output)

    def test_query_failure(self):
        with mock.patch("kanji.management.commands.check_db.Kanji.objects.count",
                        side_effect=OperationalError("down")):
            with self.assertRaises(CommandError):
                call_command("check_db", stdout=StringIO())
