from contextlib import contextmanager
from unittest import mock

from django.db import DatabaseError
from django.test import TestCase

from kanji.exceptions import KanjiCommitError, KanjiError, KanjiInsertError
from kanji.models import Kanji, KanjiCreation
from kanji.services import add_kanji, list_kanji


def make_kanji(char, level="n5", **extra):
    fields = {
        "romaji_onyomi": "nichi",
        "romaji_kunyomi": "hi",
        "hiragana_onyomi": "にち",
        "hiragana_kunyomi": "ひ",
        "jlpt_level": level,
    }
    fields.update(extra)
    return add_kanji(char, **fields)


class AddKanjiTests(TestCase):
    def test_insert_returns_database_assigned_fields(self):
        kanji = make_kanji("日")

        self.assertIsNotNone(kanji.pk)
        self.assertIsNotNone(kanji.created_at)
        self.assertIsNotNone(kanji.updated_at)
        stored = Kanji.objects.get(pk=kanji.pk)
        self.assertEqual(stored.kanji_char, "日")
        self.assertEqual(stored.hiragana_onyomi, "にち")
        self.assertEqual(stored.jlpt_level, "n5")

    def test_duplicate_characters_are_not_rejected(self):
        first = make_kanji("月")
        second = make_kanji("月")
        self.assertNotEqual(first.pk, second.pk)
        self.assertEqual(Kanji.objects.filter(kanji_char="月").count(), 2)

    def test_insert_failure_rolls_back_and_raises(self):
        with mock.patch.object(Kanji.objects, "create", side_effect=DatabaseError("insert failed")):
            with self.assertRaises(KanjiInsertError) as ctx:
                make_kanji("火")

        self.assertIsInstance(ctx.exception.__cause__, DatabaseError)
        self.assertEqual(ctx.exception.kanji_char, "火")
        self.assertFalse(Kanji.objects.filter(kanji_char="火").exists())

    def test_commit_failure_is_reported_separately(self):
        @contextmanager
        def failing_commit():
            yield
            raise DatabaseError("could not commit")

        with mock.patch("kanji.services.transaction.atomic", failing_commit):
            with self.assertRaises(KanjiCommitError) as ctx:
                make_kanji("水")

        self.assertNotIsInstance(ctx.exception, KanjiInsertError)
        self.assertIsInstance(ctx.exception, KanjiError)
        self.assertIsInstance(ctx.exception.__cause__, DatabaseError)


class ListKanjiTests(TestCase):
    def test_listing_is_ordered_by_ascending_id(self):
        created = [make_kanji(char) for char in ("木", "金", "土", "山")]

        listed = list_kanji()

        self.assertEqual([k.pk for k in listed], sorted(k.pk for k in created))
        ids = [k.pk for k in listed]
        self.assertTrue(all(a < b for a, b in zip(ids, ids[1:])))

    def test_empty_table(self):
        self.assertEqual(list_kanji(), [])


class KanjiCreationTests(TestCase):
    def setUp(self):
        self.kanji = make_kanji("川")
        self.creation = KanjiCreation.objects.create(
            kanji=self.kanji,
            created_by="yuki",
            explanation="Three strokes flowing like a river.",
        )

    def test_defaults(self):
        self.assertFalse(self.creation.is_public)
        self.assertEqual(self.creation.stars, 0)
        self.assertEqual(self.creation.flags, 0)
        self.assertIsNone(self.creation.image_url)

    def test_add_star_and_flag_increment_in_database(self):
        self.creation.add_star()
        self.creation.add_star()
        self.creation.add_flag()

        self.assertEqual(self.creation.stars, 2)
        self.assertEqual(self.creation.flags, 1)
        stored = KanjiCreation.objects.get(pk=self.creation.pk)
        self.assertEqual((stored.stars, stored.flags), (2, 1))

    def test_creations_are_reachable_from_kanji(self):
        self.assertEqual(list(self.kanji.creations.all()), [self.creation])
