# kanji/services.py
"""
Write path for the kanji table.

Reads are plain ORM queries in the views; inserts go through add_kanji so that
insert failures and commit failures are reported separately.
"""
import logging

from django.db import DatabaseError, transaction

from .exceptions import KanjiCommitError, KanjiInsertError
from .models import Kanji

logger = logging.getLogger(__name__)


def add_kanji(
    kanji_char,
    romaji_onyomi="",
    romaji_kunyomi="",
    hiragana_onyomi="",
    hiragana_kunyomi="",
    jlpt_level="",
):
    """
    Insert one kanji inside a transaction.

    Returns:
        Kanji: the saved row, with id, created_at and updated_at filled in
            by the database.

    Raises:
        KanjiInsertError: the INSERT failed (rolled back).
        KanjiCommitError: the COMMIT failed.
    """
    try:
        with transaction.atomic():
            try:
                kanji = Kanji.objects.create(
                    kanji_char=kanji_char,
                    romaji_onyomi=romaji_onyomi,
                    romaji_kunyomi=romaji_kunyomi,
                    hiragana_onyomi=hiragana_onyomi,
                    hiragana_kunyomi=hiragana_kunyomi,
                    jlpt_level=jlpt_level,
                )
            except DatabaseError as e:
                raise KanjiInsertError(kanji_char) from e
    except DatabaseError as e:
        raise KanjiCommitError(kanji_char) from e

    logger.info("Inserted kanji %s with id %d", kanji.kanji_char, kanji.pk)
    return kanji


def list_kanji():
    """All kanji ordered by ascending id."""
    return list(Kanji.objects.order_by("id"))
