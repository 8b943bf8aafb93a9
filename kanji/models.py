from django.db import models
from django.db.models import F
from django.utils import timezone


class JLPTLevel(models.TextChoices):
    N1 = "n1", "N1"
    N2 = "n2", "N2"
    N3 = "n3", "N3"
    N4 = "n4", "N4"
    N5 = "n5", "N5"


class Kanji(models.Model):
    """
    A single kanji with its readings and JLPT level.
    The id is assigned by the database on insert and never changes.
    """
    kanji_char = models.CharField("Kanji", max_length=8)

    # On'yomi / kun'yomi, in romaji and hiragana
    romaji_onyomi = models.CharField("On'yomi (romaji)", max_length=100, blank=True)
    romaji_kunyomi = models.CharField("Kun'yomi (romaji)", max_length=100, blank=True)
    hiragana_onyomi = models.CharField("On'yomi (hiragana)", max_length=100, blank=True)
    hiragana_kunyomi = models.CharField("Kun'yomi (hiragana)", max_length=100, blank=True)

    jlpt_level = models.CharField("JLPT", max_length=2, choices=JLPTLevel.choices)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "kanji"
        ordering = ["id"]
        verbose_name = "Kanji"
        verbose_name_plural = "Kanji"

    def __str__(self):
        return f"{self.kanji_char} ({self.get_jlpt_level_display()})"


class KanjiCreation(models.Model):
    """
    User-written explanation for one kanji. The image/mapping URLs point at
    objects in the bucket; the row does not own them.
    """
    kanji = models.ForeignKey(
        Kanji,
        on_delete=models.PROTECT,
        related_name="creations",
        db_column="kanji_char_id",
    )
    created_by = models.CharField(max_length=150)
    created_date = models.DateTimeField(auto_now_add=True)
    image_url = models.URLField(max_length=500, null=True, blank=True)
    mapping_url = models.URLField(max_length=500, null=True, blank=True)
    explanation = models.TextField()
    is_public = models.BooleanField(default=False)
    stars = models.PositiveIntegerField(default=0)
    flags = models.PositiveIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "kanji_creations"
        ordering = ["-created_date"]
        verbose_name = "Kanji creation"
        verbose_name_plural = "Kanji creations"

    def __str__(self):
        return f"{self.kanji.kanji_char} by {self.created_by}"

    def add_star(self):
        self._increment("stars")

    def add_flag(self):
        self._increment("flags")

    def _increment(self, field):
        # F() keeps concurrent increments from overwriting each other
        type(self).objects.filter(pk=self.pk).update(**{field: F(field) + 1, "updated_at": timezone.now()})
        self.refresh_from_db(fields=[field, "updated_at"])


class TempCreation(models.Model):
    """Draft of a KanjiCreation before it is published."""
    kanji = models.ForeignKey(
        Kanji,
        on_delete=models.CASCADE,
        related_name="drafts",
        db_column="kanji_char_id",
    )
    image_url = models.URLField(max_length=500, null=True, blank=True)
    mapping_url = models.URLField(max_length=500, null=True, blank=True)
    explanation = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "temp_creations"
        ordering = ["-created_at"]
        verbose_name = "Draft creation"
        verbose_name_plural = "Draft creations"

    def __str__(self):
        return f"Draft for {self.kanji.kanji_char}"
