from django.contrib import admin
from .models import Kanji, KanjiCreation, TempCreation


@admin.register(Kanji)
class KanjiAdmin(admin.ModelAdmin):
    list_display = ("id", "kanji_char", "hiragana_onyomi", "hiragana_kunyomi", "jlpt_level", "created_at")
    list_filter = ("jlpt_level",)
    search_fields = ("kanji_char", "romaji_onyomi", "romaji_kunyomi", "hiragana_onyomi", "hiragana_kunyomi")
    readonly_fields = ("created_at", "updated_at")


@admin.register(KanjiCreation)
class KanjiCreationAdmin(admin.ModelAdmin):
    list_display = ("kanji", "created_by", "is_public", "stars", "flags", "created_date")
    list_filter = ("is_public",)
    search_fields = ("kanji__kanji_char", "created_by", "explanation")
    raw_id_fields = ("kanji",)


@admin.register(TempCreation)
class TempCreationAdmin(admin.ModelAdmin):
    list_display = ("kanji", "created_at")
    search_fields = ("kanji__kanji_char", "explanation")
    raw_id_fields = ("kanji",)
