from django.apps import AppConfig


class KanjiConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'kanji'
