from django.urls import path
from . import views

app_name = "kanji"

urlpatterns = [
    path("api/kanji", views.kanji_collection, name="collection"),
]
