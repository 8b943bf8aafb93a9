import logging

from django.db import DatabaseError
from django.http import HttpResponse, HttpResponseBadRequest, HttpResponseServerError
from django.shortcuts import render
from django.views.decorators.http import require_http_methods

from .exceptions import KanjiError
from .models import JLPTLevel, Kanji
from .services import add_kanji, list_kanji

logger = logging.getLogger(__name__)

KANJI_FIELDS = (
    "kanji_char",
    "romaji_onyomi",
    "romaji_kunyomi",
    "hiragana_onyomi",
    "hiragana_kunyomi",
    "jlpt_level",
)
REQUIRED_FIELDS = ("kanji_char", "jlpt_level")


@require_http_methods(["GET", "POST"])
def kanji_collection(request):
    if request.method == "POST":
        return kanji_create(request)
    return kanji_list(request)


def kanji_list(request):
    """
    Fragment with every kanji as a card, ordered by id.
    """
    try:
        kanji_qs = list_kanji()
    except DatabaseError as e:
        logger.error("Error querying kanji: %s", e)
        return HttpResponseServerError("Failed to retrieve kanji", content_type="text/plain")

    return render(request, "kanji/_kanji_list.html", {
        "kanji_list": kanji_qs,
    })


def kanji_create(request):
    """
    Insert one kanji from form fields and return its card.
    """
    data = {name: request.POST.get(name, "").strip() for name in KANJI_FIELDS}
    data["jlpt_level"] = data["jlpt_level"].lower()

    errors = [f"{name} is required" for name in REQUIRED_FIELDS if not data[name]]
    if data["jlpt_level"] and data["jlpt_level"] not in JLPTLevel.values:
        errors.append("jlpt_level must be one of n1, n2, n3, n4, n5")
    for name in KANJI_FIELDS:
        max_length = Kanji._meta.get_field(name).max_length
        if len(data[name]) > max_length:
            errors.append(f"{name} must be at most {max_length} characters")
    if errors:
        return HttpResponseBadRequest("\n".join(errors), content_type="text/plain")

    try:
        kanji = add_kanji(**data)
    except KanjiError as e:
        logger.error("Error adding kanji: %s (cause: %s)", e, e.__cause__)
        return HttpResponseServerError("Failed to add kanji", content_type="text/plain")

    return render(request, "kanji/_kanji_card.html", {"kanji": kanji})
