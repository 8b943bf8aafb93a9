# core/views.py
from django.http import HttpResponse, HttpResponseForbidden
from django.shortcuts import render
from django.views.decorators.http import require_GET


@require_GET
def home(request):
    """
    Full page. The CSRF token is rendered into hx-headers so every HTMX
    request carries it.
    """
    context = {
        "title": "Kanji Go",
        "message": "Welcome to Kanji Go!",
    }
    return render(request, "base.html", context)


@require_GET
def dialog(request):
    return render(request, "core/_dialog.html")


@require_GET
def empty(request):
    """Empty fragment, used by the UI to clear a target."""
    return HttpResponse("", content_type="text/html")


def health(request):
    return HttpResponse("ok", content_type="text/plain")


def csrf_failure(request, reason=""):
    return HttpResponseForbidden(f"Forbidden - CSRF token invalid: {reason}", content_type="text/plain")
