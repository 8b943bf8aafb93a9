# core/middleware.py
"""
Request logging, crash recovery and environment-dependent CSRF checks.
"""
import logging
import time

from django.conf import settings
from django.core.exceptions import BadRequest, PermissionDenied, SuspiciousOperation
from django.http import Http404, HttpResponseServerError
from django.middleware.csrf import CsrfViewMiddleware

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    """Log method, path, status and duration of every request."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = (time.monotonic() - started) * 1000

        logger.info(
            '"%s %s" %s %d %.1fms',
            request.method,
            request.get_full_path(),
            response.status_code,
            len(response.content) if not response.streaming else -1,
            elapsed_ms,
        )
        return response


class RecoveryMiddleware:
    """
    Turn an uncaught exception from a view into a plain 500 and log its
    traceback. Handled errors never reach this point.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, (Http404, PermissionDenied, BadRequest, SuspiciousOperation)):
            return None
        logger.error(
            "Unhandled error on %s %s: %s",
            request.method,
            request.path,
            exception,
            exc_info=(type(exception), exception, exception.__traceback__),
        )
        return HttpResponseServerError("Internal Server Error", content_type="text/plain")


class EnvironmentCsrfViewMiddleware(CsrfViewMiddleware):
    """
    CsrfViewMiddleware whose checks are switched on or off by CSRF_ENFORCED.

    The flag is read once when the middleware chain is built. With checks
    off, tokens are still issued and rendered, only never verified.
    """

    def __init__(self, get_response):
        super().__init__(get_response)
        self.enforced = getattr(settings, "CSRF_ENFORCED", True)
        if not self.enforced:
            logger.warning("CSRF protection is disabled (APP_ENV=%s)", getattr(settings, "APP_ENV", "?"))

    def process_view(self, request, callback, callback_args, callback_kwargs):
        if not self.enforced:
            return None
        return super().process_view(request, callback, callback_args, callback_kwargs)
