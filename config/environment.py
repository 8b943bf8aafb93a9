"""
Deployment mode and the policies derived from it.

APP_ENV is read once when settings load. Everything that differs between a
local run and production (CORS, CSRF, cookies, database connection) is
computed from the resulting AppConfig instead of reading os.environ again.
"""
import base64
import binascii
import logging
import os
from dataclasses import dataclass

from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

LOCAL = "LOCAL"
PROD = "PROD"

CSRF_KEY_LENGTH = 32

DEFAULT_PROD_ORIGINS = ("https://kanjigo.app", "https://www.kanjigo.app")
CLOUD_SQL_SOCKET_DIR = "/cloudsql"


@dataclass(frozen=True)
class AppConfig:
    port: str
    app_env: str

    @property
    def is_prod(self) -> bool:
        return self.app_env == PROD


def load_config(environ=None) -> AppConfig:
    environ = os.environ if environ is None else environ

    port = environ.get("PORT", "").strip() or "8080"
    app_env = environ.get("APP_ENV", "").strip().upper() or LOCAL
    if app_env not in (LOCAL, PROD):
        raise ImproperlyConfigured(f"APP_ENV must be LOCAL or PROD, got {app_env!r}")

    return AppConfig(port=port, app_env=app_env)


def decode_csrf_key(app_config: AppConfig, raw: str) -> bytes:
    """
    Decode CSRF_KEY (base64 of 32 bytes).

    A missing key is tolerated only in LOCAL mode, where an all-zero key is
    used. A malformed key is always fatal.
    """
    raw = (raw or "").strip()
    if not raw:
        if app_config.is_prod:
            raise ImproperlyConfigured("CSRF_KEY is required when APP_ENV=PROD")
        logger.warning("CSRF_KEY not set, using a temporary key")
        return bytes(CSRF_KEY_LENGTH)

    try:
        key = base64.b64decode(raw, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ImproperlyConfigured(f"Error decoding CSRF key: {e}") from e

    if len(key) != CSRF_KEY_LENGTH:
        raise ImproperlyConfigured(
            f"CSRF key must decode to {CSRF_KEY_LENGTH} bytes, got {len(key)}"
        )
    return key


def cors_policy(app_config: AppConfig, raw_origins: str = "") -> dict:
    """Return the django-cors-headers settings for the current mode."""
    policy = {
        "CORS_ALLOW_METHODS": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "CORS_ALLOW_HEADERS": [
            "accept",
            "authorization",
            "content-type",
            "x-csrf-token",
            "x-csrftoken",
            "hx-request",
            "hx-target",
            "hx-trigger",
            "hx-current-url",
        ],
        "CORS_EXPOSE_HEADERS": ["Link"],
        "CORS_PREFLIGHT_MAX_AGE": 300,
    }

    if app_config.is_prod:
        origins = [o.strip() for o in raw_origins.split(",") if o.strip()]
        policy.update({
            "CORS_ALLOW_ALL_ORIGINS": False,
            "CORS_ALLOWED_ORIGINS": origins or list(DEFAULT_PROD_ORIGINS),
            "CORS_ALLOW_CREDENTIALS": True,
        })
    else:
        policy.update({
            "CORS_ALLOW_ALL_ORIGINS": True,
            "CORS_ALLOWED_ORIGINS": [],
            "CORS_ALLOW_CREDENTIALS": False,
        })
    return policy


def database_config(app_config: AppConfig, environ=None) -> dict | None:
    """
    Build a DATABASES["default"] entry from the DB_* variables.

    LOCAL connects over TCP with TLS required. PROD connects through the
    Unix socket directory exposed by the Cloud SQL proxy. Returns None when
    DB_HOST is not set so the caller can fall back.
    """
    environ = os.environ if environ is None else environ

    host = environ.get("DB_HOST", "").strip()
    if not host:
        return None

    options = {
        "connect_timeout": 30,
        "options": "-c statement_timeout=30000",
    }

    if app_config.is_prod:
        socket_dir = host if host.startswith("/") else f"{CLOUD_SQL_SOCKET_DIR}/{host}"
        db_host, db_port = socket_dir, ""
    else:
        db_host, db_port = host, environ.get("DB_PORT", "").strip() or "5432"
        options["sslmode"] = "require"

    return {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": environ.get("DB_NAME", ""),
        "USER": environ.get("DB_USER", ""),
        "PASSWORD": environ.get("DB_PASSWORD", ""),
        "HOST": db_host,
        "PORT": db_port,
        "OPTIONS": options,
    }
