from pathlib import Path
import logging
import os
from dotenv import load_dotenv
import dj_database_url

from config.environment import (
    cors_policy,
    database_config,
    decode_csrf_key,
    load_config,
)

BASE_DIR = Path(__file__).resolve().parent.parent

ENV_FILE = os.getenv("ENV_FILE")
if ENV_FILE and Path(ENV_FILE).exists():
    load_dotenv(ENV_FILE)
else:
    load_dotenv(BASE_DIR / ".env")

logger = logging.getLogger("config")

# Resolved once; every environment-dependent policy below derives from it.
APP_CONFIG = load_config()
APP_ENV = APP_CONFIG.app_env
PORT = APP_CONFIG.port
IS_PROD = APP_CONFIG.is_prod

CSRF_KEY = decode_csrf_key(APP_CONFIG, os.getenv("CSRF_KEY", ""))
SECRET_KEY = os.getenv("SECRET_KEY", "").strip() or CSRF_KEY.hex()


def env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, "1" if default else "0").lower() in ("1", "true", "yes", "on")


DEBUG = env_bool("DEBUG", default=not IS_PROD)

ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "").split(",") if h.strip()]
if not ALLOWED_HOSTS:
    ALLOWED_HOSTS = ["*"] if not IS_PROD else []

csrf = os.getenv("CSRF_TRUSTED_ORIGINS", "")
CSRF_TRUSTED_ORIGINS = [x.strip() for x in csrf.split(",") if x.strip()]

# === CSRF ===
# LOCAL runs skip CSRF checks entirely; tokens are still issued so the
# templates render the same in both modes.
CSRF_ENFORCED = IS_PROD
CSRF_COOKIE_SECURE = IS_PROD
CSRF_COOKIE_HTTPONLY = True
CSRF_COOKIE_SAMESITE = "Strict"
CSRF_COOKIE_PATH = "/"
CSRF_HEADER_NAME = "HTTP_X_CSRF_TOKEN"
CSRF_FAILURE_VIEW = "core.views.csrf_failure"

SESSION_COOKIE_SECURE = IS_PROD

# === CORS ===
_cors = cors_policy(APP_CONFIG, os.getenv("CORS_ALLOWED_ORIGINS", ""))
CORS_ALLOW_ALL_ORIGINS = _cors["CORS_ALLOW_ALL_ORIGINS"]
CORS_ALLOWED_ORIGINS = _cors["CORS_ALLOWED_ORIGINS"]
CORS_ALLOW_CREDENTIALS = _cors["CORS_ALLOW_CREDENTIALS"]
CORS_ALLOW_METHODS = _cors["CORS_ALLOW_METHODS"]
CORS_ALLOW_HEADERS = _cors["CORS_ALLOW_HEADERS"]
CORS_EXPOSE_HEADERS = _cors["CORS_EXPOSE_HEADERS"]
CORS_PREFLIGHT_MAX_AGE = _cors["CORS_PREFLIGHT_MAX_AGE"]

# === Object storage ===
BUCKET_NAME = os.getenv("BUCKET_NAME", "").strip()
if not BUCKET_NAME:
    logger.warning("BUCKET_NAME not set, using default bucket name")
    BUCKET_NAME = "default-bucket-name"

UPLOAD_PREFIX = "uploads/"
MAX_UPLOAD_SIZE = 5 << 20
UPLOAD_TIMEOUT = 60
STORAGE_TIMEOUT = 30

STATIC_URL = '/static/'
STATIC_ROOT = Path(os.getenv("STATIC_ROOT", str(BASE_DIR / "staticfiles")))
STATICFILES_DIRS = [BASE_DIR / "static"]

STORAGES = {
    "default": {
        "BACKEND": "config.storage_backends.GoogleCloudMediaStorage",
        "OPTIONS": {"bucket_name": BUCKET_NAME},
    },
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedStaticFilesStorage"},
}


# Application definition
INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    'corsheaders',
    'storages',

    'core',
    'kanji',
    'uploads',
]

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'core.middleware.RequestLogMiddleware',
    'core.middleware.RecoveryMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'whitenoise.middleware.WhiteNoiseMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'core.middleware.EnvironmentCsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.template.context_processors.csrf',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'

# === Database ===
# DATABASE_URL wins when present; otherwise the DB_* variables decide between
# TCP (LOCAL) and the Cloud SQL socket (PROD).
DATABASE_URL = os.getenv("DATABASE_URL", "").strip()
if DATABASE_URL:
    DATABASES = {"default": dj_database_url.parse(DATABASE_URL, conn_max_age=600)}
else:
    _db = database_config(APP_CONFIG)
    if _db is None:
        if IS_PROD:
            raise RuntimeError("Database env missing (DATABASE_URL or DB_HOST/DB_NAME/DB_USER)")
        logger.warning("DB_HOST not set, using local SQLite database")
        _db = {"ENGINE": "django.db.backends.sqlite3", "NAME": BASE_DIR / "db.sqlite3"}
    _db["CONN_MAX_AGE"] = 600
    DATABASES = {"default": _db}


AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator',
    },
]


LANGUAGE_CODE = 'en-us'
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True


# === Logging ===
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {"handlers": ["console"], "level": os.getenv("LOG_LEVEL", "INFO")},
    "loggers": {
        "django.request": {"level": "ERROR"},
    },
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'
