import os
from pathlib import Path

from dotenv import load_dotenv

# .env is read before any SHELFSYNC_* value below
load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent


def _env_bool(name, default="False"):
    return os.getenv(name, default).lower() in ("true", "1", "yes")


SECRET_KEY = os.getenv("SHELFSYNC_SECRET_KEY", "shelfsync-dev-secret-key-change-this-in-production")
DEBUG = _env_bool("SHELFSYNC_DEBUG")
ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv("SHELFSYNC_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "shelfsync.apps.ShelfSyncConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "shelfsync_site.urls"
WSGI_APPLICATION = "shelfsync_site.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

# One request = one unit of work: a view commits as a whole or not at all.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("SHELFSYNC_DATABASE_PATH", str(BASE_DIR / "db.sqlite3")),
        "ATOMIC_REQUESTS": True,
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

LOG_LEVEL = os.getenv("SHELFSYNC_LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "shelfsync": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "django": {
            "handlers": ["console"],
            "level": "WARNING",
        },
    },
}
