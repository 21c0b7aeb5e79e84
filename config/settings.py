"""
Shopfloor – Django Settings (Infrastructure Only)
=================================================
Django serves as the HTTP container for the dashboard.
Records live in in-memory screen services; Django's ORM is not used.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get(
    "SHOPFLOOR_SECRET_KEY",
    "shopfloor-dev-key-replace-before-deployment",
)

DEBUG = os.environ.get("SHOPFLOOR_DEBUG", "1") == "1"

ALLOWED_HOSTS = ["localhost", "127.0.0.1", "testserver"]

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.contenttypes",
]

# ── Middleware ────────────────────────────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# ── URL & WSGI ────────────────────────────────────────────────
ROOT_URLCONF = "config.urls"

# ── Database ──────────────────────────────────────────────────
# Unused by the dashboard; Django requires one configured.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── Shopfloor ─────────────────────────────────────────────────
SHOPFLOOR_BILL_NUMBER_PREFIX = os.environ.get("SHOPFLOOR_BILL_NUMBER_PREFIX", "INV")
SHOPFLOOR_DEFAULT_GST_RATE = float(os.environ.get("SHOPFLOOR_DEFAULT_GST_RATE", "18"))
SHOPFLOOR_SEED_DEMO_DATA = os.environ.get("SHOPFLOOR_SEED_DEMO_DATA", "1") == "1"

# ── Logging ───────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "loggers": {
        "shopfloor": {
            "handlers": ["console"],
            "level": os.environ.get("SHOPFLOOR_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
