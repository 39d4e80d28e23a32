"""
Django settings for MDProject.

Minimal settings for local development and the test-suite: no database is
needed, parsed Markdown is cached in process memory.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "mdproject-insecure-development-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "true").lower() in ("true", "1", "yes")

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    "mdengine",
]

DATABASES = {}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "mdproject-default",
    },
    "markdown": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "mdproject-markdown",
    },
}

USE_TZ = True

MARKDOWN = {
    "cache": "markdown",
    "parser": {
        "id": os.environ.get("MARKDOWN_PARSER") or None,
        "render_strategy": "filter_output",
    },
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "mdengine": {
            "handlers": ["console"],
            "level": os.environ.get("MDENGINE_LOG_LEVEL", "INFO"),
        },
    },
}

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {},
    },
]
