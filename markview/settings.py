"""
Django settings for the MarkView project.

Values that differ between deployments come from environment variables.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "markview-insecure-development-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")

ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "viewer",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "markview.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

WSGI_APPLICATION = "markview.wsgi.application"

# The viewer keeps no state of its own
DATABASES = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

# MarkView
MARKVIEW_ROOT = os.environ.get("MARKVIEW_ROOT") or os.getcwd()
MARKVIEW_DEFAULT_FILE = os.environ.get("MARKVIEW_DEFAULT_FILE", "README.md")
MARKVIEW_DOCUMENT_EXTENSION = ".md"
MARKVIEW_DIAGRAM_LANGUAGE = "mermaid"
MARKVIEW_SEARCH_MIN_QUERY_LENGTH = 2
MARKVIEW_SEARCH_MAX_MATCHES = 5

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{asctime} {levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "viewer": {
            "handlers": ["console"],
            "level": os.environ.get("MARKVIEW_LOG_LEVEL", "INFO"),
            "propagate": False,
        },
    },
}
