"""Django settings for the widget registry project."""

from __future__ import annotations

import os
from pathlib import Path

from .logging import build_logging_config

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "widget-registry-insecure-key")
DEBUG = os.environ.get("DEBUG", "") not in ("", "0", "false", "False")
ALLOWED_HOSTS: list[str] = ["localhost", "127.0.0.1"]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "widget_registry",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "widget_registry.context_processors.widgets",
            ],
            "builtins": ["widget_registry.templatetags.widget_tags"],
            "loaders": [
                (
                    "widget_registry.loaders.Loader",
                    [
                        "django.template.loaders.filesystem.Loader",
                        "django.template.loaders.app_directories.Loader",
                    ],
                ),
            ],
        },
    }
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

USE_TZ = True

LOG_DIR = Path(os.environ.get("LOG_DIR", BASE_DIR / "logs"))
LOGGING = build_logging_config(DEBUG, LOG_DIR if os.environ.get("LOG_DIR") else None)

# Widget registry
WIDGET_AUTODISCOVER = True
WIDGET_DECLARATIONS_FILE = BASE_DIR / "widgets.py"
WIDGET_FACADE_NAME = "Widget"
WIDGET_BINDINGS: dict[str, str] = {}
