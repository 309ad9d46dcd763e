"""Settings for the widget registry with their defaults."""

from __future__ import annotations

from pathlib import Path

from django.conf import settings

DEFAULT_FACADE_NAME = "Widget"


def autodiscover_enabled() -> bool:
    return bool(getattr(settings, "WIDGET_AUTODISCOVER", True))


def declarations_file() -> Path | None:
    """Return the configured declarations file, if any."""

    value = getattr(settings, "WIDGET_DECLARATIONS_FILE", None)
    if not value:
        return None
    return Path(value)


def facade_name() -> str:
    return getattr(settings, "WIDGET_FACADE_NAME", DEFAULT_FACADE_NAME) or DEFAULT_FACADE_NAME


def bindings() -> dict[str, str]:
    return dict(getattr(settings, "WIDGET_BINDINGS", {}) or {})
