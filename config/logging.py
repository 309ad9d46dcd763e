"""Logging configuration helpers for :mod:`config.settings`."""

from __future__ import annotations

from pathlib import Path

WIDGET_LOGGERS = ("widget_registry",)


def build_logging_config(debug: bool, log_dir: Path | None = None) -> dict:
    """Return a ``LOGGING`` dict with a console handler and an optional log file."""

    handlers: dict[str, dict] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    }
    if log_dir is not None:
        handlers["file"] = {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": str(Path(log_dir) / "widgets.log"),
            "when": "midnight",
            "backupCount": 7,
            "encoding": "utf-8",
            "formatter": "standard",
        }

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
        },
        "handlers": handlers,
        "root": {"handlers": list(handlers), "level": "INFO"},
        "loggers": {},
    }
    configure_widget_loggers(debug, config)
    return config


def configure_widget_loggers(debug: bool, logging_config: dict) -> None:
    """Set widget logger levels without overriding explicit configuration."""

    loggers = logging_config.setdefault("loggers", {})
    level = "DEBUG" if debug else "INFO"
    for name in WIDGET_LOGGERS:
        entry = loggers.setdefault(name, {})
        entry.setdefault("level", level)
        entry.setdefault("propagate", True)
