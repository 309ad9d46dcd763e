"""Build the process registry and load widget declarations."""

from __future__ import annotations

import logging
import runpy
from pathlib import Path

from django.utils.module_loading import autodiscover_modules

from . import conf
from .container import Container
from .registry import WidgetRegistry

logger = logging.getLogger(__name__)

DECLARATIONS_MODULE = "widgets"


def build_registry() -> WidgetRegistry:
    return WidgetRegistry(container=Container(conf.bindings()))


def load_declarations_file(registry: WidgetRegistry, path: Path | None) -> bool:
    """Execute a declarations file with the registry bound to the facade name.

    Returns ``False`` when no file is configured or it does not exist.
    """

    if path is None or not path.exists():
        return False
    runpy.run_path(
        str(path),
        init_globals={"registry": registry, conf.facade_name(): registry},
    )
    logger.info("Loaded widget declarations from %s", path)
    return True


def load_declarations(registry: WidgetRegistry) -> None:
    if conf.autodiscover_enabled():
        autodiscover_modules(DECLARATIONS_MODULE)
    load_declarations_file(registry, conf.declarations_file())
    logger.debug(
        "Widget registry ready with %d widgets and %d groups",
        len(registry.widgets),
        len(registry.groups),
    )


__all__ = ["build_registry", "load_declarations", "load_declarations_file"]
