"""Widget registration and rendering for Django templates."""

from __future__ import annotations

from .callbacks import WidgetArguments
from .registry import WidgetGroup, WidgetRegistry


def get_registry() -> WidgetRegistry:
    """Return the registry owned by the installed ``widget_registry`` app."""

    from django.apps import apps

    return apps.get_app_config("widget_registry").registry


def register_widget(name: str):
    """Decorator registering a function as a widget on the app registry.

    Usage::

        @register_widget("greet")
        def greet(name):
            return f"Hello, {name}"
    """

    def decorator(func):
        get_registry().register(name, func)
        return func

    return decorator


__all__ = [
    "WidgetArguments",
    "WidgetGroup",
    "WidgetRegistry",
    "get_registry",
    "register_widget",
]
