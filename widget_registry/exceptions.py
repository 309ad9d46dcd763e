class WidgetError(Exception):
    """Base class for widget registry errors."""


class InvalidWidgetName(WidgetError, ValueError):
    """Raised when a widget or group name cannot be used as a directive."""


class BindingResolutionError(WidgetError):
    """Raised when the container cannot resolve a target."""


__all__ = ["BindingResolutionError", "InvalidWidgetName", "WidgetError"]
