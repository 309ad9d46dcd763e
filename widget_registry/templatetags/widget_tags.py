from django import template
from django.utils.safestring import mark_safe

from widget_registry import get_registry
from widget_registry.callbacks import WidgetArguments

register = template.Library()


def _registry_for(context):
    return context.get("widget_registry") or get_registry()


@register.simple_tag(takes_context=True)
def widget(context, name, /, *args, **kwargs):
    """Render the widget or widget group registered as ``name``."""

    output = _registry_for(context).get(name, WidgetArguments(args, kwargs))
    if output is None:
        return ""
    return mark_safe(output)


@register.simple_tag(takes_context=True)
def widget_exists(context, name, /):
    registry = _registry_for(context)
    return registry.has(name) or registry.has_group(name)
