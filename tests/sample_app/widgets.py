from widget_registry import get_registry, register_widget


@register_widget("clock")
def clock(fmt="%H:%M"):
    return "12:00"


registry = get_registry()
registry.register("shout", "tests.widget_handlers.shout")
registry.register("welcome", "tests.widget_handlers.Greeter@register")
registry.group("header", ["clock", "welcome"])
