"""Callables referenced by dotted path from the widget tests."""

NOT_CALLABLE = "plain text"


def greet(name):
    return f"Hello, {name}"


def shout(text):
    return f"{text.upper()}!"


class Greeter:
    def __init__(self, prefix="Hello"):
        self.prefix = prefix

    def register(self, name="guest"):
        return f"{self.prefix}, {name}"

    def farewell(self, name):
        return f"Goodbye, {name}"


class SidebarSubscriber:
    def subscribe(self, registry):
        registry.register("recent_posts", lambda: "<ul class=\"recent\"></ul>")
        registry.group("sidebar", ["recent_posts"])

    def register_footer(self, registry):
        registry.register("footer", lambda: "<footer></footer>")


class BrokenWidget:
    def __init__(self):
        raise RuntimeError("database unavailable")

    def register(self):
        return "never"
