from django.apps import AppConfig


class WidgetsConfig(AppConfig):
    name = "widget_registry"
    label = "widget_registry"
    verbose_name = "Widgets"

    def ready(self):
        from .bootstrap import build_registry, load_declarations

        self.registry = build_registry()
        load_declarations(self.registry)
