"""Template loader that expands widget directives before compilation."""

from __future__ import annotations

from django.template.loaders.base import Loader as BaseLoader

from . import get_registry


class Loader(BaseLoader):
    """Wrap other loaders and rewrite ``@name(args)`` in the source they find.

    Configure it like Django's cached loader::

        "loaders": [
            ("widget_registry.loaders.Loader", [
                "django.template.loaders.filesystem.Loader",
                "django.template.loaders.app_directories.Loader",
            ]),
        ]
    """

    def __init__(self, engine, loaders):
        super().__init__(engine)
        self.loaders = engine.get_template_loaders(loaders)

    def get_dirs(self):
        for loader in self.loaders:
            if hasattr(loader, "get_dirs"):
                yield from loader.get_dirs()

    def get_contents(self, origin):
        source = origin.loader.get_contents(origin)
        return get_registry().compile(source)

    def get_template_sources(self, template_name):
        for loader in self.loaders:
            yield from loader.get_template_sources(template_name)

    def reset(self):
        for loader in self.loaders:
            loader.reset()
