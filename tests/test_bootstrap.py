from __future__ import annotations

import tempfile
from pathlib import Path
from unittest import mock

from django.test import SimpleTestCase, override_settings

from widget_registry import WidgetRegistry, get_registry
from widget_registry.bootstrap import build_registry, load_declarations, load_declarations_file


class AppRegistryTests(SimpleTestCase):
    def test_autodiscovered_modules_are_loaded(self):
        registry = get_registry()

        self.assertTrue(registry.has("clock"))
        self.assertTrue(registry.has("shout"))
        self.assertEqual(registry.get("shout", ["hey"]), "HEY!")
        self.assertEqual(registry.get("header"), "12:00Hello, guest")

    def test_declarations_file_is_loaded(self):
        registry = get_registry()

        self.assertEqual(registry.get("greet", ["Django"]), "Hello, Django")
        self.assertEqual(registry.get_group("sidebar"), ["greet", "greet"])


class DeclarationsFileTests(SimpleTestCase):
    def setUp(self):
        self.registry = WidgetRegistry()
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.directory = Path(tmp.name)

    def write(self, source):
        path = self.directory / "widgets.py"
        path.write_text(source, encoding="utf-8")
        return path

    def test_file_sees_registry_under_facade_name(self):
        path = self.write(
            'Widget.register("hello", lambda: "hi")\n'
            'registry.group("g", ["hello"])\n'
        )

        with self.assertLogs("widget_registry.bootstrap", level="INFO"):
            self.assertTrue(load_declarations_file(self.registry, path))

        self.assertEqual(self.registry.get("g"), "hi")

    @override_settings(WIDGET_FACADE_NAME="Widgets")
    def test_custom_facade_name(self):
        path = self.write('Widgets.register("hello", lambda: "hi")\n')

        load_declarations_file(self.registry, path)

        self.assertTrue(self.registry.has("hello"))

    def test_missing_file_is_skipped(self):
        self.assertFalse(load_declarations_file(self.registry, self.directory / "absent.py"))
        self.assertFalse(load_declarations_file(self.registry, None))

    def test_errors_in_file_propagate(self):
        path = self.write('raise RuntimeError("bad declarations")\n')

        with self.assertRaisesMessage(RuntimeError, "bad declarations"):
            load_declarations_file(self.registry, path)


class LoadDeclarationsTests(SimpleTestCase):
    @override_settings(WIDGET_AUTODISCOVER=True, WIDGET_DECLARATIONS_FILE=None)
    def test_autodiscovers_widget_modules(self):
        with mock.patch("widget_registry.bootstrap.autodiscover_modules") as autodiscover:
            load_declarations(WidgetRegistry())

        autodiscover.assert_called_once_with("widgets")

    @override_settings(WIDGET_AUTODISCOVER=False, WIDGET_DECLARATIONS_FILE=None)
    def test_autodiscovery_can_be_disabled(self):
        with mock.patch("widget_registry.bootstrap.autodiscover_modules") as autodiscover:
            load_declarations(WidgetRegistry())

        autodiscover.assert_not_called()


class BuildRegistryTests(SimpleTestCase):
    @override_settings(WIDGET_BINDINGS={"greeter": "tests.widget_handlers.Greeter"})
    def test_container_uses_configured_bindings(self):
        registry = build_registry()
        registry.register("welcome", "greeter@farewell")

        self.assertTrue(registry.container.bound("greeter"))
        self.assertEqual(registry.get("welcome", ["Ada"]), "Goodbye, Ada")
