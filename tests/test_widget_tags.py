from __future__ import annotations

from django.template import Context, Template
from django.test import RequestFactory, SimpleTestCase, override_settings

from widget_registry import WidgetRegistry, get_registry
from widget_registry.context_processors import widgets


class WidgetTagTests(SimpleTestCase):
    def setUp(self):
        self.registry = WidgetRegistry()
        self.registry.register("greet", lambda name="World": f"Hello, {name}")
        self.registry.register("bold", lambda text: f"<b>{text}</b>")
        self.registry.register("rule", lambda: "<hr>")
        self.registry.group("pair", ["greet", "rule"])

    def render(self, source, **context):
        context.setdefault("widget_registry", self.registry)
        return Template("{% load widget_tags %}" + source).render(Context(context))

    def test_positional_and_keyword_arguments(self):
        self.assertEqual(self.render('{% widget "greet" "Django" %}'), "Hello, Django")
        self.assertEqual(self.render('{% widget "greet" name=who %}', who="Ada"), "Hello, Ada")

    def test_output_is_not_escaped(self):
        self.assertEqual(self.render("{% widget 'bold' 'x' %}"), "<b>x</b>")

    def test_group_renders_members(self):
        self.assertEqual(self.render("{% widget 'pair' %}"), "Hello, World<hr>")

    def test_group_members_receive_positional_arguments_by_index(self):
        self.registry.group("banner", ["greet", "bold"])

        html = self.render("{% widget 'banner' first second %}", first=["Ada"], second=["x"])

        self.assertEqual(html, "Hello, Ada<b>x</b>")

    def test_name_keyword_reaches_widget(self):
        source = self.registry.compile('<p>@greet(name="Ada")</p>')

        self.assertEqual(self.render(source), "<p>Hello, Ada</p>")
        self.assertEqual(self.render('{% widget "greet" name="Ada" %}'), "Hello, Ada")

    def test_unknown_widget_renders_nothing(self):
        self.assertEqual(self.render("[{% widget 'missing' %}]"), "[]")

    def test_widget_exists(self):
        source = "{% widget_exists name as found %}{% if found %}yes{% else %}no{% endif %}"

        self.assertEqual(self.render(source, name="greet"), "yes")
        self.assertEqual(self.render(source, name="pair"), "yes")
        self.assertEqual(self.render(source, name="missing"), "no")

    def test_falls_back_to_app_registry(self):
        html = Template('{% widget "greet" "Django" %}').render(Context())

        self.assertEqual(html, "Hello, Django")

    def test_facade_attribute_lookup(self):
        html = Template("{{ Widget.greet }}").render(Context({"Widget": self.registry}))

        self.assertEqual(html, "Hello, World")


class WidgetsContextProcessorTests(SimpleTestCase):
    def setUp(self):
        self.request = RequestFactory().get("/")

    def test_exposes_registry_under_facade_name(self):
        self.assertEqual(widgets(self.request), {"Widget": get_registry()})

    @override_settings(WIDGET_FACADE_NAME="Widgets")
    def test_facade_name_is_configurable(self):
        self.assertIs(widgets(self.request)["Widgets"], get_registry())
