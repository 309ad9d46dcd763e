"""Registry of named widgets and widget groups."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import Any

from .callbacks import (
    DEFAULT_SUBSCRIBER_METHOD,
    Callback,
    WidgetArguments,
    parse_callback,
    resolve_callback,
    split_parameters,
)
from .compiler import DirectiveCompiler
from .container import Container
from .exceptions import InvalidWidgetName

logger = logging.getLogger(__name__)

GroupKey = int | str


def entry_name(entry: Any) -> str:
    """Return the widget name of a group entry (a name or ``(name, order)``)."""

    if isinstance(entry, (list, tuple)):
        return entry[0] if entry else ""
    return entry


def _as_members(widgets: Mapping[GroupKey, Any] | Iterable[Any]) -> dict[GroupKey, Any]:
    if isinstance(widgets, Mapping):
        return dict(widgets)
    return dict(enumerate(widgets))


def _member_parameters(parameters: Any, key: GroupKey) -> Any:
    if isinstance(parameters, WidgetArguments):
        parameters = {**dict(enumerate(parameters.args)), **parameters.kwargs}
    if isinstance(parameters, Mapping):
        return parameters.get(key, ())
    if (
        isinstance(parameters, Sequence)
        and not isinstance(parameters, (str, bytes))
        and isinstance(key, int)
        and 0 <= key < len(parameters)
    ):
        return parameters[key]
    return ()


class WidgetGroup(Sequence):
    """Read-only view over the members of a widget group."""

    def __init__(self, name: str, members: Mapping[GroupKey, Any]) -> None:
        self.name = name
        self._members = dict(members)

    def __getitem__(self, index):
        return list(self._members.values())[index]

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._members.values())

    def __repr__(self) -> str:
        return f"WidgetGroup({self.name!r}, {list(self._members.values())!r})"

    def keys(self) -> list[GroupKey]:
        return list(self._members)

    def items(self) -> list[tuple[GroupKey, Any]]:
        return list(self._members.items())

    def names(self) -> list[str]:
        return [entry_name(entry) for entry in self._members.values()]


class WidgetRegistry:
    """Named widgets and groups, invoked by name and rendered to strings.

    Widgets and groups share one namespace. Declaring either installs a
    directive rule on the compiler so ``@name(args)`` in template source
    becomes a ``{% widget %}`` tag.
    """

    def __init__(
        self,
        container: Container | None = None,
        compiler: DirectiveCompiler | None = None,
    ) -> None:
        self.container = container or Container()
        self.compiler = compiler or DirectiveCompiler()
        self._widgets: dict[str, Callback | None] = {}
        self._groups: dict[str, dict[GroupKey, Any]] = {}

    # Registration -------------------------------------------------------

    def register(self, name: str, callback: Any) -> None:
        """Store *callback* under *name* and install its directive."""

        self._validate_name(name)
        self._widgets[name] = resolve_callback(callback)
        logger.debug("Registered widget: %s", name)
        self.compiler.extend(name)

    def subscribe(self, subscriber: str) -> None:
        """Let ``"path.Class@method"`` register widgets against this registry."""

        class_path, method = parse_callback(subscriber, DEFAULT_SUBSCRIBER_METHOD)
        instance = self.container.make(class_path)
        getattr(instance, method)(self)

    def widget(self, name: str) -> Callable[[Any], Any]:
        """Decorator form of :meth:`register`."""

        def decorator(func):
            self.register(name, func)
            return func

        return decorator

    def group(self, name: str, widgets: Mapping[GroupKey, Any] | Iterable[Any]) -> None:
        self._validate_name(name)
        self._groups[name] = _as_members(widgets)
        logger.debug("Registered widget group: %s", name)
        self.compiler.extend(name)

    def merge_group(self, name: str, widgets: Mapping[GroupKey, Any] | Iterable[Any]) -> None:
        """Overlay *widgets* onto the group, creating it when unknown."""

        self._validate_name(name)
        members = dict(self._groups.get(name, {}))
        members.update(_as_members(widgets))
        self._groups[name] = members
        logger.debug("Merged widget group: %s", name)
        self.compiler.extend(name)

    # Lookup ---------------------------------------------------------------

    def has(self, name: str) -> bool:
        return name in self._widgets

    def has_group(self, name: str) -> bool:
        return name in self._groups

    def get(self, name: str, parameters: Any = None) -> Any:
        """Render the group or widget called *name*; ``None`` when unknown."""

        if self.has_group(name):
            return self.call_group(name, parameters)

        if not self.has(name):
            logger.debug("No widget registered as %s", name)
            return None

        callback = self._widgets[name]
        if callback is None:
            return None
        return callback.invoke(self.container, split_parameters(parameters))

    call = get

    def call_group(self, name: str, parameters: Any = None) -> str | None:
        if not self.has_group(name):
            return None

        result = ""
        for key, entry in self._groups[name].items():
            output = self.get(entry_name(entry), _member_parameters(parameters, key))
            if output is not None:
                result += str(output)
        return result

    def get_group(self, name: str) -> list[Any] | None:
        if not self.has_group(name):
            return None
        return list(self._groups[name].values())

    def collect_group(self, name: str) -> WidgetGroup | None:
        if not self.has_group(name):
            return None
        return WidgetGroup(name, self._groups[name])

    @property
    def widgets(self) -> list[str]:
        return list(self._widgets)

    @property
    def groups(self) -> list[str]:
        return list(self._groups)

    def compile(self, source: str) -> str:
        """Rewrite widget directives in template *source*."""

        return self.compiler.compile(source)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        """Dispatch declared widget and group names; other names raise AttributeError."""

        if name.startswith("_") or not (self.has(name) or self.has_group(name)):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

        def dispatch(*args, **kwargs):
            return self.get(name, WidgetArguments(args, kwargs))

        return dispatch

    @staticmethod
    def _validate_name(name: str) -> None:
        if not isinstance(name, str) or not name.isidentifier():
            raise InvalidWidgetName(f"Widget name {name!r} is not a valid identifier")


__all__ = ["WidgetGroup", "WidgetRegistry", "entry_name"]
