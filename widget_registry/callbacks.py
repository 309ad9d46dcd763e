"""Callback shapes accepted for widgets and how each one is invoked."""

from __future__ import annotations

import builtins
import inspect
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, NamedTuple, Union

from django.utils.module_loading import import_string

from .container import Container

logger = logging.getLogger(__name__)

DEFAULT_WIDGET_METHOD = "register"
DEFAULT_SUBSCRIBER_METHOD = "subscribe"


class WidgetArguments(NamedTuple):
    """Positional and keyword arguments for a single widget call."""

    args: tuple = ()
    kwargs: Mapping[str, Any] = MappingProxyType({})


def parse_callback(value: str, default: str) -> tuple[str, str]:
    """Split ``"path.Class@method"`` into its class path and method name."""

    if "@" in value:
        class_path, _, method = value.partition("@")
        return class_path, method or default
    return value, default


def split_parameters(parameters: Any) -> WidgetArguments:
    """Normalise call parameters into positional and keyword arguments."""

    if parameters is None:
        return WidgetArguments((), {})
    if isinstance(parameters, WidgetArguments):
        return WidgetArguments(tuple(parameters.args), dict(parameters.kwargs))
    if isinstance(parameters, Mapping):
        return WidgetArguments((), dict(parameters))
    if isinstance(parameters, Sequence) and not isinstance(parameters, (str, bytes)):
        return WidgetArguments(tuple(parameters), {})
    return WidgetArguments((parameters,), {})


@dataclass(frozen=True, slots=True)
class InlineCallback:
    """Any callable object registered directly."""

    func: Callable[..., Any]

    def invoke(self, container: Container, arguments: WidgetArguments) -> Any:
        return self.func(*arguments.args, **arguments.kwargs)


@dataclass(frozen=True, slots=True)
class ClassMethodReference:
    """``"path.to.Class@method"``; the class is built through the container."""

    class_path: str
    method: str = DEFAULT_WIDGET_METHOD

    def invoke(self, container: Container, arguments: WidgetArguments) -> Any:
        instance = container.make(self.class_path)
        handler = getattr(instance, self.method)
        return handler(*arguments.args, **arguments.kwargs)


@dataclass(frozen=True, slots=True)
class FunctionReference:
    """A dotted path (or builtin name) that should name a function.

    When nothing importable by that name is a plain function the reference
    is handled as a class whose ``register`` method renders the widget.
    """

    path: str

    @property
    def fallback(self) -> ClassMethodReference:
        return ClassMethodReference(self.path)

    def invoke(self, container: Container, arguments: WidgetArguments) -> Any:
        func = self.lookup()
        if func is None:
            return self.fallback.invoke(container, arguments)
        return func(*arguments.args, **arguments.kwargs)

    def lookup(self) -> Callable[..., Any] | None:
        if "." in self.path:
            try:
                target = import_string(self.path)
            except ImportError:
                return None
        else:
            target = getattr(builtins, self.path, None)
        if target is None or inspect.isclass(target) or not callable(target):
            return None
        return target


Callback = Union[InlineCallback, FunctionReference, ClassMethodReference]


def resolve_callback(value: Any) -> Callback | None:
    """Classify *value* into a callback shape, or ``None`` when unsupported."""

    if isinstance(value, (InlineCallback, FunctionReference, ClassMethodReference)):
        return value
    if isinstance(value, str):
        if "@" in value:
            return ClassMethodReference(*parse_callback(value, DEFAULT_WIDGET_METHOD))
        return FunctionReference(value)
    if callable(value):
        return InlineCallback(value)
    logger.warning("Unsupported widget callback %r", value)
    return None


__all__ = [
    "Callback",
    "ClassMethodReference",
    "DEFAULT_SUBSCRIBER_METHOD",
    "DEFAULT_WIDGET_METHOD",
    "FunctionReference",
    "InlineCallback",
    "WidgetArguments",
    "parse_callback",
    "resolve_callback",
    "split_parameters",
]
