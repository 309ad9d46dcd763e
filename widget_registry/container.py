"""A small dependency-injection container used to build widget handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from django.utils.module_loading import import_string

from .exceptions import BindingResolutionError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Binding:
    concrete: Callable[..., Any] | str
    shared: bool = False


class Container:
    """Resolve classes by dotted path, explicit bindings or shared instances.

    ``make`` looks for a stored instance first, then a binding, and finally
    treats the abstract itself as something to import (for strings) and
    instantiate. Constructor errors are not caught.
    """

    def __init__(self, bindings: Mapping[str, Callable[..., Any] | str] | None = None) -> None:
        self._bindings: dict[str, Binding] = {}
        self._instances: dict[str, Any] = {}
        for abstract, concrete in (bindings or {}).items():
            self.bind(abstract, concrete)

    def bind(
        self,
        abstract: str | type,
        concrete: Callable[..., Any] | str | None = None,
        *,
        shared: bool = False,
    ) -> None:
        key = self._key(abstract)
        self._instances.pop(key, None)
        target = abstract if concrete is None else concrete
        self._bindings[key] = Binding(concrete=target, shared=shared)
        logger.debug("Bound %s (shared=%s)", key, shared)

    def singleton(
        self, abstract: str | type, concrete: Callable[..., Any] | str | None = None
    ) -> None:
        self.bind(abstract, concrete, shared=True)

    def instance(self, abstract: str | type, obj: Any) -> Any:
        self._instances[self._key(abstract)] = obj
        return obj

    def bound(self, abstract: str | type) -> bool:
        key = self._key(abstract)
        return key in self._bindings or key in self._instances

    def make(self, abstract: str | type) -> Any:
        key = self._key(abstract)
        if key in self._instances:
            return self._instances[key]

        binding = self._bindings.get(key)
        obj = self._build(abstract if binding is None else binding.concrete)
        if binding is not None and binding.shared:
            self._instances[key] = obj
        return obj

    def _build(self, concrete: Callable[..., Any] | str) -> Any:
        factory = self._resolve(concrete) if isinstance(concrete, str) else concrete
        if not callable(factory):
            raise BindingResolutionError(f"Target [{concrete!r}] is not instantiable.")
        return factory()

    @staticmethod
    def _resolve(path: str) -> Any:
        try:
            return import_string(path)
        except ImportError as exc:
            raise BindingResolutionError(f"Target class [{path}] does not exist.") from exc

    @staticmethod
    def _key(abstract: str | type) -> str:
        if isinstance(abstract, str):
            return abstract
        return f"{abstract.__module__}.{abstract.__qualname__}"


__all__ = ["Binding", "Container"]
