"""Rewrite ``@name(args)`` directives in template source into widget tags.

Rules are keyed by widget or group name. Declaring the same name again
replaces its rule, and rules are applied in the order names were first
declared.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

Rewriter = Callable[[str], str]

DEFAULT_DIRECTIVE_TAG = "widget"

_ARGUMENT_RE = re.compile(r"""(?:"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*'|[^,"'])+""")


def create_matcher(name: str) -> re.Pattern[str]:
    """Return the pattern matching ``@name(...)`` not preceded by a word character."""

    return re.compile(r"(?<!\w)(\s*)@" + re.escape(name) + r"(\s*\(.*\))")


def split_arguments(source: str) -> list[str]:
    """Split a directive argument list on commas outside of quoted strings."""

    inner = source.strip()
    if inner.startswith("(") and inner.endswith(")"):
        inner = inner[1:-1]
    return [piece.strip() for piece in _ARGUMENT_RE.findall(inner) if piece.strip()]


@dataclass(slots=True)
class DirectiveRule:
    name: str
    pattern: re.Pattern[str]
    tag: str = DEFAULT_DIRECTIVE_TAG

    def __call__(self, source: str) -> str:
        return self.pattern.sub(self._replace, source)

    def _replace(self, match: re.Match[str]) -> str:
        arguments = "".join(f" {argument}" for argument in split_arguments(match.group(2)))
        return f'{match.group(1)}{{% {self.tag} "{self.name}"{arguments} %}}'


class DirectiveCompiler:
    """Ordered set of source rewriters applied before template compilation."""

    def __init__(self, tag: str = DEFAULT_DIRECTIVE_TAG) -> None:
        self.tag = tag
        self._rules: dict[str, Rewriter] = {}

    def extend(self, name: str, rewriter: Rewriter | None = None) -> None:
        """Install the rewriter for *name*, replacing any previous one."""

        if rewriter is None:
            rewriter = DirectiveRule(name=name, pattern=create_matcher(name), tag=self.tag)
        replaced = name in self._rules
        self._rules[name] = rewriter
        logger.debug("%s directive rule for @%s", "Replaced" if replaced else "Installed", name)

    def has_extension(self, name: str) -> bool:
        return name in self._rules

    @property
    def extensions(self) -> list[str]:
        return list(self._rules)

    def compile(self, source: str) -> str:
        for rewriter in self._rules.values():
            source = rewriter(source)
        return source


__all__ = ["DirectiveCompiler", "DirectiveRule", "create_matcher", "split_arguments"]
