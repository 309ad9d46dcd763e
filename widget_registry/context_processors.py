from __future__ import annotations

from django.http import HttpRequest

from . import conf, get_registry


def widgets(request: HttpRequest):
    """Expose the widget registry under the configured facade name."""

    return {conf.facade_name(): get_registry()}
