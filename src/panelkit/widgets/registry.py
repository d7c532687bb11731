"""Name-based widget registry."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from panelkit.errors import UnknownWidgetError, WidgetError
from panelkit.widgets.base import WidgetBase

logger = logging.getLogger(__name__)

W = TypeVar("W", bound=type[WidgetBase])

_REGISTRY: dict[str, type[WidgetBase]] = {}


def register_widget(cls: W) -> W:
    """Class decorator to register a widget by its NAME."""
    name = getattr(cls, "NAME", None)
    if not name:
        raise WidgetError(f"{cls.__name__} must define NAME")
    existing = _REGISTRY.get(name)
    if existing is not None and existing is not cls:
        raise WidgetError(
            f"Widget name '{name}' already registered by {existing.__name__}"
        )
    _REGISTRY[name] = cls
    logger.debug("Registered widget %s as '%s'", cls.__name__, name)
    return cls


def get_widget_class(name: str) -> type[WidgetBase]:
    """Get a registered widget class by name."""
    cls = _REGISTRY.get(name)
    if cls is None:
        raise UnknownWidgetError(name, list_widget_names())
    return cls


def create_widget(name: str, /, **overrides: Any) -> WidgetBase:
    """Instantiate a registered widget with optional config overrides."""
    return get_widget_class(name)(**overrides)


def list_widget_names() -> list[str]:
    """List registered widget names, sorted."""
    return sorted(_REGISTRY)


__all__ = [
    "create_widget",
    "get_widget_class",
    "list_widget_names",
    "register_widget",
]
