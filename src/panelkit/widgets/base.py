"""Base widget: owns the merge of base defaults with a class fragment."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from panelkit.models.config import WidgetConfig

_EMPTY: Mapping[str, Any] = MappingProxyType({})


class WidgetBase:
    """Base class for all widgets.

    Subclasses override :meth:`js_properties` to supply a partial
    configuration fragment. The composition layer reads :meth:`js_config`,
    which layers base defaults, the class fragment and instance overrides
    (later layers win).
    """

    NAME: ClassVar[str] = ""  # Override in subclass; registry key

    def __init__(self, config: WidgetConfig | None = None, **overrides: Any) -> None:
        if config is None:
            config = WidgetConfig(**overrides)
        elif overrides:
            config = config.model_copy(update=WidgetConfig(**overrides).model_dump(exclude_unset=True))
        self.config = config

    @classmethod
    def js_properties(cls) -> Mapping[str, Any]:
        """Class-level configuration fragment. Empty for the base widget."""
        return _EMPTY

    @classmethod
    def default_js_config(cls) -> Mapping[str, Any]:
        return MappingProxyType({"widget": cls.NAME or cls.__name__})

    def js_config(self) -> Mapping[str, Any]:
        """Resolved configuration handed to the composition layer."""
        merged: dict[str, Any] = dict(self.default_js_config())
        merged.update(type(self).js_properties())
        if self.config.name is not None:
            merged["name"] = self.config.name
        merged.update(self.config.options)
        return MappingProxyType(merged)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.config.name!r})"


__all__ = ["WidgetBase"]
