"""Panel that arranges its children in border-layout regions."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from panelkit.layouts import BORDER_LAYOUT
from panelkit.widgets.base import WidgetBase
from panelkit.widgets.registry import register_widget

_JS_PROPERTIES: Mapping[str, Any] = MappingProxyType({"layout": BORDER_LAYOUT})


@register_widget
class BorderLayoutPanel(WidgetBase):
    """A plain panel with a border layout (center/north/south/east/west)."""

    NAME = "border_layout_panel"

    @classmethod
    def js_properties(cls) -> Mapping[str, Any]:
        return _JS_PROPERTIES


__all__ = ["BorderLayoutPanel"]
