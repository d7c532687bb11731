"""Widgets shipped with panelkit.

Importing this package registers every bundled widget.
"""

from .base import WidgetBase
from .border_layout_panel import BorderLayoutPanel
from .registry import (
    create_widget,
    get_widget_class,
    list_widget_names,
    register_widget,
)

__all__ = [
    "BorderLayoutPanel",
    "WidgetBase",
    "create_widget",
    "get_widget_class",
    "list_widget_names",
    "register_widget",
]
