"""panelkit - configuration-providing UI widgets.

Widgets expose a class-level configuration fragment that the hosting
composition layer merges with base defaults at instantiation time.
"""

from __future__ import annotations

from typing import Any

__version__ = "0.1.0"


# Lazy imports to avoid circular dependencies
def __getattr__(name: str) -> Any:
    """Lazy import of submodules."""
    if name == "main":
        from panelkit.cli import main

        return main
    if name == "BorderLayoutPanel":
        from panelkit.widgets import BorderLayoutPanel

        return BorderLayoutPanel
    if name == "WidgetBase":
        from panelkit.widgets import WidgetBase

        return WidgetBase
    if name == "create_widget":
        from panelkit.widgets import create_widget

        return create_widget
    raise AttributeError(f"module 'panelkit' has no attribute {name!r}")


__all__ = [
    "__version__",
    "main",
    "BorderLayoutPanel",
    "WidgetBase",
    "create_widget",
]
