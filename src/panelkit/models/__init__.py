"""Pydantic models for panelkit configuration."""

from .config import Settings, WidgetConfig

__all__ = ["Settings", "WidgetConfig"]
