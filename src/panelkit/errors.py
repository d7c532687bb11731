"""Exceptions raised by widget lookup and construction."""

from __future__ import annotations


class WidgetError(Exception):
    """Base error for widget registry and configuration misuse."""


class UnknownWidgetError(WidgetError, KeyError):
    """Raised when a widget name is not present in the registry."""

    def __init__(self, name: str, known: list[str] | None = None):
        self.name = name
        self.known = known or []
        message = f"No widget registered for name '{name}'"
        if self.known:
            message += f" (known: {', '.join(self.known)})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


__all__ = ["WidgetError", "UnknownWidgetError"]
