"""Configuration models for widgets and the panelkit runtime."""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class WidgetConfig(BaseModel):
    """Per-instance widget configuration.

    ``options`` holds instance-level overrides that are layered on top of the
    widget class fragment when the final configuration is resolved.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str | None = Field(default=None, description="Instance name")
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Per-instance option overrides",
    )

    @field_validator("name", mode="before")
    @classmethod
    def normalize_name(cls, value: Any) -> str | None:
        """Strip the name; blank names become None."""
        if value is None:
            return None
        stripped = str(value).strip()
        return stripped or None

    @field_validator("options", mode="before")
    @classmethod
    def parse_options(cls, value: Any) -> dict[str, Any]:
        """Parse options from a mapping or a ``key=value,key=value`` string."""
        if value is None:
            return {}
        if isinstance(value, BaseModel):
            return value.model_dump()
        if isinstance(value, dict):
            return dict(value)
        if isinstance(value, (list, tuple)):
            value = ",".join(str(item) for item in value)
        if isinstance(value, str):
            parsed: dict[str, Any] = {}
            for chunk in value.split(","):
                if "=" not in chunk:
                    continue
                key, raw = chunk.split("=", maxsplit=1)
                key = key.strip()
                raw = raw.strip()
                if not key:
                    continue
                parsed[key] = _coerce(raw)
            return parsed
        raise ValueError("options must be a mapping or key=value list")


def _coerce(raw: str) -> Any:
    lowered = raw.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        return raw


class Settings(BaseModel):
    """Runtime settings for the CLI and logging."""

    log_level: str = Field(default="WARNING", description="Logging level name")
    debug: bool = Field(default=False, description="Enable debug output")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> str:
        """Upper-case and validate the level name."""
        normalized = str(value).strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return normalized

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    @classmethod
    def from_env(cls) -> "Settings":
        """Create settings from environment variables."""
        return cls(
            log_level=os.getenv("PANELKIT_LOG_LEVEL", "WARNING"),
            debug=os.getenv("PANELKIT_DEBUG", "").lower() in ("1", "true", "yes"),
        )


__all__ = ["Settings", "WidgetConfig"]
