"""Test configuration for panelkit.

Dependencies (pydantic, rich, typer) are installed with the package, so
no stubs are needed.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from panelkit.widgets import registry


@pytest.fixture
def isolated_registry() -> Iterator[dict]:
    """Snapshot the widget registry and restore it after the test."""
    saved = dict(registry._REGISTRY)
    try:
        yield registry._REGISTRY
    finally:
        registry._REGISTRY.clear()
        registry._REGISTRY.update(saved)
