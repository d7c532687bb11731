"""Tests for the widget registry."""

from __future__ import annotations

import pytest

from panelkit.errors import UnknownWidgetError, WidgetError
from panelkit.widgets import (
    BorderLayoutPanel,
    WidgetBase,
    create_widget,
    get_widget_class,
    list_widget_names,
    register_widget,
)


def test_border_layout_panel_registered() -> None:
    assert "border_layout_panel" in list_widget_names()
    assert get_widget_class("border_layout_panel") is BorderLayoutPanel


def test_unknown_widget(isolated_registry) -> None:
    with pytest.raises(UnknownWidgetError) as excinfo:
        get_widget_class("nope")
    assert excinfo.value.name == "nope"
    assert "border_layout_panel" in excinfo.value.known
    assert "nope" in str(excinfo.value)
    # still catchable as a lookup failure
    assert isinstance(excinfo.value, KeyError)


def test_register_requires_name(isolated_registry) -> None:
    class Nameless(WidgetBase):
        pass

    with pytest.raises(WidgetError, match="must define NAME"):
        register_widget(Nameless)


def test_register_duplicate_name_rejected(isolated_registry) -> None:
    class Impostor(WidgetBase):
        NAME = "border_layout_panel"

    with pytest.raises(WidgetError, match="already registered"):
        register_widget(Impostor)
    assert get_widget_class("border_layout_panel") is BorderLayoutPanel


def test_reregister_same_class_is_noop(isolated_registry) -> None:
    assert register_widget(BorderLayoutPanel) is BorderLayoutPanel
    assert list_widget_names().count("border_layout_panel") == 1


def test_create_registered_widget(isolated_registry) -> None:
    @register_widget
    class Toolbar(WidgetBase):
        NAME = "toolbar"

    widget = create_widget("toolbar", name="top")
    assert isinstance(widget, Toolbar)
    assert widget.js_config()["name"] == "top"
    assert list_widget_names() == sorted(list_widget_names())
