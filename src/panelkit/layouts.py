"""Layout names understood by the composition layer."""

from __future__ import annotations

from typing import Literal

LayoutName = Literal["border", "fit", "vbox", "hbox"]
BorderRegion = Literal["center", "north", "south", "east", "west"]

BORDER_LAYOUT: LayoutName = "border"

# Regions a border layout splits its container into.
BORDER_REGIONS: tuple[BorderRegion, ...] = ("center", "north", "south", "east", "west")

__all__ = ["BORDER_LAYOUT", "BORDER_REGIONS", "BorderRegion", "LayoutName"]
