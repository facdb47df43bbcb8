"""Canvas configuration — glyph defaults shared by the primitives."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CanvasConfig:
    """Glyphs and spacing used when a canvas is prepared for drawing."""

    # Glyph meaning "unset"
    blank: str = " "

    # Ruler guides along row 0 / column 0
    guide_marker: str = "▓"
    guide_spacing: int = 10

    # Safety cap for canvases built from untrusted input (API, CLI files)
    max_cells: int = 250_000
