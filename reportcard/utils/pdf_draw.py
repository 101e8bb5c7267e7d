# reportcard/utils/pdf_draw.py
"""
Drawing primitives over a reportlab canvas.

All geometry is in millimetres from the bottom-left page corner; the
conversion to PDF points happens here so layout code never sees points.
"""
from __future__ import annotations
from typing import Optional

from reportlab.lib.colors import Color
from reportlab.lib.units import mm


def draw_text(surface, x: float, y: float, text: str, size: float, font: str) -> None:
    surface.setFont(font, size)
    surface.drawString(x * mm, y * mm, text)


def draw_rect(
    surface,
    x: float,
    y: float,
    width: float,
    height: float,
    fill: Optional[Color] = None,
    stroke: Optional[Color] = None,
    line_width: float = 1.0,
) -> None:
    """
    Axis-aligned rectangle with (x, y) as its lower-left corner.
    fill / stroke of None disable that part of the paint.
    """
    surface.saveState()
    if fill is not None:
        surface.setFillColor(fill)
    if stroke is not None:
        surface.setStrokeColor(stroke)
        surface.setLineWidth(line_width)
    surface.rect(
        x * mm,
        y * mm,
        width * mm,
        height * mm,
        stroke=int(stroke is not None),
        fill=int(fill is not None),
    )
    surface.restoreState()


def set_text_color(surface, color: Color) -> None:
    surface.setFillColor(color)
