#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from dataclasses import dataclass

from ..core.bounds import REFERENCE_DPI
from ..core.errors import ImageParseError
from .page import PageDimensions

MM_PER_INCH = 25.4
PT_PER_INCH = 72.0

# Monospace glyph width / height = 3 / 5
FONT_RATIO = 3.0 / 5.0


def pt_to_mm(value: float) -> float:
    return float(value) * MM_PER_INCH / PT_PER_INCH


def px_to_mm(value: float, dpi: float = REFERENCE_DPI) -> float:
    return float(value) / dpi * MM_PER_INCH


def font_height(size_pt: float) -> float:
    """Height of a font size in millimetres."""
    return pt_to_mm(size_pt)


def estimated_text_width(text: str, size_pt: float) -> float:
    """Width of a monospace string in millimetres, from the glyph ratio."""
    return pt_to_mm(FONT_RATIO * size_pt * len(text))


@dataclass(frozen=True)
class BarcodePlacement:
    x: float
    y: float
    width: float
    height: float
    scale: float
    dpi: float


def place_barcode(
    width_px: float,
    height_px: float,
    desired_size: float,
    page: PageDimensions,
    *,
    dpi: float = REFERENCE_DPI,
) -> BarcodePlacement:
    """Scale an image of known pixel size to ``desired_size`` mm tall.

    The image is centered horizontally and hangs from the top of the page,
    leaving one margin above it and one margin of buffer below the top
    margin. ``y`` is the bottom edge of the image. Oversized results are not
    clamped to the page.
    """
    if height_px <= 0:
        raise ImageParseError("QR code image has zero height")
    if width_px <= 0:
        raise ImageParseError("QR code image has zero width")
    initial_height = px_to_mm(height_px, dpi)
    scale = desired_size / initial_height
    rendered_width = px_to_mm(width_px, dpi) * scale
    rendered_height = initial_height * scale
    return BarcodePlacement(
        x=(page.width - rendered_width) / 2.0,
        y=page.height - rendered_height - page.margin * 2.0,
        width=rendered_width,
        height=rendered_height,
        scale=scale,
        dpi=dpi,
    )
