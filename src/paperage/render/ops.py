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

"""Drawing instructions that describe one page.

Positions are millimetres from the bottom-left corner. Font sizes, line
heights, outline thicknesses and dash lengths are points.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from .page import Point


@dataclass(frozen=True)
class Rgb:
    r: float
    g: float
    b: float

    def to_255(self) -> tuple[int, int, int]:
        return (round(self.r * 255), round(self.g * 255), round(self.b * 255))


WHITE = Rgb(1.0, 1.0, 1.0)
BLACK = Rgb(0.0, 0.0, 0.0)
LIGHT_GRAY = Rgb(0.75, 0.75, 0.75)


class FontId(Enum):
    TITLE = "title"
    CODE = "code"


@dataclass(frozen=True)
class SetFillColor:
    kind: ClassVar[str] = "set_fill_color"
    color: Rgb


@dataclass(frozen=True)
class FillRect:
    kind: ClassVar[str] = "fill_rect"
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class BeginText:
    kind: ClassVar[str] = "begin_text"


@dataclass(frozen=True)
class EndText:
    kind: ClassVar[str] = "end_text"


@dataclass(frozen=True)
class SetFont:
    kind: ClassVar[str] = "set_font"
    font: FontId
    size: float


@dataclass(frozen=True)
class SetTextCursor:
    kind: ClassVar[str] = "set_text_cursor"
    position: Point


@dataclass(frozen=True)
class SetLineHeight:
    kind: ClassVar[str] = "set_line_height"
    height: float


@dataclass(frozen=True)
class WriteText:
    kind: ClassVar[str] = "write_text"
    text: str
    font: FontId


@dataclass(frozen=True)
class AddLineBreak:
    kind: ClassVar[str] = "add_line_break"


@dataclass(frozen=True)
class SetLineDashPattern:
    kind: ClassVar[str] = "set_line_dash_pattern"
    dash: float | None = None

    @property
    def solid(self) -> bool:
        return not self.dash


@dataclass(frozen=True)
class SetOutlineColor:
    kind: ClassVar[str] = "set_outline_color"
    color: Rgb


@dataclass(frozen=True)
class SetOutlineThickness:
    kind: ClassVar[str] = "set_outline_thickness"
    thickness: float


@dataclass(frozen=True)
class DrawLine:
    kind: ClassVar[str] = "draw_line"
    points: tuple[Point, ...]


@dataclass(frozen=True)
class PlaceImage:
    """Place an image resource with its bottom-left corner at (x, y)."""

    kind: ClassVar[str] = "place_image"
    image_id: str
    x: float
    y: float
    scale_x: float
    scale_y: float
    dpi: float


DrawingInstruction = Union[
    SetFillColor,
    FillRect,
    BeginText,
    EndText,
    SetFont,
    SetTextCursor,
    SetLineHeight,
    WriteText,
    AddLineBreak,
    SetLineDashPattern,
    SetOutlineColor,
    SetOutlineThickness,
    DrawLine,
    PlaceImage,
]
