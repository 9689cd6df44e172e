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

import io
import logging
import tempfile
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, BinaryIO, cast

from fpdf import FPDF

from .. import __version__
from ..qr.codec import VectorImage
from .document import Document
from .fonts import FontResources
from .geometry import pt_to_mm, px_to_mm
from .ops import (
    AddLineBreak,
    BeginText,
    DrawingInstruction,
    DrawLine,
    EndText,
    FillRect,
    FontId,
    PlaceImage,
    SetFillColor,
    SetFont,
    SetLineDashPattern,
    SetLineHeight,
    SetOutlineColor,
    SetOutlineThickness,
    SetTextCursor,
    WriteText,
)
from .page import PageDimensions, Point

logger = logging.getLogger(__name__)

PRODUCER = f"PaperAge v{__version__}"
CREATOR = "paperage"
FONT_FAMILIES = {
    FontId.TITLE: "PaperAgeTitle",
    FontId.CODE: "PaperAgeCode",
}


def render_pdf(document: Document, *, created_at: datetime | None = None) -> bytes:
    """Finalize ``document`` and serialize it to PDF bytes.

    fpdf2 only registers fonts from files, so the font bytes the document owns
    are staged in a scratch directory that lives until the output is built.
    """
    instructions = document.finalize()
    dims = document.config.page_size.dimensions()

    with tempfile.TemporaryDirectory(prefix="paperage-fonts-") as font_dir:
        pdf = FPDF(unit="mm", format=cast(Any, (dims.width, dims.height)))
        pdf.set_auto_page_break(False)
        pdf.set_margin(0)
        pdf.set_title(document.config.title)
        pdf.set_producer(PRODUCER)
        pdf.set_creator(CREATOR)
        pdf.set_creation_date(_utc(created_at))
        _register_fonts(pdf, document.fonts, Path(font_dir))
        pdf.add_page()

        _PageReplay(pdf, dims, document.images).run(instructions)
        data = bytes(pdf.output())
    logger.debug("Serialized PDF: %d bytes", len(data))
    return data


def write_pdf(
    document: Document,
    sink: str | Path | BinaryIO,
    *,
    created_at: datetime | None = None,
) -> int:
    data = render_pdf(document, created_at=created_at)
    if isinstance(sink, (str, Path)):
        Path(sink).write_bytes(data)
    else:
        sink.write(data)
        sink.flush()
    return len(data)


def _utc(value: datetime | None) -> datetime:
    if value is None:
        return datetime.now(timezone.utc)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _register_fonts(pdf: FPDF, fonts: FontResources, font_dir: Path) -> None:
    for font_id, family in FONT_FAMILIES.items():
        font_path = font_dir / f"{family}.ttf"
        font_path.write_bytes(fonts.get(font_id).data)
        pdf.add_font(family, style="", fname=str(font_path))


class _PageReplay:
    """Replay drawing instructions (bottom-left origin) on an FPDF page (top-left origin)."""

    def __init__(
        self,
        pdf: FPDF,
        dims: PageDimensions,
        images: Mapping[str, VectorImage],
    ) -> None:
        self.pdf = pdf
        self.page_h = dims.height
        self.images = images
        self.in_text = False
        self.cursor: Point | None = None
        self.line_start_x = 0.0
        self.line_height = 0.0

    def run(self, instructions: Sequence[DrawingInstruction]) -> None:
        for instruction in instructions:
            handler = getattr(self, f"_{instruction.kind}")
            handler(instruction)

    def _y(self, y: float) -> float:
        return self.page_h - y

    def _set_fill_color(self, op: SetFillColor) -> None:
        rgb = op.color.to_255()
        self.pdf.set_fill_color(*rgb)
        self.pdf.set_text_color(*rgb)

    def _fill_rect(self, op: FillRect) -> None:
        self.pdf.rect(op.x, self._y(op.y + op.height), op.width, op.height, style="F")

    def _begin_text(self, op: BeginText) -> None:
        self.in_text = True
        self.cursor = None

    def _end_text(self, op: EndText) -> None:
        self.in_text = False
        self.cursor = None

    def _set_font(self, op: SetFont) -> None:
        self.pdf.set_font(FONT_FAMILIES[op.font], size=op.size)

    def _set_text_cursor(self, op: SetTextCursor) -> None:
        self._require_text(op)
        self.cursor = op.position
        self.line_start_x = op.position.x

    def _set_line_height(self, op: SetLineHeight) -> None:
        self.line_height = op.height

    def _write_text(self, op: WriteText) -> None:
        self._require_text(op)
        if self.cursor is None:
            raise ValueError("text cursor must be set before writing text")
        if not op.text:
            return
        self.pdf.set_font(FONT_FAMILIES[op.font])
        self.pdf.text(self.cursor.x, self._y(self.cursor.y), op.text)
        self.cursor = Point(self.cursor.x + self.pdf.get_string_width(op.text), self.cursor.y)

    def _add_line_break(self, op: AddLineBreak) -> None:
        self._require_text(op)
        if self.cursor is None:
            raise ValueError("text cursor must be set before a line break")
        self.cursor = Point(self.line_start_x, self.cursor.y - pt_to_mm(self.line_height))

    def _set_line_dash_pattern(self, op: SetLineDashPattern) -> None:
        if op.solid:
            self.pdf.set_dash_pattern()
            return
        length = pt_to_mm(op.dash or 0.0)
        self.pdf.set_dash_pattern(dash=length, gap=length)

    def _set_outline_color(self, op: SetOutlineColor) -> None:
        self.pdf.set_draw_color(*op.color.to_255())

    def _set_outline_thickness(self, op: SetOutlineThickness) -> None:
        self.pdf.set_line_width(pt_to_mm(op.thickness))

    def _draw_line(self, op: DrawLine) -> None:
        for start, end in zip(op.points, op.points[1:]):
            self.pdf.line(start.x, self._y(start.y), end.x, self._y(end.y))

    def _place_image(self, op: PlaceImage) -> None:
        image = self.images.get(op.image_id)
        if image is None:
            raise ValueError(f"unknown image id: {op.image_id}")
        width = px_to_mm(image.width_px, op.dpi) * op.scale_x
        height = px_to_mm(image.height_px, op.dpi) * op.scale_y
        self.pdf.image(io.BytesIO(image.svg), x=op.x, y=self._y(op.y + height), w=width, h=height)

    def _require_text(self, op: DrawingInstruction) -> None:
        if not self.in_text:
            raise ValueError(f"{op.kind} outside of a text section")
