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

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..core.bounds import NOTES_LINE_MAX_CHARS, TITLE_ALIGN_MAX_CHARS
from ..qr.codec import VectorImage, qr_svg
from .document import Document, DocumentConfig
from .fonts import FontResources, load_fonts
from .geometry import estimated_text_width, font_height, place_barcode
from .ops import (
    BLACK,
    LIGHT_GRAY,
    WHITE,
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
from .page import Point

logger = logging.getLogger(__name__)

TITLE_FONT_SIZE = 14.0
NOTES_FONT_SIZE = 13.0
FOOTER_FONT_SIZE = 13.0
GRID_SIZE = 5.0
DIVIDER_DASH = 5.0
FOOTER_TEXT = "Scan QR code and decrypt using Age <https://age-encryption.org>"
QR_IMAGE_ID = "qrcode"


@dataclass(frozen=True)
class TextTier:
    min_lines: int
    font_size: float
    line_height: float


# Rudimentary text scaling to get the ASCII armor to fit in the bottom half.
CIPHERTEXT_TIERS = (
    TextTier(min_lines=43, font_size=6.5, line_height=7.0),
    TextTier(min_lines=40, font_size=7.0, line_height=8.0),
    TextTier(min_lines=28, font_size=8.0, line_height=9.0),
    TextTier(min_lines=23, font_size=10.0, line_height=12.0),
)
DEFAULT_CIPHERTEXT_TIER = TextTier(min_lines=0, font_size=13.0, line_height=15.0)


def ciphertext_tier(line_count: int) -> TextTier:
    for tier in CIPHERTEXT_TIERS:
        if line_count >= tier.min_lines:
            return tier
    return DEFAULT_CIPHERTEXT_TIER


BarcodeRenderer = Callable[[str], VectorImage]


class DocumentBuilder:
    """Lay out the paper backup page as an ordered list of drawing instructions."""

    def __init__(
        self,
        config: DocumentConfig,
        *,
        fonts: FontResources | Callable[[], FontResources] = load_fonts,
        barcode_renderer: BarcodeRenderer = qr_svg,
    ) -> None:
        self.config = config
        self._fonts = fonts
        self._barcode_renderer = barcode_renderer

    @property
    def page_size(self):
        return self.config.page_size

    @property
    def dimensions(self):
        return self.config.page_size.dimensions()

    def build(self, encrypted: str) -> Document:
        """Lay out ``encrypted`` (an armored ciphertext) on a new document.

        Resources are acquired before the document exists, so a failing font
        load or QR encoding never leaves a partially built document behind.
        """
        fonts = self._fonts if isinstance(self._fonts, FontResources) else self._fonts()
        qrcode = self._barcode_renderer(encrypted)

        doc = Document(config=self.config, fonts=fonts)
        doc.add_image(QR_IMAGE_ID, qrcode)
        doc.extend(self.background())
        if self.config.grid:
            doc.extend(self.draw_grid())
        doc.extend(self.insert_title_text())
        doc.extend(self.insert_qr_code(QR_IMAGE_ID, qrcode))
        doc.extend(self.insert_notes_field())
        doc.extend(self.insert_divider())
        doc.extend(self.insert_pem_text(encrypted))
        if self.config.footer:
            doc.extend(self.insert_footer())
        return doc

    def background(self) -> list[DrawingInstruction]:
        content: list[DrawingInstruction] = []
        if self.config.background:
            content.extend(
                [
                    SetFillColor(WHITE),
                    FillRect(0.0, 0.0, self.dimensions.width, self.dimensions.height),
                ]
            )
        content.append(SetFillColor(BLACK))
        return content

    def draw_grid(self) -> list[DrawingInstruction]:
        """Draw a grid for debugging layout issues."""
        dims = self.dimensions
        content: list[DrawingInstruction] = []

        x = GRID_SIZE
        while x <= dims.width:
            content.extend(self.draw_line([Point(x, dims.height), Point(x, 0.0)], 0.0))
            x += GRID_SIZE

        y = dims.height - GRID_SIZE
        while y >= 0.0:
            content.extend(self.draw_line([Point(dims.width, y), Point(0.0, y)], 0.0))
            y -= GRID_SIZE
        return content

    def insert_title_text(self) -> list[DrawingInstruction]:
        """Insert the title at the top of the page."""
        dims = self.dimensions
        # Align the title with the QR code if the title is narrower than the QR code
        if len(self.config.title) <= TITLE_ALIGN_MAX_CHARS:
            left = self.page_size.barcode_left_edge()
        else:
            left = dims.margin
        baseline = dims.height - dims.margin - font_height(TITLE_FONT_SIZE)
        return self._text_section(
            self.config.title, FontId.TITLE, TITLE_FONT_SIZE, Point(left, baseline)
        )

    def insert_qr_code(self, image_id: str, qrcode: VectorImage) -> list[DrawingInstruction]:
        """Insert the QR code in the top half of the page."""
        placement = place_barcode(
            qrcode.width_px,
            qrcode.height_px,
            self.page_size.barcode_size(),
            self.dimensions,
        )
        return [
            PlaceImage(
                image_id=image_id,
                x=placement.x,
                y=placement.y,
                scale_x=placement.scale,
                scale_y=placement.scale,
                dpi=placement.dpi,
            )
        ]

    def insert_notes_field(self) -> list[DrawingInstruction]:
        """Insert the notes label and a line to write on next to it."""
        dims = self.dimensions
        label = self.config.notes_label
        left = self.page_size.barcode_left_edge()
        baseline = dims.height / 2.0 + dims.margin

        content = self._text_section(label, FontId.TITLE, NOTES_FONT_SIZE, Point(left, baseline))
        if len(label) <= NOTES_LINE_MAX_CHARS and not self.config.skip_notes_line:
            line_y = baseline - 1.0
            content.extend(
                self.draw_line(
                    [
                        Point(left + estimated_text_width(label, NOTES_FONT_SIZE), line_y),
                        Point(left + self.page_size.barcode_size(), line_y),
                    ],
                    1.0,
                )
            )
        return content

    def insert_divider(self) -> list[DrawingInstruction]:
        dims = self.dimensions
        return self.draw_line([dims.center_left(), dims.center_right()], 1.0, dash=DIVIDER_DASH)

    def insert_pem_text(self, pem: str) -> list[DrawingInstruction]:
        """Insert the armored ciphertext in the bottom half of the page."""
        dims = self.dimensions
        lines = pem.splitlines()
        tier = ciphertext_tier(len(lines))
        logger.debug(
            "Ciphertext: %d lines, font size %s, line height %s",
            len(lines),
            tier.font_size,
            tier.line_height,
        )
        cursor = Point(dims.margin, dims.height / 2.0 - font_height(tier.font_size) - dims.margin)
        content: list[DrawingInstruction] = [
            BeginText(),
            SetFillColor(BLACK),
            SetLineHeight(tier.line_height),
            SetFont(FontId.CODE, tier.font_size),
            SetTextCursor(cursor),
        ]
        for line in lines:
            content.append(WriteText(line, FontId.CODE))
            content.append(AddLineBreak())
        content.append(EndText())
        return content

    def insert_footer(self) -> list[DrawingInstruction]:
        return self._text_section(
            FOOTER_TEXT,
            FontId.TITLE,
            FOOTER_FONT_SIZE,
            self.dimensions.bottom_left(),
        )

    def draw_line(
        self,
        points: Sequence[Point],
        thickness: float,
        *,
        dash: float | None = None,
    ) -> list[DrawingInstruction]:
        return [
            SetOutlineColor(LIGHT_GRAY),
            SetLineDashPattern(dash),
            SetOutlineThickness(thickness),
            DrawLine(tuple(points)),
        ]

    def _text_section(
        self,
        text: str,
        font: FontId,
        size: float,
        position: Point,
    ) -> list[DrawingInstruction]:
        return [
            BeginText(),
            SetFillColor(BLACK),
            SetFont(font, size),
            SetTextCursor(position),
            WriteText(text, font),
            EndText(),
        ]


def build_document(
    config: DocumentConfig,
    encrypted: str,
    *,
    fonts: FontResources | None = None,
    barcode_renderer: BarcodeRenderer = qr_svg,
) -> Document:
    builder = DocumentBuilder(
        config,
        fonts=fonts if fonts is not None else load_fonts,
        barcode_renderer=barcode_renderer,
    )
    return builder.build(encrypted)
