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

"""Page size presets and the anchor points derived from them.

All lengths are millimetres. Points use the PDF convention: the origin is the
bottom-left corner of the page and y grows upwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class PageDimensions:
    width: float
    height: float
    margin: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.margin <= 0:
            raise ValueError("page dimensions must be positive")
        if self.margin >= min(self.width, self.height) / 2:
            raise ValueError("page margin must be less than half the shortest side")

    def center(self) -> Point:
        """Center point of the page (margin is ignored)."""
        return Point(self.width / 2.0, self.height / 2.0)

    def center_left(self) -> Point:
        """Vertical center on the left margin."""
        return Point(self.margin, self.height / 2.0)

    def center_right(self) -> Point:
        """Vertical center on the right margin."""
        return Point(self.width - self.margin, self.height / 2.0)

    def top_left(self) -> Point:
        return Point(self.margin, self.height - self.margin)

    def top_right(self) -> Point:
        return Point(self.width - self.margin, self.height - self.margin)

    def bottom_left(self) -> Point:
        return Point(self.margin, self.margin)

    def bottom_right(self) -> Point:
        return Point(self.width - self.margin, self.margin)


A4_PAGE = PageDimensions(width=210.0, height=297.0, margin=10.0)
LETTER_PAGE = PageDimensions(width=215.9, height=279.4, margin=10.0)


class PageSize(Enum):
    A4 = "a4"
    LETTER = "letter"

    @classmethod
    def parse(cls, value: str | PageSize) -> PageSize:
        if isinstance(value, PageSize):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        allowed = ", ".join(member.value for member in cls)
        raise ValueError(f"page size must be one of: {allowed}")

    def dimensions(self) -> PageDimensions:
        return _DIMENSIONS[self]

    def barcode_size(self) -> float:
        """Physical side length of the QR code on this page size."""
        return _BARCODE_SIZES[self]

    def barcode_left_edge(self) -> float:
        """Left edge of the QR code column, shared by the title and notes label."""
        return (self.dimensions().width - self.barcode_size()) / 2.0

    def __str__(self) -> str:
        return self.value


_DIMENSIONS: dict[PageSize, PageDimensions] = {
    PageSize.A4: A4_PAGE,
    PageSize.LETTER: LETTER_PAGE,
}

_BARCODE_SIZES: dict[PageSize, float] = {
    PageSize.A4: 110.0,
    PageSize.LETTER: 102.0,
}

DEFAULT_PAGE_SIZE = PageSize.A4


def dimensions(page_size: PageSize) -> PageDimensions:
    return page_size.dimensions()


def barcode_target_size(page_size: PageSize) -> float:
    return page_size.barcode_size()


def barcode_left_edge(page_size: PageSize) -> float:
    return page_size.barcode_left_edge()
