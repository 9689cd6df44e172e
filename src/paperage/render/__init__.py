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

"""Page layout and PDF serialization."""

from .builder import DocumentBuilder, build_document, ciphertext_tier
from .document import Document, DocumentConfig, DocumentState
from .fonts import FontResource, FontResources, load_fonts
from .page import PageDimensions, PageSize, Point
from .pdf_render import render_pdf, write_pdf

__all__ = [
    "Document",
    "DocumentBuilder",
    "DocumentConfig",
    "DocumentState",
    "FontResource",
    "FontResources",
    "PageDimensions",
    "PageSize",
    "Point",
    "build_document",
    "ciphertext_tier",
    "load_fonts",
    "render_pdf",
    "write_pdf",
]
