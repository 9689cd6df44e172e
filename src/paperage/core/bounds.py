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

# Maximum page title length (characters).
MAX_TITLE_CHARS = 64

# Titles up to this length are aligned with the QR code column.
TITLE_ALIGN_MAX_CHARS = 37

# Notes labels up to this length get a handwriting underline.
NOTES_LINE_MAX_CHARS = 32

# Reference resolution used to convert QR pixels into physical units.
REFERENCE_DPI = 300.0

# Smallest rendered QR symbol (pixels per side).
MIN_QR_PIXELS = 256
