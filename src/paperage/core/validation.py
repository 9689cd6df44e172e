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

import unicodedata

from .bounds import MAX_TITLE_CHARS


def normalize_text(value: object, *, label: str) -> str:
    """Normalize a text field to Unicode NFC and ensure it is valid UTF-8."""
    if not isinstance(value, str):
        raise ValueError(f"{label} must be a string")
    try:
        value.encode("utf-8", "strict")
    except UnicodeEncodeError as exc:
        raise ValueError(f"{label} must be valid UTF-8") from exc
    return unicodedata.normalize("NFC", value)


def validate_title(title: object) -> str:
    """Validate the page title and return it normalized."""
    normalized = normalize_text(title, label="title")
    if len(normalized) > MAX_TITLE_CHARS:
        raise ValueError(f"The title cannot be longer than {MAX_TITLE_CHARS} characters")
    return normalized


def validate_notes_label(label: object) -> str:
    normalized = normalize_text(label, label="notes label")
    if "\n" in normalized or "\r" in normalized:
        raise ValueError("notes label must be a single line")
    return normalized
