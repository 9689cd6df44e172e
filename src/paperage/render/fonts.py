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
import struct
from dataclasses import dataclass, field
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError

from ..core.errors import ResourceLoadError
from .ops import FontId

logger = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
FONTS_DIR = PACKAGE_ROOT / "assets/fonts"
TITLE_FONT_PATH = FONTS_DIR / "SourceCodePro-Bold.ttf"
CODE_FONT_PATH = FONTS_DIR / "SourceCodePro-Regular.ttf"
FONTS_LICENSE_PATH = FONTS_DIR / "LICENSE.txt"


@dataclass(frozen=True)
class FontResource:
    name: str
    path: Path
    data: bytes = field(repr=False)
    family: str


@dataclass(frozen=True)
class FontResources:
    title: FontResource
    code: FontResource

    def get(self, font: FontId) -> FontResource:
        if font is FontId.TITLE:
            return self.title
        return self.code


def load_font(path: str | Path, *, name: str) -> FontResource:
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ResourceLoadError(f"Can't load {name} font: {exc}") from exc
    try:
        font = TTFont(io.BytesIO(data), lazy=True)
        family = str(font["name"].getDebugName(1) or path.stem)
        fixed_pitch = bool(font["post"].isFixedPitch)
    except (TTLibError, KeyError, AssertionError, ValueError, struct.error) as exc:
        raise ResourceLoadError(f"Can't load {name} font: {path.name} is not a valid font") from exc
    if not fixed_pitch:
        raise ResourceLoadError(f"Can't load {name} font: {family} is not monospaced")
    logger.debug("Loaded %s font %s (%d bytes)", name, family, len(data))
    return FontResource(name=name, path=path, data=data, family=family)


def load_fonts(
    title_path: str | Path = TITLE_FONT_PATH,
    code_path: str | Path = CODE_FONT_PATH,
) -> FontResources:
    return FontResources(
        title=load_font(title_path, name="title"),
        code=load_font(code_path, name="code"),
    )


def fonts_license() -> str:
    return FONTS_LICENSE_PATH.read_text(encoding="utf-8")
