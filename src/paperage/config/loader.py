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
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from ..render.document import DEFAULT_NOTES_LABEL, DEFAULT_TITLE
from ..render.page import DEFAULT_PAGE_SIZE, PageSize
from .installer import resolve_config_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageDefaults:
    size: PageSize = DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class DocumentDefaults:
    title: str = DEFAULT_TITLE
    notes_label: str = DEFAULT_NOTES_LABEL
    skip_notes_line: bool = False
    grid: bool = False
    footer: bool = True


@dataclass(frozen=True)
class AppConfig:
    page: PageDefaults = field(default_factory=PageDefaults)
    document: DocumentDefaults = field(default_factory=DocumentDefaults)
    source: Path | None = None


def load_app_config(path: str | Path | None = None) -> AppConfig:
    config_path = resolve_config_path(path)
    if config_path is None:
        logger.debug("No config file found, using built-in defaults")
        return AppConfig()
    logger.debug("Loading config from %s", config_path)
    data = _load_toml(config_path)
    return AppConfig(
        page=_parse_page(_get_dict(data, "page")),
        document=_parse_document(_get_dict(data, "document")),
        source=config_path,
    )


def _parse_page(section: dict[str, object]) -> PageDefaults:
    value = section.get("size")
    if value is None:
        return PageDefaults()
    if not isinstance(value, str):
        raise ValueError("page.size must be a string")
    try:
        return PageDefaults(size=PageSize.parse(value))
    except ValueError as exc:
        raise ValueError(f"page.size: {exc}") from exc


def _parse_document(section: dict[str, object]) -> DocumentDefaults:
    defaults = DocumentDefaults()
    return DocumentDefaults(
        title=_parse_str(section.get("title"), field="document.title", default=defaults.title),
        notes_label=_parse_str(
            section.get("notes_label"),
            field="document.notes_label",
            default=defaults.notes_label,
        ),
        skip_notes_line=_parse_bool(
            section.get("skip_notes_line"),
            field="document.skip_notes_line",
            default=defaults.skip_notes_line,
        ),
        grid=_parse_bool(section.get("grid"), field="document.grid", default=defaults.grid),
        footer=_parse_bool(section.get("footer"), field="document.footer", default=defaults.footer),
    )


def _load_toml(path: Path) -> dict[str, object]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"invalid config file {path}: {exc}") from exc


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return value
    raise ValueError(f"{key} must be a table")


def _parse_str(value: object, *, field: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    return value


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")
