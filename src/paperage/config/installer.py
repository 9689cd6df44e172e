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
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "paperage"
CONFIG_FILENAME = "config.toml"
CONFIG_ENV = "PAPERAGE_CONFIG"
XDG_CONFIG_ENV = "XDG_CONFIG_HOME"

DEFAULT_CONFIG_TOML = """\
# paperage defaults. Command line flags take precedence over these values.

[page]
# "a4" or "letter"
size = "a4"

[document]
title = "PaperAge"
notes_label = "Passphrase:"
skip_notes_line = false
grid = false
footer = true
"""


@dataclass(frozen=True)
class ConfigPaths:
    user_config_dir: Path
    user_config_file: Path


def _user_config_dir() -> Path:
    xdg_override = os.environ.get(XDG_CONFIG_ENV)
    if xdg_override:
        return Path(xdg_override) / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / ".config" / APP_NAME
    return Path(user_config_dir(APP_NAME, appauthor=False))


def _build_paths() -> ConfigPaths:
    config_dir = _user_config_dir()
    return ConfigPaths(
        user_config_dir=config_dir,
        user_config_file=config_dir / CONFIG_FILENAME,
    )


def user_config_path() -> Path:
    return _build_paths().user_config_file


def resolve_config_path(path: str | Path | None = None) -> Path | None:
    """Return the config file to read, or ``None`` to use built-in defaults.

    An explicit path (from ``--config`` or ``$PAPERAGE_CONFIG``) must exist;
    the per-user file is only used when present.
    """
    if path:
        return _require_file(Path(path).expanduser())

    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        return _require_file(Path(env_path).expanduser())

    user_file = _build_paths().user_config_file
    if user_file.is_file():
        return user_file
    return None


def _require_file(path: Path) -> Path:
    if not path.is_file():
        raise FileNotFoundError(f"config file not found: {path}")
    return path


def init_user_config() -> tuple[Path, bool]:
    """Write the default config file unless one already exists.

    Returns the config file path and whether it was created.
    """
    paths = _build_paths()
    if paths.user_config_file.exists():
        return paths.user_config_file, False
    try:
        paths.user_config_dir.mkdir(parents=True, exist_ok=True)
        paths.user_config_file.write_text(DEFAULT_CONFIG_TOML, encoding="utf-8")
    except OSError as exc:
        raise OSError(f"unable to create config at {paths.user_config_file}: {exc}") from exc
    logger.debug("Wrote default config to %s", paths.user_config_file)
    return paths.user_config_file, True
