#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    create as create_command,
    fonts_license as fonts_license_command,
    manpage as manpage_command,
)


def register(app: typer.Typer) -> None:
    create_command.register(app)
    fonts_license_command.register(app)
    manpage_command.register(app)
