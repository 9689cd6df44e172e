#!/usr/bin/env python3
from __future__ import annotations

import typer

from ...render.fonts import fonts_license as read_fonts_license
from ..core.common import _ctx_value, _run_cli
from ..ui import console


def register(app: typer.Typer) -> None:
    app.command("fonts-license", help="Print out the license for the embedded fonts.")(
        fonts_license
    )


def fonts_license(ctx: typer.Context) -> None:
    def _print() -> None:
        console.print(
            read_fonts_license(),
            markup=False,
            highlight=False,
            soft_wrap=True,
            end="",
        )

    _run_cli(_print, debug=bool(_ctx_value(ctx, "debug")))
