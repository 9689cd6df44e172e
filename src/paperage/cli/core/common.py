#!/usr/bin/env python3
from __future__ import annotations

from collections.abc import Callable
from typing import Any

import typer
from rich.traceback import install as install_rich_traceback

from ... import __version__
from ...render.page import PageSize
from ..ui import console_err

# sysexits.h
EX_DATAERR = 65
EX_NOINPUT = 66
EX_SOFTWARE = 70
EX_CANTCREAT = 73


def _run_cli(func: Callable[[], Any], *, debug: bool) -> None:
    if debug:
        install_rich_traceback(show_locals=True)
    try:
        result = func()
    except (OSError, RuntimeError, ValueError, TypeError, LookupError) as exc:
        if debug:
            raise
        console_err.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(code=2)
    if isinstance(result, int) and result != 0:
        raise typer.Exit(code=result)


def _ctx_value(ctx: typer.Context, key: str) -> Any:
    if ctx.obj is None:
        return None
    return ctx.obj.get(key)


def _page_size_callback(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return PageSize.parse(value).value
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _get_version() -> str:
    return __version__
