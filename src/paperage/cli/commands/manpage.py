#!/usr/bin/env python3
from __future__ import annotations

import datetime
from pathlib import Path
from typing import Any

import typer

from ..ui import console

HELP_INDENT = "  "
HELP_COLUMN = 30


def register(app: typer.Typer) -> None:
    app.command(help="Generate a manpage for the CLI.")(manpage)


def _sub_context(command: Any, name: str, parent: Any | None = None) -> Any:
    # Typer's rich help prints straight to the terminal, so help is rebuilt from params.
    return command.context_class(command, info_name=name, parent=parent)


def _usage(command: Any, ctx: Any) -> str:
    pieces = [ctx.command_path, "[OPTIONS]"]
    for param in command.get_params(ctx):
        if param.param_type_name != "argument":
            continue
        name = param.human_readable_name.upper()
        pieces.append(name if param.required else f"[{name}]")
    if hasattr(command, "list_commands"):
        pieces.append("COMMAND [ARGS]...")
    return "Usage: " + " ".join(pieces)


def _help_rows(command: Any, ctx: Any) -> list[str]:
    rows = []
    for param in command.get_params(ctx):
        if getattr(param, "hidden", False):
            continue
        record = param.get_help_record(ctx)
        if record is None:
            continue
        names, text = record
        if len(names) + len(HELP_INDENT) >= HELP_COLUMN:
            rows.append(f"{HELP_INDENT}{names}")
            rows.append(f"{' ' * HELP_COLUMN}{text}".rstrip())
        else:
            rows.append(f"{HELP_INDENT}{names.ljust(HELP_COLUMN - len(HELP_INDENT))}{text}".rstrip())
    return rows


def _plain_help(command: Any, ctx: Any) -> str:
    lines = [_usage(command, ctx)]
    if command.help:
        lines.extend(["", command.help.strip()])
    rows = _help_rows(command, ctx)
    if rows:
        lines.extend(["", "Options:", *rows])
    return "\n".join(lines)


def _command_sections(group: Any, root_ctx: Any) -> list[str]:
    lines = [".SH COMMANDS"]
    for name in group.list_commands(root_ctx):
        command = group.get_command(root_ctx, name)
        if command is None or command.hidden:
            continue
        sub_ctx = _sub_context(command, name, root_ctx)
        lines.extend([f".SS {name}", ".nf", _plain_help(command, sub_ctx), ".fi"])
    return lines


def manpage(
    ctx: typer.Context,
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the manpage to a file (default: stdout).",
    ),
) -> None:
    command = ctx.find_root().command
    root_ctx = _sub_context(command, "paperage")
    date = datetime.datetime.now(datetime.timezone.utc).strftime("%Y-%m-%d")
    lines = [
        f'.TH PAPERAGE 1 "{date}" "paperage" "User Commands"',
        ".SH NAME",
        "paperage \\- easy and secure paper backups of secrets",
        ".SH SYNOPSIS",
        ".nf",
        _plain_help(command, root_ctx),
        ".fi",
    ]
    if hasattr(command, "list_commands"):
        lines.extend(_command_sections(command, root_ctx))
    man = "\n".join(lines) + "\n"
    if output:
        output.write_text(man, encoding="utf-8")
    else:
        console.print(man, markup=False, highlight=False, soft_wrap=True, end="")
