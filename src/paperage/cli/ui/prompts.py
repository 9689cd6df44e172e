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

import sys
from contextlib import ExitStack
from typing import Any

import questionary
from prompt_toolkit.input import create_input
from prompt_toolkit.output import create_output
from rich.rule import Rule

from .state import UIContext, get_context, isatty

TTY_PATH = "/dev/tty"

QUESTIONARY_STYLE = questionary.Style(
    [
        ("question", "bold"),
        ("answer", "bold"),
        ("instruction", "fg:ansibrightblack"),
    ]
)

DEFAULT_CONTEXT = get_context()


class TerminalUnavailableError(RuntimeError):
    pass


def _resolve_context(context: UIContext | None) -> UIContext:
    return context or DEFAULT_CONTEXT


def _prompt_streams(stack: ExitStack) -> dict[str, Any]:
    """Return prompt_toolkit I/O bound to the controlling terminal.

    Standard input may carry the data being backed up, so when it is not a
    terminal the prompt reads from and draws on the terminal device instead.
    """
    if isatty(sys.stdin, sys.__stdin__):
        return {}
    try:
        tty_in = stack.enter_context(open(TTY_PATH, encoding="utf-8"))
        tty_out = stack.enter_context(open(TTY_PATH, "w", encoding="utf-8"))
    except OSError as exc:
        raise TerminalUnavailableError("standard input is not a terminal") from exc
    return {"input": create_input(stdin=tty_in), "output": create_output(stdout=tty_out)}


def _ask_secret(prompt: str, streams: dict[str, Any]) -> str:
    value = questionary.password(prompt, qmark="", style=QUESTIONARY_STYLE, **streams).ask()
    if value is None:
        raise KeyboardInterrupt
    return value


def prompt_required_secret(
    prompt: str,
    *,
    confirm: str | None = None,
    context: UIContext | None = None,
) -> str:
    """Ask for a non-empty secret, optionally twice until both entries match."""
    context = _resolve_context(context)
    with ExitStack() as stack:
        streams = _prompt_streams(stack)
        context.console_err.print(Rule(style="rule"))
        while True:
            value = _ask_secret(prompt, streams)
            if not value:
                context.console_err.print("[red]Passphrase cannot be empty.[/red]")
                continue
            if confirm is None or _ask_secret(confirm, streams) == value:
                return value
            context.console_err.print("[red]Passphrases didn't match.[/red]")
