#!/usr/bin/env python3
from __future__ import annotations

import functools

import typer

from ..core.common import _ctx_value, _page_size_callback, _run_cli
from ..core.log import configure_logging
from ..core.types import CreateArgs
from ..flows.create import run_create


def register(app: typer.Typer) -> None:
    app.command(
        help=(
            "Encrypt a small file with a passphrase and lay it out on a printable PDF page.\n\n"
            "Examples:\n"
            "  paperage create secret.txt\n"
            "  paperage create --title 'Wallet seed' --output seed.pdf seed.txt\n"
            "  cat secret.txt | paperage create --page-size letter -o - > backup.pdf\n"
        )
    )(create)


def create(
    ctx: typer.Context,
    input_path: str | None = typer.Argument(
        None,
        metavar="INPUT",
        help="The path to the file to read. Defaults to standard input. Max. ~1.9KB.",
        show_default=False,
    ),
    title: str | None = typer.Option(
        None,
        "--title",
        "-t",
        help="Page title (max. 64 characters). [default: PaperAge]",
        rich_help_panel="Layout",
    ),
    output: str = typer.Option(
        "out.pdf",
        "--output",
        "-o",
        help="Output file name. Use - for STDOUT.",
        rich_help_panel="Output",
    ),
    page_size: str | None = typer.Option(
        None,
        "--page-size",
        "-s",
        help="Paper size (a4/letter). [default: a4]",
        callback=_page_size_callback,
        rich_help_panel="Layout",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite the output file if it already exists.",
        rich_help_panel="Output",
    ),
    grid: bool = typer.Option(
        False,
        "--grid",
        "-g",
        help="Draw a grid pattern for debugging layout issues.",
        rich_help_panel="Layout",
    ),
    notes_label: str | None = typer.Option(
        None,
        "--notes-label",
        help="Label printed next to the notes line. [default: Passphrase:]",
        rich_help_panel="Layout",
    ),
    skip_notes_line: bool = typer.Option(
        False,
        "--skip-notes-line",
        help="Do not draw the line next to the notes label.",
        rich_help_panel="Layout",
    ),
    no_footer: bool = typer.Option(
        False,
        "--no-footer",
        "-n",
        help="Disable drawing of footer.",
        rich_help_panel="Layout",
    ),
    config: str | None = typer.Option(
        None,
        "--config",
        help="Use this TOML config file.",
        rich_help_panel="Config",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="More output per occurrence (-v info, -vv debug).",
        rich_help_panel="Behavior",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Hide non-error output.",
        rich_help_panel="Behavior",
    ),
) -> None:
    debug_value = bool(_ctx_value(ctx, "debug"))
    configure_logging(verbose=verbose, quiet=quiet, debug=debug_value)
    args = CreateArgs(
        input=input_path,
        output=output,
        config=config,
        title=title,
        page_size=page_size,
        notes_label=notes_label,
        skip_notes_line=skip_notes_line,
        grid=grid,
        no_footer=no_footer,
        force=force,
        verbose=verbose,
        quiet=quiet,
    )
    _run_cli(functools.partial(run_create, args), debug=debug_value)
