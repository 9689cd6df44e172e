#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path

from ..core.log import _warn
from ..ui import console_err


def _is_stdout(path: str) -> bool:
    return path == "-"


def _check_output(path: str, *, force: bool, quiet: bool) -> None:
    """Refuse to clobber an existing output file unless ``force`` is set."""
    if _is_stdout(path):
        return
    if not Path(path).exists():
        return
    if not force:
        raise FileExistsError(f"Output file already exists: {path}")
    _warn(f"Overwriting existing output file: {path}", quiet=quiet)


def _write_output(path: str, data: bytes, *, quiet: bool) -> None:
    if _is_stdout(path):
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    with open(path, "wb") as handle:
        handle.write(data)
    if not quiet:
        console_err.print(f"[dim]- wrote {path}[/dim]")
