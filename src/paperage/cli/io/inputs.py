#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path


def _is_stdin(path: str | None) -> bool:
    return path is None or path == "-"


def _read_input(path: str | None) -> bytes:
    """Read the plaintext from ``path``, or standard input for ``-``/``None``."""
    if _is_stdin(path):
        return sys.stdin.buffer.read()
    source = Path(path).expanduser()
    if not source.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    return source.read_bytes()
