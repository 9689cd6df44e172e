#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CreateArgs:
    input: str | None = None
    output: str = "out.pdf"
    config: str | None = None
    title: str | None = None
    page_size: str | None = None
    notes_label: str | None = None
    skip_notes_line: bool | None = None
    grid: bool | None = None
    no_footer: bool | None = None
    force: bool = False
    verbose: int = 0
    quiet: bool = False
