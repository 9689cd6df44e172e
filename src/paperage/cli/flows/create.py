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

from ...config import AppConfig, load_app_config
from ...core.errors import CapacityExceededError, ImageParseError, ResourceLoadError
from ...core.validation import validate_notes_label, validate_title
from ...crypto import encrypt_plaintext
from ...render import DocumentConfig, PageSize, build_document, render_pdf
from ..core.common import EX_CANTCREAT, EX_DATAERR, EX_NOINPUT, EX_SOFTWARE
from ..core.log import _error
from ..core.types import CreateArgs
from ..io.inputs import _read_input
from ..io.outputs import _check_output, _write_output
from ..ui import TerminalUnavailableError, prompt_required_secret

logger = logging.getLogger(__name__)

PASSPHRASE_ENV = "PAPERAGE_PASSPHRASE"
CAPACITY_MESSAGE = "Too much data after encryption, please try a smaller file"
QR_FAILURE_MESSAGE = "The QR code generation failed for an unknown reason"


def _resolve_passphrase() -> str:
    env_value = os.environ.get(PASSPHRASE_ENV)
    if env_value is not None:
        logger.debug("Using passphrase from %s", PASSPHRASE_ENV)
        return env_value
    try:
        return prompt_required_secret("Type passphrase", confirm="Confirm passphrase")
    except TerminalUnavailableError as exc:
        raise RuntimeError(
            f"cannot prompt for the passphrase ({exc}); set {PASSPHRASE_ENV} instead"
        ) from exc


def _document_config(args: CreateArgs, app_config: AppConfig, *, title: str) -> DocumentConfig:
    defaults = app_config.document
    page_size = PageSize.parse(args.page_size) if args.page_size else app_config.page.size
    notes_label = args.notes_label if args.notes_label is not None else defaults.notes_label
    return DocumentConfig(
        title=title,
        page_size=page_size,
        grid=args.grid or defaults.grid,
        notes_label=validate_notes_label(notes_label),
        skip_notes_line=args.skip_notes_line or defaults.skip_notes_line,
        footer=defaults.footer and not args.no_footer,
    )


def run_create(args: CreateArgs) -> int:
    """Encrypt the input and write the paper backup PDF.

    Returns a sysexits code for the failures users can act on; anything else
    propagates to the caller.
    """
    app_config = load_app_config(args.config)

    raw_title = args.title if args.title is not None else app_config.document.title
    try:
        title = validate_title(raw_title)
    except ValueError as exc:
        _error(str(exc))
        return EX_DATAERR

    try:
        _check_output(args.output, force=args.force, quiet=args.quiet)
    except FileExistsError as exc:
        _error(str(exc))
        return EX_CANTCREAT

    try:
        plaintext = _read_input(args.input)
    except FileNotFoundError as exc:
        _error(str(exc))
        return EX_NOINPUT

    config = _document_config(args, app_config, title=title)
    passphrase = _resolve_passphrase()
    _plaintext_len, encrypted = encrypt_plaintext(plaintext, passphrase)

    try:
        document = build_document(config, encrypted)
    except CapacityExceededError:
        _error(CAPACITY_MESSAGE)
        return EX_DATAERR
    except ImageParseError:
        _error(QR_FAILURE_MESSAGE)
        return EX_SOFTWARE
    except ResourceLoadError as exc:
        _error(str(exc))
        return EX_SOFTWARE

    data = render_pdf(document)
    _write_output(args.output, data, quiet=args.quiet)
    return 0
