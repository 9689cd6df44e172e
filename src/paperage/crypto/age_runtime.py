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
from dataclasses import dataclass
from typing import BinaryIO

import pyrage
from pyrage import passphrase as pyrage_passphrase

from .armor import armor, dearmor

logger = logging.getLogger(__name__)


@dataclass
class AgeError(RuntimeError):
    backend: str
    detail: str

    def __str__(self) -> str:
        message = self.detail.strip() or "unknown error"
        return f"age ({self.backend}) failed: {message}"


def _wrap_pyrage_error(exc: Exception) -> AgeError:
    detail = str(exc).strip() or exc.__class__.__name__
    return AgeError(backend="pyrage", detail=detail)


def _encrypt_with_pyrage(data: bytes, passphrase: str) -> bytes:
    try:
        return pyrage_passphrase.encrypt(data, passphrase)
    except (ValueError, TypeError, RuntimeError, OSError) as exc:
        # pyrage can raise various exceptions for invalid input/state
        raise _wrap_pyrage_error(exc) from exc


def _decrypt_with_pyrage(data: bytes, passphrase: str) -> bytes:
    try:
        return pyrage_passphrase.decrypt(data, passphrase)
    except (ValueError, TypeError, RuntimeError, OSError, pyrage.DecryptError) as exc:
        # pyrage raises DecryptError for wrong passphrase, other exceptions for corrupted data
        raise _wrap_pyrage_error(exc) from exc


def encrypt_plaintext(data: bytes, passphrase: str) -> tuple[int, str]:
    """Encrypt ``data`` with an age passphrase and ASCII-armor the result.

    Returns the plaintext length and the armored ciphertext.
    """
    if not passphrase:
        raise ValueError("passphrase cannot be empty")
    logger.debug("Encrypting plaintext")
    ciphertext = _encrypt_with_pyrage(data, passphrase)
    armored = armor(ciphertext)
    logger.info("Plaintext length: %d bytes", len(data))
    logger.info("Encrypted length: %d bytes", len(armored))
    return len(data), armored


def encrypt_stream(reader: BinaryIO, passphrase: str) -> tuple[int, str]:
    return encrypt_plaintext(reader.read(), passphrase)


def decrypt_armored(armored: str, *, passphrase: str, debug: bool = False) -> bytes:
    ciphertext = dearmor(armored)
    try:
        return _decrypt_with_pyrage(ciphertext, passphrase)
    except AgeError:
        if debug:
            raise
        raise ValueError("decryption failed") from None
