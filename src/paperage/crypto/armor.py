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

"""ASCII armor for age ciphertexts (strict PEM, 64 columns)."""

from __future__ import annotations

import base64
import binascii

ARMOR_BEGIN = "-----BEGIN AGE ENCRYPTED FILE-----"
ARMOR_END = "-----END AGE ENCRYPTED FILE-----"
ARMOR_COLUMNS = 64


def armor(data: bytes) -> str:
    encoded = base64.b64encode(data).decode("ascii")
    lines = [ARMOR_BEGIN]
    lines.extend(
        encoded[idx : idx + ARMOR_COLUMNS] for idx in range(0, len(encoded), ARMOR_COLUMNS)
    )
    lines.append(ARMOR_END)
    return "\n".join(lines) + "\n"


def dearmor(text: str) -> bytes:
    lines = [line.strip() for line in text.strip().splitlines()]
    if len(lines) < 2 or lines[0] != ARMOR_BEGIN or lines[-1] != ARMOR_END:
        raise ValueError("armored data must be framed by BEGIN/END AGE ENCRYPTED FILE lines")
    body = lines[1:-1]
    for line in body[:-1]:
        if len(line) != ARMOR_COLUMNS:
            raise ValueError(f"armored lines must be {ARMOR_COLUMNS} columns wide")
    if body and len(body[-1]) > ARMOR_COLUMNS:
        raise ValueError(f"armored lines must be at most {ARMOR_COLUMNS} columns wide")
    try:
        return base64.b64decode("".join(body), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("armored data is not valid base64") from exc
