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


class PaperAgeError(Exception):
    """Base class for errors raised while producing a paper backup."""


class ResourceLoadError(PaperAgeError):
    """A packaged resource (font) could not be read or parsed."""


class CapacityExceededError(PaperAgeError, ValueError):
    """The ciphertext does not fit in a QR code at any error-correction level."""


class ImageParseError(PaperAgeError, ValueError):
    """A vector image is malformed or has degenerate dimensions."""


class DocumentFinalizedError(PaperAgeError, RuntimeError):
    """The document was already handed to the serializer."""
