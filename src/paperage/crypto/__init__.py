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

"""age encryption and ASCII armor."""

from .age_runtime import AgeError, decrypt_armored, encrypt_plaintext, encrypt_stream
from .armor import ARMOR_BEGIN, ARMOR_END, armor, dearmor

__all__ = [
    "ARMOR_BEGIN",
    "ARMOR_END",
    "AgeError",
    "armor",
    "dearmor",
    "decrypt_armored",
    "encrypt_plaintext",
    "encrypt_stream",
]
