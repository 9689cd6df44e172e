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

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from ..core.bounds import MAX_TITLE_CHARS
from ..core.errors import DocumentFinalizedError
from ..qr.codec import VectorImage
from .fonts import FontResources
from .ops import DrawingInstruction
from .page import DEFAULT_PAGE_SIZE, PageSize

DEFAULT_TITLE = "PaperAge"
DEFAULT_NOTES_LABEL = "Passphrase:"


@dataclass(frozen=True)
class DocumentConfig:
    title: str = DEFAULT_TITLE
    page_size: PageSize = DEFAULT_PAGE_SIZE
    grid: bool = False
    notes_label: str = DEFAULT_NOTES_LABEL
    skip_notes_line: bool = False
    footer: bool = True
    background: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.page_size, PageSize):
            object.__setattr__(self, "page_size", PageSize.parse(self.page_size))
        if len(self.title) > MAX_TITLE_CHARS:
            raise ValueError(f"The title cannot be longer than {MAX_TITLE_CHARS} characters")


class DocumentState(Enum):
    BUILDING = "building"
    FINALIZED = "finalized"


@dataclass
class Document:
    """One page worth of drawing instructions plus the resources they use.

    Instructions are append-only. ``finalize()`` hands the instruction list
    over to the serializer exactly once; the document rejects any further
    mutation afterwards.
    """

    config: DocumentConfig
    fonts: FontResources
    _instructions: list[DrawingInstruction] = field(default_factory=list, repr=False)
    _images: dict[str, VectorImage] = field(default_factory=dict, repr=False)
    state: DocumentState = DocumentState.BUILDING

    @property
    def instructions(self) -> tuple[DrawingInstruction, ...]:
        return tuple(self._instructions)

    @property
    def images(self) -> Mapping[str, VectorImage]:
        return MappingProxyType(self._images)

    @property
    def finalized(self) -> bool:
        return self.state is DocumentState.FINALIZED

    def append(self, instruction: DrawingInstruction) -> None:
        self._require_building()
        self._instructions.append(instruction)

    def extend(self, instructions: Iterable[DrawingInstruction]) -> None:
        self._require_building()
        self._instructions.extend(instructions)

    def add_image(self, image_id: str, image: VectorImage) -> None:
        self._require_building()
        if image_id in self._images:
            raise ValueError(f"duplicate image id: {image_id}")
        self._images[image_id] = image

    def finalize(self) -> tuple[DrawingInstruction, ...]:
        self._require_building()
        self.state = DocumentState.FINALIZED
        return tuple(self._instructions)

    def _require_building(self) -> None:
        if self.state is DocumentState.FINALIZED:
            raise DocumentFinalizedError("document has already been finalized")
