#!/usr/bin/env python3
from __future__ import annotations

import io
import logging
import math
import xml.etree.ElementTree as ElementTree
from dataclasses import dataclass, field
from typing import Any

import segno

from ..core.bounds import MIN_QR_PIXELS
from ..core.errors import CapacityExceededError, ImageParseError

logger = logging.getLogger(__name__)

# QR code error correction capability (approx.)
#     H: 30%
#     Q: 25%
#     M: 15%
#     L: 7%
EC_LEVELS = ("H", "Q", "M", "L")

DARK_COLOR = "#000000"
LIGHT_COLOR = "#ffffff"


@dataclass(frozen=True)
class VectorImage:
    svg: bytes = field(repr=False)
    width_px: float
    height_px: float
    error_level: str | None = None
    version: int | None = None


def make_qr(
    data: bytes | str,
    *,
    error: str = "H",
    version: int | None = None,
    mask: int | None = None,
    micro: bool = False,
    boost_error: bool = False,
) -> Any:
    return segno.make(
        data,
        error=error,
        version=version,
        mask=mask,
        micro=micro,
        boost_error=boost_error,
    )


def best_qr(data: bytes | str, *, levels: tuple[str, ...] = EC_LEVELS) -> Any:
    """Return the most redundant QR code that can hold ``data``."""
    overflow: Exception | None = None
    for level in levels:
        logger.debug("Trying EC level %s", level)
        try:
            qr = make_qr(data, error=level)
        except segno.DataOverflowError as exc:
            overflow = exc
            continue
        logger.info("QR code EC level: %s", qr.error)
        logger.info("QR code version: %s", qr.version)
        return qr
    raise CapacityExceededError(
        "Too much data after encryption, please try a smaller file"
    ) from overflow


def module_scale(qr: Any, *, min_pixels: int = MIN_QR_PIXELS) -> int:
    modules, _ = qr.symbol_size(scale=1, border=0)
    return max(1, math.ceil(min_pixels / modules))


def qr_svg(data: bytes | str, *, min_pixels: int = MIN_QR_PIXELS) -> VectorImage:
    """Render ``data`` as a black-on-white SVG QR code without quiet zone."""
    qr = best_qr(data)
    buf = io.BytesIO()
    qr.save(
        buf,
        kind="svg",
        scale=module_scale(qr, min_pixels=min_pixels),
        border=0,
        dark=DARK_COLOR,
        light=LIGHT_COLOR,
        xmldecl=False,
    )
    svg = buf.getvalue()
    width_px, height_px = parse_svg_size(svg)
    version = qr.version if isinstance(qr.version, int) else None
    return VectorImage(
        svg=svg,
        width_px=width_px,
        height_px=height_px,
        error_level=qr.error,
        version=version,
    )


def parse_svg_size(svg: bytes | str) -> tuple[float, float]:
    """Read the intrinsic pixel size of an SVG document."""
    try:
        root = ElementTree.fromstring(svg)
    except ElementTree.ParseError as exc:
        raise ImageParseError(f"invalid SVG image: {exc}") from exc
    if not root.tag.endswith("svg"):
        raise ImageParseError("invalid SVG image: root element is not <svg>")

    width = _parse_length(root.get("width"))
    height = _parse_length(root.get("height"))
    if width is None or height is None:
        view_box = root.get("viewBox")
        if view_box is None:
            raise ImageParseError("invalid SVG image: missing width/height")
        parts = view_box.replace(",", " ").split()
        if len(parts) != 4:
            raise ImageParseError(f"invalid SVG image: bad viewBox {view_box!r}")
        try:
            width = float(parts[2]) if width is None else width
            height = float(parts[3]) if height is None else height
        except ValueError as exc:
            raise ImageParseError(f"invalid SVG image: bad viewBox {view_box!r}") from exc
    if width <= 0 or height <= 0:
        raise ImageParseError("invalid SVG image: degenerate size")
    return width, height


def _parse_length(value: str | None) -> float | None:
    if value is None:
        return None
    raw = value.strip()
    if raw.endswith("px"):
        raw = raw[:-2]
    try:
        return float(raw)
    except ValueError as exc:
        raise ImageParseError(f"invalid SVG image: unsupported length {value!r}") from exc
