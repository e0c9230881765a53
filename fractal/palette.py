"""Posterized colouring of escape times."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Optional

Color = tuple[int, int, int]


@dataclass(frozen=True)
class ColorBand:
    """Inclusive intensity range painted with a single colour."""

    low: int
    high: int
    name: str
    color: Color


PALETTE: tuple[ColorBand, ...] = (
    ColorBand(0, 0, "black", (0, 0, 0)),
    ColorBand(1, 35, "violet", (148, 0, 211)),
    ColorBand(36, 70, "indigo", (75, 0, 130)),
    ColorBand(71, 105, "blue", (0, 0, 255)),
    ColorBand(106, 140, "green", (0, 255, 0)),
    ColorBand(141, 175, "yellow", (255, 255, 0)),
    ColorBand(176, 210, "orange", (255, 127, 0)),
    ColorBand(211, 254, "red", (255, 0, 0)),
    ColorBand(255, 255, "white", (255, 255, 255)),
)

_UPPER_BOUNDS = tuple(band.high for band in PALETTE)


def intensity(escape: Optional[int]) -> int:
    """Convert an escape time into an intensity byte; members map to 0."""

    if escape is None:
        return 0
    # Limits above 255 can produce counts past 254; keep those off black.
    return max(255 - escape, 1)


def color_band(value: int) -> ColorBand:
    if not 0 <= value <= 255:
        raise ValueError(f"intensity must be in 0..255, got {value}")
    return PALETTE[bisect_left(_UPPER_BOUNDS, value)]


def map_color(value: int) -> Color:
    """Return the RGB triple for an intensity byte."""

    return color_band(value).color


def color_for(escape: Optional[int]) -> Color:
    return map_color(intensity(escape))
