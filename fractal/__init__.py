"""Public API for rendering Mandelbrot images."""

from .escape import DEFAULT_ITERATION_LIMIT, escape_time
from .geometry import ImageBounds, PlaneRectangle, pixel_to_point
from .palette import PALETTE, ColorBand, color_for, intensity, map_color
from .parsing import PARALLEL, SEQUENTIAL, parse_complex, parse_mode, parse_pair
from .renderer import (
    Band,
    RenderParameters,
    allocate_pixels,
    partition_bands,
    render_band,
    render_parallel,
    render_sequential,
)

__all__ = [
    "Band",
    "ColorBand",
    "DEFAULT_ITERATION_LIMIT",
    "ImageBounds",
    "PALETTE",
    "PARALLEL",
    "PlaneRectangle",
    "RenderParameters",
    "SEQUENTIAL",
    "allocate_pixels",
    "color_for",
    "escape_time",
    "intensity",
    "map_color",
    "parse_complex",
    "parse_mode",
    "parse_pair",
    "partition_bands",
    "pixel_to_point",
    "render_band",
    "render_parallel",
    "render_sequential",
]
