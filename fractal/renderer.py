"""Sequential and row-banded parallel rendering of Mandelbrot images."""

from __future__ import annotations

from concurrent.futures import Executor, ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from .escape import DEFAULT_ITERATION_LIMIT, escape_time
from .geometry import ImageBounds, PlaneRectangle, pixel_to_point
from .palette import color_for

OPAQUE = 255
SUPPORTED_CHANNELS = (3, 4)


@dataclass(frozen=True)
class RenderParameters:
    """Knobs shared by both renderers."""

    iteration_limit: int = DEFAULT_ITERATION_LIMIT
    channels: int = 3
    rows_per_band: int = 1

    def __post_init__(self) -> None:
        if self.iteration_limit < 0:
            raise ValueError(f"iteration_limit must be non-negative, got {self.iteration_limit}")
        if self.channels not in SUPPORTED_CHANNELS:
            raise ValueError(f"channels must be one of {SUPPORTED_CHANNELS}, got {self.channels}")
        if self.rows_per_band < 1:
            raise ValueError(f"rows_per_band must be at least 1, got {self.rows_per_band}")


@dataclass(frozen=True)
class Band:
    """A run of whole image rows rendered as one unit of parallel work."""

    index: int
    top: int
    rows: int
    start: int
    stop: int
    plane: PlaneRectangle


def allocate_pixels(bounds: ImageBounds, channels: int = 3) -> np.ndarray:
    """Allocate a zeroed row-major pixel buffer for ``bounds``."""

    return np.zeros((bounds.height, bounds.width, channels), dtype=np.uint8)


def _check_buffer(pixels: np.ndarray, bounds: ImageBounds, params: RenderParameters) -> None:
    assert pixels.dtype == np.uint8 and pixels.flags.c_contiguous, "pixel buffer must be contiguous uint8"
    assert pixels.size == bounds.width * bounds.height * params.channels, (
        f"pixel buffer holds {pixels.size} bytes, expected "
        f"{bounds.width}x{bounds.height}x{params.channels}"
    )


def _paint_rows(
    rows: np.ndarray,
    top: int,
    bounds: ImageBounds,
    rectangle: PlaneRectangle,
    params: RenderParameters,
) -> None:
    # ``rows`` holds image rows ``top:top + len(rows)``; mapping always uses
    # the full-image bounds and rectangle.
    for offset in range(rows.shape[0]):
        for column in range(bounds.width):
            point = pixel_to_point(bounds, (column, top + offset), rectangle)
            color = color_for(escape_time(point, params.iteration_limit))
            rows[offset, column, :3] = color
    if params.channels == 4:
        rows[..., 3] = OPAQUE


def render_sequential(
    pixels: np.ndarray,
    bounds: ImageBounds,
    rectangle: PlaneRectangle,
    params: RenderParameters = RenderParameters(),
) -> None:
    """Paint every pixel of ``pixels`` on the calling thread."""

    _check_buffer(pixels, bounds, params)
    image = pixels.reshape(bounds.height, bounds.width, params.channels)
    _paint_rows(image, 0, bounds, rectangle, params)


def partition_bands(bounds: ImageBounds, rectangle: PlaneRectangle, params: RenderParameters) -> list[Band]:
    """Split the image into disjoint row bands covering the whole buffer."""

    row_bytes = bounds.width * params.channels
    bands: list[Band] = []
    for index, top in enumerate(range(0, bounds.height, params.rows_per_band)):
        rows = min(params.rows_per_band, bounds.height - top)
        plane = PlaneRectangle(
            upper_left=pixel_to_point(bounds, (0, top), rectangle),
            lower_right=pixel_to_point(bounds, (bounds.width, top + rows), rectangle),
        )
        bands.append(
            Band(
                index=index,
                top=top,
                rows=rows,
                start=top * row_bytes,
                stop=(top + rows) * row_bytes,
                plane=plane,
            )
        )
    return bands


def render_band(band: Band, bounds: ImageBounds, rectangle: PlaneRectangle, params: RenderParameters) -> np.ndarray:
    """Render ``band`` into a private buffer and return its raw bytes."""

    rows = np.zeros((band.rows, bounds.width, params.channels), dtype=np.uint8)
    _paint_rows(rows, band.top, bounds, rectangle, params)
    return rows.reshape(-1)


def render_parallel(
    pixels: np.ndarray,
    bounds: ImageBounds,
    rectangle: PlaneRectangle,
    params: RenderParameters = RenderParameters(),
    *,
    executor_factory: Callable[[], Executor] = ProcessPoolExecutor,
    on_band: Optional[Callable[[Band], None]] = None,
) -> list[Band]:
    """Paint ``pixels`` by rendering row bands concurrently.

    Every band is computed by a worker into its own buffer and copied into
    the band's byte range of ``pixels``; the ranges never overlap. Returns
    once all bands have been written.
    """

    _check_buffer(pixels, bounds, params)
    flat = pixels.reshape(-1)
    bands = partition_bands(bounds, rectangle, params)

    with executor_factory() as executor:
        futures = {
            executor.submit(render_band, band, bounds, rectangle, params): band
            for band in bands
        }
        for future in as_completed(futures):
            band = futures[future]
            flat[band.start:band.stop] = future.result()
            if on_band is not None:
                on_band(band)

    return bands
