"""Mapping between the pixel grid and the complex plane."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ImageBounds:
    """Width and height of an image in pixels."""

    width: int
    height: int

    def as_tuple(self) -> tuple[int, int]:
        return self.width, self.height


@dataclass(frozen=True)
class PlaneRectangle:
    """Region of the complex plane covered by an image (or a band of one)."""

    upper_left: complex
    lower_right: complex

    @property
    def width(self) -> float:
        return self.lower_right.real - self.upper_left.real

    @property
    def height(self) -> float:
        return self.upper_left.imag - self.lower_right.imag

    def is_inverted(self) -> bool:
        return self.width < 0 or self.height < 0


def pixel_to_point(bounds: ImageBounds, pixel: tuple[int, int], rectangle: PlaneRectangle) -> complex:
    """Return the point of ``rectangle`` under the ``(column, row)`` pixel.

    Column 0 / row 0 is exactly ``rectangle.upper_left``. Columns grow towards
    larger real parts; rows grow downwards, towards smaller imaginary parts.
    """

    column, row = pixel
    upper_left = rectangle.upper_left
    real = upper_left.real + column * rectangle.width / bounds.width
    imag = upper_left.imag - row * rectangle.height / bounds.height
    return complex(real, imag)
