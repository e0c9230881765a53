"""Escape-time test for membership in the Mandelbrot set."""

from __future__ import annotations

from typing import Optional

ESCAPE_RADIUS_SQUARED = 4.0
DEFAULT_ITERATION_LIMIT = 255


def escape_time(c: complex, limit: int) -> Optional[int]:
    """Try to decide whether ``c`` is in the Mandelbrot set in ``limit`` iterations.

    Returns the index of the first iteration at which ``z`` lies outside the
    circle of radius 2, or ``None`` when no escape was seen within ``limit``
    iterations (``c`` is probably a member).
    """

    z = 0j
    for i in range(limit):
        if z.real * z.real + z.imag * z.imag > ESCAPE_RADIUS_SQUARED:
            return i
        z = z * z + c
    return None
