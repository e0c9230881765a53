"""Parsers for the textual arguments of the renderer."""

from __future__ import annotations

from typing import Callable, Optional, TypeVar

T = TypeVar("T", int, float)

SEQUENTIAL = "sequential"
PARALLEL = "parallel"

_MODE_TOKENS = {
    "Single": SEQUENTIAL,
    "Multi": PARALLEL,
    SEQUENTIAL: SEQUENTIAL,
    PARALLEL: PARALLEL,
}


def _parse_number(text: str, kind: Callable[[str], T]) -> Optional[T]:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return kind(text)
    except ValueError:
        return None


def parse_pair(s: str, separator: str, kind: Callable[[str], T] = int) -> Optional[tuple[T, T]]:
    """Parse ``s`` as a coordinate pair such as ``"400x600"`` or ``"1.0,0.5"``.

    ``s`` must have the form ``<left><separator><right>`` where both sides
    parse with ``kind``. The first occurrence of ``separator`` splits the
    string. Returns ``None`` when ``s`` does not have that form.
    """

    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    index = s.find(separator)
    if index < 0:
        return None
    left = _parse_number(s[:index], kind)
    right = _parse_number(s[index + 1:], kind)
    if left is None or right is None:
        return None
    return left, right


def parse_complex(s: str) -> Optional[complex]:
    """Parse a ``"re,im"`` pair into a complex number."""

    pair = parse_pair(s, ",", float)
    if pair is None:
        return None
    return complex(*pair)


def parse_mode(token: str) -> Optional[str]:
    return _MODE_TOKENS.get(token)


def mode_tokens() -> tuple[str, ...]:
    return tuple(_MODE_TOKENS)
