"""Packed colour helpers.

Colours travel through the renderer as 32-bit integers in
``0xRRGGBBAA`` order.  The alpha byte is never used as a blend weight:
``0`` marks a transparent colour whose writes are skipped, any other
value writes the RGB channels as-is.
"""

from __future__ import annotations

from typing import Tuple

RGB = Tuple[int, int, int]


def unpack_rgba(colour: int) -> Tuple[int, int, int, int]:
    """Split a packed colour into ``(r, g, b, a)`` bytes."""
    colour &= 0xFFFFFFFF
    return (
        (colour >> 24) & 0xFF,
        (colour >> 16) & 0xFF,
        (colour >> 8) & 0xFF,
        colour & 0xFF,
    )


def to_rgb(colour: int) -> RGB:
    r, g, b, _ = unpack_rgba(colour)
    return r, g, b


def pack_rgba(r: int, g: int, b: int, a: int = 0xFF) -> int:
    """Inverse of :func:`unpack_rgba`."""
    return ((r & 0xFF) << 24) | ((g & 0xFF) << 16) | ((b & 0xFF) << 8) | (a & 0xFF)


def is_transparent(colour: int) -> bool:
    return (colour & 0xFF) == 0


def blend_channel(coverage: int, ink: int, background: int) -> int:
    """Interpolate one channel between background and ink by coverage.

    ``coverage`` is in ``0..255``; 0 yields the background and 255 the
    ink.  Equivalent to ``round(x / 255)`` in exact integer arithmetic.
    """
    return (coverage * ink + (255 - coverage) * background + 127) // 255
