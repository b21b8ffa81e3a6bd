"""The shared drawing surface handed to every rendering layer.

A :class:`ChartCanvas` owns an RGB pixel buffer together with the
geometry needed to place data on it: canvas size, margins, the price
range of the series and the total time span it covers.  Layers draw
through the canvas methods (``line``, ``fill_rect``, ``set_pixel``,
``text``) and position data with :meth:`ChartCanvas.to_pixel`, which
maps a ``(price, elapsed_seconds)`` pair into the margin-inset drawing
rectangle.

A canvas lives for a single render call.  Layers must not keep a
reference to it after their ``apply`` returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from . import raster
from .colour import to_rgb
from .glyphs import draw_text, glyph_size, text_width


@dataclass(frozen=True)
class Margin:
    """Pixel insets around the plotted area."""

    top: int = 0
    bottom: int = 0
    left: int = 0
    right: int = 0


class ChartCanvas:
    """Mutable pixel buffer plus the data-to-pixel coordinate mapping.

    Parameters
    ----------
    width, height : int
        Canvas size in pixels.
    margin : Margin
        Insets reserved for labels and titles.
    high, low : float
        Price extent mapped to the top and bottom of the drawing
        rectangle.
    time_span : float
        Total elapsed seconds mapped across the drawing rectangle.
    time_units : float
        Seconds represented by one bar.
    background : int
        RGBA background colour used to fill the buffer and to composite
        text.
    glyph_scale : int
        Pixel replication factor applied to the bitmap font.
    """

    def __init__(
        self,
        width: int,
        height: int,
        margin: Margin,
        high: float,
        low: float,
        time_span: float,
        time_units: float,
        background: int,
        glyph_scale: int = 1,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        if margin.left + margin.right >= width or margin.top + margin.bottom >= height:
            raise ValueError("Margins leave no drawable area")
        if time_span <= 0:
            raise ValueError(f"Time span must be positive, got {time_span}")
        self.width = width
        self.height = height
        self.margin = margin
        self.high = high
        self.low = low
        self.time_span = time_span
        self.time_units = time_units
        self.background = background
        self.glyph_scale = glyph_scale
        self.buffer = np.empty((height, width, 3), dtype=np.uint8)
        self.buffer[:, :] = to_rgb(background)

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def drawable_width(self) -> int:
        return self.width - self.margin.left - self.margin.right

    @property
    def drawable_height(self) -> int:
        return self.height - self.margin.top - self.margin.bottom

    def to_pixel(self, price: float, elapsed: float) -> Tuple[float, float]:
        """Map a price and elapsed time (seconds) to pixel coordinates.

        Higher prices map to smaller ``y``.  ``x`` is clamped to the
        drawing rectangle; ``y`` is not, so out-of-range prices land in
        the margins and are clipped by the rasterizer.
        """
        x = self.margin.left + elapsed / self.time_span * self.drawable_width
        x = min(max(x, float(self.margin.left)), float(self.width - self.margin.right))
        if self.high == self.low:
            y = self.margin.top + self.drawable_height / 2
        else:
            y = self.margin.top + (self.high - price) / (self.high - self.low) * self.drawable_height
        return x, y

    def price_at(self, y: float) -> float:
        """Inverse of the vertical mapping."""
        if self.high == self.low:
            return self.high
        return self.high - (y - self.margin.top) / self.drawable_height * (self.high - self.low)

    def elapsed_at(self, x: float) -> float:
        """Inverse of the horizontal mapping."""
        return (x - self.margin.left) / self.drawable_width * self.time_span

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------
    def set_pixel(self, x: float, y: float, colour: int) -> None:
        raster.set_pixel(self.buffer, x, y, colour)

    def line(self, p1: Tuple[float, float], p2: Tuple[float, float], colour: int) -> None:
        raster.draw_line(self.buffer, p1, p2, colour)

    def fill_rect(self, x0: int, y0: int, x1: int, y1: int, colour: int) -> None:
        raster.fill_rect(self.buffer, x0, y0, x1, y1, colour)

    def text(self, origin: Tuple[int, int], text: str, colour: int) -> None:
        draw_text(self.buffer, origin, text, colour, self.background, self.glyph_scale)

    def text_width(self, text: str) -> int:
        return text_width(text, self.glyph_scale)

    @property
    def glyph_size(self) -> Tuple[int, int]:
        return glyph_size(self.glyph_scale)

    def pixel(self, x: int, y: int) -> Tuple[int, int, int]:
        """Return the RGB triple at ``(x, y)``."""
        r, g, b = self.buffer[y, x]
        return int(r), int(g), int(b)

    def to_bytes(self) -> bytes:
        """Packed row-major RGB bytes."""
        return self.buffer.tobytes()
