"""Current-value indicator line and marker."""

from __future__ import annotations

from typing import Optional, Sequence

from ..canvas.buffer import ChartCanvas
from ..data.models import Candle
from .base import Layer, bar_centre_time

MARKER_RADIUS = 3


class CurrentValueLayer(Layer):
    """Horizontal line at the last close plus a diamond on the last bar."""

    def __init__(self, colour: int, radius: int = MARKER_RADIUS) -> None:
        self.colour = colour
        self.radius = radius

    def apply(self, canvas: ChartCanvas, series: Sequence[Candle]) -> None:
        last_close = series[-1].close
        _, y = canvas.to_pixel(last_close, 0)
        row = round(y)
        canvas.fill_rect(
            canvas.margin.left, row, canvas.width - canvas.margin.right - 1, row, self.colour
        )
        x, _ = canvas.to_pixel(last_close, bar_centre_time(canvas, len(series) - 1))
        cx = round(x)
        for dy in range(-self.radius, self.radius + 1):
            half = self.radius - abs(dy)
            canvas.fill_rect(cx - half, row + dy, cx + half, row + dy, self.colour)

    def legend_colour(self) -> Optional[int]:
        return self.colour

    def name(self) -> str:
        return "CurrentValue()"
