"""Candle bodies and wicks."""

from __future__ import annotations

from typing import Optional, Sequence

from ..canvas.buffer import ChartCanvas
from ..data.models import Candle
from .base import Layer, bar_left, bar_slot


class CandleLayer(Layer):
    """Draws one candle per bar.

    Each bar gets ``floor(drawable_width / len(series))`` pixels of
    horizontal space.  Bodies span ``[min(open, close), max(open,
    close)]`` and are inset by one pixel on each side when the slot is
    at least three pixels wide, leaving a gap between neighbours.  The
    wick spans ``[low, high]`` and is centred in the slot, one fifth of
    the body width and never narrower than one pixel.
    """

    def __init__(self, up_colour: int, down_colour: int) -> None:
        self.up_colour = up_colour
        self.down_colour = down_colour

    def apply(self, canvas: ChartCanvas, series: Sequence[Candle]) -> None:
        slot = max(1, bar_slot(canvas, len(series)))
        inset = 1 if slot >= 3 else 0
        body_width = slot - 2 * inset
        wick_width = max(1, body_width // 5)
        for index, bar in enumerate(series):
            colour = self.down_colour if bar.open > bar.close else self.up_colour
            x0 = bar_left(canvas, index)
            t = index * canvas.time_units
            _, high_y = canvas.to_pixel(bar.high, t)
            _, low_y = canvas.to_pixel(bar.low, t)
            _, body_top = canvas.to_pixel(max(bar.open, bar.close), t)
            _, body_bottom = canvas.to_pixel(min(bar.open, bar.close), t)
            wick_x = x0 + (slot - wick_width) // 2
            canvas.fill_rect(wick_x, round(high_y), wick_x + wick_width - 1, round(low_y), colour)
            canvas.fill_rect(
                x0 + inset, round(body_top), x0 + inset + body_width - 1, round(body_bottom), colour
            )

    def legend_colour(self) -> Optional[int]:
        return self.up_colour

    def name(self) -> str:
        return "Candles()"
