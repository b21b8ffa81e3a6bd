"""Price and time grid lines with optional margin labels."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Sequence

from ..canvas.buffer import ChartCanvas
from ..data.models import Candle
from ..options import AxisOptions
from .base import Layer

# Gap in pixels between a label and the plot edge.
LABEL_PADDING = 2


def format_price(value: float, interval: float) -> str:
    """Format a grid price with as many decimals as the interval needs."""
    exponent = Decimal(repr(float(interval))).normalize().as_tuple().exponent
    decimals = max(0, -int(exponent))
    return f"{value:.{decimals}f}"


def format_elapsed(seconds: float) -> str:
    """Compact duration label (``90m``, ``6h``, ``2d``)."""
    whole = int(round(seconds))
    for unit, size in (("d", 86400), ("h", 3600), ("m", 60)):
        if whole and whole % size == 0:
            return f"{whole // size}{unit}"
    return f"{whole}s"


class GridLines(Layer):
    """Horizontal price lines and vertical time lines.

    A horizontal line is drawn on every row whose price span (from the
    row's mapped price down to the next row's) contains a multiple of
    the price axis interval.  Vertical lines follow the same rule for
    multiples of the time axis interval.  When an axis has a non-zero
    ``label_frequency``, every Nth line gets a label in the margin;
    labels wider than the space available are skipped.
    """

    def __init__(
        self,
        price_axis: AxisOptions,
        time_axis: AxisOptions,
        value_prefix: str = "",
        value_suffix: str = "",
    ) -> None:
        self.price_axis = price_axis
        self.time_axis = time_axis
        self.value_prefix = value_prefix
        self.value_suffix = value_suffix

    def apply(self, canvas: ChartCanvas, series: Sequence[Candle]) -> None:
        if self.price_axis.line_interval > 0:
            self._price_lines(canvas)
        if self.time_axis.line_interval > 0:
            self._time_lines(canvas)

    def _price_lines(self, canvas: ChartCanvas) -> None:
        interval = self.price_axis.line_interval
        if canvas.high == canvas.low:
            # Every row maps to the same price; the series sits on the centre row.
            multiple = round(canvas.high / interval)
            if math.isclose(multiple * interval, canvas.high, rel_tol=1e-9, abs_tol=1e-12):
                _, y = canvas.to_pixel(canvas.high, 0)
                self._price_line(canvas, round(y), multiple * interval, 0)
            return
        count = 0
        for y in range(canvas.margin.top, canvas.height - canvas.margin.bottom):
            upper = canvas.price_at(y)
            lower = canvas.price_at(y + 1)
            multiple = math.floor(upper / interval)
            if multiple * interval <= lower:
                continue
            self._price_line(canvas, y, multiple * interval, count)
            count += 1

    def _price_line(self, canvas: ChartCanvas, y: int, price: float, count: int) -> None:
        axis = self.price_axis
        canvas.fill_rect(canvas.margin.left, y, canvas.width - canvas.margin.right - 1, y, axis.line_colour)
        if axis.label_frequency and count % axis.label_frequency == 0:
            label = f"{self.value_prefix}{format_price(price, axis.line_interval)}{self.value_suffix}"
            self._price_label(canvas, y, label)

    def _price_label(self, canvas: ChartCanvas, y: int, label: str) -> None:
        _, glyph_height = canvas.glyph_size
        width = canvas.text_width(label)
        if width > canvas.margin.left - LABEL_PADDING:
            return
        x = canvas.margin.left - LABEL_PADDING - width
        canvas.text((x, y - glyph_height // 2), label, self.price_axis.label_colour)

    def _time_lines(self, canvas: ChartCanvas) -> None:
        axis = self.time_axis
        interval = axis.line_interval
        top = canvas.margin.top
        bottom = canvas.height - canvas.margin.bottom - 1
        right = canvas.width - canvas.margin.right
        count = 0
        for x in range(canvas.margin.left, right):
            start = canvas.elapsed_at(x)
            end = canvas.elapsed_at(x + 1)
            multiple = math.ceil(start / interval)
            if multiple * interval >= end:
                continue
            canvas.fill_rect(x, top, x, bottom, axis.line_colour)
            if axis.label_frequency and count % axis.label_frequency == 0:
                self._time_label(canvas, x, format_elapsed(multiple * interval))
            count += 1

    def _time_label(self, canvas: ChartCanvas, x: int, label: str) -> None:
        _, glyph_height = canvas.glyph_size
        if canvas.margin.bottom < glyph_height + LABEL_PADDING:
            return
        if x + canvas.text_width(label) > canvas.width:
            return
        y = canvas.height - canvas.margin.bottom + LABEL_PADDING
        canvas.text((x, y), label, self.time_axis.label_colour)

    def name(self) -> str:
        return "Grid()"
