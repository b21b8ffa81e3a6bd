"""Layer interface for the rendering pipeline.

A layer is a self-contained drawing step.  It receives the shared
:class:`~ohlc_render.canvas.buffer.ChartCanvas` and the bar series and
draws directly into the canvas.  Layers run strictly in sequence, so a
later layer overwrites whatever an earlier one drew at the same pixel.

To add an indicator overlay, subclass :class:`Layer`, implement
:meth:`Layer.apply` and register an instance with
``RenderOptions.add_layer``.  Extension layers run after the built-in
grid, candle and current-value layers, in registration order, and
before the title.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..canvas.buffer import ChartCanvas
from ..data.models import Candle


class Layer(ABC):
    """Abstract rendering layer."""

    @abstractmethod
    def apply(self, canvas: ChartCanvas, series: Sequence[Candle]) -> None:
        """Draw this layer into ``canvas``."""

    def legend_colour(self) -> Optional[int]:
        """Colour representing this layer in a legend, if any."""
        return None

    def name(self) -> str:
        return type(self).__name__

    def __repr__(self) -> str:
        return f"<{self.name()}>"


def bar_slot(canvas: ChartCanvas, count: int) -> int:
    """Horizontal pixels available per bar, floored."""
    return canvas.drawable_width // count


def bar_left(canvas: ChartCanvas, index: int) -> int:
    """Left pixel column of bar ``index``."""
    x, _ = canvas.to_pixel(canvas.high, index * canvas.time_units)
    return int(x)


def bar_centre_time(canvas: ChartCanvas, index: int) -> float:
    """Elapsed seconds at the horizontal centre of bar ``index``."""
    return (index + 0.5) * canvas.time_units
