"""Text layers: the chart title and free-standing text overlays."""

from __future__ import annotations

from typing import Sequence, Tuple

from ..canvas.buffer import ChartCanvas
from ..data.models import Candle
from .base import Layer


class TitleLayer(Layer):
    """Chart title, left-aligned with the plot and centred in the top margin.

    Always runs last so nothing overwrites it.
    """

    def __init__(self, title: str, colour: int) -> None:
        self.title = title
        self.colour = colour

    def apply(self, canvas: ChartCanvas, series: Sequence[Candle]) -> None:
        if not self.title:
            return
        _, glyph_height = canvas.glyph_size
        y = max(0, (canvas.margin.top - glyph_height) // 2)
        canvas.text((canvas.margin.left, y), self.title, self.colour)

    def name(self) -> str:
        return f"Title({self.title!r})"


class TextOverlay(Layer):
    """Stamps a fixed string at a fixed pixel origin.

    Useful as a watermark or for checking glyph output by eye.
    """

    def __init__(self, origin: Tuple[int, int], text: str, colour: int) -> None:
        self.origin = origin
        self.text = text
        self.colour = colour

    def apply(self, canvas: ChartCanvas, series: Sequence[Candle]) -> None:
        canvas.text(self.origin, self.text, self.colour)

    def name(self) -> str:
        return f"Text({self.text!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextOverlay):
            return NotImplemented
        return (self.origin, self.text, self.colour) == (other.origin, other.text, other.colour)

    def __hash__(self) -> int:
        return hash((self.origin, self.text, self.colour))
