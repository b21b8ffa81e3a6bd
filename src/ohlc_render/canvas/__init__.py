"""Pixel canvas, rasterizer and glyph renderer.

See :class:`ohlc_render.canvas.buffer.ChartCanvas` for the drawing
surface passed to every rendering layer.
"""

from .buffer import ChartCanvas, Margin
from .colour import pack_rgba, unpack_rgba

__all__ = ["ChartCanvas", "Margin", "pack_rgba", "unpack_rgba"]
