"""
Configuration constants for the OHLC renderer.

This module centralises default values that are used across the
package.  Colours are packed 32-bit integers in ``0xRRGGBBAA`` order.
New values should be added here deliberately; the renderer output is
expected to be byte-identical for identical inputs, so changing a
default changes every chart rendered with default options.
"""

from typing import Final

PROJECT_NAME: Final[str] = "ohlc-render"

# Canvas geometry in pixels.
DEFAULT_WIDTH: Final[int] = 800
DEFAULT_HEIGHT: Final[int] = 600
DEFAULT_MARGIN_TOP: Final[int] = 30
DEFAULT_MARGIN_BOTTOM: Final[int] = 30
DEFAULT_MARGIN_LEFT: Final[int] = 70
DEFAULT_MARGIN_RIGHT: Final[int] = 20

# Duration represented by a single bar, in seconds.  Default is one hour.
DEFAULT_TIME_UNITS: Final[int] = 3600

# Colours (RGBA).
DEFAULT_BACKGROUND_COLOUR: Final[int] = 0xFFFFFFFF
DEFAULT_TEXT_COLOUR: Final[int] = 0x000000FF
DEFAULT_UP_COLOUR: Final[int] = 0x00C800FF
DEFAULT_DOWN_COLOUR: Final[int] = 0xDC0000FF
DEFAULT_CURRENT_VALUE_COLOUR: Final[int] = 0x0050DCFF
DEFAULT_GRID_COLOUR: Final[int] = 0xDCDCDCFF
DEFAULT_LABEL_COLOUR: Final[int] = 0x505050FF

# Integer pixel replication applied to the 5x7 source font.
DEFAULT_GLYPH_SCALE: Final[int] = 2

# Environment overrides read by ``RenderOptions.from_env``.
ENV_WIDTH: Final[str] = "OHLC_RENDER_WIDTH"
ENV_HEIGHT: Final[str] = "OHLC_RENDER_HEIGHT"
ENV_TIME_UNITS: Final[str] = "OHLC_RENDER_TIME_UNITS"

__all__ = [
    "PROJECT_NAME",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "DEFAULT_MARGIN_TOP",
    "DEFAULT_MARGIN_BOTTOM",
    "DEFAULT_MARGIN_LEFT",
    "DEFAULT_MARGIN_RIGHT",
    "DEFAULT_TIME_UNITS",
    "DEFAULT_BACKGROUND_COLOUR",
    "DEFAULT_TEXT_COLOUR",
    "DEFAULT_UP_COLOUR",
    "DEFAULT_DOWN_COLOUR",
    "DEFAULT_CURRENT_VALUE_COLOUR",
    "DEFAULT_GRID_COLOUR",
    "DEFAULT_LABEL_COLOUR",
    "DEFAULT_GLYPH_SCALE",
    "ENV_WIDTH",
    "ENV_HEIGHT",
    "ENV_TIME_UNITS",
]
