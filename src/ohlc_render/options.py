"""Render configuration.

:class:`RenderOptions` is an immutable description of how a chart is
drawn: canvas geometry, colours, axis grid settings, the time unit
represented by each bar and the ordered list of extension layers.
Every ``with_*`` method and :meth:`RenderOptions.add_layer` returns a
new instance, so a configured value can be shared and reused safely::

    options = (
        RenderOptions()
        .with_title("AAPL 1h")
        .with_price_axis(AxisOptions(line_interval=5.0, label_frequency=1))
        .add_layer(BollingerBands(20, 2, 0x0000FFFF))
    )
    options.render_and_save(bars, "chart.png")
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Sequence, Tuple, Union

from .canvas.buffer import Margin
from .config import (
    DEFAULT_BACKGROUND_COLOUR,
    DEFAULT_CURRENT_VALUE_COLOUR,
    DEFAULT_DOWN_COLOUR,
    DEFAULT_GLYPH_SCALE,
    DEFAULT_GRID_COLOUR,
    DEFAULT_HEIGHT,
    DEFAULT_LABEL_COLOUR,
    DEFAULT_MARGIN_BOTTOM,
    DEFAULT_MARGIN_LEFT,
    DEFAULT_MARGIN_RIGHT,
    DEFAULT_MARGIN_TOP,
    DEFAULT_TEXT_COLOUR,
    DEFAULT_TIME_UNITS,
    DEFAULT_UP_COLOUR,
    DEFAULT_WIDTH,
    ENV_HEIGHT,
    ENV_TIME_UNITS,
    ENV_WIDTH,
)

if TYPE_CHECKING:  # pragma: no cover
    from .data.models import Candle
    from .layers.base import Layer


@dataclass(frozen=True)
class AxisOptions:
    """Grid line and label settings for one axis.

    Attributes
    ----------
    line_colour : int
        RGBA colour of the grid lines.
    line_interval : float
        Spacing between grid lines, in price units for the price axis
        and seconds for the time axis.  ``0`` disables the lines.
    label_colour : int
        RGBA colour of the margin labels.
    label_frequency : int
        Label every Nth grid line.  ``0`` disables labels.
    """

    line_colour: int = DEFAULT_GRID_COLOUR
    line_interval: float = 0.0
    label_colour: int = DEFAULT_LABEL_COLOUR
    label_frequency: int = 0

    def __post_init__(self) -> None:
        if self.line_interval < 0:
            raise ValueError(f"line_interval must be >= 0, got {self.line_interval}")
        if self.label_frequency < 0:
            raise ValueError(f"label_frequency must be >= 0, got {self.label_frequency}")


@dataclass(frozen=True)
class RenderOptions:
    """Chart configuration consumed by the renderer.

    Attributes
    ----------
    title : str
        Drawn in the top margin after every other layer.
    text_colour : int
        RGBA colour of the title.
    value_prefix, value_suffix : str
        Wrapped around price labels (e.g. ``"$"`` or ``" USD"``).
    time_units : int
        Seconds represented by one bar.
    time_axis, price_axis : AxisOptions
        Vertical (time) and horizontal (price) grid settings.
    up_colour, down_colour : int
        Candle colours for rising and falling bars.
    current_value_colour : int
        Colour of the last-close line and marker.
    background_colour : int
        Canvas fill and text compositing colour.
    width, height : int
        Canvas size in pixels.
    margin : Margin
        Insets around the plotted area.
    glyph_scale : int
        Pixel replication factor for the bitmap font.
    layers : tuple of Layer
        Extension layers, run in order after the built-in layers.
    """

    title: str = ""
    text_colour: int = DEFAULT_TEXT_COLOUR
    value_prefix: str = ""
    value_suffix: str = ""
    time_units: int = DEFAULT_TIME_UNITS
    time_axis: AxisOptions = field(default_factory=AxisOptions)
    price_axis: AxisOptions = field(default_factory=AxisOptions)
    up_colour: int = DEFAULT_UP_COLOUR
    down_colour: int = DEFAULT_DOWN_COLOUR
    current_value_colour: int = DEFAULT_CURRENT_VALUE_COLOUR
    background_colour: int = DEFAULT_BACKGROUND_COLOUR
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    margin: Margin = field(
        default_factory=lambda: Margin(
            top=DEFAULT_MARGIN_TOP,
            bottom=DEFAULT_MARGIN_BOTTOM,
            left=DEFAULT_MARGIN_LEFT,
            right=DEFAULT_MARGIN_RIGHT,
        )
    )
    glyph_scale: int = DEFAULT_GLYPH_SCALE
    layers: Tuple["Layer", ...] = ()

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas size must be positive, got {self.width}x{self.height}")
        m = self.margin
        if min(m.top, m.bottom, m.left, m.right) < 0:
            raise ValueError("Margins must be non-negative")
        if m.left + m.right >= self.width or m.top + m.bottom >= self.height:
            raise ValueError("Margins leave no drawable area")
        if self.time_units <= 0:
            raise ValueError(f"time_units must be positive, got {self.time_units}")
        if self.glyph_scale < 1:
            raise ValueError(f"glyph_scale must be >= 1, got {self.glyph_scale}")

    @classmethod
    def from_env(cls) -> "RenderOptions":
        """Default options with size and time unit overridden from the environment."""
        overrides = {}
        for env, key in ((ENV_WIDTH, "width"), (ENV_HEIGHT, "height"), (ENV_TIME_UNITS, "time_units")):
            value = os.getenv(env)
            if value:
                try:
                    overrides[key] = int(value)
                except ValueError as exc:
                    raise ValueError(f"{env} must be an integer, got {value!r}") from exc
        return cls(**overrides)

    # Builder methods -------------------------------------------------
    def with_title(self, title: str) -> "RenderOptions":
        return replace(self, title=title)

    def with_text_colour(self, colour: int) -> "RenderOptions":
        return replace(self, text_colour=colour)

    def with_value_prefix(self, prefix: str) -> "RenderOptions":
        return replace(self, value_prefix=prefix)

    def with_value_suffix(self, suffix: str) -> "RenderOptions":
        return replace(self, value_suffix=suffix)

    def with_time_units(self, seconds: int) -> "RenderOptions":
        return replace(self, time_units=seconds)

    def with_time_axis(self, axis: AxisOptions) -> "RenderOptions":
        return replace(self, time_axis=axis)

    def with_price_axis(self, axis: AxisOptions) -> "RenderOptions":
        return replace(self, price_axis=axis)

    def with_up_colour(self, colour: int) -> "RenderOptions":
        return replace(self, up_colour=colour)

    def with_down_colour(self, colour: int) -> "RenderOptions":
        return replace(self, down_colour=colour)

    def with_current_value_colour(self, colour: int) -> "RenderOptions":
        return replace(self, current_value_colour=colour)

    def with_background_colour(self, colour: int) -> "RenderOptions":
        return replace(self, background_colour=colour)

    def with_size(self, width: int, height: int) -> "RenderOptions":
        return replace(self, width=width, height=height)

    def with_margin(self, margin: Margin) -> "RenderOptions":
        return replace(self, margin=margin)

    def with_glyph_scale(self, scale: int) -> "RenderOptions":
        return replace(self, glyph_scale=scale)

    def add_layer(self, layer: "Layer") -> "RenderOptions":
        return replace(self, layers=self.layers + (layer,))

    # Rendering -------------------------------------------------------
    def render(self, series: Sequence["Candle"], on_complete: Callable[[Path], Any]) -> Any:
        """See :func:`ohlc_render.renderer.render`."""
        from .renderer import render  # local import to avoid a cycle

        return render(self, series, on_complete)

    def render_and_save(self, series: Sequence["Candle"], destination: Union[str, Path]) -> Path:
        """See :func:`ohlc_render.renderer.render_and_save`."""
        from .renderer import render_and_save  # local import to avoid a cycle

        return render_and_save(self, series, destination)
