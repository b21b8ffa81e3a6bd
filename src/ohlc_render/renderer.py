"""Deterministic OHLC chart renderer.

This module wires the pieces together: the bar series is validated,
summarised and mapped onto a freshly allocated :class:`ChartCanvas`,
then every layer draws into it in a fixed order:

1. grid lines,
2. candles,
3. current-value line and marker,
4. extension layers from ``RenderOptions.layers``, in registration order,
5. the title.

Layers share the canvas and later layers overwrite earlier ones at
the same pixel.  Rendering never consults the clock or any random
source, so identical options and data produce byte-identical images.
The per-layer timings logged at DEBUG level are diagnostics only.
"""

from __future__ import annotations

import logging
import tempfile
import time
from pathlib import Path
from typing import Any, Callable, List, Sequence, Union

from .canvas.buffer import ChartCanvas
from .codec import write_png
from .data.models import Candle
from .data.summary import summarize
from .data.validation import validate_series
from .errors import ResourceError
from .layers.base import Layer
from .layers.candles import CandleLayer
from .layers.grid import GridLines
from .layers.markers import CurrentValueLayer
from .layers.text import TitleLayer
from .options import RenderOptions

logger = logging.getLogger(__name__)

# File name used inside the staging directory created by ``render``.
STAGED_FILE_NAME = "chart.png"


def build_pipeline(options: RenderOptions) -> List[Layer]:
    """Return the layers for ``options`` in execution order."""
    pipeline: List[Layer] = [
        GridLines(options.price_axis, options.time_axis, options.value_prefix, options.value_suffix),
        CandleLayer(options.up_colour, options.down_colour),
        CurrentValueLayer(options.current_value_colour),
    ]
    pipeline.extend(options.layers)
    pipeline.append(TitleLayer(options.title, options.text_colour))
    return pipeline


def render_canvas(options: RenderOptions, series: Sequence[Candle]) -> ChartCanvas:
    """Run the full layer pipeline and return the finished canvas.

    Raises:
        DataValidationError: If the series is empty or a bar violates
            the OHLC ordering.  Raised before any canvas is allocated.
    """
    validate_series(series)
    summary = summarize(series)
    canvas = ChartCanvas(
        width=options.width,
        height=options.height,
        margin=options.margin,
        high=summary.high,
        low=summary.low,
        time_span=options.time_units * len(series),
        time_units=options.time_units,
        background=options.background_colour,
        glyph_scale=options.glyph_scale,
    )
    started = time.perf_counter()
    for layer in build_pipeline(options):
        layer_started = time.perf_counter()
        layer.apply(canvas, series)
        logger.debug("layer %s applied in %.3f ms", layer.name(), (time.perf_counter() - layer_started) * 1000)
    logger.debug(
        "rendered %d bars onto %dx%d canvas in %.3f ms",
        len(series),
        canvas.width,
        canvas.height,
        (time.perf_counter() - started) * 1000,
    )
    return canvas


def render_and_save(options: RenderOptions, series: Sequence[Candle], destination: Union[str, Path]) -> Path:
    """Render the chart and write it as an RGB PNG to ``destination``.

    Raises:
        DataValidationError: On invalid input; nothing is written.
        CodecError: If the image cannot be encoded or written.
    """
    canvas = render_canvas(options, series)
    return write_png(canvas.buffer, destination)


def render(options: RenderOptions, series: Sequence[Candle], on_complete: Callable[[Path], Any]) -> Any:
    """Render into a temporary directory and hand the file to ``on_complete``.

    ``on_complete`` is called synchronously with the path of the
    rendered PNG while it still exists.  The temporary directory is
    removed afterwards on every exit path, including when the callback
    raises.  Do not keep the path or hand it to asynchronous work.

    Returns:
        Whatever ``on_complete`` returns.

    Raises:
        DataValidationError: On invalid input, before any directory is
            created.
        ResourceError: If the temporary directory cannot be created.
        CodecError: If the image cannot be encoded or written.
    """
    canvas = render_canvas(options, series)
    try:
        staging = tempfile.TemporaryDirectory(prefix="ohlc-render-")
    except OSError as exc:
        raise ResourceError(f"Could not create staging directory: {exc}") from exc
    with staging as tmp:
        path = write_png(canvas.buffer, Path(tmp) / STAGED_FILE_NAME)
        return on_complete(path)
