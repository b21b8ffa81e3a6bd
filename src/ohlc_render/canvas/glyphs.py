"""Fixed-pitch bitmap text rendering.

Glyphs come from the 5x7 table in :mod:`ohlc_render.canvas.font`,
enlarged by an integer scale factor and expanded into coverage grids
(``0`` = background, ``255`` = ink).  Coverage tables are built once
per scale on first use and shared process-wide; callers must treat the
returned arrays as read-only.

Text never reads the destination pixels.  Every glyph pixel is the
per-channel interpolation between the configured background colour and
the ink colour, so labels are meant to sit on flat background (the
chart margins).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Tuple

import numpy as np

from .colour import is_transparent, to_rgb
from .font import FIRST_CHAR, GLYPH_COLUMNS, GLYPH_ROWS, GLYPHS_5X7, LAST_CHAR


@lru_cache(maxsize=None)
def glyph_table(scale: int = 1) -> Dict[str, np.ndarray]:
    """Return the coverage grid for every printable character at ``scale``."""
    if scale < 1:
        raise ValueError(f"Glyph scale must be >= 1, got {scale}")
    table: Dict[str, np.ndarray] = {}
    for offset, columns in enumerate(GLYPHS_5X7):
        grid = np.zeros((GLYPH_ROWS, GLYPH_COLUMNS), dtype=np.uint8)
        for col, bits in enumerate(columns):
            for row in range(GLYPH_ROWS):
                if bits & (1 << row):
                    grid[row, col] = 255
        grid = np.kron(grid, np.ones((scale, scale), dtype=np.uint8))
        grid.setflags(write=False)
        table[chr(FIRST_CHAR + offset)] = grid
    return table


def glyph_for(char: str, scale: int = 1) -> np.ndarray:
    """Coverage grid for ``char``; non-printable characters map to space."""
    code = ord(char)
    if code < FIRST_CHAR or code > LAST_CHAR:
        char = " "
    return glyph_table(scale)[char]


def glyph_size(scale: int = 1) -> Tuple[int, int]:
    """``(pitch, height)`` in pixels; pitch includes one column of spacing."""
    return (GLYPH_COLUMNS + 1) * scale, GLYPH_ROWS * scale


def text_width(text: str, scale: int = 1) -> int:
    pitch, _ = glyph_size(scale)
    return pitch * len(text)


def composite(coverage: np.ndarray, ink: Tuple[int, int, int], background: Tuple[int, int, int]) -> np.ndarray:
    """Blend a coverage grid into an RGB tile.

    Each channel is ``round((c * ink + (255 - c) * bg) / 255)``.
    """
    cov = coverage.astype(np.int32)[:, :, None]
    ink_arr = np.asarray(ink, dtype=np.int32)
    bg_arr = np.asarray(background, dtype=np.int32)
    return ((cov * ink_arr + (255 - cov) * bg_arr + 127) // 255).astype(np.uint8)


def draw_text(
    buffer: np.ndarray,
    origin: Tuple[int, int],
    text: str,
    colour: int,
    background: int,
    scale: int = 1,
) -> None:
    """Blit ``text`` with its top-left corner at ``origin``.

    Glyphs that fall partially outside the buffer are clipped.
    """
    if is_transparent(colour):
        return
    ink = to_rgb(colour)
    bg = to_rgb(background)
    pitch, _ = glyph_size(scale)
    height, width = buffer.shape[:2]
    x, y = int(origin[0]), int(origin[1])
    for char in text:
        tile = composite(glyph_for(char, scale), ink, bg)
        th, tw = tile.shape[:2]
        # Clip the tile against the buffer edges.
        sx0 = max(0, -x)
        sy0 = max(0, -y)
        sx1 = min(tw, width - x)
        sy1 = min(th, height - y)
        if sx0 < sx1 and sy0 < sy1:
            buffer[y + sy0:y + sy1, x + sx0:x + sx1] = tile[sy0:sy1, sx0:sx1]
        x += pitch
