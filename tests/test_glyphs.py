"""Tests for the bitmap glyph renderer."""

from __future__ import annotations

import numpy as np

from ohlc_render.canvas.buffer import ChartCanvas, Margin
from ohlc_render.canvas.glyphs import composite, draw_text, glyph_for, glyph_size, glyph_table, text_width

WHITE = 0xFFFFFFFF
BLACK = 0x000000FF


def test_table_covers_printable_ascii() -> None:
    table = glyph_table(1)
    assert len(table) == 0x7E - 0x20 + 1
    assert all(grid.shape == (7, 5) for grid in table.values())
    assert not table[" "].any()


def test_table_is_built_once_and_read_only() -> None:
    assert glyph_table(2) is glyph_table(2)
    assert not glyph_table(1)["A"].flags.writeable


def test_exclamation_mark_bits() -> None:
    grid = glyph_table(1)["!"]
    # Column byte 0x5F: rows 0-4 and 6 set, row 5 clear
    assert grid[:, 2].tolist() == [255, 255, 255, 255, 255, 0, 255]
    assert not grid[:, 0].any()


def test_non_printable_characters_render_as_space() -> None:
    space = glyph_for(" ")
    assert np.array_equal(glyph_for("\n"), space)
    assert np.array_equal(glyph_for("\x7f"), space)
    assert np.array_equal(glyph_for("é"), space)


def test_scaled_glyph_size() -> None:
    assert glyph_table(2)["A"].shape == (14, 10)
    assert glyph_size(2) == (12, 14)
    assert text_width("abc", 2) == 36


def test_composite_interpolates_per_channel() -> None:
    coverage = np.array([[0, 128, 255]], dtype=np.uint8)
    tile = composite(coverage, (255, 0, 0), (0, 0, 255))
    assert tile[0, 0].tolist() == [0, 0, 255]
    assert tile[0, 1].tolist() == [128, 0, 127]
    assert tile[0, 2].tolist() == [255, 0, 0]


def test_text_composites_against_background_not_destination() -> None:
    buffer = np.zeros((20, 20, 3), dtype=np.uint8)
    buffer[:, :] = (1, 2, 3)
    draw_text(buffer, (0, 0), "A", BLACK, WHITE)
    # Column 0 of "A" is 0x7E: row 0 clear, row 1 set
    assert buffer[0, 0].tolist() == [255, 255, 255]
    assert buffer[1, 0].tolist() == [0, 0, 0]
    # The spacing column after the glyph is left alone
    assert buffer[0, 5].tolist() == [1, 2, 3]


def test_text_advances_by_fixed_pitch() -> None:
    buffer = np.zeros((10, 20, 3), dtype=np.uint8)
    draw_text(buffer, (0, 0), "II", BLACK, WHITE)
    # "I" has a full-height stroke in column 2
    for x in (2, 8):
        assert all(buffer[y, x].tolist() == [0, 0, 0] for y in range(7))


def test_transparent_ink_draws_nothing() -> None:
    buffer = np.zeros((10, 10, 3), dtype=np.uint8)
    draw_text(buffer, (0, 0), "A", 0x00000000, WHITE)
    assert not buffer.any()


def test_text_is_clipped_at_edges() -> None:
    buffer = np.zeros((10, 10, 3), dtype=np.uint8)
    draw_text(buffer, (-3, -2), "AB", BLACK, WHITE)
    draw_text(buffer, (8, 8), "AB", BLACK, WHITE)
    assert buffer.shape == (10, 10, 3)


def test_canvas_text_uses_canvas_scale_and_background() -> None:
    canvas = ChartCanvas(
        width=40,
        height=30,
        margin=Margin(),
        high=1.0,
        low=0.0,
        time_span=1.0,
        time_units=1.0,
        background=0x102030FF,
        glyph_scale=2,
    )
    canvas.fill_rect(0, 0, 39, 29, 0xFF0000FF)
    canvas.text((0, 0), "I", 0xFFFFFFFF)
    # Column 0 of "I" is empty: composited against the canvas background
    assert canvas.pixel(0, 0) == (0x10, 0x20, 0x30)
    # Column 2 (pixels 4-5 at scale 2) is full height
    assert canvas.pixel(4, 13) == (255, 255, 255)
    assert canvas.pixel(5, 0) == (255, 255, 255)
