"""Tests for the coordinate mapper and rasterizer."""

from __future__ import annotations

import pytest

from ohlc_render.canvas.buffer import ChartCanvas, Margin
from ohlc_render.canvas.colour import blend_channel, pack_rgba, unpack_rgba
from ohlc_render.canvas.raster import bresenham, clip_segment

WHITE = 0xFFFFFFFF
RED = 0xFF0000FF
BLUE = 0x0000FFFF


def _canvas(high: float = 5.0, low: float = 0.0) -> ChartCanvas:
    # 80x40 drawable rectangle starting at (10, 10)
    return ChartCanvas(
        width=100,
        height=60,
        margin=Margin(top=10, bottom=10, left=10, right=10),
        high=high,
        low=low,
        time_span=100.0,
        time_units=10.0,
        background=WHITE,
    )


def test_canvas_is_filled_with_background() -> None:
    canvas = _canvas()
    assert canvas.buffer.shape == (60, 100, 3)
    assert (canvas.buffer == 255).all()


def test_to_pixel_corners_and_centre() -> None:
    canvas = _canvas()
    assert canvas.to_pixel(5.0, 0) == (10, 10)
    assert canvas.to_pixel(0.0, 100) == (90, 50)
    assert canvas.to_pixel(2.5, 50) == (50, 30)


def test_to_pixel_flat_series_uses_vertical_centre() -> None:
    canvas = _canvas(high=3.0, low=3.0)
    _, y = canvas.to_pixel(3.0, 0)
    assert y == 30


def test_to_pixel_clamps_x() -> None:
    canvas = _canvas()
    assert canvas.to_pixel(1.0, 500)[0] == 90
    assert canvas.to_pixel(1.0, -20)[0] == 10


def test_to_pixel_is_monotonic() -> None:
    canvas = _canvas()
    ys = [canvas.to_pixel(p / 10, 0)[1] for p in range(0, 51)]
    assert all(a >= b for a, b in zip(ys, ys[1:]))
    xs = [canvas.to_pixel(1.0, t)[0] for t in range(0, 101, 5)]
    assert all(a <= b for a, b in zip(xs, xs[1:]))


def test_inverse_mapping() -> None:
    canvas = _canvas()
    assert canvas.price_at(30) == pytest.approx(2.5)
    assert canvas.elapsed_at(50) == pytest.approx(50.0)


def test_invalid_geometry_rejected() -> None:
    with pytest.raises(ValueError):
        ChartCanvas(20, 20, Margin(left=10, right=10), 1, 0, 10, 1, WHITE)
    with pytest.raises(ValueError):
        ChartCanvas(20, 20, Margin(), 1, 0, 0, 1, WHITE)


def test_set_pixel_overwrites_and_skips_transparent() -> None:
    canvas = _canvas()
    canvas.set_pixel(3, 4, RED)
    assert canvas.pixel(3, 4) == (255, 0, 0)
    canvas.set_pixel(3, 4, 0x00FF0000)  # alpha 0
    assert canvas.pixel(3, 4) == (255, 0, 0)
    # Alpha is not a blend weight
    canvas.set_pixel(3, 4, 0x0000FF01)
    assert canvas.pixel(3, 4) == (0, 0, 255)


def test_set_pixel_out_of_bounds_is_ignored() -> None:
    canvas = _canvas()
    before = canvas.to_bytes()
    canvas.set_pixel(-1, 5, RED)
    canvas.set_pixel(100, 5, RED)
    canvas.set_pixel(5, 60, RED)
    assert canvas.to_bytes() == before


def test_bresenham_covers_all_directions() -> None:
    assert list(bresenham(0, 0, 3, 0)) == [(0, 0), (1, 0), (2, 0), (3, 0)]
    assert list(bresenham(3, 0, 0, 0)) == [(3, 0), (2, 0), (1, 0), (0, 0)]
    assert list(bresenham(0, 0, 2, 2)) == [(0, 0), (1, 1), (2, 2)]
    assert list(bresenham(4, 4, 4, 4)) == [(4, 4)]
    steep = list(bresenham(0, 0, 1, 3))
    assert steep[0] == (0, 0) and steep[-1] == (1, 3)
    assert {y for _, y in steep} == {0, 1, 2, 3}


def test_line_draws_every_pixel_between_endpoints() -> None:
    canvas = _canvas()
    canvas.line((20.0, 20.0), (20.2, 25.0), BLUE)
    for y in range(20, 26):
        assert canvas.pixel(20, y) == (0, 0, 255)
    canvas.line((30, 30), (30, 30), RED)
    assert canvas.pixel(30, 30) == (255, 0, 0)


def test_line_clips_outside_buffer() -> None:
    canvas = _canvas()
    canvas.line((-10, 5), (5, 5), RED)
    assert canvas.pixel(0, 5) == (255, 0, 0)
    assert canvas.pixel(5, 5) == (255, 0, 0)


def test_fill_rect_is_inclusive_and_clipped() -> None:
    canvas = _canvas()
    canvas.fill_rect(98, 58, 120, 70, RED)
    assert canvas.pixel(98, 58) == (255, 0, 0)
    assert canvas.pixel(99, 59) == (255, 0, 0)
    assert canvas.pixel(97, 58) == (255, 255, 255)
    canvas.fill_rect(5, 6, 2, 3, BLUE)
    assert canvas.pixel(2, 3) == (0, 0, 255)
    assert canvas.pixel(5, 6) == (0, 0, 255)


def test_colour_packing() -> None:
    assert unpack_rgba(0x11223344) == (0x11, 0x22, 0x33, 0x44)
    assert pack_rgba(0x11, 0x22, 0x33, 0x44) == 0x11223344
    assert pack_rgba(1, 2, 3) & 0xFF == 0xFF


def test_blend_channel_matches_rounded_formula() -> None:
    for coverage in (0, 1, 64, 128, 200, 255):
        for ink, bg in ((255, 0), (0, 255), (17, 200)):
            expected = round((coverage * ink + (255 - coverage) * bg) / 255)
            assert blend_channel(coverage, ink, bg) == expected


def test_clip_segment() -> None:
    assert clip_segment(20, 20, 20, 3_000_000, 99, 59) == pytest.approx((20, 20, 20, 59))
    assert clip_segment(-10, 5, 5, 5, 99, 59) == pytest.approx((0, 5, 5, 5), abs=1e-9)
    assert clip_segment(10, 10, 30, 40, 99, 59) == pytest.approx((10, 10, 30, 40))
    assert clip_segment(-5, -5, -1, 70, 99, 59) is None
    assert clip_segment(0, 100, 99, 100, 99, 59) is None


def test_line_with_far_off_canvas_endpoint_draws_visible_part() -> None:
    canvas = _canvas()
    canvas.line((20, 20), (20, 3_000_000_000), RED)
    assert all(canvas.pixel(20, y) == (255, 0, 0) for y in range(20, 60))
    assert canvas.pixel(20, 19) == (255, 255, 255)
    # Both endpoints far outside, crossing the buffer horizontally
    canvas.line((-10**12, 30), (10**12, 30), BLUE)
    assert canvas.pixel(0, 30) == (0, 0, 255)
    assert canvas.pixel(99, 30) == (0, 0, 255)


def test_line_entirely_outside_draws_nothing() -> None:
    canvas = _canvas()
    before = canvas.to_bytes()
    canvas.line((-50, -50), (-1, -10**9), RED)
    assert canvas.to_bytes() == before
