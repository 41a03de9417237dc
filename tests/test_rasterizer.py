"""Tests for rasterizer.py — axis-aligned strokes and sampled diagonals."""

from plotter_text.backend import TextDrawingBackend
from plotter_text.cell import CROSS, EMPTY, HLINE, PIXEL, VLINE
from plotter_text.config import BackendConfig
from plotter_text.rasterizer import rasterize_line
from plotter_text.types import TRANSPARENT, Color, ShapeStyle

STYLE = ShapeStyle()


def _drawn(backend: TextDrawingBackend) -> set[tuple[int, int]]:
    w = backend.size_x
    return {(i % w, i // w) for i, state in enumerate(backend.pixels) if state != EMPTY}


class TestVerticalLine:
    def test_far_endpoint_excluded(self):
        b = TextDrawingBackend(10, 10)
        b.draw_line((2, 1), (2, 4), STYLE)
        for y in (1, 2, 3):
            assert b.canvas.get(2, y) == VLINE, f"y={y}"
        assert b.canvas.get(2, 0) == EMPTY
        assert b.canvas.get(2, 4) == EMPTY
        assert _drawn(b) == {(2, 1), (2, 2), (2, 3)}

    def test_reversed_endpoints(self):
        b = TextDrawingBackend(10, 10)
        b.draw_line((2, 4), (2, 1), STYLE)
        assert _drawn(b) == {(2, 1), (2, 2), (2, 3)}

    def test_zero_length_draws_nothing(self):
        b = TextDrawingBackend(10, 10)
        b.draw_line((3, 3), (3, 3), STYLE)
        assert _drawn(b) == set()

    def test_off_canvas_column_is_clipped(self):
        b = TextDrawingBackend(10, 10)
        b.draw_line((12, 1), (12, 5), STYLE)
        assert _drawn(b) == set()

    def test_rows_past_bottom_are_clipped(self):
        b = TextDrawingBackend(10, 10)
        b.draw_line((0, 8), (0, 20), STYLE)
        assert _drawn(b) == {(0, 8), (0, 9)}


class TestHorizontalLine:
    def test_far_endpoint_excluded(self):
        b = TextDrawingBackend(10, 10)
        b.draw_line((1, 3), (5, 3), STYLE)
        assert _drawn(b) == {(1, 3), (2, 3), (3, 3), (4, 3)}
        assert b.canvas.get(1, 3) == HLINE

    def test_negative_start_is_clipped(self):
        b = TextDrawingBackend(10, 10)
        b.draw_line((-1, 2), (3, 2), STYLE)
        assert _drawn(b) == {(0, 2), (1, 2), (2, 2)}

    def test_crossing_lines_make_cross(self):
        b = TextDrawingBackend(10, 10)
        b.draw_line((0, 2), (6, 2), STYLE)
        b.draw_line((3, 0), (3, 6), STYLE)
        assert b.canvas.get(3, 2) == CROSS
        assert b.canvas.get(3, 1) == VLINE
        assert b.canvas.get(4, 2) == HLINE


class TestRowStride:
    def test_default_stride_is_canvas_width(self):
        b = TextDrawingBackend(10, 10)
        assert b.row_stride == 10

    def test_legacy_stride_clips_lines_below_first_row(self):
        # With a 100-cell stride, row 1 of a 10x10 canvas starts past the grid.
        b = TextDrawingBackend(config=BackendConfig.legacy(10, 10))
        assert b.row_stride == 100
        b.draw_line((2, 1), (2, 4), STYLE)
        assert _drawn(b) == set()

    def test_legacy_stride_first_row_still_drawn(self):
        b = TextDrawingBackend(config=BackendConfig.legacy(10, 10))
        b.draw_line((1, 0), (5, 0), STYLE)
        assert _drawn(b) == {(1, 0), (2, 0), (3, 0), (4, 0)}

    def test_legacy_stride_matches_default_at_width_100(self):
        legacy = TextDrawingBackend(config=BackendConfig.legacy(100, 5))
        default = TextDrawingBackend(100, 5)
        for b in (legacy, default):
            b.draw_line((2, 1), (2, 4), STYLE)
            b.draw_line((0, 2), (7, 2), STYLE)
        assert legacy.pixels == default.pixels


class TestRasterizeLine:
    def test_shallow_line_samples(self):
        samples = list(rasterize_line((0, 0), (4, 2)))
        assert samples == [
            ((0, 0), 1.0),
            ((0, 1), 0.0),
            ((1, 0), 0.5),
            ((1, 1), 0.5),
            ((2, 1), 1.0),
            ((2, 2), 0.0),
            ((3, 1), 0.5),
            ((3, 2), 0.5),
            ((4, 2), 1.0),
            ((4, 3), 0.0),
        ]

    def test_steep_line_swaps_axes(self):
        samples = list(rasterize_line((0, 0), (2, 4)))
        assert samples[:4] == [((0, 0), 1.0), ((1, 0), 0.0), ((0, 1), 0.5), ((1, 1), 0.5)]
        assert samples[-2] == ((2, 4), 1.0)

    def test_direction_independent(self):
        assert list(rasterize_line((4, 2), (0, 0))) == list(rasterize_line((0, 0), (4, 2)))


class TestDiagonalLine:
    def test_pixels_above_threshold(self):
        b = TextDrawingBackend(10, 10)
        b.draw_line((0, 0), (4, 2), STYLE)
        assert _drawn(b) == {(0, 0), (1, 0), (1, 1), (2, 1), (3, 1), (3, 2), (4, 2)}
        assert all(b.canvas.get(x, y) == PIXEL for x, y in _drawn(b))

    def test_partial_alpha_drops_half_covered_cells(self):
        b = TextDrawingBackend(10, 10)
        b.draw_line((0, 0), (4, 2), ShapeStyle(color=Color(0, 0, 0, 0.5)))
        assert _drawn(b) == {(0, 0), (2, 1), (4, 2)}

    def test_transparent_draws_nothing(self):
        b = TextDrawingBackend(10, 10)
        b.draw_line((0, 0), (4, 2), ShapeStyle(color=TRANSPARENT))
        assert _drawn(b) == set()

    def test_zero_stroke_width_draws_nothing(self):
        b = TextDrawingBackend(10, 10)
        b.draw_line((0, 0), (4, 2), ShapeStyle(stroke_width=0))
        assert _drawn(b) == set()

    def test_pixel_over_stroke(self):
        b = TextDrawingBackend(10, 10)
        b.draw_line((0, 0), (5, 0), STYLE)
        b.draw_line((0, 0), (4, 2), STYLE)
        assert b.canvas.get(1, 0) == PIXEL
        assert b.canvas.get(2, 0) == HLINE

    def test_line_entering_from_above(self):
        # y = -3 + x / 2 only reaches row 0 at x = 5.
        b = TextDrawingBackend(10, 10)
        b.draw_line((0, -3), (6, 0), STYLE)
        assert _drawn(b) == {(5, 0), (6, 0)}

    def test_line_entering_from_left(self):
        b = TextDrawingBackend(10, 10)
        b.draw_line((-4, 0), (4, 4), STYLE)
        assert (0, 2) in _drawn(b)
        assert all(x >= 0 for x, _ in _drawn(b))

    def test_far_off_canvas_line(self):
        b = TextDrawingBackend(10, 10)
        b.draw_line((0, 0), (3_000_000, 5), STYLE)
        assert _drawn(b) == {(x, 0) for x in range(10)}


class TestClippedRasterizeLine:
    def test_negative_minor_coordinate_uses_floor(self):
        samples = dict(rasterize_line((0, -3), (6, 0)))
        assert samples[(5, -1)] == 0.5
        assert samples[(5, 0)] == 0.5
        assert (5, 1) not in samples

    def test_walk_limited_to_grid(self):
        samples = list(rasterize_line((0, 0), (3_000_000, 5), size=(10, 10)))
        assert len(samples) <= 2 * 10
        assert {pos for pos, cov in samples if cov > 0.3} == {(x, 0) for x in range(10)}

    def test_walk_limited_on_minor_axis(self):
        samples = list(rasterize_line((-1_000_000, -1_000_000), (1_000_000, 1_000_005), size=(10, 10)))
        assert 0 < len(samples) <= 2 * 12

    def test_entirely_off_grid(self):
        assert list(rasterize_line((0, -1000), (50, -500), size=(10, 10))) == []

    def test_steep_walk_limited_to_grid(self):
        samples = list(rasterize_line((0, 0), (5, 3_000_000), size=(10, 10)))
        assert {pos for pos, cov in samples if cov > 0.3} == {(0, y) for y in range(10)}

    def test_unclipped_matches_clipped_inside_grid(self):
        inside = [s for s in rasterize_line((0, 0), (4, 2)) if 0 <= s[0][0] < 10 and 0 <= s[0][1] < 10]
        assert list(rasterize_line((0, 0), (4, 2), size=(10, 10))) == inside
