"""Position, color helpers and drawing primitives."""

import pytest

from holidaylights.graphics import (
    CenterPosition,
    Positions,
    apply_brightness,
    blend_brightness,
    calculate,
    draw_glyphs,
    draw_line,
    draw_rect,
    fill_polygon,
    format_rgb,
    hsv_to_rgb,
    parse_rgb,
    rgb,
)
from holidaylights.model import BLACK_CELL, Cell, Coordinates, Dimensions, Matrix


# ---------------------------------------------------------------------------
# Position
# ---------------------------------------------------------------------------

class TestPosition:

    @pytest.mark.parametrize("cw,ch,ew,eh", [
        (64, 64, 15, 15), (64, 64, 45, 30), (10, 7, 3, 2), (5, 5, 5, 5), (9, 9, 2, 1),
    ])
    def test_center_floors_remainder(self, cw, ch, ew, eh):
        offset = calculate(Positions.center(), Dimensions(cw, ch), Dimensions(ew, eh))
        assert offset == Coordinates((cw - ew) // 2, (ch - eh) // 2)

    def test_equal_sizes_give_origin(self):
        assert calculate(CenterPosition(), Dimensions(64, 64), Dimensions(64, 64)) == (0, 0)

    def test_static(self):
        assert calculate(Positions.static(3, -4), Dimensions(64, 64), Dimensions(1, 1)) == (3, -4)

    def test_center_horizontal_keeps_y(self):
        assert calculate(Positions.center_horizontal(53), Dimensions(64, 64), Dimensions(20, 8)) == (22, 53)

    def test_center_vertical_keeps_x(self):
        assert calculate(Positions.center_vertical(5), Dimensions(64, 64), Dimensions(20, 9)) == (5, 27)

    def test_unknown_variant_raises(self):
        with pytest.raises(TypeError):
            calculate("center", Dimensions(1, 1), Dimensions(1, 1))


# ---------------------------------------------------------------------------
# Color
# ---------------------------------------------------------------------------

class TestColor:

    def test_rgb_fills_missing_channels(self):
        color = rgb(10, None, 30)
        assert color[0] == 10 and color[2] == 30
        assert 0 <= color[1] <= 255

    def test_format_and_parse(self):
        assert format_rgb((1, 2, 3)) == "rgb(1, 2, 3)"
        assert parse_rgb("rgb(45, 45, 45)") == (45, 45, 45)
        assert parse_rgb("rgb(0,255,0)") == (0, 255, 0)
        assert parse_rgb("#ff6480") == (255, 100, 128)
        assert parse_rgb("red") is None

    def test_apply_brightness(self):
        assert apply_brightness((10, 20, 30), 255) == "rgb(10, 20, 30)"
        assert apply_brightness((10, 20, 30), 0) == "rgba(10, 20, 30, 0.0)"

    def test_blend_brightness(self):
        assert blend_brightness((200, 100, 50), 255) == (200, 100, 50)
        assert blend_brightness((200, 100, 50), 0) == (0, 0, 0)
        assert blend_brightness((200, 100, 0), 128) == (100, 50, 0)

    def test_hsv_primaries(self):
        assert hsv_to_rgb(0, 1, 1) == (255, 0, 0)
        assert hsv_to_rgb(120, 1, 1) == (0, 255, 0)
        assert hsv_to_rgb(240, 1, 1) == (0, 0, 255)

    def test_hsv_wraps_and_desaturates(self):
        assert hsv_to_rgb(360 + 60, 1, 1) == (255, 255, 0)
        assert hsv_to_rgb(-120, 1, 1) == (0, 0, 255)
        assert hsv_to_rgb(200, 0, 0.5) == (128, 128, 128)
        assert hsv_to_rgb(30, 1, 1) == (255, 128, 0)


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

class TestPrimitives:

    def test_draw_rect_clips(self):
        matrix = Matrix(Dimensions(4, 4))
        draw_rect(matrix, 2, 2, 5, 5, (1, 1, 1))
        assert matrix.get(3, 3) == Cell((1, 1, 1))
        assert matrix.get(1, 1) == BLACK_CELL

    def test_draw_rect_outline(self):
        matrix = Matrix(Dimensions(5, 5))
        draw_rect(matrix, 0, 0, 5, 5, (1, 1, 1), filled=False)
        assert matrix.get(0, 2) == Cell((1, 1, 1))
        assert matrix.get(2, 2) == BLACK_CELL

    def test_draw_line_endpoints(self):
        matrix = Matrix(Dimensions(8, 8))
        draw_line(matrix, 0, 0, 7, 3, (5, 5, 5))
        assert matrix.get(0, 0).color == (5, 5, 5)
        assert matrix.get(7, 3).color == (5, 5, 5)

    def test_fill_polygon_square(self):
        matrix = Matrix(Dimensions(10, 10))
        fill_polygon(matrix, [(2, 2), (7, 2), (7, 7), (2, 7)], (9, 9, 9), 150)
        assert matrix.get(4, 4) == Cell((9, 9, 9), 150)
        assert matrix.get(0, 0) == BLACK_CELL

    def test_draw_glyphs_returns_width(self):
        glyphs = {"A": [[1, 1], [1, 0]]}
        matrix = Matrix(Dimensions(10, 3))
        width = draw_glyphs(matrix, "aa", 0, 0, (1, 2, 3), glyphs)
        assert width == 6
        assert matrix.get(3, 0).color == (1, 2, 3)
        assert matrix.get(1, 1) == BLACK_CELL
