"""Matrix, Cell and Dimensions."""

import numpy as np
import pytest

from holidaylights.model import BLACK, BLACK_CELL, Cell, Coordinates, Dimensions, Matrix


# ---------------------------------------------------------------------------
# Dimensions
# ---------------------------------------------------------------------------

class TestDimensions:

    def test_square(self):
        assert Dimensions.square(64) == Dimensions(64, 64)

    def test_of(self):
        assert Dimensions.of(3, 5) == Dimensions(3, 5)

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            Dimensions(-1, 4)

    @pytest.mark.parametrize("container,element,expected", [
        (Dimensions(64, 64), Dimensions(15, 15), Coordinates(24, 24)),
        (Dimensions(10, 10), Dimensions(3, 4), Coordinates(3, 3)),
        (Dimensions(8, 8), Dimensions(8, 8), Coordinates(0, 0)),
        (Dimensions(4, 4), Dimensions(7, 7), Coordinates(-2, -2)),
    ])
    def test_center_offset_floors(self, container, element, expected):
        assert container.center_offset(element) == expected

    def test_contains_and_area(self):
        d = Dimensions(3, 2)
        assert d.area == 6
        assert d.contains(2, 1)
        assert not d.contains(3, 0)
        assert not d.contains(0, -1)


# ---------------------------------------------------------------------------
# Cell
# ---------------------------------------------------------------------------

class TestCell:

    def test_default_is_black_full_brightness(self):
        assert Cell() == Cell(BLACK, 255)

    def test_black_is_transparent_at_any_brightness(self):
        assert Cell(BLACK, 0).is_transparent
        assert Cell(BLACK, 255).is_transparent
        assert not Cell((0, 0, 1), 255).is_transparent

    def test_numpy_channels_normalized(self):
        cell = Cell(tuple(np.array([0, 0, 0], dtype=np.uint8)))
        assert cell.color == BLACK
        assert cell.is_transparent

    @pytest.mark.parametrize("brightness", [-1, 256, 300])
    def test_brightness_out_of_range_rejected(self, brightness):
        with pytest.raises(ValueError):
            Cell((1, 2, 3), brightness)

    @pytest.mark.parametrize("color", [(999, 0, 0), (0, -1, 0), (0, 0, 256)])
    def test_channel_out_of_range_rejected(self, color):
        with pytest.raises(ValueError):
            Cell(color)

    def test_range_limits_accepted(self):
        assert Cell((255, 255, 255), 255).brightness == 255
        assert Cell((0, 0, 0), 0).brightness == 0

    def test_with_brightness_validates(self):
        with pytest.raises(ValueError):
            Cell((1, 2, 3)).with_brightness(256)


# ---------------------------------------------------------------------------
# Matrix
# ---------------------------------------------------------------------------

class TestMatrix:

    @pytest.mark.parametrize("size", [Dimensions(1, 1), Dimensions(5, 3), Dimensions(0, 4)])
    def test_get_defined_only_inside_bounds(self, size):
        matrix = Matrix(size)
        assert (matrix.width, matrix.height) == (size.width, size.height)
        for y in range(-1, size.height + 1):
            for x in range(-1, size.width + 1):
                inside = 0 <= x < size.width and 0 <= y < size.height
                assert (matrix.get(x, y) is not None) == inside

    def test_set_out_of_bounds_declined(self):
        matrix = Matrix(Dimensions(2, 2))
        assert matrix.set(1, 1, Cell((1, 2, 3)))
        assert not matrix.set(2, 0, Cell((1, 2, 3)))
        assert not matrix.set(0, -1, Cell((1, 2, 3)))
        assert matrix.get(1, 1) == Cell((1, 2, 3))

    def test_default_fill_is_black(self):
        matrix = Matrix(Dimensions(3, 3))
        assert all(cell == BLACK_CELL for cell, _, _ in matrix)

    def test_initializer_receives_coordinates(self):
        matrix = Matrix(Dimensions(3, 2), lambda x, y: Cell((x, y, 0)))
        assert matrix.get(2, 1).color == (2, 1, 0)

    def test_iteration_order_is_row_major(self):
        matrix = Matrix(Dimensions(2, 2))
        assert [(x, y) for _, x, y in matrix] == [(0, 0), (1, 0), (0, 1), (1, 1)]

    def test_for_each_visits_every_cell(self):
        matrix = Matrix(Dimensions(3, 2), lambda x, y: Cell((x, y, 0)))
        seen = []
        matrix.for_each(lambda cell, x, y: seen.append((cell.color, x, y)))
        assert seen == [((x, y, 0), x, y) for y in range(2) for x in range(3)]

    def test_fill_with_cell_and_initializer(self):
        matrix = Matrix(Dimensions(2, 2))
        matrix.fill(Cell((9, 9, 9), 10))
        assert all(cell == Cell((9, 9, 9), 10) for cell, _, _ in matrix)

        matrix.fill(lambda x, y: Cell((x, y, 1)))
        assert matrix.get(1, 0).color == (1, 0, 1)

    def test_set_color_and_brightness_keep_other_field(self):
        matrix = Matrix(Dimensions(2, 2))
        matrix.set(0, 0, Cell((1, 1, 1), 50))
        assert matrix.set_color(0, 0, (7, 8, 9))
        assert matrix.get(0, 0) == Cell((7, 8, 9), 50)
        assert matrix.set_brightness(0, 0, 200)
        assert matrix.get(0, 0) == Cell((7, 8, 9), 200)
        assert not matrix.set_color(5, 5, (1, 1, 1))

    def test_copy_is_independent(self):
        matrix = Matrix(Dimensions(2, 2))
        clone = matrix.copy()
        clone.set(0, 0, Cell((1, 1, 1)))
        assert matrix.get(0, 0) == BLACK_CELL
        assert matrix != clone

    def test_to_buffer_applies_brightness(self):
        matrix = Matrix(Dimensions(2, 1))
        matrix.set(0, 0, Cell((200, 100, 50), 255))
        matrix.set(1, 0, Cell((200, 100, 50), 0))

        buffer = matrix.to_buffer()
        assert buffer.shape == (1, 2, 3)
        assert buffer.dtype == np.uint8
        assert tuple(buffer[0, 0]) == (200, 100, 50)
        assert tuple(buffer[0, 1]) == (0, 0, 0)

        raw = matrix.to_buffer(apply_brightness=False)
        assert tuple(raw[0, 1]) == (200, 100, 50)

    def test_from_buffer(self):
        buffer = np.zeros((2, 3, 3), dtype=np.uint8)
        buffer[1, 2] = (10, 20, 30)
        matrix = Matrix.from_buffer(buffer)
        assert matrix.dimensions == Dimensions(3, 2)
        assert matrix.get(2, 1) == Cell((10, 20, 30), 255)

    def test_to_dict_snapshot_shape(self):
        matrix = Matrix(Dimensions(1, 1), lambda x, y: Cell((1, 2, 3), 128))
        assert matrix.to_dict() == {
            "dimensions": {"width": 1, "height": 1},
            "cells": [[{"color": "rgb(1, 2, 3)", "brightness": 128}]],
        }
