"""CompositeImager layout and transparency rules."""

from typing import List, Optional, Tuple

import pytest

from holidaylights.graphics.position import Positions
from holidaylights.imagers import CompositeImager, Imager, RandomImage
from holidaylights.model import BLACK, Cell, Color, Dimensions, Matrix

GRAY: Color = (45, 45, 45)


class SolidImager(Imager):
    """Fixed-size block of one color."""

    def __init__(self, dimensions: Dimensions, color: Color, brightness: int = 255) -> None:
        self.dimensions = dimensions
        self.cell = Cell(color, brightness)

    def get_matrix(self, frame: int, previous_matrix: Optional[Matrix]) -> Matrix:
        return Matrix(self.dimensions, lambda x, y: self.cell)


class RecordingImager(SolidImager):
    """Remembers every (frame, previous_matrix) it was asked for."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.calls: List[Tuple[int, Optional[Matrix]]] = []

    def get_matrix(self, frame: int, previous_matrix: Optional[Matrix]) -> Matrix:
        self.calls.append((frame, previous_matrix))
        return super().get_matrix(frame, previous_matrix)


def colors(matrix: Matrix):
    return {(x, y): cell.color for cell, x, y in matrix}


# ---------------------------------------------------------------------------
# Background and builder
# ---------------------------------------------------------------------------

class TestBackground:

    def test_no_layers_is_background_everywhere(self):
        matrix = CompositeImager(Dimensions(7, 5), GRAY).get_matrix(0, None)
        assert matrix.dimensions == Dimensions(7, 5)
        assert all(cell == Cell(GRAY, 255) for cell, _, _ in matrix)

    def test_default_size_and_color(self):
        matrix = CompositeImager().get_matrix(0, None)
        assert matrix.dimensions == Dimensions.square(64)
        assert matrix.get(10, 10) == Cell(BLACK, 255)


class TestBuilder:

    def test_add_is_chainable_and_counted(self):
        composite = CompositeImager(Dimensions.square(4))
        result = composite.add_imager(SolidImager(Dimensions(1, 1), (1, 1, 1))).add_imager(
            SolidImager(Dimensions(1, 1), (2, 2, 2))
        )
        assert result is composite
        assert composite.layer_count() == 2

    def test_pop_removes_top_layer(self):
        composite = CompositeImager(Dimensions.square(2))
        composite.add_imager(SolidImager(Dimensions(2, 2), (1, 1, 1)))
        composite.add_imager(SolidImager(Dimensions(2, 2), (2, 2, 2)))

        layer = composite.pop()
        assert layer.imager.cell.color == (2, 2, 2)
        assert composite.get_matrix(0, None).get(0, 0).color == (1, 1, 1)

    def test_pop_empty_returns_none(self):
        assert CompositeImager().pop() is None

    def test_clear(self):
        composite = CompositeImager(Dimensions.square(2), GRAY)
        composite.add_imager(SolidImager(Dimensions(2, 2), (1, 1, 1)))
        composite.clear()
        assert composite.layer_count() == 0
        assert composite.get_matrix(0, None).get(1, 1).color == GRAY


# ---------------------------------------------------------------------------
# Merging
# ---------------------------------------------------------------------------

class TestMerge:

    def test_all_black_layer_changes_nothing(self):
        base = CompositeImager(Dimensions.square(8), GRAY)
        base.add_imager(SolidImager(Dimensions(3, 3), (200, 0, 0)), Positions.static(1, 1))
        expected = base.get_matrix(0, None)

        base.add_imager(SolidImager(Dimensions.square(8), BLACK), Positions.static(0, 0))
        assert base.get_matrix(0, None) == expected

    def test_black_skipped_regardless_of_brightness(self):
        composite = CompositeImager(Dimensions.square(2), GRAY)
        composite.add_imager(SolidImager(Dimensions.square(2), BLACK, brightness=0))
        assert composite.get_matrix(0, None).get(0, 0) == Cell(GRAY, 255)

    def test_later_layer_wins_on_overlap(self):
        composite = CompositeImager(Dimensions.square(6), GRAY)
        composite.add_imager(SolidImager(Dimensions(4, 4), (255, 0, 0)), Positions.static(0, 0))
        composite.add_imager(SolidImager(Dimensions(4, 4), (0, 0, 255)), Positions.static(2, 2))
        result = colors(composite.get_matrix(0, None))

        assert result[(1, 1)] == (255, 0, 0)
        for x in range(2, 4):
            for y in range(2, 4):
                assert result[(x, y)] == (0, 0, 255)
        assert result[(5, 5)] == (0, 0, 255)
        assert result[(5, 0)] == GRAY

    def test_layer_brightness_is_kept(self):
        composite = CompositeImager(Dimensions.square(2), GRAY)
        composite.add_imager(SolidImager(Dimensions(1, 1), (9, 9, 9), brightness=40))
        assert composite.get_matrix(0, None).get(0, 0) == Cell((9, 9, 9), 40)

    def test_override_dimensions_crop_layer(self):
        composite = CompositeImager(Dimensions.square(6))
        composite.add_imager(
            SolidImager(Dimensions(5, 5), (1, 2, 3)),
            Positions.static(0, 0),
            Dimensions(2, 3),
        )
        result = colors(composite.get_matrix(0, None))
        painted = {pos for pos, color in result.items() if color == (1, 2, 3)}
        assert painted == {(x, y) for x in range(2) for y in range(3)}

    def test_override_larger_than_layer_uses_actual_bounds(self):
        composite = CompositeImager(Dimensions.square(6))
        composite.add_imager(
            SolidImager(Dimensions(2, 2), (1, 2, 3)),
            Positions.center(),
            Dimensions(4, 4),
        )
        result = colors(composite.get_matrix(0, None))
        # Centered as 4x4 at (1, 1), only the 2x2 the imager returned is drawn
        painted = {pos for pos, color in result.items() if color == (1, 2, 3)}
        assert painted == {(1, 1), (2, 1), (1, 2), (2, 2)}

    def test_layer_clipped_at_edges(self):
        composite = CompositeImager(Dimensions.square(4), GRAY)
        composite.add_imager(SolidImager(Dimensions(3, 3), (5, 5, 5)), Positions.static(-1, 2))
        result = colors(composite.get_matrix(0, None))
        painted = {pos for pos, color in result.items() if color == (5, 5, 5)}
        assert painted == {(0, 2), (1, 2), (0, 3), (1, 3)}

    @pytest.mark.parametrize("position", [
        Positions.static(10, 0),
        Positions.static(0, -5),
        Positions.static(-3, -3),
    ])
    def test_layer_fully_outside_contributes_nothing(self, position):
        composite = CompositeImager(Dimensions.square(4), GRAY)
        composite.add_imager(SolidImager(Dimensions(3, 3), (5, 5, 5)), position)
        assert all(cell.color == GRAY for cell, _, _ in composite.get_matrix(0, None))

    def test_layers_share_frame_and_previous_matrix(self):
        first = RecordingImager(Dimensions(1, 1), (1, 1, 1))
        second = RecordingImager(Dimensions(1, 1), (2, 2, 2))
        composite = CompositeImager(Dimensions.square(2)).add_imager(first).add_imager(second)

        previous = Matrix(Dimensions.square(2))
        composite.get_matrix(7, previous)

        assert first.calls == [(7, previous)]
        assert second.calls == [(7, previous)]

    def test_nested_composites(self):
        inner = CompositeImager(Dimensions.square(2), (0, 255, 0))
        outer = CompositeImager(Dimensions.square(6), GRAY).add_imager(inner, Positions.center())
        result = colors(outer.get_matrix(0, None))
        assert result[(2, 2)] == (0, 255, 0)
        assert result[(3, 3)] == (0, 255, 0)
        assert result[(1, 1)] == GRAY


def test_centered_random_patch_leaves_background_outside():
    composite = CompositeImager(Dimensions.square(64), GRAY)
    composite.add_imager(RandomImage(Dimensions.square(15)), Positions.center())

    matrix = composite.get_matrix(0, None)
    inside = range(24, 24 + 15)
    background = Cell(GRAY, 255)

    differing_inside = 0
    for cell, x, y in matrix:
        if x in inside and y in inside:
            differing_inside += cell != background
        else:
            assert cell == background

    assert differing_inside > 0
