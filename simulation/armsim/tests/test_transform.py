"""Tests for the screen/model coordinate transform."""

import pytest
from armsim.geometry import Point
from armsim.transform import ViewTransform, default_view, round_half_up


class TestViewTransform:

    @pytest.fixture
    def view(self):
        """600 x 300 canvas at 1:1."""
        return default_view()

    def test_y_axis_inverted(self, view):
        assert view.to_model(0, 300) == Point(0, 0)
        assert view.to_model(0, 0) == Point(0, 300)
        assert view.to_model(450, 250) == Point(450, 50)

    def test_to_model_rounds(self, view):
        assert view.to_model(10.4, 100.6) == Point(10, 199)
        assert view.to_model(10.5, 0.5) == Point(11, 300)

    def test_to_screen(self, view):
        assert view.to_screen(Point(60, 105)) == (60, 195)
        assert view.to_screen(Point(59.6, 0)) == (60, 300)

    def test_scaled_canvas(self):
        """Canvas drawn at twice its model size."""
        view = ViewTransform(600, 300, scale=2.0)
        assert view.to_model(900, 100) == Point(450, 250)
        assert view.to_screen(Point(450, 250)) == (900, 100)

    def test_contains(self, view):
        assert view.contains(Point(0, 0))
        assert view.contains(Point(600, 300))
        assert not view.contains(Point(-1, 10))
        assert not view.contains(Point(10, 301))

    @pytest.mark.parametrize("kwargs", [
        {'width': 0},
        {'height': -5},
        {'scale': 0},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            ViewTransform(**kwargs)


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0
    assert round_half_up(-1.6) == -2
