"""Tests for geom/labels.py and geom/transform.py."""
import math

import pytest

from floorcanvas.core.model import Bounds, Point
from floorcanvas.geom.labels import format_square_footage, split_room_label
from floorcanvas.geom.transform import (
    GRID_UNIT_PX,
    bounds_to_pixels,
    clamp_zoom,
    length_to_pixels,
    point_to_pixels,
)


# ============================================================
# Label splitting
# ============================================================

class TestSplitRoomLabel:
    @pytest.mark.parametrize("name, expected", [
        ("Bedroom 1 (12' x 10')", ("Bedroom 1", "(12' x 10')")),
        ("Master Suite (14x16)", ("Master Suite", "(14x16)")),
        ("Living 14x12", ("Living", "14x12")),
        ("Garage 20'", ("Garage", "20'")),
        ("Studio 4.5m", ("Studio", "4.5m")),
        ("Den  (10 ft × 9 ft)  ", ("Den", "(10 ft × 9 ft)")),
    ])
    def test_dimension_suffix_gets_its_own_line(self, name, expected):
        assert split_room_label(name) == expected

    @pytest.mark.parametrize("name", [
        "Kitchen",
        "Bedroom 1",
        "Kitchen (open)",
        "Living Room",
        "Bath 2nd",
    ])
    def test_single_line(self, name):
        assert split_room_label(name) == (name,)

    def test_single_token_with_digits_is_one_line(self):
        assert split_room_label("12x10") == ("12x10",)
        assert split_room_label("(12' x 10')") == ("(12' x 10')",)

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name(self, name):
        assert split_room_label(name) == ()


class TestFormatSquareFootage:
    @pytest.mark.parametrize("value, expected", [
        (120, "120 sq ft"),
        (120.0, "120 sq ft"),
        (87.5, "87.5 sq ft"),
        (1450, "1,450 sq ft"),
        (0, "0 sq ft"),
    ])
    def test_format(self, value, expected):
        assert format_square_footage(value) == expected

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite(self, value):
        assert format_square_footage(value) is None


# ============================================================
# Grid-to-pixel mapping
# ============================================================

class TestPointToPixels:
    def test_scale(self):
        assert GRID_UNIT_PX == 20
        assert point_to_pixels(Point(1.5, 2)) == (30.0, 40.0)

    def test_negative_coordinates_are_kept(self):
        assert point_to_pixels(Point(-1, 0)) == (-20.0, 0.0)

    @pytest.mark.parametrize("point", [
        Point(math.nan, 0), Point(0, math.inf), Point(1e300, 0),
    ])
    def test_unusable_points(self, point):
        assert point_to_pixels(point) is None


class TestLengthToPixels:
    def test_scale(self):
        assert length_to_pixels(0.8) == pytest.approx(16.0)

    @pytest.mark.parametrize("length", [-5, math.nan, math.inf])
    def test_unusable_lengths_are_zero(self, length):
        assert length_to_pixels(length) == 0.0


class TestBoundsToPixels:
    def test_inclusive_box(self):
        assert bounds_to_pixels(Bounds(1, 1, 4, 3)) == (20, 20, 99, 79)

    @pytest.mark.parametrize("bounds", [
        Bounds(1, 1, -5, 3),
        Bounds(1, 1, 4, 0),
        Bounds(1, 1, 0.01, 3),
        Bounds(math.nan, 1, 4, 3),
        Bounds(1, 1, math.inf, 3),
    ])
    def test_zero_extent(self, bounds):
        assert bounds_to_pixels(bounds) is None


class TestClampZoom:
    @pytest.mark.parametrize("zoom, expected", [
        (100, 100), (25, 25), (400, 400), (10, 25), (1000, 400), (137.4, 137), (math.nan, 100),
    ])
    def test_clamp(self, zoom, expected):
        assert clamp_zoom(zoom) == expected
