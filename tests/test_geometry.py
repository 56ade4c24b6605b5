"""Tests for the Point and BoundingBox value types.

Covers:
    - Point construction from fields and from two-element sequences
    - Point.from_array rejection of wrong lengths and non-numeric values
    - Euclidean distance, vector helpers and string form
    - BoundingBox corners, dimensions and min > max rejection
    - Degenerate (zero-size) boxes
    - Closed-interval overlap test
    - Linear interpolation helpers

Run:
    pytest tests/test_geometry.py -v
"""
import dataclasses

import numpy as np
import pytest

from bezierkit.exceptions import InvalidArgumentError, InvalidBoundingBoxError
from bezierkit.geometry import BoundingBox, Point, lerp


def test_point_fields_are_floats():
    point = Point(1, 2)
    assert point.x == 1.0 and isinstance(point.x, float)
    assert point.y == 2.0 and isinstance(point.y, float)


def test_point_from_array():
    assert Point.from_array([3, 4]) == Point(3.0, 4.0)
    assert Point.from_array((1.5, -2)) == Point(1.5, -2.0)
    assert Point.from_array(np.array([7.0, 8.0])) == Point(7.0, 8.0)


@pytest.mark.parametrize("coordinates", [[], [1], [1, 2, 3]])
def test_point_from_array_requires_two_values(coordinates):
    with pytest.raises(InvalidArgumentError):
        Point.from_array(coordinates)


@pytest.mark.parametrize("coordinates", [["a", 1], [1, None], [True, 2]])
def test_point_from_array_requires_numbers(coordinates):
    with pytest.raises(InvalidArgumentError):
        Point.from_array(coordinates)


def test_point_coerce_keeps_points():
    point = Point(1, 1)
    assert Point.coerce(point) is point
    assert Point.coerce((1, 1)) == point


def test_point_distance():
    assert Point(0, 0).distance(Point(3, 4)) == pytest.approx(5.0)
    assert Point(2, 2).distance(Point(2, 2)) == 0.0


def test_point_vector_helpers():
    a = Point(1, 2)
    b = Point(3, 5)
    assert a + b == Point(4, 7)
    assert b - a == Point(2, 3)
    assert a * 2 == Point(2, 4)
    assert 3 * a == Point(3, 6)
    assert a.dot(b) == pytest.approx(13.0)
    assert Point(3, 4).magnitude == pytest.approx(5.0)
    assert list(a) == [1.0, 2.0]
    np.testing.assert_array_equal(a.to_array(), [1.0, 2.0])


def test_point_is_immutable_and_string_formatted():
    point = Point(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.x = 5
    assert str(point) == "(1.0, 2.0)"


def test_bounding_box_corners_and_dimensions():
    box = BoundingBox(Point(1, 2), Point(4, 6))

    assert box.top_left == Point(1, 2)
    assert box.top_right == Point(4, 2)
    assert box.bottom_left == Point(1, 6)
    assert box.bottom_right == Point(4, 6)
    assert box.width == pytest.approx(3.0)
    assert box.height == pytest.approx(4.0)
    assert (box.min_x, box.max_x, box.min_y, box.max_y) == (1.0, 4.0, 2.0, 6.0)
    assert box.size == pytest.approx(4.0)


@pytest.mark.parametrize("low,high", [
    (Point(5, 0), Point(1, 1)),
    (Point(0, 5), Point(1, 1)),
])
def test_bounding_box_rejects_inverted_corners(low, high):
    with pytest.raises(InvalidBoundingBoxError):
        BoundingBox(low, high)


def test_bounding_box_error_is_value_error():
    with pytest.raises(ValueError):
        BoundingBox(Point(1, 1), Point(0, 0))


def test_degenerate_bounding_box_is_valid():
    box = BoundingBox(Point(2, 3), Point(2, 3))
    assert box.width == 0.0
    assert box.height == 0.0


def test_bounding_box_from_points():
    box = BoundingBox.from_points([Point(1, 5), (4, -1), Point(2, 2)])
    assert box.min == Point(1, -1)
    assert box.max == Point(4, 5)

    array_box = BoundingBox.from_points(np.array([[0.0, 0.0], [2.0, 3.0]]))
    assert array_box.max == Point(2, 3)

    with pytest.raises(InvalidArgumentError):
        BoundingBox.from_points([])


def test_bounding_box_overlap():
    box = BoundingBox(Point(0, 0), Point(2, 2))

    assert box.overlaps(BoundingBox(Point(1, 1), Point(3, 3)))
    assert box.overlaps(BoundingBox(Point(2, 2), Point(3, 3)))
    assert not box.overlaps(BoundingBox(Point(2.1, 0), Point(3, 2)))
    assert not box.overlaps(BoundingBox(Point(0, -3), Point(2, -0.1)))


def test_lerp():
    p1 = Point(0, 0)
    p2 = Point(10, 20)
    assert lerp(p1, p2, 0.0) == p1
    assert lerp(p1, p2, 1.0) == p2
    assert lerp(p1, p2, 0.25) == Point(2.5, 5)
    assert lerp(p1, p2, 2.0) == Point(20, 40)
