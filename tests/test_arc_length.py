"""Tests for arc length and distance to parameter mapping.

Covers:
    - Length of straight lines, convergence with more samples
    - Sample count validation
    - parameter_at_distance at both ends, monotonicity and bound checks
    - point_at_distance spacing along a curved path
    - ArcLengthTable contents and agreement with Curve.length
    - Distances within DISTANCE_EPSILON of the total snap to t = 1
    - Degenerate zero-length curves
"""
import numpy as np
import pytest

from bezierkit import (
    ArcLengthTable,
    CubicCurve,
    InvalidDistanceError,
    InvalidSampleCountError,
    LinearCurve,
    NOrderCurve,
    Point,
)
from bezierkit.curves.arc_length import DISTANCE_EPSILON


@pytest.fixture
def cubic():
    return CubicCurve((0, 0), (25, 120), (75, 80), (100, 0))


@pytest.fixture(params=[LinearCurve, NOrderCurve], ids=lambda cls: cls.__name__)
def line(request):
    return request.param((0, 0), (3, 4))


def test_line_length(line):
    assert line.length() == pytest.approx(5.0, abs=1e-9)
    assert line.length(2) == pytest.approx(5.0, abs=1e-9)


def test_length_converges(cubic):
    coarse = cubic.length(100)
    fine = cubic.length(1000)

    assert abs(coarse - fine) < 0.01
    assert fine > cubic.control_points[0].distance(cubic.control_points[-1])


@pytest.mark.parametrize("samples", [1, 0, -5])
def test_invalid_sample_count(cubic, samples):
    with pytest.raises(InvalidSampleCountError):
        cubic.length(samples)
    with pytest.raises(InvalidSampleCountError):
        cubic.parameter_at_distance(1.0, samples)


def test_parameter_at_distance_ends(cubic):
    length = cubic.length()

    assert cubic.parameter_at_distance(0.0) == 0.0
    assert cubic.parameter_at_distance(length) == pytest.approx(1.0)
    assert cubic.point_at_distance(0.0) == cubic.evaluate(0.0)


def test_parameter_at_distance_out_of_range(cubic):
    length = cubic.length()

    with pytest.raises(InvalidDistanceError):
        cubic.parameter_at_distance(-1.0)
    with pytest.raises(InvalidDistanceError):
        cubic.parameter_at_distance(length + 1.0)
    with pytest.raises(ValueError):
        cubic.point_at_distance(length * 2)


def test_parameter_at_distance_is_monotonic(cubic):
    length = cubic.length()
    params = [cubic.parameter_at_distance(min(length, length * i / 50)) for i in range(51)]

    assert all(a <= b for a, b in zip(params, params[1:]))
    assert params[0] == 0.0
    assert params[-1] == pytest.approx(1.0)


def test_line_midpoint_by_distance(line):
    assert line.parameter_at_distance(2.5) == pytest.approx(0.5, abs=1e-9)
    point = line.point_at_distance(2.5)
    assert point.x == pytest.approx(1.5, abs=1e-9)
    assert point.y == pytest.approx(2.0, abs=1e-9)


def test_half_length_is_not_half_parameter(cubic):
    length = cubic.length(1000)
    t = cubic.parameter_at_distance(length / 2, 1000)

    assert abs(t - 0.5) > 0.01

    left, right = cubic.split(t)
    assert left.length(1000) == pytest.approx(right.length(1000), abs=0.1)


def test_points_by_distance_are_evenly_spaced(cubic):
    length = cubic.length(200)
    points = [cubic.point_at_distance(min(length, length * i / 10), 200) for i in range(11)]
    chords = [a.distance(b) for a, b in zip(points, points[1:])]

    mean = sum(chords) / len(chords)
    assert all(chord == pytest.approx(mean, rel=0.05) for chord in chords)


def test_arc_length_table(cubic):
    table = cubic.arc_length_table(50)

    assert isinstance(table, ArcLengthTable)
    assert len(table) == 51
    assert table.params[0] == 0.0 and table.params[-1] == 1.0
    assert table.distances[0] == 0.0
    assert table.total_length == cubic.length(50)
    assert np.all(np.diff(table.params) > 0)
    assert np.all(np.diff(table.distances) >= 0)


def test_arc_length_table_lookup_matches_curve(cubic):
    table = ArcLengthTable.build(cubic, 100)
    for distance in (0.0, 10.0, 77.7, 150.0):
        assert table.parameter_at(distance) == cubic.parameter_at_distance(distance, 100)


def test_arc_length_table_is_read_only(cubic):
    table = cubic.arc_length_table()
    with pytest.raises(ValueError):
        table.distances[1] = 0.0


def test_arc_length_table_rejects_non_finite(cubic):
    table = cubic.arc_length_table()
    with pytest.raises(InvalidDistanceError):
        table.parameter_at(float("nan"))


def test_zero_length_curve():
    curve = NOrderCurve((2, 2), (2, 2), (2, 2))

    assert curve.length() == 0.0
    assert curve.parameter_at_distance(0.0) == 0.0
    assert curve.point_at_distance(0.0) == Point(2, 2)
    with pytest.raises(InvalidDistanceError):
        curve.parameter_at_distance(1.0)


def test_distance_just_below_total_maps_to_end(line):
    table = line.arc_length_table()

    assert DISTANCE_EPSILON == 1e-10
    assert table.parameter_at(table.total_length - DISTANCE_EPSILON / 10) == 1.0
    assert table.parameter_at(table.total_length - 1e-6) < 1.0
