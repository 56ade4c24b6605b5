import math
from abc import ABC, abstractmethod
from fractions import Fraction
from typing import Iterator, List, Optional, Sequence, Tuple, Union
import numpy as np
from ..config import DEFAULT_CONFIG
from ..exceptions import InsufficientControlPointsError, InvalidArgumentError, InvalidStepError
from ..geometry import BoundingBox, Point
from . import arc_length
from . import intersection

PointLike = Union[Point, Sequence[float]]

TANGENT_EPSILON = 1e-10

def control_point(index: int) -> property:
    """Read-only named access to one control point (p0, p1, ...)"""
    return property(lambda self: self.control_points[index], doc=f"Control point {index}")


class Curve(ABC):
    """Base class for all Bezier curves.

    Subclasses implement evaluate, derivative, split and bounding_box. Everything
    else (tangent, normal, arc length, intersections, sampling) is derived from
    those four and works the same for every degree.
    """
    DEGREE: Optional[int] = None

    def __init__(self, *points: PointLike):
        if len(points) < 2:
            raise InsufficientControlPointsError(
                f"At least 2 control points are required for a Bezier curve, got {len(points)}")
        if self.DEGREE is not None and len(points) != self.DEGREE + 1:
            raise InvalidArgumentError(
                f"{type(self).__name__} requires exactly {self.DEGREE + 1} control points, got {len(points)}")

        self._control_points = tuple(Point.coerce(p) for p in points)
        array = np.array([p.to_tuple() for p in self._control_points], dtype=np.float64)
        array.flags.writeable = False
        self._points = array

    @classmethod
    def from_points(cls, points: Sequence[PointLike]) -> 'Curve':
        """Create a curve from Points or (x, y) pairs.

        Called on Curve itself this builds an NOrderCurve of matching degree.
        """
        if cls is Curve:
            from .n_order import NOrderCurve
            return NOrderCurve(*points)
        return cls(*points)

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'Curve':
        return cls(*(Point(x, y) for x, y in array))

    @property
    def control_points(self) -> Tuple[Point, ...]:
        return self._control_points

    @property
    def points_array(self) -> np.ndarray:
        """Control points as a read-only (n, 2) array"""
        return self._points

    @property
    def degree(self) -> int:
        return len(self._points) - 1

    def to_list(self) -> List[Tuple[float, float]]:
        return [p.to_tuple() for p in self._control_points]

    @abstractmethod
    def evaluate(self, t: float) -> Point:
        """Position on the curve at parameter t (0 = start, 1 = end)"""

    @abstractmethod
    def derivative(self, t: float) -> Point:
        """Velocity vector at parameter t"""

    @abstractmethod
    def split(self, t: float) -> Tuple['Curve', 'Curve']:
        """Split into the curves covering [0, t] and [t, 1], both of the same type"""

    @abstractmethod
    def bounding_box(self) -> BoundingBox:
        """Axis-aligned box containing the curve over [0, 1]"""

    def point_at(self, t: float) -> Point:
        return self.evaluate(t)

    def _box_from_extrema(self, x_params: Sequence[float], y_params: Sequence[float]) -> BoundingBox:
        """Box spanning the end points and the curve at the given extremum parameters"""
        start, end = self._control_points[0], self._control_points[-1]
        x_values = [start.x, end.x] + [self.evaluate(t).x for t in x_params if 0 < t < 1]
        y_values = [start.y, end.y] + [self.evaluate(t).y for t in y_params if 0 < t < 1]
        return BoundingBox(Point(min(x_values), min(y_values)), Point(max(x_values), max(y_values)))

    def tangent(self, t: float) -> Point:
        """Unit tangent at t, or (0, 0) at a stationary point"""
        derivative = self.derivative(t)
        magnitude = derivative.magnitude

        if magnitude < TANGENT_EPSILON:
            return Point(0.0, 0.0)

        return Point(derivative.x / magnitude, derivative.y / magnitude)

    def normal(self, t: float) -> Point:
        """Tangent rotated 90 degrees counter-clockwise: (x, y) -> (-y, x)"""
        tangent = self.tangent(t)
        return Point(-tangent.y, tangent.x)

    def points(self, step: float) -> 'CurvePoints':
        return CurvePoints(self, step)

    def length(self, samples: int = DEFAULT_CONFIG.length_samples) -> float:
        return arc_length.curve_length(self, samples)

    def arc_length_table(self, samples: int = DEFAULT_CONFIG.distance_samples) -> arc_length.ArcLengthTable:
        return arc_length.ArcLengthTable.build(self, samples)

    def parameter_at_distance(self, distance: float, samples: int = DEFAULT_CONFIG.distance_samples) -> float:
        return arc_length.parameter_at_distance(self, distance, samples)

    def point_at_distance(self, distance: float, samples: int = DEFAULT_CONFIG.distance_samples) -> Point:
        return arc_length.point_at_distance(self, distance, samples)

    def intersections(self, other: 'Curve',
                      tolerance: float = DEFAULT_CONFIG.intersection_tolerance,
                      max_depth: int = DEFAULT_CONFIG.intersection_max_depth) -> List[intersection.Intersection]:
        return intersection.find_intersections(self, other, tolerance, max_depth)

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return np.array_equal(self._points, other._points)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._points.tobytes()))

    def __repr__(self) -> str:
        points = ", ".join(str(p) for p in self._control_points)
        return f"{type(self).__name__}({points})"


class CurvePoints:
    """Points evenly spaced in t from 0 to 1. Iterating again starts over.

    The point count is exact even when 1 / step does not fit in a float, and
    points are only evaluated while iterating. As with range, len() fails for
    counts beyond sys.maxsize, use count instead.
    """

    def __init__(self, curve: Curve, step: float):
        if not 0 < step <= 1:
            raise InvalidStepError(f"Step must be greater than 0 and less than or equal to 1, got {step}")
        self.curve = curve
        self.step = step
        self.count = math.floor(Fraction(1) / Fraction(step) + Fraction(1, 10 ** 9)) + 1

    def __iter__(self) -> Iterator[Point]:
        for i in range(self.count):
            yield self.curve.evaluate(min(1.0, i * self.step))

    def __len__(self) -> int:
        return self.count
