from typing import Tuple
from .curve import Curve, control_point
from .de_casteljau import de_casteljau_split
from .roots import bernstein_extrema, binomial_coefficient
from ..geometry import BoundingBox, Point

BERNSTEIN_5 = tuple(binomial_coefficient(5, i) for i in range(6))
BERNSTEIN_4 = tuple(binomial_coefficient(4, i) for i in range(5))

def _bernstein_sum(points, weights, t: float) -> Point:
    n = len(points) - 1
    mt = 1 - t
    x = y = 0.0
    for i, (p, w) in enumerate(zip(points, weights)):
        b = w * mt ** (n - i) * t ** i
        x += b * p.x
        y += b * p.y
    return Point(x, y)


class QuinticCurve(Curve):
    """Quintic Bezier curve (degree 5) defined by six control points"""
    DEGREE = 5

    p0 = control_point(0)
    p1 = control_point(1)
    p2 = control_point(2)
    p3 = control_point(3)
    p4 = control_point(4)
    p5 = control_point(5)

    def evaluate(self, t: float) -> Point:
        return _bernstein_sum(self.control_points, BERNSTEIN_5, t)

    def derivative(self, t: float) -> Point:
        """Quartic Bezier over the control points 5 * (P[i+1] - P[i])"""
        points = self.control_points
        deltas = [5 * (b - a) for a, b in zip(points, points[1:])]
        return _bernstein_sum(deltas, BERNSTEIN_4, t)

    def split(self, t: float) -> Tuple['QuinticCurve', 'QuinticCurve']:
        left, right = de_casteljau_split(self.points_array, t)
        return QuinticCurve.from_array(left), QuinticCurve.from_array(right)

    def bounding_box(self) -> BoundingBox:
        """Exact box from the real roots of the quartic derivative on each axis"""
        return self._box_from_extrema(
            bernstein_extrema(self.points_array[:, 0]),
            bernstein_extrema(self.points_array[:, 1])
        )
