from typing import Tuple
from .curve import Curve, control_point
from .de_casteljau import de_casteljau_split
from .roots import bernstein_extrema
from ..geometry import BoundingBox, Point

class QuarticCurve(Curve):
    """Quartic Bezier curve (degree 4) defined by five control points"""
    DEGREE = 4

    p0 = control_point(0)
    p1 = control_point(1)
    p2 = control_point(2)
    p3 = control_point(3)
    p4 = control_point(4)

    def evaluate(self, t: float) -> Point:
        p0, p1, p2, p3, p4 = self.control_points
        mt = 1 - t

        b0 = mt ** 4
        b1 = 4 * mt ** 3 * t
        b2 = 6 * mt ** 2 * t ** 2
        b3 = 4 * mt * t ** 3
        b4 = t ** 4

        return Point(
            b0 * p0.x + b1 * p1.x + b2 * p2.x + b3 * p3.x + b4 * p4.x,
            b0 * p0.y + b1 * p1.y + b2 * p2.y + b3 * p3.y + b4 * p4.y
        )

    def derivative(self, t: float) -> Point:
        """Cubic Bezier over the control points 4 * (P[i+1] - P[i])"""
        p0, p1, p2, p3, p4 = self.control_points
        d0, d1, d2, d3 = (4 * (b - a) for a, b in ((p0, p1), (p1, p2), (p2, p3), (p3, p4)))
        mt = 1 - t

        b0 = mt ** 3
        b1 = 3 * mt ** 2 * t
        b2 = 3 * mt * t ** 2
        b3 = t ** 3

        return Point(
            b0 * d0.x + b1 * d1.x + b2 * d2.x + b3 * d3.x,
            b0 * d0.y + b1 * d1.y + b2 * d2.y + b3 * d3.y
        )

    def split(self, t: float) -> Tuple['QuarticCurve', 'QuarticCurve']:
        left, right = de_casteljau_split(self.points_array, t)
        return QuarticCurve.from_array(left), QuarticCurve.from_array(right)

    def bounding_box(self) -> BoundingBox:
        """Exact box from the real roots of the cubic derivative on each axis"""
        return self._box_from_extrema(
            bernstein_extrema(self.points_array[:, 0]),
            bernstein_extrema(self.points_array[:, 1])
        )
