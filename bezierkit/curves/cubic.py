from typing import Tuple
from .curve import Curve, control_point
from .roots import solve_quadratic
from ..geometry import BoundingBox, Point, lerp

class CubicCurve(Curve):
    """Cubic Bezier curve: B(t) = (1-t)³·P0 + 3(1-t)²t·P1 + 3(1-t)t²·P2 + t³·P3"""
    DEGREE = 3

    p0 = control_point(0)
    p1 = control_point(1)
    p2 = control_point(2)
    p3 = control_point(3)

    def evaluate(self, t: float) -> Point:
        p0, p1, p2, p3 = self.control_points
        mt = 1 - t

        b0 = mt ** 3
        b1 = 3 * mt ** 2 * t
        b2 = 3 * mt * t ** 2
        b3 = t ** 3

        return Point(
            b0 * p0.x + b1 * p1.x + b2 * p2.x + b3 * p3.x,
            b0 * p0.y + b1 * p1.y + b2 * p2.y + b3 * p3.y
        )

    def derivative(self, t: float) -> Point:
        """B'(t) = 3(1-t)²(P1-P0) + 6(1-t)t(P2-P1) + 3t²(P3-P2)"""
        p0, p1, p2, p3 = self.control_points
        mt = 1 - t

        dx = 3 * mt ** 2 * (p1.x - p0.x) + 6 * mt * t * (p2.x - p1.x) + 3 * t ** 2 * (p3.x - p2.x)
        dy = 3 * mt ** 2 * (p1.y - p0.y) + 6 * mt * t * (p2.y - p1.y) + 3 * t ** 2 * (p3.y - p2.y)
        return Point(dx, dy)

    def split(self, t: float) -> Tuple['CubicCurve', 'CubicCurve']:
        p0, p1, p2, p3 = self.control_points

        q0 = lerp(p0, p1, t)
        q1 = lerp(p1, p2, t)
        q2 = lerp(p2, p3, t)

        r0 = lerp(q0, q1, t)
        r1 = lerp(q1, q2, t)

        s0 = lerp(r0, r1, t)

        return CubicCurve(p0, q0, r0, s0), CubicCurve(s0, r1, q2, p3)

    def bounding_box(self) -> BoundingBox:
        """Exact box from the roots of the quadratic derivative on each axis"""
        p0, p1, p2, p3 = self.control_points

        x_params = solve_quadratic(
            3 * (p3.x - 3 * p2.x + 3 * p1.x - p0.x),
            6 * (p0.x - 2 * p1.x + p2.x),
            3 * (p1.x - p0.x)
        )
        y_params = solve_quadratic(
            3 * (p3.y - 3 * p2.y + 3 * p1.y - p0.y),
            6 * (p0.y - 2 * p1.y + p2.y),
            3 * (p1.y - p0.y)
        )

        return self._box_from_extrema(x_params, y_params)
