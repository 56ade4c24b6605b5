from typing import Tuple
from .curve import Curve, control_point
from .roots import EPSILON
from ..geometry import BoundingBox, Point, lerp

class QuadraticCurve(Curve):
    """Quadratic Bezier curve: B(t) = (1-t)²·P0 + 2(1-t)t·P1 + t²·P2"""
    DEGREE = 2

    p0 = control_point(0)
    p1 = control_point(1)
    p2 = control_point(2)

    def evaluate(self, t: float) -> Point:
        p0, p1, p2 = self.control_points
        mt = 1 - t
        x = mt ** 2 * p0.x + 2 * mt * t * p1.x + t ** 2 * p2.x
        y = mt ** 2 * p0.y + 2 * mt * t * p1.y + t ** 2 * p2.y
        return Point(x, y)

    def derivative(self, t: float) -> Point:
        """B'(t) = 2(1-t)(P1-P0) + 2t(P2-P1)"""
        p0, p1, p2 = self.control_points
        dx = 2 * (1 - t) * (p1.x - p0.x) + 2 * t * (p2.x - p1.x)
        dy = 2 * (1 - t) * (p1.y - p0.y) + 2 * t * (p2.y - p1.y)
        return Point(dx, dy)

    def split(self, t: float) -> Tuple['QuadraticCurve', 'QuadraticCurve']:
        p0, p1, p2 = self.control_points

        q0 = lerp(p0, p1, t)
        q1 = lerp(p1, p2, t)
        r0 = lerp(q0, q1, t)

        return QuadraticCurve(p0, q0, r0), QuadraticCurve(r0, q1, p2)

    def bounding_box(self) -> BoundingBox:
        """Exact box: B'(t) = 0 at t = (P0-P1)/(P0-2P1+P2) on each axis"""
        p0, p1, p2 = self.control_points
        x_params = []
        y_params = []

        denom_x = p0.x - 2 * p1.x + p2.x
        if abs(denom_x) > EPSILON:
            x_params.append((p0.x - p1.x) / denom_x)

        denom_y = p0.y - 2 * p1.y + p2.y
        if abs(denom_y) > EPSILON:
            y_params.append((p0.y - p1.y) / denom_y)

        return self._box_from_extrema(x_params, y_params)
