from typing import Tuple
from .curve import Curve, control_point
from ..geometry import BoundingBox, Point, lerp

class LinearCurve(Curve):
    """Degree 1 Bezier curve, a straight segment from p0 to p1"""
    DEGREE = 1

    p0 = control_point(0)
    p1 = control_point(1)

    def evaluate(self, t: float) -> Point:
        return lerp(self.p0, self.p1, t)

    def derivative(self, t: float) -> Point:
        return self.p1 - self.p0

    def split(self, t: float) -> Tuple['LinearCurve', 'LinearCurve']:
        middle = self.evaluate(t)
        return LinearCurve(self.p0, middle), LinearCurve(middle, self.p1)

    def bounding_box(self) -> BoundingBox:
        return BoundingBox(
            Point(min(self.p0.x, self.p1.x), min(self.p0.y, self.p1.y)),
            Point(max(self.p0.x, self.p1.x), max(self.p0.y, self.p1.y))
        )