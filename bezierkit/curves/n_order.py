from typing import Tuple
import numpy as np
from .curve import Curve
from .de_casteljau import de_casteljau, de_casteljau_many, de_casteljau_split, evaluate_derivative
from ..geometry import BoundingBox, Point

class NOrderCurve(Curve):
    """Bezier curve of arbitrary degree (control point count - 1).

    Every operation goes through De Casteljau's algorithm, which stays
    numerically stable for high degrees. The bounding box is sampled rather
    than solved: the control points plus min(50 + 10 * degree, 200) evenly
    spaced curve points. Including the control points keeps the box a
    superset of the curve, at the price of not always being the tightest one.

    The intersection search asks for a fresh box after every split, so the
    samples are evaluated together in one vectorised pass.
    """
    MAX_BOUNDING_SAMPLES = 200

    def evaluate(self, t: float) -> Point:
        x, y = de_casteljau(self.points_array, t)
        return Point(x, y)

    def derivative(self, t: float) -> Point:
        x, y = evaluate_derivative(self.points_array, t)
        return Point(x, y)

    def split(self, t: float) -> Tuple['NOrderCurve', 'NOrderCurve']:
        left, right = de_casteljau_split(self.points_array, t)
        return NOrderCurve.from_array(left), NOrderCurve.from_array(right)

    def bounding_samples(self) -> int:
        return min(50 + self.degree * 10, self.MAX_BOUNDING_SAMPLES)

    def bounding_box(self) -> BoundingBox:
        samples = self.bounding_samples()
        sampled = de_casteljau_many(self.points_array, np.arange(1, samples) / samples)
        return BoundingBox.from_points(np.vstack((self.points_array, sampled)))
