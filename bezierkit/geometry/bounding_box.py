from dataclasses import dataclass
from typing import Iterable, Union
import numpy as np
from .point import Point
from ..exceptions import InvalidArgumentError, InvalidBoundingBoxError

@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle spanning min (top-left) to max (bottom-right)"""
    min: Point
    max: Point

    def __post_init__(self):
        if self.min.x > self.max.x or self.min.y > self.max.y:
            raise InvalidBoundingBoxError(f"Invalid bounding box: min {self.min} exceeds max {self.max}")

    @classmethod
    def from_points(cls, points: Union[np.ndarray, Iterable[Point]]) -> 'BoundingBox':
        """Tightest box containing every given point"""
        if not isinstance(points, np.ndarray):
            points = np.array([Point.coerce(p).to_tuple() for p in points], dtype=np.float64)
        if points.size == 0:
            raise InvalidArgumentError("Cannot build a bounding box from zero points")

        lower = points.min(axis=0)
        upper = points.max(axis=0)
        return cls(Point(lower[0], lower[1]), Point(upper[0], upper[1]))

    @property
    def top_left(self) -> Point:
        return Point(self.min.x, self.min.y)

    @property
    def top_right(self) -> Point:
        return Point(self.max.x, self.min.y)

    @property
    def bottom_left(self) -> Point:
        return Point(self.min.x, self.max.y)

    @property
    def bottom_right(self) -> Point:
        return Point(self.max.x, self.max.y)

    @property
    def width(self) -> float:
        return self.max.x - self.min.x

    @property
    def height(self) -> float:
        return self.max.y - self.min.y

    @property
    def min_x(self) -> float:
        return self.min.x

    @property
    def max_x(self) -> float:
        return self.max.x

    @property
    def min_y(self) -> float:
        return self.min.y

    @property
    def max_y(self) -> float:
        return self.max.y

    @property
    def size(self) -> float:
        """Longest side of the box"""
        return max(self.width, self.height)

    def overlaps(self, other: 'BoundingBox') -> bool:
        """Closed-interval overlap test on both axes, touching edges count"""
        return not (self.max.x < other.min.x
                    or other.max.x < self.min.x
                    or self.max.y < other.min.y
                    or other.max.y < self.min.y)
