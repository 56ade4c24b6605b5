import math
from dataclasses import dataclass
from numbers import Real
from typing import Sequence, Union
import numpy as np
from ..exceptions import InvalidArgumentError

@dataclass(frozen=True)
class Point:
    """Immutable 2D point, also used as a vector for derivatives and tangents"""
    x: float
    y: float

    def __post_init__(self):
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    @classmethod
    def from_array(cls, coordinates: Sequence[float]) -> 'Point':
        """Create a point from a two-element sequence [x, y]"""
        if len(coordinates) != 2:
            raise InvalidArgumentError(f"Point.from_array expects exactly two values, got {len(coordinates)}")

        x, y = coordinates[0], coordinates[1]
        for value in (x, y):
            if isinstance(value, bool) or not isinstance(value, (Real, np.number)):
                raise InvalidArgumentError(f"Point.from_array expects numeric values, got {value!r}")

        return cls(float(x), float(y))

    @classmethod
    def coerce(cls, value: Union['Point', Sequence[float]]) -> 'Point':
        if isinstance(value, Point):
            return value
        return cls.from_array(value)

    def distance(self, other: 'Point') -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def dot(self, other: 'Point') -> float:
        return self.x * other.x + self.y * other.y

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, other: 'Point') -> 'Point':
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Point') -> 'Point':
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> 'Point':
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
