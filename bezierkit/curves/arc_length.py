"""Arc-length parameterization.

Bezier curves have no closed-form length, so the speed |B'(t)| is integrated
with the trapezoidal rule over equal steps of t. The cumulative sums form a
lookup table mapping t to distance travelled, which is searched with bisect
and linearly interpolated to map a distance back to t.
"""
from __future__ import annotations

import bisect
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING
import numpy as np
from ..config import DEFAULT_CONFIG
from ..exceptions import InvalidDistanceError, InvalidSampleCountError
from ..geometry import Point

if TYPE_CHECKING:
    from .curve import Curve

# Distances this close to the total length map to t = 1 exactly
DISTANCE_EPSILON = 1e-10


def _check_samples(samples: int):
    if samples < 2:
        raise InvalidSampleCountError(f"Samples must be at least 2, got {samples}")


def cumulative_distances(curve: Curve, samples: int) -> tuple[np.ndarray, np.ndarray]:
    """Parameters and cumulative distances at samples + 1 evenly spaced values of t"""
    _check_samples(samples)
    dt = 1.0 / samples
    params = np.arange(samples + 1) * dt
    params[-1] = 1.0

    speeds = np.array([curve.derivative(t).magnitude for t in params])
    segments = (speeds[:-1] + speeds[1:]) * 0.5 * dt

    distances = np.zeros(samples + 1)
    distances[1:] = np.cumsum(segments)
    return params, distances


def curve_length(curve: Curve, samples: int = DEFAULT_CONFIG.length_samples) -> float:
    """Approximate arc length, more samples converge towards the true length"""
    _, distances = cumulative_distances(curve, samples)
    return float(distances[-1])


@dataclass(frozen=True, eq=False)
class ArcLengthTable:
    """Samples of (t, cumulative distance), both non-decreasing, from (0, 0) to (1, length)"""
    params: np.ndarray
    distances: np.ndarray

    @classmethod
    def build(cls, curve: Curve, samples: int = DEFAULT_CONFIG.distance_samples) -> ArcLengthTable:
        params, distances = cumulative_distances(curve, samples)
        params.flags.writeable = False
        distances.flags.writeable = False
        logging.debug(f"Built arc length table with {len(params)} entries, total length {distances[-1]}")
        return cls(params, distances)

    @property
    def total_length(self) -> float:
        return float(self.distances[-1])

    def __len__(self) -> int:
        return len(self.params)

    def parameter_at(self, distance: float) -> float:
        """Parameter t reached after travelling distance along the curve"""
        total_length = self.total_length
        if not math.isfinite(distance):
            raise InvalidDistanceError(f"Distance must be finite, got {distance}")
        if distance < 0:
            raise InvalidDistanceError(f"Distance must be non-negative, got {distance}")
        if distance > total_length:
            raise InvalidDistanceError(f"Distance {distance} exceeds curve length {total_length}")

        if distance == 0.0:
            return 0.0
        if abs(distance - total_length) < DISTANCE_EPSILON:
            return 1.0

        # distances[index - 1] < distance <= distances[index]
        index = bisect.bisect_left(self.distances, distance)
        index = min(max(index, 1), len(self.distances) - 1)

        d1, d2 = self.distances[index - 1], self.distances[index]
        t1, t2 = self.params[index - 1], self.params[index]

        if d2 - d1 == 0:
            return float(t1)

        ratio = (distance - d1) / (d2 - d1)
        return float(t1 + ratio * (t2 - t1))


def parameter_at_distance(curve: Curve, distance: float, samples: int = DEFAULT_CONFIG.distance_samples) -> float:
    """Map a distance along the curve to its parameter t.

    The table is rebuilt on every call. The total length used for the bound
    check comes from the same trapezoidal sums as length(samples), so the two
    always agree for a given sample count.
    """
    _check_samples(samples)
    if distance < 0:
        raise InvalidDistanceError(f"Distance must be non-negative, got {distance}")
    if distance == 0.0:
        return 0.0

    return ArcLengthTable.build(curve, samples).parameter_at(distance)


def point_at_distance(curve: Curve, distance: float, samples: int = DEFAULT_CONFIG.distance_samples) -> Point:
    return curve.evaluate(parameter_at_distance(curve, distance, samples))
