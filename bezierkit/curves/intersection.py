"""Curve/curve intersection by recursive subdivision.

Both curves are halved together, and any pair of halves whose bounding boxes
do not overlap is dropped. A pair whose boxes are both smaller than the
tolerance counts as a hit. Each branch returns its own list of hits and the
caller concatenates them, so no accumulator is shared between branches.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, NamedTuple
from ..exceptions import InvalidArgumentError
from ..geometry import Point

if TYPE_CHECKING:
    from .curve import Curve


class Intersection(NamedTuple):
    point: Point
    t1: float
    t2: float


class _Segment(NamedTuple):
    """Piece of an original curve together with the [t_min, t_max] it covers on it"""
    curve: Curve
    t_min: float
    t_max: float

    @property
    def t_mid(self) -> float:
        return (self.t_min + self.t_max) / 2

    def halves(self) -> tuple[_Segment, _Segment]:
        left, right = self.curve.split(0.5)
        t_mid = self.t_mid
        return _Segment(left, self.t_min, t_mid), _Segment(right, t_mid, self.t_max)


def find_intersections(curve1: Curve, curve2: Curve, tolerance: float = 0.5, max_depth: int = 16) -> List[Intersection]:
    """Approximate intersections of two curves.

    t1 and t2 are parameters on curve1 and curve2. The reported point is the
    average of both curves evaluated at those parameters. Hits closer together
    than tolerance are collapsed, keeping the first one found.
    """
    if tolerance <= 0:
        raise InvalidArgumentError(f"Tolerance must be positive, got {tolerance}")
    if max_depth < 0:
        raise InvalidArgumentError(f"Max depth must be non-negative, got {max_depth}")

    if not curve1.bounding_box().overlaps(curve2.bounding_box()):
        logging.debug("Bounding boxes do not overlap, no intersections")
        return []

    candidates = _search(curve1, curve2, _Segment(curve1, 0.0, 1.0), _Segment(curve2, 0.0, 1.0),
                         tolerance, max_depth, 0)
    unique = remove_duplicates(candidates, tolerance)
    logging.debug(f"Found {len(candidates)} intersection candidates, {len(unique)} after removing duplicates")
    return unique


def _search(original1: Curve, original2: Curve, segment1: _Segment, segment2: _Segment,
            tolerance: float, max_depth: int, depth: int) -> List[Intersection]:
    box1 = segment1.curve.bounding_box()
    box2 = segment2.curve.bounding_box()

    if not box1.overlaps(box2):
        return []

    if box1.size < tolerance and box2.size < tolerance:
        t1 = segment1.t_mid
        t2 = segment2.t_mid
        p1 = original1.evaluate(t1)
        p2 = original2.evaluate(t2)
        point = Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)
        return [Intersection(point, t1, t2)]

    if depth >= max_depth:
        return []

    halves2 = segment2.halves()
    found = []
    for half1 in segment1.halves():
        for half2 in halves2:
            found.extend(_search(original1, original2, half1, half2, tolerance, max_depth, depth + 1))
    return found


def remove_duplicates(intersections: List[Intersection], tolerance: float) -> List[Intersection]:
    unique: List[Intersection] = []

    for candidate in intersections:
        if not any(candidate.point.distance(existing.point) < tolerance for existing in unique):
            unique.append(candidate)

    return unique
