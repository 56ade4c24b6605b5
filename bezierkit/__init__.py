from .geometry import Point, BoundingBox
from .curves import (
    Curve,
    CurvePoints,
    LinearCurve,
    QuadraticCurve,
    CubicCurve,
    QuarticCurve,
    QuinticCurve,
    NOrderCurve,
    ArcLengthTable,
    Intersection
)
from .config import CurveConfig, DEFAULT_CONFIG
from .exceptions import (
    BezierError,
    InvalidArgumentError,
    InsufficientControlPointsError,
    InvalidStepError,
    InvalidSampleCountError,
    InvalidDistanceError,
    InvalidBoundingBoxError
)

__version__ = "0.1.0"

__all__ = [
    'Point',
    'BoundingBox',
    'Curve',
    'CurvePoints',
    'LinearCurve',
    'QuadraticCurve',
    'CubicCurve',
    'QuarticCurve',
    'QuinticCurve',
    'NOrderCurve',
    'ArcLengthTable',
    'Intersection',
    'CurveConfig',
    'DEFAULT_CONFIG',
    'BezierError',
    'InvalidArgumentError',
    'InsufficientControlPointsError',
    'InvalidStepError',
    'InvalidSampleCountError',
    'InvalidDistanceError',
    'InvalidBoundingBoxError'
]
