from .curve import Curve, CurvePoints
from .linear import LinearCurve
from .quadratic import QuadraticCurve
from .cubic import CubicCurve
from .quartic import QuarticCurve
from .quintic import QuinticCurve
from .n_order import NOrderCurve
from .arc_length import ArcLengthTable
from .intersection import Intersection

__all__ = [
    'Curve',
    'CurvePoints',
    'LinearCurve',
    'QuadraticCurve',
    'CubicCurve',
    'QuarticCurve',
    'QuinticCurve',
    'NOrderCurve',
    'ArcLengthTable',
    'Intersection'
]
