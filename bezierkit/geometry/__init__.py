from .point import Point
from .bounding_box import BoundingBox
from .interpolation import lerp

__all__ = [
    'Point',
    'BoundingBox',
    'lerp'
]
