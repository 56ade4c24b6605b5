from .point import Point

def lerp(p1: Point, p2: Point, t: float) -> Point:
    """Point along the straight line from p1 (t=0) to p2 (t=1), extrapolating outside [0, 1]"""
    return Point(p1.x + (p2.x - p1.x) * t, p1.y + (p2.y - p1.y) * t)
