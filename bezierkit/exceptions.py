class BezierError(Exception):
    """Base class for every error raised by bezierkit"""


class InvalidArgumentError(BezierError, ValueError):
    """An operation was called with input it cannot accept"""


class InsufficientControlPointsError(InvalidArgumentError):
    pass


class InvalidStepError(InvalidArgumentError):
    pass


class InvalidSampleCountError(InvalidArgumentError):
    pass


class InvalidDistanceError(InvalidArgumentError):
    pass


class InvalidBoundingBoxError(InvalidArgumentError):
    pass
