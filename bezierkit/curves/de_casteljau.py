import numpy as np

def de_casteljau(control_points: np.ndarray, t: float) -> np.ndarray:
    """Evaluate a Bezier curve of any degree by repeated linear interpolation.

    Works on an (n, 2) array of control points and returns the (2,) point at t.
    Any finite t is accepted, values outside [0, 1] extrapolate the polynomial.
    """
    mid_points = np.array(control_points, dtype=np.float64)
    count = len(mid_points)

    for i in range(1, count):
        head = mid_points[:count - i]
        mid_points[:count - i] = head + t * (mid_points[1:count - i + 1] - head)

    return mid_points[0]


def de_casteljau_many(control_points: np.ndarray, params: np.ndarray) -> np.ndarray:
    """Evaluate at every parameter in one pass, returning an (m, 2) array.

    Runs the same interpolation levels as de_casteljau on a (m, n, 2) stack,
    so each row equals de_casteljau(control_points, params[row]).
    """
    points = np.asarray(control_points, dtype=np.float64)
    t = np.asarray(params, dtype=np.float64).reshape(-1, 1, 1)
    mid_points = np.repeat(points[np.newaxis], len(t), axis=0)
    count = points.shape[0]

    for i in range(1, count):
        head = mid_points[:, :count - i]
        mid_points[:, :count - i] = head + t * (mid_points[:, 1:count - i + 1] - head)

    return mid_points[:, 0]


def de_casteljau_split(control_points: np.ndarray, t: float) -> tuple[np.ndarray, np.ndarray]:
    """Split control points at t into the control points of [0, t] and [t, 1].

    The left curve collects the first point of every interpolation level and
    the right curve the last one, read from the split point to the end.
    """
    mid_points = np.array(control_points, dtype=np.float64)
    count = len(mid_points)
    left = np.empty_like(mid_points)
    right = np.empty_like(mid_points)

    for i in range(count):
        left[i] = mid_points[0]
        right[count - i - 1] = mid_points[count - i - 1]
        head = mid_points[:count - i - 1]
        mid_points[:count - i - 1] = head + t * (mid_points[1:count - i] - head)

    return left, right


def derivative_points(control_points: np.ndarray) -> np.ndarray:
    """Control points of the derivative curve: n * (P[i+1] - P[i])"""
    degree = len(control_points) - 1
    return degree * np.diff(control_points, axis=0)


def evaluate_derivative(control_points: np.ndarray, t: float) -> np.ndarray:
    if len(control_points) < 2:
        return np.zeros(2)
    return de_casteljau(derivative_points(control_points), t)
