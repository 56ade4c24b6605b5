"""Root finding used to locate curve extrema for exact bounding boxes."""
import numpy as np
from numpy.polynomial import polynomial

EPSILON = 1e-10

def binomial_coefficient(n: int, k: int) -> int:
    """Calculate binomial coefficient C(n,k) using multiplicative formula"""
    if k < 0 or k > n:
        return 0

    if k == 0 or k == n:
        return 1

    k = min(k, n - k)
    c = 1

    for i in range(1, k + 1):
        c = c * (n + 1 - i) // i

    return c


def solve_quadratic(a: float, b: float, c: float) -> list[float]:
    """Real roots of a*x^2 + b*x + c = 0, degrading to the linear case when a is ~0"""
    if abs(a) < EPSILON:
        if abs(b) < EPSILON:
            return []
        return [-c / b]

    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return []

    if abs(discriminant) < EPSILON:
        return [-b / (2 * a)]

    sqrt_disc = np.sqrt(discriminant)
    return [(-b + sqrt_disc) / (2 * a), (-b - sqrt_disc) / (2 * a)]


def bernstein_to_power(values: np.ndarray) -> np.ndarray:
    """Convert 1D Bernstein coefficients to power-basis coefficients, lowest order first"""
    degree = len(values) - 1
    coefficients = np.zeros(degree + 1)

    for j in range(degree + 1):
        total = 0.0
        for i in range(j + 1):
            sign = -1.0 if (j - i) % 2 else 1.0
            total += sign * binomial_coefficient(j, i) * values[i]
        coefficients[j] = binomial_coefficient(degree, j) * total

    return coefficients


def unit_interval_roots(coefficients: np.ndarray) -> list[float]:
    """Real roots strictly inside (0, 1) of a power-basis polynomial"""
    coefficients = np.array(coefficients, dtype=np.float64)
    # Leading terms that vanish would blow the companion matrix up
    scale = max(1.0, float(np.max(np.abs(coefficients)))) if len(coefficients) else 1.0
    while len(coefficients) > 1 and abs(coefficients[-1]) < EPSILON * scale:
        coefficients = coefficients[:-1]
    if len(coefficients) < 2:
        return []

    roots = polynomial.polyroots(coefficients)
    real = roots[np.abs(roots.imag) < 1e-9].real
    return [float(t) for t in real if 0.0 < t < 1.0]


def bernstein_extrema(values: np.ndarray) -> list[float]:
    """Parameters in (0, 1) where a 1D Bezier polynomial has zero slope"""
    degree = len(values) - 1
    if degree < 1:
        return []
    slope = degree * np.diff(values)
    return unit_interval_roots(bernstein_to_power(slope))
