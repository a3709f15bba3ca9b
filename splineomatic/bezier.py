"""Cubic Bezier curves.

Scalar evaluation uses the Bernstein form directly:

    B(t) = (1-t)^3 P0 + 3 (1-t)^2 t P1 + 3 (1-t) t^2 P2 + t^3 P3
    B'(t) = 3 (1-t)^2 (P1 - P0) + 6 (1-t) t (P2 - P1) + 3 t^2 (P3 - P2)

Batch sampling uses characteristic matrix form ``powers(t) @ CUBIC @ P``.
Parameter t is always clamped to 0..1.
"""
import numpy as np

from .vectors import as_point, clamp01, normalize

CUBIC = np.array([[1, 0, 0, 0], [-3, 3, 0, 0], [3, -6, 3, 0], [-1, 3, -3, 1]], dtype=np.float64)


def point(p0, p1, p2, p3, t):
    "position on cubic segment at t"
    t = clamp01(t)
    s = 1.0 - t
    return (
        s * s * s * np.asarray(p0, dtype=np.float64)
        + 3.0 * s * s * t * np.asarray(p1, dtype=np.float64)
        + 3.0 * s * t * t * np.asarray(p2, dtype=np.float64)
        + t * t * t * np.asarray(p3, dtype=np.float64)
    )


def velocity(p0, p1, p2, p3, t):
    "first derivative of cubic segment at t, unnormalized"
    t = clamp01(t)
    s = 1.0 - t
    p0, p1, p2, p3 = (np.asarray(p, dtype=np.float64) for p in (p0, p1, p2, p3))
    return 3.0 * s * s * (p1 - p0) + 6.0 * s * t * (p2 - p1) + 3.0 * t * t * (p3 - p2)


def powers(tt, d):
    "[1, t, t^2, ..., t^d]"
    tt = np.asarray(tt, dtype=np.float64)
    return np.stack([tt**i for i in range(d + 1)], axis=-1)


def powers_dt(tt, d):
    "[0, 1, 2t, ..., d t^(d-1)]"
    tt = np.asarray(tt, dtype=np.float64)
    return np.stack([np.zeros_like(tt)] + [i * tt ** (i - 1) for i in range(1, d + 1)], axis=-1)


def sample(cpoints, ts):
    """Evaluate one cubic segment at many parameters.

    Args:
        cpoints: control points, shape (4, 3)
        ts: parameters, shape (M,), clamped to 0..1

    Returns:
        points, shape (M, 3)
    """
    cpoints = np.asarray(cpoints, dtype=np.float64)
    if cpoints.shape != (4, 3):
        raise ValueError(f"expected (4, 3) control points, got {cpoints.shape}")
    ts = np.clip(np.asarray(ts, dtype=np.float64), 0.0, 1.0)
    return powers(ts, 3) @ (CUBIC @ cpoints)


def sample_velocity(cpoints, ts):
    "same as `sample` for first derivative"
    cpoints = np.asarray(cpoints, dtype=np.float64)
    ts = np.clip(np.asarray(ts, dtype=np.float64), 0.0, 1.0)
    return powers_dt(ts, 3) @ (CUBIC @ cpoints)


class BezierCurve:
    """Single cubic curve with four freely editable control points"""

    def __init__(self, points=None):
        if points is None:
            self.reset()
        else:
            pts = np.array(points, dtype=np.float64)
            if pts.shape != (4, 3):
                raise ValueError(f"expected (4, 3) control points, got {pts.shape}")
            self.points = pts

    def reset(self):
        self.points = np.array([[1, 0, 0], [2, 0, 0], [3, 0, 0], [4, 0, 0]], dtype=np.float64)

    def __getitem__(self, index):
        return self.points[index].copy()

    def __setitem__(self, index, value):
        self.points[index] = as_point(value)

    def point(self, t):
        return point(*self.points, t)

    def velocity(self, t):
        return velocity(*self.points, t)

    def direction(self, t):
        return normalize(self.velocity(t))


class Line:
    """Straight segment from p0 to p1"""

    def __init__(self, p0=(0.0, 0.0, 0.0), p1=(1.0, 0.0, 0.0)):
        self.p0 = as_point(p0)
        self.p1 = as_point(p1)

    def point(self, t):
        t = clamp01(t)
        return (1.0 - t) * self.p0 + t * self.p1

    def direction(self):
        return normalize(self.p1 - self.p0)
