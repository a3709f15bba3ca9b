"""Vector helpers.

All points and vectors are numpy arrays of shape (3,) with float64 components.
"""
import math

import numpy as np


def as_point(value):
    "coerce a 3-sequence into a fresh float array"
    p = np.array(value, dtype=np.float64)
    if p.shape != (3,):
        raise ValueError(f"expected 3 components, got shape {p.shape}")
    return p


def length(v):
    return float(np.sqrt(np.dot(v, v)))


def distance(a, b):
    return length(np.subtract(a, b))


def normalize(v):
    """Unit vector in direction of v.

    A zero-length vector has no direction, it is returned as zero vector.
    """
    n = length(v)
    if n == 0.0:
        return np.zeros(3, dtype=np.float64)
    return np.asarray(v, dtype=np.float64) / n


def clamp01(t):
    "clamp t to 0..1, NaN goes to 0"
    t = float(t)
    if math.isnan(t):
        return 0.0
    return min(max(t, 0.0), 1.0)
