"""
Piecewise cubic Bezier splines.

A spline of C curves holds 3*C+1 control points.
Neighbour curves share end points, so points with index ``3*i`` are joints,
and points ``3*i-1`` and ``3*i+1`` are tangent handles of the joint i.

Each joint has a mode constraining its handles:

    FREE
        No constraint.
    ALIGNED
        Handles are collinear through the joint, their distances may differ.
        The first derivative keeps direction across the joint.
    MIRRORED
        Handles are reflections of each other through the joint.
        Both first and second derivatives are continuous.

End joints of an open spline are never constrained.
When the spline is a loop, first and last points coincide and share a mode,
handles of the end joints are constrained across the array boundary.

The constraints hold after every public call:
points and modes are changed only by methods of the spline,
and every such method enforces the mode of the affected joint.
"""
import enum
import json
import logging
import operator
from pathlib import Path

import numpy as np

from . import bezier
from .errors import ControlPointIndexError, InvalidSplineError
from .vectors import as_point, clamp01, distance, normalize

logger = logging.getLogger(__name__)


class ControlPointMode(enum.Enum):
    FREE = "free"
    ALIGNED = "aligned"
    MIRRORED = "mirrored"

    @classmethod
    def parse(cls, value):
        "mode from enum member or its case-insensitive name"
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"invalid control point mode {value!r}") from None


class BezierSpline:
    """Spline of cubic Bezier curves with constrained joints.

    Args:
        new_curve_offset:
            Displacement between consecutive points appended by `add_curve`.
    """

    def __init__(self, new_curve_offset=(1.0, 0.0, 0.0)):
        self._offset = as_point(new_curve_offset)
        self._points = None
        self._modes = None
        self._loop = False
        self.reset()

    def reset(self):
        "restore single straight curve from (1,0,0) to (4,0,0) with free ends"
        self._points = np.array([[1, 0, 0], [2, 0, 0], [3, 0, 0], [4, 0, 0]], dtype=np.float64)
        self._modes = [ControlPointMode.FREE, ControlPointMode.FREE]
        self._loop = False

    def __repr__(self):
        return f"<BezierSpline curves={self.curve_count} loop={self._loop}>"

    # structure

    @property
    def control_point_count(self):
        return len(self._points)

    @property
    def curve_count(self):
        return (len(self._points) - 1) // 3

    @property
    def control_points(self):
        "copy of all control points, shape (3*C+1, 3)"
        return self._points.copy()

    @property
    def modes(self):
        return tuple(self._modes)

    @property
    def loop(self):
        return self._loop

    @loop.setter
    def loop(self, value):
        self._loop = bool(value)
        if self._loop:
            self._modes[-1] = self._modes[0]
            # moving the first point onto itself syncs the last point and its handles
            self.set_control_point(0, self._points[0])
        logger.debug("loop set to %s", self._loop)

    # evaluation

    def _locate(self, t):
        "split global t into index of first curve point and local t"
        if t >= 1.0:
            return len(self._points) - 4, 1.0
        count = self.curve_count
        t = clamp01(t) * count
        i = min(int(t), count - 1)
        return i * 3, t - i

    def point(self, t):
        i, u = self._locate(t)
        return bezier.point(*self._points[i : i + 4], u)

    def velocity(self, t):
        i, u = self._locate(t)
        return bezier.velocity(*self._points[i : i + 4], u)

    def direction(self, t):
        "unit tangent at t, zero vector where the curve is degenerate"
        return normalize(self.velocity(t))

    def _sample(self, evaluate, steps_per_curve):
        "apply per-curve batch evaluator at uniform t"
        if steps_per_curve < 1:
            raise ValueError("steps_per_curve must be >= 1")
        count = self.curve_count
        ts = np.linspace(0.0, 1.0, steps_per_curve * count + 1)
        scaled = ts * count
        idx = np.minimum(np.floor(scaled).astype(int), count - 1)
        local = scaled - idx
        out = np.empty((len(ts), 3), dtype=np.float64)
        for i in range(count):
            mask = idx == i
            out[mask] = evaluate(self._points[3 * i : 3 * i + 4], local[mask])
        return out

    def sample(self, steps_per_curve=10):
        """Points at uniform t, for drawing the spline as a polyline.

        Returns:
            array of shape (steps_per_curve * C + 1, 3)
        """
        return self._sample(bezier.sample, steps_per_curve)

    def velocities(self, steps_per_curve=10):
        "velocities at the same t as `sample`"
        return self._sample(bezier.sample_velocity, steps_per_curve)

    def directions(self, steps_per_curve=10, scale=0.5):
        "list of (origin, tip) pairs visualizing direction along the spline"
        origins = self.sample(steps_per_curve)
        velocities = self.velocities(steps_per_curve)
        return [(origin, origin + normalize(v) * scale) for origin, v in zip(origins, velocities)]

    # control points

    def _check_index(self, index):
        index = operator.index(index)
        if not 0 <= index < len(self._points):
            raise ControlPointIndexError(index, len(self._points))
        return index

    def get_control_point(self, index):
        index = self._check_index(index)
        return self._points[index].copy()

    def set_control_point(self, index, point):
        """Move a control point.

        Moving a joint drags its handles along by the same displacement.
        In a loop, moving either end moves both ends and handles on both sides.
        """
        index = self._check_index(index)
        point = as_point(point)
        points = self._points
        if index % 3 == 0:
            delta = point - points[index]
            if self._loop:
                if index == 0:
                    points[1] += delta
                    points[-2] += delta
                    points[-1] = point
                elif index == len(points) - 1:
                    points[0] = point
                    points[1] += delta
                    points[index - 1] += delta
                else:
                    points[index - 1] += delta
                    points[index + 1] += delta
            else:
                if index > 0:
                    points[index - 1] += delta
                if index + 1 < len(points):
                    points[index + 1] += delta
        points[index] = point
        self._enforce_mode(index)

    def get_control_point_mode(self, index):
        index = self._check_index(index)
        return self._modes[(index + 1) // 3]

    def set_control_point_mode(self, index, mode):
        """Change mode of the joint the point belongs to.

        Points 3*i-1, 3*i, 3*i+1 all belong to joint i.
        """
        index = self._check_index(index)
        mode = ControlPointMode.parse(mode)
        mode_index = (index + 1) // 3
        self._modes[mode_index] = mode
        if self._loop:
            if mode_index == 0:
                self._modes[-1] = mode
            elif mode_index == len(self._modes) - 1:
                self._modes[0] = mode
        logger.debug("joint %d mode set to %s", mode_index, mode.value)
        self._enforce_mode(index)

    def add_curve(self):
        "append a straight curve after the last point"
        points = self._points
        if points is None or len(points) < 4 or (len(points) - 1) % 3 != 0:
            raise InvalidSplineError("spline must have 3*C+1 points, C >= 1, to add a curve")
        last = points[-1]
        extra = np.array([last + self._offset * k for k in (1, 2, 3)])
        self._points = np.concatenate([points, extra])
        self._modes.append(self._modes[-1])
        self._enforce_mode(len(self._points) - 4)
        if self._loop:
            self._points[-1] = self._points[0]
            self._modes[-1] = self._modes[0]
            self._enforce_mode(0)
        logger.debug("curve added, %d curves", self.curve_count)

    def _enforce_mode(self, index):
        mode_index = (index + 1) // 3
        mode = self._modes[mode_index]
        if mode is ControlPointMode.FREE or not self._loop and (mode_index == 0 or mode_index == len(self._modes) - 1):
            return

        points = self._points
        count = len(points)
        middle_index = mode_index * 3
        # the point being edited stays put, its opposite handle follows
        if index <= middle_index:
            fixed_index = middle_index - 1
            if fixed_index < 0:
                fixed_index = count - 2
            enforced_index = middle_index + 1
            if enforced_index >= count:
                enforced_index = 1
        else:
            fixed_index = middle_index + 1
            if fixed_index >= count:
                fixed_index = 1
            enforced_index = middle_index - 1
            if enforced_index < 0:
                enforced_index = count - 2

        middle = points[middle_index]
        tangent = middle - points[fixed_index]
        if mode is ControlPointMode.ALIGNED:
            tangent = normalize(tangent) * distance(middle, points[enforced_index])
        points[enforced_index] = middle + tangent

    # persistence

    def copy(self):
        other = BezierSpline.__new__(BezierSpline)
        other._offset = self._offset.copy()
        other._points = self._points.copy()
        other._modes = list(self._modes)
        other._loop = self._loop
        return other

    def to_dict(self):
        return {
            "points": self._points.tolist(),
            "modes": [m.value for m in self._modes],
            "loop": self._loop,
        }

    @classmethod
    def from_dict(cls, data, new_curve_offset=(1.0, 0.0, 0.0)):
        """Build spline from `to_dict` layout.

        The data is checked against the structural invariants, but constraints of modes are not re-enforced.
        """
        try:
            points = np.array(data["points"], dtype=np.float64)
            modes = [ControlPointMode.parse(m) for m in data["modes"]]
            loop = data.get("loop", False)
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidSplineError(f"invalid spline data: {exc}") from exc

        if not isinstance(loop, bool):
            raise InvalidSplineError(f"loop must be true or false, got {loop!r}")

        if points.ndim != 2 or points.shape[1] != 3:
            raise InvalidSplineError(f"points must have shape (N, 3), got {points.shape}")
        if len(points) < 4 or (len(points) - 1) % 3 != 0:
            raise InvalidSplineError(f"points count must be 3*C+1 with C >= 1, got {len(points)}")
        curves = (len(points) - 1) // 3
        if len(modes) != curves + 1:
            raise InvalidSplineError(f"expected {curves + 1} modes, got {len(modes)}")
        if loop and (not np.array_equal(points[0], points[-1]) or modes[0] is not modes[-1]):
            raise InvalidSplineError("loop spline must have matching first and last points and modes")

        spline = cls(new_curve_offset)
        spline._points = points
        spline._modes = modes
        spline._loop = loop
        return spline

    def save(self, path):
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(self.to_dict(), fh, indent=2)

    @classmethod
    def load(cls, path, new_curve_offset=(1.0, 0.0, 0.0)):
        with Path(path).open("r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise InvalidSplineError("spline file must contain an object")
        return cls.from_dict(data, new_curve_offset)
