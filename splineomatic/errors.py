"""Exceptions raised by spline operations"""


class SplineError(Exception):
    """Base class for spline errors"""


class ControlPointIndexError(SplineError, IndexError):
    def __init__(self, index, count):
        super().__init__(f"control point index {index} out of range 0..{count - 1}")
        self.index = index
        self.count = count


class InvalidSplineError(SplineError, ValueError):
    """Spline data violates structural invariants

    Raised when points count is not 3*C+1, modes count is not C+1,
    or a loop has mismatching ends.
    """
