"""
Cubic Bezier splines with continuity constraints between curves.
"""
import logging

from .bezier import BezierCurve, Line
from .decorator import Placement, decorate
from .errors import ControlPointIndexError, InvalidSplineError, SplineError
from .spline import BezierSpline, ControlPointMode
from .walker import SplineWalker, WalkerMode, WalkerState

__version__ = "0.1"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BezierCurve",
    "BezierSpline",
    "ControlPointIndexError",
    "ControlPointMode",
    "InvalidSplineError",
    "Line",
    "Placement",
    "SplineError",
    "SplineWalker",
    "WalkerMode",
    "WalkerState",
    "decorate",
]
