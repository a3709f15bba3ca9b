import pytest

from splineomatic.spline import BezierSpline


@pytest.fixture
def spline():
    "default single straight curve (1,0,0) .. (4,0,0)"
    return BezierSpline()


@pytest.fixture
def spline2():
    "two curves (1,0,0) .. (7,0,0)"
    s = BezierSpline()
    s.add_curve()
    return s
