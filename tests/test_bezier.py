import numpy as np
import pytest

from splineomatic import bezier
from splineomatic.bezier import BezierCurve, Line

STRAIGHT = [(1, 0, 0), (2, 0, 0), (3, 0, 0), (4, 0, 0)]


@pytest.fixture
def cpoints():
    rng = np.random.default_rng(7)
    return rng.uniform(-5, 5, size=(4, 3))


def test_endpoints_interpolated(cpoints):
    np.testing.assert_allclose(bezier.point(*cpoints, 0.0), cpoints[0])
    np.testing.assert_allclose(bezier.point(*cpoints, 1.0), cpoints[3])


def test_midpoint_of_straight_curve():
    np.testing.assert_allclose(bezier.point(*STRAIGHT, 0.5), [2.5, 0, 0])


def test_point_matches_polynomial(cpoints):
    t = 0.3
    s = 1 - t
    expected = s**3 * cpoints[0] + 3 * s**2 * t * cpoints[1] + 3 * s * t**2 * cpoints[2] + t**3 * cpoints[3]
    np.testing.assert_allclose(bezier.point(*cpoints, t), expected)


def test_t_is_clamped(cpoints):
    np.testing.assert_allclose(bezier.point(*cpoints, -2.0), cpoints[0])
    np.testing.assert_allclose(bezier.point(*cpoints, 7.0), cpoints[3])
    np.testing.assert_allclose(bezier.velocity(*cpoints, 7.0), bezier.velocity(*cpoints, 1.0))


@pytest.mark.parametrize("t", [0.0, 0.3, 1.0])
def test_velocity_of_evenly_spaced_points_is_constant(t):
    np.testing.assert_allclose(bezier.velocity(*STRAIGHT, t), [3, 0, 0])


def test_velocity_at_ends(cpoints):
    np.testing.assert_allclose(bezier.velocity(*cpoints, 0.0), 3 * (cpoints[1] - cpoints[0]))
    np.testing.assert_allclose(bezier.velocity(*cpoints, 1.0), 3 * (cpoints[3] - cpoints[2]))


def test_continuity(cpoints):
    a = bezier.point(*cpoints, 0.4)
    for eps in (1e-2, 1e-4, 1e-6):
        b = bezier.point(*cpoints, 0.4 + eps)
        assert np.linalg.norm(b - a) < 100 * eps


def test_sample_matches_point(cpoints):
    ts = np.linspace(0, 1, 11)
    expected = np.array([bezier.point(*cpoints, t) for t in ts])
    np.testing.assert_allclose(bezier.sample(cpoints, ts), expected, atol=1e-12)


def test_sample_velocity_matches_velocity(cpoints):
    ts = np.linspace(0, 1, 11)
    expected = np.array([bezier.velocity(*cpoints, t) for t in ts])
    np.testing.assert_allclose(bezier.sample_velocity(cpoints, ts), expected, atol=1e-12)


def test_sample_rejects_bad_shape():
    with pytest.raises(ValueError):
        bezier.sample(np.zeros((3, 3)), [0.5])


def test_curve_defaults():
    curve = BezierCurve()
    np.testing.assert_array_equal(curve.points, STRAIGHT)
    np.testing.assert_allclose(curve.point(0.5), [2.5, 0, 0])
    np.testing.assert_allclose(curve.direction(0.2), [1, 0, 0])


def test_curve_edit_and_reset():
    curve = BezierCurve()
    curve[1] = (2, 3, 0)
    np.testing.assert_array_equal(curve[1], [2, 3, 0])
    assert curve.velocity(0.0)[1] == pytest.approx(9.0)
    curve.reset()
    np.testing.assert_array_equal(curve[1], [2, 0, 0])


def test_line():
    line = Line((0, 0, 0), (0, 2, 0))
    np.testing.assert_allclose(line.point(0.5), [0, 1, 0])
    np.testing.assert_allclose(line.point(4.0), [0, 2, 0])
    np.testing.assert_allclose(line.direction(), [0, 1, 0])
