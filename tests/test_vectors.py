import numpy as np
import pytest

from splineomatic.vectors import as_point, clamp01, distance, length, normalize


def test_as_point_copies():
    src = np.array([1.0, 2.0, 3.0])
    p = as_point(src)
    p[0] = 10.0
    assert src[0] == 1.0


def test_as_point_rejects_bad_shape():
    with pytest.raises(ValueError):
        as_point((1.0, 2.0))


def test_length_and_distance():
    assert length(np.array([3.0, 4.0, 0.0])) == pytest.approx(5.0)
    assert distance((1, 1, 1), (1, 1, 3)) == pytest.approx(2.0)


def test_normalize():
    np.testing.assert_allclose(normalize(np.array([0.0, 0.0, 5.0])), [0, 0, 1])


def test_normalize_zero_is_zero():
    np.testing.assert_array_equal(normalize(np.zeros(3)), [0, 0, 0])


@pytest.mark.parametrize("t, expected", [(-1.0, 0.0), (0.25, 0.25), (3.0, 1.0)])
def test_clamp01(t, expected):
    assert clamp01(t) == expected


def test_clamp01_nan():
    assert clamp01(float("nan")) == 0.0
