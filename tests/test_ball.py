from fractions import Fraction

import numpy as np
import pytest
from lazy_sets import ArgumentError, Ball, UsageError, an_element, is_bounded, is_empty, translate


def ball(center, radius, dtype):
    return Ball(np.asarray(center, dtype=dtype), dtype(radius))


def vec_of(values, dtype):
    return np.asarray(values, dtype=dtype)


@pytest.mark.parametrize("dtype", [np.float64, np.float32])
def test_support_vector_1d(dtype):
    b = ball([0], 1, dtype)
    assert b.dim == 1
    assert np.array_equal(b.support_vector(vec_of([1], dtype)), [1])
    assert np.array_equal(b.support_vector(vec_of([-1], dtype)), [-1])


@pytest.mark.parametrize("dtype", [np.float64, np.float32])
def test_support_vector_2d(dtype):
    b = ball([0, 0], 1, dtype)
    assert b.dim == 2
    for d in ([1, 0], [-1, 0], [0, 1], [0, -1]):
        assert np.array_equal(b.support_vector(vec_of(d, dtype)), d)
    # Zero direction returns the center
    assert np.array_equal(b.support_vector(vec_of([0, 0], dtype)), [0, 0])


@pytest.mark.parametrize("dtype", [np.float64, np.float32])
def test_support_vector_not_centered(dtype):
    b = ball([1, 2], 1, dtype)
    assert np.array_equal(b.support_vector(vec_of([1, 0], dtype)), [2, 2])
    assert np.array_equal(b.support_vector(vec_of([-1, 0], dtype)), [0, 2])
    assert np.array_equal(b.support_vector(vec_of([0, 1], dtype)), [1, 3])
    assert np.array_equal(b.support_vector(vec_of([0, -1], dtype)), [1, 1])
    assert np.array_equal(b.support_vector(vec_of([0, 0], dtype)), [1, 2])


@pytest.mark.parametrize("dtype", [np.float64, np.float32])
def test_support_vector_radius_two(dtype):
    b = ball([0, 0], 2, dtype)
    assert np.array_equal(b.support_vector(vec_of([1, 0], dtype)), [2, 0])
    assert np.array_equal(b.support_vector(vec_of([-1, 0], dtype)), [-2, 0])
    assert np.array_equal(b.support_vector(vec_of([0, 1], dtype)), [0, 2])
    assert np.array_equal(b.support_vector(vec_of([0, -1], dtype)), [0, -2])


def test_support_vector_scales_direction():
    """The direction is normalized; its length does not matter."""
    b = Ball([1.0, 1.0], 2.0)
    assert np.allclose(b.support_vector([3.0, 4.0]), [1.0 + 1.2, 1.0 + 1.6])
    assert np.allclose(b.support_vector([30.0, 40.0]), b.support_vector([3.0, 4.0]))


def test_support_vector_is_member():
    rng = np.random.default_rng(3)
    for _ in range(50):
        n = int(rng.integers(1, 6))
        b = Ball(rng.uniform(-100, 100, n), float(rng.uniform(0.1, 10.0)))
        d = rng.normal(size=n)
        assert b.contains(b.support_vector(d))


def test_support_function():
    b = Ball([0.0, 0.0], 2.0)
    assert b.support_function([3.0, 4.0]) == pytest.approx(10.0)


def test_membership():
    b = Ball([0.0, 0.0], 1.0)
    assert b.contains([np.cos(0.3), np.sin(0.3)])
    assert [0.5, 0.5] in b
    assert not b.contains([1.0 + 1e-6, 0.0])
    assert [1.0, 1.0] not in b

    with pytest.raises(UsageError):
        b.contains([0.0, 0.0, 0.0])


def test_membership_exact():
    """Integer and fraction balls compare squared distances exactly."""
    b = Ball([0, 0], 5)
    assert b.contains([3, 4])
    assert not b.contains([3, 5])

    half = Fraction(1, 2)
    f = Ball(np.array([half, half], dtype=object), half)
    assert f.contains(np.array([half, Fraction(1)], dtype=object))
    assert not f.contains(np.array([half, Fraction(1) + Fraction(1, 10**20)], dtype=object))


def test_degenerate_ball():
    b = Ball([1, 2], 0)
    assert b.contains([1, 2])
    assert not b.contains([1, 3])
    assert np.array_equal(b.support_vector([1, 0]), [1, 2])


def test_radius_and_diameter():
    b = Ball([0.0, 0.0], 2.0)
    assert b.radius_p() == pytest.approx(2.0)
    assert b.radius_p(2) == pytest.approx(2.0)
    # smallest enclosing 1-norm ball of a Euclidean ball
    assert b.radius_p(1) == pytest.approx(2.0 * np.sqrt(2.0))
    assert b.diameter_p(1) == pytest.approx(4.0 * np.sqrt(2.0))
    assert b.diameter_p() == pytest.approx(4.0)


def test_invalid_radius():
    with pytest.raises(ArgumentError):
        Ball([0.0, 0.0], -1.0)
    with pytest.raises(ArgumentError):
        Ball([0.0, 0.0], [1.0, 1.0])


def test_bounded_nonempty_element():
    b = Ball([1, 2], 2)
    assert is_bounded(b)
    assert not is_empty(b)
    assert an_element(b) in b


def test_translate():
    b = Ball([1, 2], 2)
    assert translate(b, [1, 2]) == Ball([2, 4], 2)
    assert b == Ball([1, 2], 2)
    assert translate(b, [1, 2]) != Ball([2, 4], 3)
