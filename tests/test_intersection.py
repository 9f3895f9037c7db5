from fractions import Fraction

import numpy as np
import pytest
from lazy_sets import Ball, BallInf, Box, Singleton, UsageError, is_intersection_empty


@pytest.mark.parametrize("dtype", [np.float64, np.float32])
def test_ball_intersection_cases(dtype):
    N = lambda x: np.asarray(x, dtype=dtype)
    b1 = Ball(N([0, 0]), dtype(2))
    b2 = Ball(N([2, 2]), dtype(2))
    b3 = Ball(N([4, 4]), dtype(2))
    b4 = Ball(N([1, 1]), dtype(1))

    empty, point = is_intersection_empty(b1, b2, witness=True)
    assert not is_intersection_empty(b1, b2) and not empty
    assert b1.contains(point) and b2.contains(point)

    # center distance 4√2 ≈ 5.66 > 4
    assert is_intersection_empty(b1, b3) and is_intersection_empty(b1, b3, witness=True)[0]

    empty, point = is_intersection_empty(b2, b1, witness=True)
    assert not is_intersection_empty(b2, b1) and not empty
    assert b2.contains(point) and b1.contains(point)

    empty, point = is_intersection_empty(b1, b4, witness=True)
    assert not is_intersection_empty(b1, b4) and not empty
    assert b1.contains(point) and b4.contains(point)


def test_empty_result_has_no_witness():
    result = is_intersection_empty(Ball([0.0, 0.0], 2.0), Ball([4.0, 4.0], 2.0), witness=True)
    assert result == (True, None)


def test_ball_witness_splits_segment():
    """The witness divides the segment between the centers in the ratio ra : rb."""
    empty, point = is_intersection_empty(Ball([0.0, 0.0], 2.0), Ball([2.0, 2.0], 2.0), witness=True)
    assert not empty
    assert np.allclose(point, [1.0, 1.0])

    empty, point = is_intersection_empty(Ball([0.0, 0.0], 3.0), Ball([4.0, 0.0], 1.0), witness=True)
    assert not empty
    assert np.allclose(point, [3.0, 0.0])


def test_tangent_balls_intersect():
    """Externally tangent balls share one point."""
    empty, point = is_intersection_empty(Ball([0, 0], 1), Ball([2, 0], 1), witness=True)
    assert not empty
    assert np.allclose(point, [1.0, 0.0])

    # tangent up to rounding
    a = Ball([0.1, 0.2], 0.3)
    b = Ball([0.1 + 0.6, 0.2], 0.3)
    empty, point = is_intersection_empty(a, b, witness=True)
    assert not empty
    assert a.contains(point) and b.contains(point)

    assert is_intersection_empty(Ball([0.0, 0.0], 1.0), Ball([2.001, 0.0], 1.0))


def test_zero_radius_balls():
    assert not is_intersection_empty(Ball([1, 2], 0), Ball([1, 2], 0))
    assert is_intersection_empty(Ball([1, 2], 0), Ball([1, 3], 0))


def test_exact_balls():
    half = Fraction(1, 2)
    a = Ball(np.array([0, 0], dtype=object), half)
    b = Ball(np.array([1, 0], dtype=object), half)
    empty, point = is_intersection_empty(a, b, witness=True)
    assert not empty
    assert point[0] == half
    c = Ball(np.array([1 + Fraction(1, 10**20), 0], dtype=object), half)
    assert is_intersection_empty(a, c)


def test_box_box():
    H = Box([0.0, 0.0], [1.0, 1.0])
    empty, point = is_intersection_empty(H, Box([1.5, 0.0], [1.0, 1.0]), witness=True)
    assert not empty
    assert np.allclose(point, [0.75, 0.0])

    assert is_intersection_empty(H, Box([3.0, 0.0], [1.0, 1.0]))
    assert is_intersection_empty(Box([3.0, 0.0], [1.0, 1.0]), H)

    # boxes sharing a face
    empty, point = is_intersection_empty(H, Box([2.0, 0.0], [1.0, 1.0]), witness=True)
    assert not empty
    assert np.allclose(point, [1.0, 0.0])


def test_box_ballinf():
    H = Box([0.0, 0.0], [1.0, 2.0])
    B = BallInf([1.5, 2.5], 1.0)
    empty, point = is_intersection_empty(H, B, witness=True)
    assert not empty
    assert H.contains(point) and B.contains(point)
    assert is_intersection_empty(H, BallInf([3.5, 0.0], 1.0))


def test_box_ball_both_orders():
    H = Box([0.0, 0.0], [1.0, 1.0])
    B = Ball([2.0, 2.0], 1.5)
    empty, point = is_intersection_empty(H, B, witness=True)
    assert not empty
    # nearest box point to the ball center
    assert np.array_equal(point, [1.0, 1.0])
    empty, point = is_intersection_empty(B, H, witness=True)
    assert not empty
    assert H.contains(point) and B.contains(point)

    far = Ball([3.0, 3.0], 1.0)
    assert is_intersection_empty(H, far)
    assert is_intersection_empty(far, H)


def test_ball_inside_box():
    H = Box([0.0, 0.0], [5.0, 5.0])
    B = Ball([1.0, -1.0], 0.5)
    empty, point = is_intersection_empty(H, B, witness=True)
    assert not empty
    assert np.array_equal(point, [1.0, -1.0])


def test_singletons():
    S = Singleton([1.0, 1.0])
    B = Ball([0.0, 0.0], 2.0)
    empty, point = is_intersection_empty(S, B, witness=True)
    assert not empty
    assert np.array_equal(point, [1.0, 1.0])
    empty, point = is_intersection_empty(B, S, witness=True)
    assert not empty
    assert np.array_equal(point, [1.0, 1.0])

    assert is_intersection_empty(Singleton([3.0, 3.0]), B)
    assert is_intersection_empty(B, Singleton([3.0, 3.0]))
    assert not is_intersection_empty(S, Singleton([1.0, 1.0]))
    assert is_intersection_empty(S, Singleton([1.0, 1.5]))


def test_symmetry_random_pairs():
    """The boolean result does not depend on the argument order."""
    rng = np.random.default_rng(11)

    def random_shape(n):
        c = rng.uniform(-3, 3, n)
        if rng.random() < 0.5:
            return Ball(c, float(rng.uniform(0.1, 2.0)))
        return Box(c, rng.uniform(0.1, 2.0, n))

    for _ in range(200):
        n = int(rng.integers(1, 4))
        a, b = random_shape(n), random_shape(n)
        empty_ab, p_ab = is_intersection_empty(a, b, witness=True)
        empty_ba, p_ba = is_intersection_empty(b, a, witness=True)
        assert empty_ab == empty_ba
        if not empty_ab:
            assert a.contains(p_ab) and b.contains(p_ab)
            assert a.contains(p_ba) and b.contains(p_ba)
        else:
            assert p_ab is None and p_ba is None


def test_dimension_mismatch():
    with pytest.raises(UsageError):
        is_intersection_empty(Ball([0.0, 0.0], 1.0), Ball([0.0, 0.0, 0.0], 1.0))
    with pytest.raises(UsageError):
        is_intersection_empty(Box([0.0], [1.0]), Singleton([0.0, 0.0]))


def test_unsupported_operand():
    with pytest.raises(TypeError):
        is_intersection_empty(Ball([0.0, 0.0], 1.0), _DimOnly())
    with pytest.raises(TypeError):
        is_intersection_empty(_DimOnly(), Box([0.0, 0.0], [1.0, 1.0]), witness=True)
    # not even a dimension
    with pytest.raises(TypeError):
        is_intersection_empty([0.0, 0.0], Ball([0.0, 0.0], 1.0))


class _DimOnly:
    """Has a dimension but no support vector or membership."""
    dim = 2
