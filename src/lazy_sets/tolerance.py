# MIT License (see LICENSE)
"""
Tolerance-aware numeric comparisons.

Support vectors computed in floating point land on a facet only up to
rounding error, so every geometric predicate decides boundary cases
through these primitives instead of raw ``<=`` and ``==``:

    leq(x, y)            x <= y, or x ≈ y
    geq(x, y)            leq(y, x)
    is_approx(x, y)      both ≈ 0, or |x - y| <= atol + rtol * max(|x|, |y|)
    is_approx_zero(x)    |x| <= ztol

Tolerances depend on the numeric type. Floating types derive them from
machine epsilon; exact types (integers, fractions.Fraction) use zero
tolerances, which turns every comparison into an exact one.

Example:
    tol = default_tolerance(np.float64)
    leq(1.0 + 1e-12, 1.0, tol)   # True
    leq(1.1, 1.0, tol)           # False
"""
from __future__ import annotations
from dataclasses import dataclass
from functools import lru_cache

import numpy as np

from .constants import ZERO_TOL_FACTOR

# Object arrays without floating members are treated as exact.
EXACT = np.dtype(object)


@dataclass(frozen=True)
class ToleranceConfig:
    """
    Tolerances for approximate comparisons.

    Attributes:
        rtol: Relative tolerance.
        ztol: Absolute tolerance for comparisons against zero.
        atol: Absolute tolerance for comparisons between two numbers.
    """
    rtol: float = 0.0
    ztol: float = 0.0
    atol: float = 0.0

    @property
    def is_exact(self) -> bool:
        """True if all tolerances are zero (comparisons are exact)."""
        return self.rtol == 0 and self.ztol == 0 and self.atol == 0


@lru_cache(maxsize=None)
def _default_tolerance(dtype: np.dtype) -> ToleranceConfig:
    if np.issubdtype(dtype, np.floating):
        root_eps = float(np.sqrt(np.finfo(dtype).eps))
        return ToleranceConfig(rtol=root_eps, ztol=ZERO_TOL_FACTOR * root_eps, atol=0.0)
    return ToleranceConfig()


def default_tolerance(numeric_type) -> ToleranceConfig:
    """
    Default tolerances for a numeric type (dtype, scalar type or dtype name).

    Computed once per type. Non-floating types get zero tolerances.
    """
    return _default_tolerance(np.dtype(numeric_type))


def _value_dtype(value) -> np.dtype:
    a = np.asarray(value)
    if a.dtype != object:
        return a.dtype
    if any(isinstance(x, (float, np.floating)) for x in a.ravel()):
        return np.dtype(np.float64)
    return EXACT


def numeric_type(*values) -> np.dtype:
    """
    Common numeric type of scalars and arrays.

    Any floating operand makes the result floating; integers and exact
    object values (fractions) give the EXACT marker dtype.
    """
    dtypes = [_value_dtype(v) for v in values]
    floats = [d for d in dtypes if np.issubdtype(d, np.floating)]
    if floats:
        return np.result_type(*floats)
    return EXACT


def tolerance_for(*values) -> ToleranceConfig:
    """Default tolerances for the common numeric type of the given values."""
    return default_tolerance(numeric_type(*values))


def is_approx_zero(x, tol: ToleranceConfig | None = None) -> bool:
    """Return True iff |x| <= ztol."""
    if tol is None:
        tol = tolerance_for(x)
    return bool(abs(x) <= tol.ztol)


def is_approx(x, y, tol: ToleranceConfig | None = None) -> bool:
    """
    Return True iff x ≈ y.

    Two numbers that are both approximately zero are equal; otherwise the
    combined relative/absolute test |x - y| <= atol + rtol * max(|x|, |y|)
    decides. With x = ztol and y = -ztol the result is True even though
    |x - y| = 2 * ztol.
    """
    if tol is None:
        tol = tolerance_for(x, y)
    if is_approx_zero(x, tol) and is_approx_zero(y, tol):
        return True
    if x == y:
        return True
    return bool(abs(x - y) <= tol.atol + tol.rtol * max(abs(x), abs(y)))


def leq(x, y, tol: ToleranceConfig | None = None) -> bool:
    """
    Return True iff x <= y up to tolerance.

    For exact types this is plain ``x <= y``. For floating types the test
    is ``x <= y or is_approx(x, y)``.
    """
    if tol is None:
        tol = tolerance_for(x, y)
    if tol.is_exact:
        return bool(x <= y)
    return bool(x <= y) or is_approx(x, y, tol)


def geq(x, y, tol: ToleranceConfig | None = None) -> bool:
    """Return True iff x >= y up to tolerance (leq with swapped arguments)."""
    return leq(y, x, tol)
