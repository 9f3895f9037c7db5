# MIT License (see LICENSE)
"""
Utility functions for vector handling and norms.

Points, directions and radius vectors are 1-D numpy arrays. Their dtype is
preserved so that exact inputs (integers, fractions.Fraction in object
arrays) stay exact; floating inputs are never silently converted.
"""
from __future__ import annotations

import numpy as np

from .errors import DimensionMismatchError, UsageError


def vec(x) -> np.ndarray:
    """
    Convert an array-like to a fresh 1-D numpy array, keeping its dtype.

    Raises:
        DimensionMismatchError: If the input is not one-dimensional.
    """
    v = np.array(x)
    if v.ndim != 1:
        raise DimensionMismatchError(f"Expected a vector, got an array of shape {v.shape}")
    return v


def frozen(v: np.ndarray) -> np.ndarray:
    """Return v with its write flag cleared (used for arrays stored on shapes)."""
    v.setflags(write=False)
    return v


def check_dim(n: int, m: int, what: str = "operand") -> None:
    """Raise UsageError unless two ambient dimensions agree."""
    if n != m:
        raise UsageError(f"Dimension mismatch: {what} has dimension {m}, expected {n}")


def sign_cadlag(d: np.ndarray) -> np.ndarray:
    """
    Sign vector with sign(0) = +1.

    Right-continuous ("cadlag") sign, so a zero direction component selects
    the upper bound. This gives box support vectors a deterministic
    tie-break on axis-degenerate directions.
    """
    return np.where(np.asarray(d) >= 0, 1, -1).astype(np.int8)


def unit_vector(n: int, i: int, sign: int = 1) -> np.ndarray:
    """The i-th signed canonical direction in n dimensions."""
    e = np.zeros(n, dtype=np.int8)
    e[i] = sign
    return e


def vector_norm(v, p: float = np.inf):
    """
    p-norm of a vector.

    The 1-norm and infinity-norm of exact (object) arrays are computed
    exactly; every other case goes through numpy in float64.
    """
    v = np.asarray(v)
    if v.size == 0:
        return 0
    if v.dtype == object:
        a = np.abs(v)
        if p == np.inf:
            return max(a)
        if p == 1:
            return sum(a)
        v = v.astype(np.float64)
    return float(np.linalg.norm(v, p))


def euclidean_distance(x: np.ndarray, y: np.ndarray) -> float:
    """Euclidean distance between two points."""
    return vector_norm(np.asarray(x) - np.asarray(y), 2)
