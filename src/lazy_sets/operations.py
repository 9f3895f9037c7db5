# MIT License (see LICENSE)
"""
Free-function forms of the shape queries.

Thin wrappers so that callers can write ``translate(B, v)`` or
``an_element(H)`` uniformly for every shape, including third-party convex
sets that only implement the methods.
"""
from __future__ import annotations

import numpy as np

from .tolerance import ToleranceConfig
from .types import ConvexSet, LazySet


def dim(s: ConvexSet) -> int:
    """Ambient dimension of s."""
    return s.dim


def support_vector(d, s: ConvexSet) -> np.ndarray:
    """Support vector of s in direction d."""
    return s.support_vector(d)


def support_function(d, s: ConvexSet):
    """Support function of s evaluated at d."""
    if isinstance(s, LazySet):
        return s.support_function(d)
    d = np.asarray(d)
    return np.dot(d, s.support_vector(d))


def contains(x, s: ConvexSet, tol: ToleranceConfig | None = None) -> bool:
    """Membership of the point x in s."""
    return s.contains(x, tol)


def an_element(s: LazySet) -> np.ndarray:
    """A point of s (the center for the concrete shapes)."""
    return s.an_element()


def is_bounded(s: LazySet) -> bool:
    return s.is_bounded()


def is_empty(s: LazySet) -> bool:
    return s.is_empty()


def translate(s: LazySet, v) -> LazySet:
    """s shifted by v; the original set is unchanged."""
    return s.translate(v)
