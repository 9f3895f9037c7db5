# MIT License (see LICENSE)
"""
Support-function intersection test for arbitrary convex sets.

This is the generic fallback of is_intersection_empty() for shape pairs
without a closed form. It works in Minkowski space: A and B intersect iff
the origin lies in A - B, and the support vector of A - B in direction d
is supA(d) - supB(-d).

The search is the n-dimensional GJK distance iteration. It keeps a simplex
of support points of A - B (each remembered as its pair of points in A and
B) and the point v of the simplex's convex hull closest to the origin,
with barycentric weights. The weights give a point pa of A and a point pb
of B with v = pa - pb. Each step either

- certifies disjointness: w = supA(-v) - supB(v) is the point of A - B
  with the smallest projection on v; if that projection is positive,
  the hyperplane orthogonal to v separates A from B; or
- certifies intersection: pa passes B's membership test (or pb passes A's),
  so a common point is known; or
- adds w to the simplex and re-solves for the closest point of the new
  hull, dropping the simplex points that no longer carry weight.

A pair is reported as intersecting only together with a point that both
membership tests accept.

Usage:
    empty, point = gjk_intersection(ball, custom_set, tol)
"""
from __future__ import annotations
import logging

import numpy as np

from ..constants import GJK_MAX_ITERS
from ..tolerance import ToleranceConfig, leq
from ..types import ConvexSet
from ..util import unit_vector

logger = logging.getLogger(__name__)


def minkowski_support(a: ConvexSet, b: ConvexSet, d: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Support points of A and B that give the support vector of A - B along d.

    Returns:
        Tuple (qa, qb) with qa = supA(d) and qb = supB(-d); qa - qb is the
        support vector of A - B.
    """
    qa = np.asarray(a.support_vector(d), dtype=np.float64)
    qb = np.asarray(b.support_vector(-d), dtype=np.float64)
    return qa, qb


def _common_point(a: ConvexSet, b: ConvexSet, pa: np.ndarray, pb: np.ndarray,
                  tol: ToleranceConfig) -> np.ndarray | None:
    """pa if it lies in B, else pb if it lies in A, else None."""
    if b.contains(pa, tol):
        return pa
    if a.contains(pb, tol):
        return pb
    return None


def _affine_minimizer(W: np.ndarray) -> np.ndarray:
    """
    Weights mu (summing to 1) of the point of the affine hull of the rows of
    W closest to the origin.

    Solves the optimality system [W W^T, 1; 1^T, 0] [mu; theta] = [0; 1].
    """
    k = len(W)
    M = np.ones((k + 1, k + 1))
    M[:k, :k] = W @ W.T
    M[k, k] = 0.0
    rhs = np.zeros(k + 1)
    rhs[k] = 1.0
    return np.linalg.lstsq(M, rhs, rcond=None)[0][:k]


def closest_on_hull(W: np.ndarray, lam: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Move the convex weights lam to the point of conv(W) closest to the origin.

    Wolfe's corral step: take the affine minimizer of the current points;
    if its weights are all positive it is the answer, otherwise walk from
    lam toward it until a weight reaches zero, drop that point and repeat.

    Args:
        W: Simplex points as rows.
        lam: Convex weights of the current point, one per row (0 for a
            newly added row).

    Returns:
        Tuple (keep, weights): indices of the rows that stay in the simplex
        and their positive weights.
    """
    keep = np.arange(len(W))
    lam = np.asarray(lam, dtype=np.float64)
    for _ in range(len(W)):
        mu = _affine_minimizer(W[keep])
        if np.all(mu > 0):
            return keep, mu
        neg = np.flatnonzero(mu <= 0)
        gap = lam[neg] - mu[neg]
        ratios = np.where(gap > 0, lam[neg] / np.where(gap > 0, gap, 1.0), 0.0)
        j = neg[int(np.argmin(ratios))]
        lam = lam + ratios.min() * (mu - lam)
        lam[j] = 0.0
        alive = lam > 0
        keep, lam = keep[alive], lam[alive]
    return keep, lam / lam.sum()


def gjk_intersection(
    a: ConvexSet,
    b: ConvexSet,
    tol: ToleranceConfig,
    max_iters: int = GJK_MAX_ITERS,
) -> tuple[bool, np.ndarray | None]:
    """
    Decide whether two convex sets are disjoint.

    Args:
        a: First convex set.
        b: Second convex set, same dimension as a.
        tol: Tolerances for the separation and membership tests.
        max_iters: Iteration limit.

    Returns:
        Tuple (empty, witness) where:
        - empty: False if a point accepted by both membership tests was
          found, True otherwise.
        - witness: That point when empty is False, else None.

    Note:
        The search stops without a separating direction only for sets that
        touch or nearly touch (distance within the zero tolerance), or when
        max_iters is reached. The midpoint of the closest pair is then tried
        as a common point; if it fails either membership test, the sets are
        reported disjoint and a warning is logged.
    """
    n = a.dim
    qa, qb = minkowski_support(a, b, unit_vector(n, 0).astype(np.float64))
    QA, QB = qa[np.newaxis, :], qb[np.newaxis, :]
    lam = np.ones(1)
    pa, pb = qa, qb
    dist = float(np.linalg.norm(pa - pb))

    for it in range(max_iters):
        pa, pb = lam @ QA, lam @ QB
        point = _common_point(a, b, pa, pb, tol)
        if point is not None:
            logger.debug("gjk: common point found after %d iterations", it)
            return False, point.copy()

        v = pa - pb
        vv = float(np.dot(v, v))
        dist = float(np.sqrt(vv))
        if dist == 0.0:
            break

        qa, qb = minkowski_support(a, b, -v)
        vw = float(np.dot(v, qa - qb))

        # Every z in A - B satisfies dot(v, z) >= dot(v, w)
        if not leq(vw / dist, 0.0, tol):
            logger.debug("gjk: separating direction found after %d iterations", it)
            return True, None

        # w gets no closer than v: the sets are within the zero tolerance
        if vv - vw <= tol.rtol * vv:
            break

        QA, QB = np.vstack([QA, qa]), np.vstack([QB, qb])
        keep, lam = closest_on_hull(QA - QB, np.append(lam, 0.0))
        QA, QB = QA[keep], QB[keep]
    else:
        logger.warning("gjk: no certificate after %d iterations (distance %.3g)", max_iters, dist)

    mid = 0.5 * (pa + pb)
    if a.contains(mid, tol) and b.contains(mid, tol):
        return False, mid
    logger.warning("gjk: no common point verified (distance %.3g); reporting disjoint sets", dist)
    return True, None
