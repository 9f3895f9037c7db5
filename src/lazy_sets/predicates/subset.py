# MIT License (see LICENSE)
"""
Subset test with counterexample witnesses.

is_subset(a, b) decides whether every point of a lies in b. There is no
single algorithm for this; the dispatcher picks the cheapest exact
criterion for the shape pair:

- Singleton a:            membership of its element.
- Ball in Ball:           ||ca - cb|| + ra <= rb.
- Box-like in box-like:   per-axis bounds.
- Any set in a box-like:  support vectors along the 2n signed axes.
- a with vertices:        every vertex is a member of b (the convex hull
                          of members is contained).

When the result is False a witness can be requested: a point of a that
fails membership in b.
"""
from __future__ import annotations
import logging

import numpy as np

from ..tolerance import ToleranceConfig, leq
from ..types import AbstractHyperrectangle, Ball, ConvexSet, Singleton, check_convex, tolerance_of
from ..util import check_dim, euclidean_distance, unit_vector

logger = logging.getLogger(__name__)

SubsetResult = tuple[bool, "np.ndarray | None"]


def is_subset(
    a: ConvexSet,
    b: ConvexSet,
    witness: bool = False,
    tol: ToleranceConfig | None = None,
) -> bool | SubsetResult:
    """
    Check whether a is a subset of b.

    Args:
        a: Candidate subset.
        b: Candidate superset.
        witness: If True, also return a counterexample.
        tol: Tolerances; defaults to those of the operands' numeric type.

    Returns:
        The boolean result, or with witness=True a tuple (result, point)
        where point lies in a but not in b if result is False, and is None
        otherwise.

    Raises:
        UsageError: If a and b have different dimensions.
        TypeError: If an operand is not a convex set, or no subset
            algorithm applies to the pair.
    """
    check_convex(a, b)
    check_dim(a.dim, b.dim, "superset")
    if tol is None:
        tol = tolerance_of(a, b)

    result, point = _dispatch(a, b, tol)
    if witness:
        return result, point
    return result


def _dispatch(a: ConvexSet, b: ConvexSet, tol: ToleranceConfig) -> SubsetResult:
    if isinstance(a, Singleton):
        logger.debug("subset: singleton in %s", type(b).__name__)
        return _element_in_set(a, b, tol)
    if isinstance(a, Ball) and isinstance(b, Ball):
        logger.debug("subset: ball in ball (closed form)")
        return ball_in_ball(a, b, tol)
    if isinstance(a, AbstractHyperrectangle) and isinstance(b, AbstractHyperrectangle):
        logger.debug("subset: box bounds")
        return box_in_box(a, b, tol)
    if isinstance(b, AbstractHyperrectangle):
        logger.debug("subset: %s in box via support vectors", type(a).__name__)
        return set_in_box(a, b, tol)
    if hasattr(a, "vertices_list"):
        logger.debug("subset: vertices of %s in %s", type(a).__name__, type(b).__name__)
        return vertices_in_set(a, b, tol)
    raise TypeError(f"No subset algorithm for {type(a).__name__} in {type(b).__name__}")


def _element_in_set(a: Singleton, b: ConvexSet, tol: ToleranceConfig) -> SubsetResult:
    if b.contains(a.element, tol):
        return True, None
    return False, a.element.copy()


def ball_in_ball(a: Ball, b: Ball, tol: ToleranceConfig) -> SubsetResult:
    """
    Closed-form containment of Euclidean balls.

    a ⊆ b iff ||ca - cb|| + ra <= rb. The witness is the point of a farthest
    from cb, on the ray from cb through ca (along the first axis when the
    centers coincide).
    """
    diff = a.center - b.center
    if tol.is_exact:
        gap = b.radius - a.radius
        inside = gap >= 0 and np.dot(diff, diff) <= gap * gap
        dist = euclidean_distance(a.center, b.center)
    else:
        dist = euclidean_distance(a.center, b.center)
        inside = leq(dist + a.radius, b.radius, tol)
    if inside:
        return True, None

    if dist == 0:
        u = unit_vector(a.dim, 0)
    else:
        u = diff / dist
    return False, a.center + a.radius * u


def box_in_box(a: AbstractHyperrectangle, b: AbstractHyperrectangle,
               tol: ToleranceConfig) -> SubsetResult:
    """
    Containment of hyperrectangles by their bounds.

    Each bound of a is compared against b the same way b.contains() compares
    a coordinate. The witness is a's center with the first violating axis
    moved onto the violating bound of a.
    """
    cb, rb = b.center, b.half_widths()
    for i, (lo, hi) in enumerate(zip(a.low(), a.high())):
        for bound in (hi, lo):
            if not leq(abs(bound - cb[i]), rb[i], tol):
                point = a.center.copy()
                point[i] = bound
                return False, point
    return True, None


def set_in_box(a: ConvexSet, b: AbstractHyperrectangle, tol: ToleranceConfig) -> SubsetResult:
    """
    Containment of any convex set in a hyperrectangle.

    a ⊆ b iff along every axis i the support vectors of a in directions +e_i
    and -e_i stay within b's bounds. A violating support vector is a point of
    a outside b and serves as witness.
    """
    cb, rb = b.center, b.half_widths()
    n = b.dim
    for i in range(n):
        for sign in (1, -1):
            s = np.asarray(a.support_vector(unit_vector(n, i, sign)))
            if not leq(abs(s[i] - cb[i]), rb[i], tol):
                return False, s
    return True, None


def vertices_in_set(a, b: ConvexSet, tol: ToleranceConfig) -> SubsetResult:
    """
    Containment by vertex enumeration.

    Stops at the first vertex of a that is not in b and returns it as
    witness. Exponential in the dimension for boxes.
    """
    for v in a.vertices_list():
        if not b.contains(v, tol):
            return False, np.array(v)
    return True, None
