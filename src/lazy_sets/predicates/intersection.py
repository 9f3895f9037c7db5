# MIT License (see LICENSE)
"""
Intersection-emptiness test with witnesses.

is_intersection_empty(a, b) decides whether a and b share no point. Known
shape pairs use closed forms; every other pair of convex sets falls back to
the support-function search in gjk.py.

Sets that merely touch (externally tangent balls, boxes sharing a face)
intersect. The boolean result does not depend on the argument order; the
witness point may.
"""
from __future__ import annotations
import logging

import numpy as np

from ..tolerance import ToleranceConfig, leq
from ..types import AbstractHyperrectangle, Ball, ConvexSet, Singleton, check_convex, tolerance_of
from ..util import check_dim, euclidean_distance
from .gjk import gjk_intersection

logger = logging.getLogger(__name__)

IntersectionResult = tuple[bool, "np.ndarray | None"]


def is_intersection_empty(
    a: ConvexSet,
    b: ConvexSet,
    witness: bool = False,
    tol: ToleranceConfig | None = None,
) -> bool | IntersectionResult:
    """
    Check whether the intersection of a and b is empty.

    Args:
        a: First set.
        b: Second set.
        witness: If True, also return a common point.
        tol: Tolerances; defaults to those of the operands' numeric type.

    Returns:
        The boolean result, or with witness=True a tuple (empty, point)
        where point lies in both sets if empty is False, and is None
        otherwise.

    Raises:
        UsageError: If a and b have different dimensions.
        TypeError: If an operand is not a convex set.
    """
    check_convex(a, b)
    check_dim(a.dim, b.dim, "second operand")
    if tol is None:
        tol = tolerance_of(a, b)

    empty, point = _dispatch(a, b, tol)
    if witness:
        return empty, point
    return empty


def _dispatch(a: ConvexSet, b: ConvexSet, tol: ToleranceConfig) -> IntersectionResult:
    if isinstance(a, Singleton):
        logger.debug("intersection: singleton in %s", type(b).__name__)
        return _element_in_set(a, b, tol)
    if isinstance(b, Singleton):
        logger.debug("intersection: singleton in %s", type(a).__name__)
        return _element_in_set(b, a, tol)
    if isinstance(a, Ball) and isinstance(b, Ball):
        logger.debug("intersection: ball/ball (closed form)")
        return ball_ball(a, b, tol)
    if isinstance(a, AbstractHyperrectangle) and isinstance(b, AbstractHyperrectangle):
        logger.debug("intersection: box/box (closed form)")
        return box_box(a, b, tol)
    if isinstance(a, AbstractHyperrectangle) and isinstance(b, Ball):
        logger.debug("intersection: box/ball (closed form)")
        return box_ball(a, b, tol)
    if isinstance(a, Ball) and isinstance(b, AbstractHyperrectangle):
        logger.debug("intersection: ball/box (closed form)")
        return box_ball(b, a, tol)
    logger.debug("intersection: %s/%s via support functions",
                 type(a).__name__, type(b).__name__)
    return gjk_intersection(a, b, tol)


def _element_in_set(s: Singleton, other: ConvexSet, tol: ToleranceConfig) -> IntersectionResult:
    if other.contains(s.element, tol):
        return False, s.element.copy()
    return True, None


def ball_ball(a: Ball, b: Ball, tol: ToleranceConfig) -> IntersectionResult:
    """
    Closed-form test for two Euclidean balls.

    The intersection is empty iff ||ca - cb|| > ra + rb. The witness is the
    point of the segment [ca, cb] that splits it in the ratio ra : rb, which
    is within ra of ca and within rb of cb whenever the balls intersect.
    """
    rsum = a.radius + b.radius
    if tol.is_exact:
        diff = a.center - b.center
        empty = np.dot(diff, diff) > rsum * rsum
    else:
        empty = not leq(euclidean_distance(a.center, b.center), rsum, tol)
    if empty:
        return True, None
    if rsum == 0:
        return False, a.center.copy()
    return False, a.center + (b.center - a.center) * (a.radius / rsum)


def box_box(a: AbstractHyperrectangle, b: AbstractHyperrectangle,
            tol: ToleranceConfig) -> IntersectionResult:
    """
    Closed-form test for two hyperrectangles.

    The intersection is empty iff on some axis |ca_i - cb_i| > ra_i + rb_i.
    The witness is the center of the overlap box.
    """
    ra, rb = a.half_widths(), b.half_widths()
    for i in range(a.dim):
        if not leq(abs(a.center[i] - b.center[i]), ra[i] + rb[i], tol):
            return True, None
    lo = np.maximum(a.low(), b.low())
    hi = np.minimum(a.high(), b.high())
    return False, (lo + hi) / 2


def box_ball(h: AbstractHyperrectangle, ball: Ball, tol: ToleranceConfig) -> IntersectionResult:
    """
    Closed-form test for a hyperrectangle and a Euclidean ball.

    The point of the box nearest to the ball center is the ball center
    clamped to the box bounds; the sets intersect iff that point is in the
    ball, and it is then the witness.
    """
    nearest = np.minimum(np.maximum(ball.center, h.low()), h.high())
    if ball.contains(nearest, tol):
        return False, nearest
    return True, None
