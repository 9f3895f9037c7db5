# MIT License (see LICENSE)
"""
Geometric predicates on convex sets.

This subpackage provides:
    - Subset: is_subset() with counterexample witnesses.
    - Intersection: is_intersection_empty() with common-point witnesses.
    - Fallback: support-function intersection search for arbitrary convex sets.

Typical usage:
    from lazy_sets.predicates import is_subset, is_intersection_empty

    inside, point = is_subset(ball, box, witness=True)
    if not inside:
        # point lies in ball but not in box
        ...
"""
from .subset import is_subset, ball_in_ball, box_in_box, set_in_box, vertices_in_set
from .intersection import is_intersection_empty, ball_ball, box_box, box_ball
from .gjk import gjk_intersection, minkowski_support, closest_on_hull

__all__ = [
    # Subset
    "is_subset",
    "ball_in_ball",
    "box_in_box",
    "set_in_box",
    "vertices_in_set",
    # Intersection
    "is_intersection_empty",
    "ball_ball",
    "box_box",
    "box_ball",
    # Support-function fallback
    "gjk_intersection",
    "minkowski_support",
    "closest_on_hull",
]
