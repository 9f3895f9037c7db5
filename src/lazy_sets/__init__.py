# MIT License (see LICENSE)
"""
lazy_sets - Convex sets represented by their support function.

Sets are described implicitly, through the support vector (the point of
the set farthest in a given direction) and a membership test, instead of
explicit vertex or facet lists. Geometric queries such as containment,
subset and intersection-emptiness work directly on this representation
and can return witness points.

Main entry points:
    - Box, BallInf, Singleton, Ball: Concrete shapes.
    - make_box: Box from center/radius or low/high keywords.
    - is_subset, is_intersection_empty: Predicates with witnesses.
    - leq, geq, is_approx, is_approx_zero: Tolerance-aware comparisons.
    - ToleranceConfig, default_tolerance: Per-type comparison tolerances.

Submodules:
    - predicates: Subset and intersection algorithms.
    - tolerance: Numeric comparison layer.
    - logging_config: Console/file logging setup for scripts.

Example:
    from lazy_sets import Ball, is_intersection_empty

    a = Ball([0.0, 0.0], 2.0)
    b = Ball([2.0, 2.0], 2.0)
    empty, point = is_intersection_empty(a, b, witness=True)
"""
import logging

from .errors import (
    LazySetError,
    ConstructionError,
    DimensionMismatchError,
    ArgumentError,
    UsageError,
)
from .tolerance import (
    ToleranceConfig,
    default_tolerance,
    tolerance_for,
    leq,
    geq,
    is_approx,
    is_approx_zero,
)
from .types import (
    ConvexSet,
    LazySet,
    AbstractHyperrectangle,
    Box,
    BallInf,
    Singleton,
    Ball,
    BoxInput,
    make_box,
    tolerance_of,
)
from .operations import (
    dim,
    support_vector,
    support_function,
    contains,
    an_element,
    is_bounded,
    is_empty,
    translate,
)
from .predicates import is_subset, is_intersection_empty

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "LazySetError",
    "ConstructionError",
    "DimensionMismatchError",
    "ArgumentError",
    "UsageError",
    # Tolerance layer
    "ToleranceConfig",
    "default_tolerance",
    "tolerance_for",
    "leq",
    "geq",
    "is_approx",
    "is_approx_zero",
    # Shapes
    "ConvexSet",
    "LazySet",
    "AbstractHyperrectangle",
    "Box",
    "BallInf",
    "Singleton",
    "Ball",
    "BoxInput",
    "make_box",
    "tolerance_of",
    # Queries
    "dim",
    "support_vector",
    "support_function",
    "contains",
    "an_element",
    "is_bounded",
    "is_empty",
    "translate",
    # Predicates
    "is_subset",
    "is_intersection_empty",
]
