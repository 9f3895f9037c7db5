# MIT License (see LICENSE)
"""
Convex set representations.

Every set is described by its support vector rather than by explicit
vertices or facets. The capability set shared by all shapes is:

  - dim:               ambient dimension, fixed at construction.
  - support_vector(d): a point of the set maximizing dot(x, d).
  - contains(x):       tolerance-aware membership test.

Defines:
- ConvexSet: structural protocol for any object providing the capabilities.
- LazySet: abstract base class with the derived queries.
- Hyperrectangular sets: Box, BallInf, Singleton.
- Ball: Euclidean ball.

Shapes are immutable values: arrays are copied on construction and stored
read-only, and every query returns a freshly allocated array.
"""
from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from enum import Enum
from itertools import product
from typing import Protocol, runtime_checkable

import numpy as np

from .constants import VERTEX_ENUMERATION_WARN_DIM
from .errors import ArgumentError, DimensionMismatchError
from .tolerance import ToleranceConfig, leq, tolerance_for
from .util import check_dim, euclidean_distance, frozen, sign_cadlag, vec, vector_norm

logger = logging.getLogger(__name__)


@runtime_checkable
class ConvexSet(Protocol):
    """Anything with a dimension, a support vector and a membership test."""

    @property
    def dim(self) -> int: ...

    def support_vector(self, d) -> np.ndarray: ...

    def contains(self, x, tol: ToleranceConfig | None = None) -> bool: ...


class LazySet(ABC):
    """
    Base class for the concrete shapes.

    Subclasses are frozen dataclasses; equality compares their fields
    elementwise.
    """

    @property
    @abstractmethod
    def dim(self) -> int:
        """Ambient dimension."""

    @abstractmethod
    def support_vector(self, d) -> np.ndarray:
        """Point of the set maximizing the dot product with d."""

    @abstractmethod
    def contains(self, x, tol: ToleranceConfig | None = None) -> bool:
        """Membership test, with boundary cases decided by the tolerance layer."""

    @abstractmethod
    def an_element(self) -> np.ndarray:
        """Some point guaranteed to lie in the set."""

    @abstractmethod
    def translate(self, v) -> LazySet:
        """The set shifted by the vector v."""

    def support_function(self, d):
        """Value of the support function, max over x in the set of dot(x, d)."""
        d = self._point(d, "direction")
        return np.dot(d, self.support_vector(d))

    def is_bounded(self) -> bool:
        return True

    def is_empty(self) -> bool:
        return False

    def _point(self, x, what: str = "point") -> np.ndarray:
        """Convert x to a vector and check it lives in this set's dimension."""
        v = vec(x)
        check_dim(self.dim, len(v), what)
        return v

    def __contains__(self, x) -> bool:
        return self.contains(x)

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return all(
            np.array_equal(getattr(self, f.name), getattr(other, f.name))
            for f in fields(self)
        )

    __hash__ = None


# =============================================================================
# Hyperrectangular sets
# =============================================================================

class AbstractHyperrectangle(LazySet):
    """
    Sets of the form {x : |x_i - c_i| <= r_i for all i}.

    Subclasses provide ``center`` and half_widths(); the support vector,
    membership, vertices and norms are shared.
    """

    center: np.ndarray

    @abstractmethod
    def half_widths(self) -> np.ndarray:
        """Radius along each axis."""

    @property
    def dim(self) -> int:
        return len(self.center)

    def support_vector(self, d) -> np.ndarray:
        """
        Support vector c + sign(d) * r, with sign(0) = +1.

        A zero direction component selects the upper bound on that axis, so
        the zero direction yields the vertex with the largest coordinates.
        """
        d = self._point(d, "direction")
        return self.center + sign_cadlag(d) * self.half_widths()

    def contains(self, x, tol: ToleranceConfig | None = None) -> bool:
        """
        Check whether x lies in the set.

        x is contained iff |c_i - x_i| <= r_i on every axis i.

        Raises:
            UsageError: If x has a different dimension.
        """
        x = self._point(x)
        r = self.half_widths()
        if tol is None:
            tol = tolerance_for(x, self.center, r)
        for i in range(len(x)):
            if not leq(abs(self.center[i] - x[i]), r[i], tol):
                return False
        return True

    def low(self) -> np.ndarray:
        """Lower corner (smallest coordinate on every axis)."""
        return self.center - self.half_widths()

    def high(self) -> np.ndarray:
        """Upper corner (largest coordinate on every axis)."""
        return self.center + self.half_widths()

    def vertices_list(self) -> np.ndarray:
        """
        All 2^n corners as rows of an array.

        Each corner adds one sign combination of the radius to the center.
        Cost and size are exponential in the dimension; callers must bound
        the dimension before calling.
        """
        n = self.dim
        if n > VERTEX_ENUMERATION_WARN_DIM:
            logger.warning("Enumerating 2^%d vertices of a %d-dimensional box", n, n)
        signs = np.array(list(product((1, -1), repeat=n)), dtype=np.int8)
        return self.center + signs * self.half_widths()

    def radius_p(self, p: float = np.inf):
        """
        Radius in the p-norm.

        This is the radius of the smallest p-norm ball with the same center
        enclosing the set; by symmetry every vertex is at this distance.
        """
        return vector_norm(self.half_widths(), p)

    def diameter_p(self, p: float = np.inf):
        """Largest p-norm distance between two points of the set."""
        return 2 * self.radius_p(p)

    def norm_p(self, p: float = np.inf):
        """Largest p-norm of a point in the set, taken over the vertices."""
        return max(vector_norm(v, p) for v in self.vertices_list())

    def an_element(self) -> np.ndarray:
        return self.center.copy()


@dataclass(frozen=True, eq=False)
class Box(AbstractHyperrectangle):
    """
    Axis-aligned box (hyperrectangle).

    Attributes:
        center: Center point.
        radius: Half-width along each axis, same length as center, >= 0.

    Raises:
        DimensionMismatchError: If center and radius differ in length.
        ArgumentError: If a radius component is negative.
    """
    center: np.ndarray
    radius: np.ndarray

    def __post_init__(self) -> None:
        c, r = vec(self.center), vec(self.radius)
        if len(c) != len(r):
            raise DimensionMismatchError(
                f"Box center has length {len(c)} but radius has length {len(r)}"
            )
        if np.any(r < 0):
            raise ArgumentError(f"Box radius must be non-negative, got {r}")
        dtype = np.result_type(c, r)
        object.__setattr__(self, "center", frozen(c.astype(dtype)))
        object.__setattr__(self, "radius", frozen(r.astype(dtype)))

    @classmethod
    def from_bounds(cls, low, high) -> Box:
        """Box with the given lower and upper corners."""
        low, high = vec(low), vec(high)
        if len(low) != len(high):
            raise DimensionMismatchError(
                f"Box low has length {len(low)} but high has length {len(high)}"
            )
        center = (high + low) / 2
        return cls(center, np.abs(high - center))

    def half_widths(self) -> np.ndarray:
        return self.radius

    def translate(self, v) -> Box:
        return Box(self.center + self._point(v, "translation"), self.radius)


@dataclass(frozen=True, eq=False)
class BallInf(AbstractHyperrectangle):
    """
    Ball in the infinity norm: a box with the same radius on every axis.

    Attributes:
        center: Center point.
        radius: Scalar radius, >= 0.
    """
    center: np.ndarray
    radius: float

    def __post_init__(self) -> None:
        c, r = _center_and_scalar_radius(self.center, self.radius, "BallInf")
        object.__setattr__(self, "center", frozen(c))
        object.__setattr__(self, "radius", r)

    def half_widths(self) -> np.ndarray:
        return np.full(self.dim, self.radius, dtype=self.center.dtype)

    def translate(self, v) -> BallInf:
        return BallInf(self.center + self._point(v, "translation"), self.radius)


@dataclass(frozen=True, eq=False)
class Singleton(AbstractHyperrectangle):
    """
    Set containing exactly one point.

    Attributes:
        element: The point.
    """
    element: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "element", frozen(vec(self.element)))

    @property
    def center(self) -> np.ndarray:
        return self.element

    def half_widths(self) -> np.ndarray:
        return np.zeros_like(self.element)

    def support_vector(self, d) -> np.ndarray:
        self._point(d, "direction")
        return self.element.copy()

    def vertices_list(self) -> np.ndarray:
        return self.element[np.newaxis, :].copy()

    def translate(self, v) -> Singleton:
        return Singleton(self.element + self._point(v, "translation"))


class BoxInput(Enum):
    """Accepted keyword combinations for make_box(), in order of precedence."""
    CENTER_RADIUS = ("center", "radius")
    LOW_HIGH = ("low", "high")


def make_box(*, center=None, radius=None, low=None, high=None) -> Box:
    """
    Build a Box from keyword arguments.

    Either ``center`` and ``radius`` or ``low`` and ``high`` must be given.
    If both pairs are given, center and radius are used.

    Raises:
        ArgumentError: If neither pair is complete.
    """
    given = {"center": center, "radius": radius, "low": low, "high": high}
    for mode in BoxInput:
        if all(given[k] is not None for k in mode.value):
            break
    else:
        passed = sorted(k for k, v in given.items() if v is not None)
        raise ArgumentError(
            f"Invalid arguments for Box {passed}: use either 'center' and 'radius' "
            "or 'low' and 'high'."
        )
    if mode is BoxInput.CENTER_RADIUS:
        if low is not None or high is not None:
            logger.debug("make_box: center and radius given, ignoring low/high")
        return Box(center, radius)
    return Box.from_bounds(low, high)


# =============================================================================
# Euclidean ball
# =============================================================================

def _center_and_scalar_radius(center, radius, kind: str) -> tuple[np.ndarray, object]:
    """Validate a (center, scalar radius) pair and give both a common dtype."""
    c = vec(center)
    r = np.asarray(radius)
    if r.ndim != 0:
        raise ArgumentError(f"{kind} radius must be a scalar, got shape {r.shape}")
    if r < 0:
        raise ArgumentError(f"{kind} radius must be non-negative, got {radius}")
    dtype = np.result_type(c, r)
    return c.astype(dtype), r.astype(dtype)[()]


@dataclass(frozen=True, eq=False)
class Ball(LazySet):
    """
    Euclidean ball {x : ||x - center||_2 <= radius}.

    Attributes:
        center: Center point.
        radius: Scalar radius, >= 0. A zero radius gives a single point.
    """
    center: np.ndarray
    radius: float

    def __post_init__(self) -> None:
        c, r = _center_and_scalar_radius(self.center, self.radius, "Ball")
        object.__setattr__(self, "center", frozen(c))
        object.__setattr__(self, "radius", r)

    @property
    def dim(self) -> int:
        return len(self.center)

    def support_vector(self, d) -> np.ndarray:
        """
        Support vector center + radius * d / ||d||.

        The zero direction has no preferred boundary point, so the center
        is returned.
        """
        d = self._point(d, "direction")
        if not np.any(d):
            return self.center.copy()
        return self.center + self.radius * (d / vector_norm(d, 2))

    def contains(self, x, tol: ToleranceConfig | None = None) -> bool:
        """
        Check whether x lies in the ball: ||x - center|| <= radius.

        Exact inputs compare squared distances so no square root is taken.

        Raises:
            UsageError: If x has a different dimension.
        """
        x = self._point(x)
        if tol is None:
            tol = tolerance_for(x, self.center, self.radius)
        if tol.is_exact:
            diff = x - self.center
            return leq(np.dot(diff, diff), self.radius * self.radius, tol)
        return leq(euclidean_distance(x, self.center), self.radius, tol)

    def radius_p(self, p: float = np.inf):
        """
        Radius of the smallest p-norm ball with the same center enclosing this ball.

        Equals radius * n^max(0, 1/p - 1/2); for p >= 2 this is the radius.
        """
        return self.radius * self.dim ** max(0.0, 1.0 / p - 0.5)

    def diameter_p(self, p: float = np.inf):
        return 2 * self.radius_p(p)

    def an_element(self) -> np.ndarray:
        return self.center.copy()

    def translate(self, v) -> Ball:
        return Ball(self.center + self._point(v, "translation"), self.radius)


def check_convex(*sets) -> None:
    """
    Raise TypeError unless every operand provides the ConvexSet capabilities.

    Raises:
        TypeError: If an operand lacks dim, support_vector or contains.
    """
    for s in sets:
        if not isinstance(s, ConvexSet):
            raise TypeError(
                f"{type(s).__name__} is not a convex set: dim, support_vector "
                "and contains are required"
            )


def tolerance_of(*sets) -> ToleranceConfig:
    """
    Default tolerances for the common numeric type of the given sets.

    Concrete shapes contribute their stored arrays and scalars; other
    convex sets contribute their support vector in the zero direction.
    """
    values = []
    for s in sets:
        if isinstance(s, LazySet):
            values.extend(getattr(s, f.name) for f in fields(s))
        else:
            values.append(s.support_vector(np.zeros(s.dim)))
    return tolerance_for(*values)
