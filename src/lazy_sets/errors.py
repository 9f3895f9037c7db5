# MIT License (see LICENSE)
"""
Exception types raised by lazy_sets.

Construction errors are raised by shape constructors and factories; usage
errors are raised when a query or predicate receives operands of
incompatible dimension. Both derive from ValueError so that callers which
only catch builtins keep working.
"""
from __future__ import annotations


class LazySetError(Exception):
    """Root of all lazy_sets exceptions."""


class ConstructionError(LazySetError, ValueError):
    """A shape could not be built from the given arguments."""


class DimensionMismatchError(ConstructionError):
    """Component vectors of a shape disagree in length (or are not vectors)."""


class ArgumentError(ConstructionError):
    """Missing, ambiguous or out-of-range constructor arguments."""


class UsageError(LazySetError, ValueError):
    """Operands of a query or predicate live in different dimensions."""
