# MIT License (see LICENSE)
"""
Numeric constants shared by the tolerance layer and the predicates.

These values are not tolerances themselves; the tolerances are derived
from them per numeric type in tolerance.py.
"""
from __future__ import annotations

# Multiplier on sqrt(machine epsilon) for the zero tolerance of floating types.
# For float64: 10 * sqrt(2.22e-16) ≈ 1.49e-7.
ZERO_TOL_FACTOR: float = 10.0

# Iteration limit of the support-function closest-points search used for
# shape pairs without a closed-form intersection test.
GJK_MAX_ITERS: int = 256

# vertices_list() enumerates 2^n corners. Above this dimension a warning is
# logged; callers are expected to bound the dimension themselves.
VERTEX_ENUMERATION_WARN_DIM: int = 16
