# examples/ball_intersection.py
import logging

import numpy as np
from lazy_sets import Ball, Box, is_intersection_empty
from lazy_sets.logging_config import setup_logging

setup_logging(logging.INFO)

a = Ball([0.0, 0.0], 2.0)
for center in ([2.0, 2.0], [4.0, 4.0], [4.0, 0.0]):
    b = Ball(center, 2.0)
    empty, point = is_intersection_empty(a, b, witness=True)
    print(f"center {center}: empty={empty} witness={point}")

# single precision keeps its own tolerances
a32 = Ball(np.array([0.0, 0.0], dtype=np.float32), np.float32(1.0))
b32 = Ball(np.array([2.0, 0.0], dtype=np.float32), np.float32(1.0))
print("tangent float32 balls intersect:", not is_intersection_empty(a32, b32))

print("ball meets box:", not is_intersection_empty(Box([0.0, 0.0], [1.0, 1.0]), Ball([2.0, 2.0], 1.5)))
