# examples/subset_witness.py
import logging

from lazy_sets import Ball, Box, Singleton, is_subset
from lazy_sets.logging_config import setup_logging

setup_logging(logging.DEBUG)

box = Box([0.0, 0.0], [1.0, 1.0])
pairs = [
    ("small ball in box", Ball([0.0, 0.0], 0.5), box),
    ("shifted ball in box", Ball([0.5, 0.0], 1.0), box),
    ("box in ball", box, Ball([0.0, 0.0], 1.4)),
    ("point in ball", Singleton([0.3, 0.4]), Ball([0.0, 0.0], 0.5)),
]

for name, a, b in pairs:
    subset, point = is_subset(a, b, witness=True)
    if subset:
        print(f"{name}: subset")
    else:
        print(f"{name}: not a subset, witness {point}")
