# examples/box_membership.py
import logging

from lazy_sets import Box, make_box
from lazy_sets.logging_config import setup_logging

setup_logging(logging.INFO)

H = Box(center=[1.0, 1.0], radius=[2.0, 3.0])

print("dim:", H.dim)
print("low/high:", H.low(), H.high())
print("[-1.0, 4.0] in H:", H.contains([-1.0, 4.0]))
print("[-1.1, 4.1] in H:", H.contains([-1.1, 4.1]))
print("support vector along (1, -1):", H.support_vector([1.0, -1.0]))
print("vertices:\n", H.vertices_list())

# same box from its corners
G = make_box(low=[-1.0, -2.0], high=[3.0, 4.0])
print("same box:", G == H)
