"""
nullspace_viz: an interactive pygame diagram showing that the difference of
two solutions of Ax = b lies in the null space of A.

Run with:  python -m nullspace_viz   (or the nullspace-viz script)
"""

import logging

from .linalg2d import Point2D, add, apply, scale, subtract
from .model import A, NULL_BASIS, ScalarParameters, Solution, check_invariants, solve
from .coords import to_drawing_space
from .state import InteractiveState

__version__ = "0.1.0"

__all__ = [
    "A", "NULL_BASIS", "Point2D", "ScalarParameters", "Solution", "InteractiveState",
    "add", "apply", "scale", "subtract", "solve", "check_invariants", "to_drawing_space",
]

# Silent unless the application (or a user) configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())
