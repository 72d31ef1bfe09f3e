"""
model.py

The fixed linear system and everything derived from the three slider scalars.

    A = [[1,   0.5 ],
         [0.5, 0.25]]

A has rank 1: it squashes the plane onto the line y = 0.5x (its column space).
The null space is the line x + 0.5y = 0, spanned by n = (-0.5, 1).

For a target b = k*(1, 0.5) the simplest solution of Ax = b is xp = (k, 0).
Every other solution is xp + lambda*n, so two solutions differ by a multiple
of n and A(x1 - x2) = 0.
"""

import logging

from .linalg2d import ZERO, Point2D, add, apply, column, distance, norm, scale, subtract

logger = logging.getLogger(__name__)

# ============================================================
# FIXED SYSTEM
# ============================================================

A = ((1.0, 0.5),
     (0.5, 0.25))

NULL_BASIS = Point2D(-0.5, 1.0)

# How far the drawn lines extend from their anchor, in multiples of the direction.
NULL_LINE_SPAN = 10.0
SOLUTION_LINE_SPAN = 5.0
COLUMN_LINE_SPAN = 10.0

INVARIANT_TOL = 1e-9

# ============================================================
# PARAMETERS & SOLUTION
# ============================================================

class ScalarParameters:
    """The three user-adjustable scalars."""
    def __init__(self, b_scalar=0.0, lambda1=0.0, lambda2=0.0):
        self.b_scalar = b_scalar
        self.lambda1 = lambda1
        self.lambda2 = lambda2

    def copy(self):
        return ScalarParameters(self.b_scalar, self.lambda1, self.lambda2)

    def as_tuple(self):
        return (self.b_scalar, self.lambda1, self.lambda2)

    def __eq__(self, other):
        if not isinstance(other, ScalarParameters):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self):
        return "ScalarParameters(b_scalar={!r}, lambda1={!r}, lambda2={!r})".format(*self.as_tuple())

def line_through(anchor, direction, span):
    """Segment anchor +/- span*direction, as a pair of points."""
    return (subtract(anchor, scale(span, direction)),
            add(anchor, scale(span, direction)))

class Solution:
    """All points for one render pass. Domain first, then codomain."""
    def __init__(self, params, xp, x1, x2, diff, b, ax1, ax2, a_diff):
        self.params = params

        # Domain (input space)
        self.origin = ZERO
        self.xp = xp
        self.x1 = x1
        self.x2 = x2
        self.diff = diff
        self.null_line = line_through(ZERO, NULL_BASIS, NULL_LINE_SPAN)
        self.solution_line = line_through(xp, NULL_BASIS, SOLUTION_LINE_SPAN)

        # Codomain (output space)
        self.b = b
        self.ax1 = ax1
        self.ax2 = ax2
        self.a_diff = a_diff
        self.column_line = line_through(ZERO, column(A, 0), COLUMN_LINE_SPAN)

    @property
    def residual(self):
        """||A(x1 - x2)||, zero up to rounding."""
        return norm(self.a_diff)

    @property
    def spread(self):
        """How far Ax1 and Ax2 land from b."""
        return max(distance(self.ax1, self.b), distance(self.ax2, self.b))

def particular_solution(b_scalar):
    """xp = (k, 0) solves Ax = k*(1, 0.5)."""
    return Point2D(float(b_scalar), 0.0)

def solve(params):
    """Derive every vector the diagrams need from the current scalars."""
    xp = particular_solution(params.b_scalar)
    x1 = add(xp, scale(params.lambda1, NULL_BASIS))
    x2 = add(xp, scale(params.lambda2, NULL_BASIS))
    diff = subtract(x1, x2)

    return Solution(
        params.copy(), xp, x1, x2, diff,
        b=apply(A, xp),
        ax1=apply(A, x1),
        ax2=apply(A, x2),
        a_diff=apply(A, diff),
    )

def check_invariants(solution, tol=INVARIANT_TOL):
    """
    True if A(x1-x2) ~ 0 and Ax1 ~ Ax2 ~ b. Drift is logged, never raised.
    """
    ok = solution.residual <= tol and solution.spread <= tol
    if not ok:
        logger.warning("Invariant drift for %r: |A(x1-x2)|=%.3e, |Ax - b|=%.3e",
                       solution.params, solution.residual, solution.spread)
    return ok
