"""
linalg2d.py

Tiny 2D linear algebra helpers for the null-space diagram.

Vectors are plain (x, y) tuples; results come back as Point2D so callers can
write v.x / v.y. Matrices are 2x2 nested tuples, rows first.
"""

import math
from collections import namedtuple

# ============================================================
# VECTORS
# ============================================================

Point2D = namedtuple("Point2D", ["x", "y"])

ZERO = Point2D(0.0, 0.0)

def add(u, v):
    """u + v."""
    return Point2D(u[0] + v[0], u[1] + v[1])

def subtract(u, v):
    """u - v."""
    return Point2D(u[0] - v[0], u[1] - v[1])

def scale(k, v):
    """Scalar multiple k*v."""
    return Point2D(k * v[0], k * v[1])

def dot(u, v):
    """Euclidean dot product."""
    return u[0]*v[0] + u[1]*v[1]

def norm(u):
    """Euclidean norm."""
    return math.sqrt(dot(u, u))

def distance(u, v):
    return norm(subtract(u, v))

def is_zero(v, tol=1e-9):
    """True if both components are within tol of zero."""
    return abs(v[0]) <= tol and abs(v[1]) <= tol

# ============================================================
# MATRICES
# ============================================================

def apply(A, v):
    """Multiply 2x2 matrix A by 2D vector v."""
    return Point2D(A[0][0] * v[0] + A[0][1] * v[1],
                   A[1][0] * v[0] + A[1][1] * v[1])

def column(A, j):
    """j-th column of A as a vector (the image of the j-th basis vector)."""
    return Point2D(A[0][j], A[1][j])

def det(A):
    """Determinant of a 2x2 matrix. Zero for the rank-1 system shown here."""
    return A[0][0]*A[1][1] - A[0][1]*A[1][0]
