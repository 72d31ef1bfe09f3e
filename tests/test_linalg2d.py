from nullspace_viz.linalg2d import (
    ZERO, Point2D, add, apply, column, det, distance, dot, is_zero, norm, scale, subtract,
)
from nullspace_viz.model import A, NULL_BASIS


def test_primitives():
    u = (1.0, 2.0)
    v = Point2D(-3.0, 0.5)

    assert add(u, v) == (-2.0, 2.5)
    assert subtract(u, v) == (4.0, 1.5)
    assert scale(2.0, u) == (2.0, 4.0)
    assert dot(u, v) == -2.0
    assert norm((3.0, 4.0)) == 5.0
    assert distance((1.0, 1.0), (4.0, 5.0)) == 5.0


def test_results_are_points():
    p = add((1, 2), (3, 4))
    assert isinstance(p, Point2D)
    assert (p.x, p.y) == (4, 6)


def test_apply_fixed_matrix():
    assert apply(A, (1.0, 0.0)) == (1.0, 0.5)
    assert apply(A, (0.0, 1.0)) == (0.5, 0.25)
    assert apply(A, (2.0, -4.0)) == (0.0, 0.0)


def test_null_basis_is_exactly_in_null_space():
    assert apply(A, NULL_BASIS) == (0.0, 0.0)


def test_matrix_is_rank_one():
    assert det(A) == 0.0
    assert column(A, 1) == scale(0.5, column(A, 0))


def test_is_zero():
    assert is_zero(ZERO)
    assert is_zero((1e-12, -1e-12))
    assert not is_zero((1e-6, 0.0))
    assert is_zero((1e-6, 0.0), tol=1e-5)
