from nullspace_viz.coords import (
    ORIGIN, SCALE, SURFACE_SIZE, from_drawing_space, to_drawing_space, world_to_screen,
)


def test_constants():
    assert SCALE == 40
    assert ORIGIN == 10
    assert SURFACE_SIZE == 800


def test_origin_and_corners():
    assert to_drawing_space(0, 0) == (400, 400)
    assert to_drawing_space(-10, 10) == (0, 0)
    assert to_drawing_space(10, -10) == (800, 800)


def test_y_is_inverted():
    ys = [y / 4 for y in range(-40, 41)]
    pys = [to_drawing_space(0, y)[1] for y in ys]
    assert all(a > b for a, b in zip(pys, pys[1:]))

    xs = ys
    pxs = [to_drawing_space(x, 0)[0] for x in xs]
    assert all(a < b for a, b in zip(pxs, pxs[1:]))


def test_injective_over_visible_range():
    seen = set()
    for i in range(-10, 11):
        for j in range(-10, 11):
            seen.add(to_drawing_space(i, j))
    assert len(seen) == 21 * 21


def test_inverse():
    for x, y in [(0, 0), (3, -2), (-9.5, 7.25)]:
        px, py = to_drawing_space(x, y)
        assert from_drawing_space(px, py) == (x, y)


def test_world_to_screen_rounds():
    assert world_to_screen((3.0000000000000004, 1.4999999999999998)) == (520, 340)
    assert all(isinstance(c, int) for c in world_to_screen((0.1, 0.1)))
