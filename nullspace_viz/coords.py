"""
coords.py

Conversion between math coordinates and the fixed drawing surface.

Coordinate system:
- "world" is the math plane with y pointing up, visible range [-10, 10] on both axes.
- A diagram surface is SURFACE_SIZE pixels square with y pointing down.
So the conversion shifts by ORIGIN and flips the sign in y.
"""

VIEWBOX_SIZE = 20                       # world units across one diagram
SCALE = 40                              # pixels per world unit
ORIGIN = VIEWBOX_SIZE / 2               # world origin sits in the middle (in units)
SURFACE_SIZE = VIEWBOX_SIZE * SCALE     # 800 px

def to_drawing_space(x, y):
    """Convert world (x, y) to drawing-surface pixel coords (floats)."""
    return ((ORIGIN + x) * SCALE,
            (ORIGIN - y) * SCALE)

def from_drawing_space(px, py):
    """Inverse of to_drawing_space."""
    return (px / SCALE - ORIGIN,
            ORIGIN - py / SCALE)

def world_to_screen(world_pt):
    """Integer pixel position for a world point, for handing to pygame.draw."""
    # round() rather than int(): A*x1 and A*x2 differ from b by a few ulps and
    # truncation could split them across a pixel boundary.
    px, py = to_drawing_space(world_pt[0], world_pt[1])
    return (int(round(px)), int(round(py)))
