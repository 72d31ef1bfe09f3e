"""
draw.py

Drawing helpers. Everything here works in world coordinates on one fixed-size
diagram surface (see coords.py); callers never deal with pixels directly.
"""

import math

import pygame

from .coords import ORIGIN, SCALE, SURFACE_SIZE, VIEWBOX_SIZE, world_to_screen

def fade(color, alpha, background=(255, 255, 255)):
    """Blend color over an opaque background, like SVG opacity on a white card."""
    return tuple(int(round(alpha*c + (1 - alpha)*bg)) for c, bg in zip(color, background))

def draw_grid(surf, color_grid, color_axes):
    """One line per world unit, then the two axes on top."""
    for i in range(VIEWBOX_SIZE + 1):
        p = i * SCALE
        pygame.draw.line(surf, color_grid, (p, 0), (p, SURFACE_SIZE), 1)
        pygame.draw.line(surf, color_grid, (0, p), (SURFACE_SIZE, p), 1)

    c = int(ORIGIN * SCALE)
    pygame.draw.line(surf, color_axes, (c, 0), (c, SURFACE_SIZE), 2)
    pygame.draw.line(surf, color_axes, (0, c), (SURFACE_SIZE, c), 2)

def draw_segment(surf, a, b, color, width=2):
    pygame.draw.line(surf, color, world_to_screen(a), world_to_screen(b), width)

def draw_dashed_segment(surf, a, b, color, width=2, dash=5, gap=5):
    """Dashed segment from world a to world b (dash/gap in pixels)."""
    ax, ay = world_to_screen(a)
    bx, by = world_to_screen(b)
    dx, dy = bx - ax, by - ay
    L = math.hypot(dx, dy)
    if L < 1e-6:
        return

    ux, uy = dx / L, dy / L
    t = 0.0
    while t < L:
        t2 = min(t + dash, L)
        pygame.draw.line(surf, color,
                         (round(ax + ux*t), round(ay + uy*t)),
                         (round(ax + ux*t2), round(ay + uy*t2)), width)
        t = t2 + gap

def draw_point(surf, p, color, radius=6):
    pygame.draw.circle(surf, color, world_to_screen(p), radius)

def draw_label(surf, fonts, font, text, p, color, offset=(10, -10), angle=0.0):
    """
    Put text at world point p shifted by offset pixels.
    The offset is to the text's bottom-left corner (like an SVG baseline);
    rotated labels are centred on the point instead.
    """
    img = fonts.render(font, text, color)
    x, y = world_to_screen(p)
    x += offset[0]
    y += offset[1]
    if angle:
        img = pygame.transform.rotate(img, angle)
        return surf.blit(img, img.get_rect(center=(x, y)))
    return surf.blit(img, img.get_rect(bottomleft=(x, y)))

def draw_arrow(surf, fonts, a, b, color, label=None, width=3):
    """Arrow from world a to world b with a filled head and an optional tip label."""
    ax, ay = world_to_screen(a)
    bx, by = world_to_screen(b)
    pygame.draw.line(surf, color, (ax, ay), (bx, by), width)

    # Zero-length arrows (x1 == x2) still get their label, just no head.
    dx, dy = bx - ax, by - ay
    if math.hypot(dx, dy) >= 1e-6:
        angle = math.atan2(dy, dx)
        head_len = 10
        tip = (bx, by)
        left = (bx - head_len*math.cos(angle - math.pi/6), by - head_len*math.sin(angle - math.pi/6))
        right = (bx - head_len*math.cos(angle + math.pi/6), by - head_len*math.sin(angle + math.pi/6))
        pygame.draw.polygon(surf, color, [tip, left, right])

    if label:
        draw_label(surf, fonts, fonts.label, label, b, color)

def line_angle_deg(a, b):
    """Screen rotation (degrees, counter-clockwise) that lays text along a->b, kept readable."""
    dx, dy = b[0] - a[0], b[1] - a[1]
    if dx < 0:
        dx, dy = -dx, -dy
    return math.degrees(math.atan2(dy, dx))
