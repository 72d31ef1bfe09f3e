"""
panels.py

What goes on screen: the two diagrams, the controls column, the header and
the explanation cards. Diagrams are drawn at their fixed drawing-space size
and scaled into whatever panel the layout hands us, like an SVG viewBox.
"""

import pygame

from . import draw
from .coords import SURFACE_SIZE
from .linalg2d import ZERO, distance, scale
from .model import NULL_BASIS
from .text import wrap_text

TITLE = "Visualizing \"If Ax=b has solutions, so does Ax=0\""
SUBTITLE = ("This interactive tool demonstrates that the difference between any two "
            "solutions to Ax=b is always a solution to Ax=0.")

OBSERVE = ("As you move x1 and x2 along the solution line, the red vector (x1 - x2) "
           "changes size, but it never leaves the dashed Null Space line.")

# (title, color key, body, formula lines)
EXPLANATIONS = [
    ("1. Particular Solution", "x1",
     "We have a system Ax=b. Since there are multiple solutions, they form a line "
     "(the blue line in the left graph). Let's call two points on this line x₁ and x₂.",
     ["Ax₁ = b", "Ax₂ = b"]),
    ("2. The Difference", "diff",
     "What happens if we subtract them? By the linearity of matrix multiplication:",
     ["A(x₁ - x₂) = Ax₁ - Ax₂", "= b - b", "= 0"]),
    ("3. Homogeneous Solution", "text",
     "The result 0 means that the vector (x₁ - x₂) is a solution to the system Ax=0. "
     "This is why the red arrow always lies on the dashed Null Space line.",
     []),
]

CODOMAIN_NOTES = [
    ("Matrix A squashes everything", "text_dim", False),
    ("onto the gray line.", "text_dim", False),
    (None, None, False),
    ("x1 maps to b", "x1", False),
    ("x2 maps to b", "x2", False),
    ("x1 - x2 maps to 0", "diff", True),
]

# ============================================================
# CARDS
# ============================================================

def draw_card(surf, rect, colors, fill="card"):
    pygame.draw.rect(surf, colors[fill], rect, border_radius=12)
    pygame.draw.rect(surf, colors["border"], rect, 1, border_radius=12)

def draw_lines(surf, fonts, font, lines, x, y, color, spacing=3):
    """Blit lines top to bottom; returns the y below the last one."""
    for line in lines:
        img = fonts.render(font, line, color)
        surf.blit(img, (x, y))
        y += img.get_height() + spacing
    return y

def draw_wrapped(surf, fonts, font, text, x, y, width, color):
    return draw_lines(surf, fonts, font, wrap_text(font, fonts.clean(text), width), x, y, color)

# ============================================================
# DIAGRAMS (drawing space)
# ============================================================

def draw_domain(surf, fonts, sol, colors):
    """Input space: null space, solution set, x1, x2 and x1 - x2."""
    surf.fill(colors["card"])
    draw.draw_grid(surf, colors["grid"], colors["axes"])

    # Null space, drawn long enough to cross the whole view.
    n0, n1 = sol.null_line
    draw.draw_dashed_segment(surf, n0, n1, colors["null"], 2, dash=5, gap=5)
    draw.draw_label(surf, fonts, fonts.small, "Null Space (Ax=0)", scale(8, NULL_BASIS),
                    colors["null_label"], offset=(-14, -8), angle=draw.line_angle_deg(n0, n1))

    # Solution set Ax=b, parallel to the null space through xp.
    s0, s1 = sol.solution_line
    draw.draw_segment(surf, s0, s1, draw.fade(colors["solution"], 0.3), 2)
    label_at = (sol.xp[0] - 4*NULL_BASIS[0], sol.xp[1] - 4*NULL_BASIS[1])
    draw.draw_label(surf, fonts, fonts.label, "Solution Set (Ax=b)", label_at,
                    colors["solution"], offset=(0, 0))

    draw.draw_arrow(surf, fonts, ZERO, sol.x1, colors["x1"], "x1")
    draw.draw_arrow(surf, fonts, ZERO, sol.x2, colors["x2"], "x2")

    # x1 - x2 ghosted between the two tips...
    draw.draw_dashed_segment(surf, sol.x2, sol.x1, colors["diff"], 2, dash=4, gap=2)
    # ...and again from the origin, where it lies on the null space.
    draw.draw_arrow(surf, fonts, ZERO, sol.diff, colors["diff"], "x1 - x2", width=4)

def draw_codomain(surf, fonts, sol, colors):
    """Output space: column space, b = Ax1 = Ax2 and A(x1 - x2) = 0."""
    surf.fill(colors["card"])
    draw.draw_grid(surf, colors["grid"], colors["axes"])

    c0, c1 = sol.column_line
    draw.draw_segment(surf, c0, c1, colors["column"], 4)
    draw.draw_label(surf, fonts, fonts.small, "Column Space", (6, 3.5), colors["column_label"],
                    offset=(0, 0))

    draw.draw_point(surf, sol.b, colors["b"], 6)
    draw.draw_label(surf, fonts, fonts.label, "b = Ax1 = Ax2", sol.b, colors["b"])

    draw.draw_point(surf, sol.a_diff, colors["diff"], 5)
    draw.draw_label(surf, fonts, fonts.label, "A(x1-x2) = 0", ZERO, colors["diff"], offset=(10, 20))

    x, y = draw.world_to_screen((-8, 8))
    for text, key, bold in CODOMAIN_NOTES:
        if text is None:
            y += 10
            continue
        font = fonts.label if bold else fonts.small
        img = fonts.render(font, text, colors[key])
        surf.blit(img, img.get_rect(bottomleft=(x, y)))
        y += 15

def blit_diagram(screen, canvas, rect, fonts, colors, title, subtitle):
    """Scale a drawing-space canvas into rect and put the floating caption box on top."""
    side = min(rect.width, rect.height)
    target = pygame.Rect(0, 0, side, side)
    target.center = rect.center
    if side == SURFACE_SIZE:
        screen.blit(canvas, target)
    else:
        screen.blit(pygame.transform.smoothscale(canvas, (side, side)), target)
    pygame.draw.rect(screen, colors["border"], target, 1)

    t = fonts.render(fonts.heading, title, colors["text"])
    s = fonts.render(fonts.small, subtitle, colors["text_dim"])
    box = pygame.Rect(target.x + 12, target.y + 12,
                      max(t.get_width(), s.get_width()) + 16,
                      t.get_height() + s.get_height() + 14)
    draw_card(screen, box, colors)
    screen.blit(t, (box.x + 8, box.y + 6))
    screen.blit(s, (box.x + 8, box.y + 8 + t.get_height()))

# ============================================================
# WINDOW PANELS
# ============================================================

def draw_header(screen, rect, fonts, colors):
    draw_card(screen, rect, colors)
    t = fonts.render(fonts.title, TITLE, colors["title"])
    screen.blit(t, (rect.x + 20, rect.y + 14))
    draw_wrapped(screen, fonts, fonts.body, SUBTITLE, rect.x + 20, rect.y + 22 + t.get_height(),
                 rect.width - 40, colors["text_dim"])

def draw_controls(screen, rect, fonts, colors, sliders, sol, invariants_ok):
    draw_card(screen, rect, colors)
    # Everything below stays inside the card, whatever the window height.
    prev_clip = screen.get_clip()
    screen.set_clip(rect)

    x = rect.x + 16
    w = rect.width - 32
    h = fonts.render(fonts.heading, "Controls", colors["text"])
    screen.blit(h, (x, rect.y + 14))
    y = rect.y + 20 + h.get_height()
    pygame.draw.line(screen, colors["border"], (x, y), (x + w, y), 1)

    for s in sliders:
        s.draw(screen, fonts, colors)

    check_lines = [
        f"‖A(x₁-x₂)‖ = {sol.residual:.2e}",
        f"‖Ax₁ - Ax₂‖ = {distance(sol.ax1, sol.ax2):.2e}",
        f"b = ({sol.b[0]:+.2f}, {sol.b[1]:+.2f})",
    ]
    check_h = fonts.body.get_linesize() + 5 + len(check_lines) * (fonts.mono.get_linesize() + 3)

    # Observe note below the last slider; short windows drop it before the numeric check.
    y = sliders[-1].rect.bottom + 40
    note_text = fonts.clean(OBSERVE)
    lines = ["Observe:"] + wrap_text(fonts.small, note_text, w - 20)
    note_h = len(lines) * (fonts.small.get_linesize() + 3) + 16
    if y + note_h + 16 + check_h <= rect.bottom - 12:
        note = pygame.Rect(x, y, w, note_h)
        pygame.draw.rect(screen, colors["note_bg"], note, border_radius=6)
        draw_lines(screen, fonts, fonts.small, lines, x + 10, y + 8, colors["note_text"])
        y = note.bottom + 16
    else:
        y = sliders[-1].rect.bottom + 30

    # Numeric check of the two facts the diagram is about
    status_col = colors["ok"] if invariants_ok else colors["bad"]
    y = draw_lines(screen, fonts, fonts.body, ["Numeric check:"], x, y, colors["text"])
    draw_lines(screen, fonts, fonts.mono, check_lines, x, y + 2, status_col)

    screen.set_clip(prev_clip)

def draw_explanations(screen, rects, fonts, colors):
    for rect, (title, key, body, formulas) in zip(rects, EXPLANATIONS):
        draw_card(screen, rect, colors)
        x = rect.x + 18
        w = rect.width - 36
        t = fonts.render(fonts.heading, title, colors[key])
        screen.blit(t, (x, rect.y + 14))
        y = draw_wrapped(screen, fonts, fonts.body, body, x, rect.y + 20 + t.get_height(), w,
                         colors["text_dim"])
        if formulas:
            box_h = len(formulas) * (fonts.mono.get_linesize() + 3) + 10
            box = pygame.Rect(x, y + 6, w, box_h)
            pygame.draw.rect(screen, colors["formula_bg"], box, border_radius=6)
            yy = box.y + 5
            for line in formulas:
                img = fonts.render(fonts.mono, line, colors["text"])
                screen.blit(img, img.get_rect(midtop=(box.centerx, yy)))
                yy += img.get_height() + 3
