"""
app.py

Window, layout and the main loop.

Controls:
- drag a slider : move b, x1 or x2
- 1 / 2 / 3     : focus the b / x1 / x2 slider
- LEFT / RIGHT  : nudge the focused slider by one step
- R             : reset to the opening configuration
- S             : save a screenshot (PNG) to the working directory
- F11           : toggle fullscreen
- ESC           : quit
"""

import logging
import os
import sys

import pygame

from . import config, panels
from .config import COLORS
from .coords import SURFACE_SIZE
from .logging_config import setup_logging
from .model import check_invariants, solve
from .state import InteractiveState
from .text import Fonts
from .widgets import TRACK_H, Slider

logger = logging.getLogger(__name__)

COMPACT_CONTROLS_H = 560

# ============================================================
# LAYOUT
# ============================================================

class Layout:
    """Rects for one window size."""
    def __init__(self, W, H):
        margin = 16
        header_h = 92
        cards_h = max(150, min(200, int(0.2 * H)))
        controls_w = 290

        self.margin = margin
        self.header = pygame.Rect(margin, margin, W - 2*margin, header_h)

        top = self.header.bottom + margin
        row_h = H - top - cards_h - 2*margin
        panel_w = (W - controls_w - 4*margin) // 2

        self.domain = pygame.Rect(margin, top, panel_w, row_h)
        self.controls = pygame.Rect(self.domain.right + margin, top, controls_w, row_h)
        self.codomain = pygame.Rect(self.controls.right + margin, top, panel_w, row_h)

        cards_top = self.domain.bottom + margin
        card_w = (W - 4*margin) // 3
        self.cards = [pygame.Rect(margin + i*(card_w + margin), cards_top, card_w, cards_h)
                      for i in range(3)]

    def slider_tracks(self, n):
        x = self.controls.x + 16
        w = self.controls.width - 32
        # Short rows pack the sliders tighter so the numeric check still fits.
        compact = self.controls.height < COMPACT_CONTROLS_H
        top, pitch = (90, 64) if compact else (100, 84)
        return [pygame.Rect(x, self.controls.y + top + i*pitch, w, TRACK_H) for i in range(n)]

# ============================================================
# VISUALIZER
# ============================================================

class Visualizer:
    """State + derived solution + everything needed to draw a frame."""

    def __init__(self, state, size):
        self.state = state
        self.fonts = Fonts()
        self.sliders = [
            Slider(state, "b_scalar", "Target b (Position)", COLORS["text_dim"], COLORS["track"],
                   hint="Moves the blue line"),
            Slider(state, "lambda1", "Solution x1", COLORS["x1"], COLORS["track_x1"]),
            Slider(state, "lambda2", "Solution x2", COLORS["x2"], COLORS["track_x2"]),
        ]
        self.focus = None

        # Diagrams are drawn at their native size and scaled into the panels.
        self.domain_canvas = pygame.Surface((SURFACE_SIZE, SURFACE_SIZE))
        self.codomain_canvas = pygame.Surface((SURFACE_SIZE, SURFACE_SIZE))

        self.resize(size)
        self.state.subscribe(self.recompute)
        self.recompute(state.params)

    def resize(self, size):
        self.size = size
        self.layout = Layout(*size)
        for slider, rect in zip(self.sliders, self.layout.slider_tracks(len(self.sliders))):
            slider.rect = rect

    def recompute(self, params):
        self.solution = solve(params)
        self.invariants_ok = check_invariants(self.solution)
        self.dirty = True

    def set_focus(self, index):
        self.focus = None if self.focus == index else index
        for i, s in enumerate(self.sliders):
            s.focused = (i == self.focus)

    def handle_event(self, e):
        """Slider and keyboard input. Window-level keys are handled by the loop."""
        if e.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION):
            for s in self.sliders:
                s.handle_event(e)

        elif e.type == pygame.KEYDOWN:
            if e.key in (pygame.K_1, pygame.K_2, pygame.K_3):
                self.set_focus(e.key - pygame.K_1)
            elif e.key in (pygame.K_LEFT, pygame.K_RIGHT) and self.focus is not None:
                steps = -1 if e.key == pygame.K_LEFT else 1
                self.state.nudge(self.sliders[self.focus].field, steps)
            elif e.key == pygame.K_r:
                self.state.reset()

    def render(self, screen):
        if self.dirty:
            panels.draw_domain(self.domain_canvas, self.fonts, self.solution, COLORS)
            panels.draw_codomain(self.codomain_canvas, self.fonts, self.solution, COLORS)
            self.dirty = False

        L = self.layout
        screen.fill(COLORS["page"])
        panels.draw_header(screen, L.header, self.fonts, COLORS)

        panels.draw_card(screen, L.domain, COLORS)
        panels.blit_diagram(screen, self.domain_canvas, L.domain.inflate(-16, -16), self.fonts, COLORS,
                            "Input Space (Domain)", "Where vectors x lives")

        panels.draw_card(screen, L.codomain, COLORS)
        panels.blit_diagram(screen, self.codomain_canvas, L.codomain.inflate(-16, -16), self.fonts, COLORS,
                            "Output Space (Codomain)", "Where vectors map to (Ax)")

        panels.draw_controls(screen, L.controls, self.fonts, COLORS, self.sliders,
                             self.solution, self.invariants_ok)
        panels.draw_explanations(screen, L.cards, self.fonts, COLORS)

# ============================================================
# ENTRY POINTS
# ============================================================

def next_screenshot_path(directory="."):
    i = 1
    while os.path.exists(os.path.join(directory, config.SCREENSHOT_NAME.format(i))):
        i += 1
    return os.path.join(directory, config.SCREENSHOT_NAME.format(i))

def snapshot(state, size, path):
    """Render one frame off-screen and save it; no window is opened."""
    pygame.font.init()
    surface = pygame.Surface(size)
    Visualizer(state, size).render(surface)
    pygame.image.save(surface, path)
    logger.info("Snapshot written to %s", path)
    return surface

def run(state, size, fps=config.FPS):
    pygame.init()
    pygame.display.set_caption("Ax=b: the difference of two solutions solves Ax=0")

    windowed_size = size
    fullscreen = False
    screen = pygame.display.set_mode(size, pygame.RESIZABLE)
    clock = pygame.time.Clock()

    viz = Visualizer(state, size)
    logger.info("Window opened at %dx%d", *size)

    running = True
    while running:
        clock.tick(fps)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False

            elif e.type == pygame.VIDEORESIZE and not fullscreen:
                size = (max(config.MIN_WINDOW_SIZE[0], e.w), max(config.MIN_WINDOW_SIZE[1], e.h))
                windowed_size = size
                screen = pygame.display.set_mode(size, pygame.RESIZABLE)
                viz.resize(size)

            elif e.type == pygame.KEYDOWN and e.key == pygame.K_ESCAPE:
                running = False

            elif e.type == pygame.KEYDOWN and e.key == pygame.K_F11:
                fullscreen = not fullscreen
                if fullscreen:
                    screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
                else:
                    screen = pygame.display.set_mode(windowed_size, pygame.RESIZABLE)
                viz.resize(screen.get_size())

            elif e.type == pygame.KEYDOWN and e.key == pygame.K_s:
                path = next_screenshot_path()
                pygame.image.save(screen, path)
                logger.info("Screenshot saved to %s", path)

            else:
                viz.handle_event(e)

        viz.render(screen)
        pygame.display.flip()

    pygame.quit()
    logger.info("Window closed")

def main(argv=None):
    args = config.parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    state = InteractiveState(args.b_scalar, args.lambda1, args.lambda2)
    logger.debug("Starting with %r", state.params)
    size = (args.width, args.height)

    if args.snapshot:
        snapshot(state, size, args.snapshot)
    else:
        run(state, size, args.fps)
    return 0

if __name__ == "__main__":
    sys.exit(main())
