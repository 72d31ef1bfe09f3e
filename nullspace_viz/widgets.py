"""
widgets.py

A horizontal range slider for pygame, bound to one field of InteractiveState.

The slider never stores its own value: it reads the state when drawing and
writes through InteractiveState.set, which does the clamping and snapping.
"""

import pygame

from . import config

TRACK_H = 8
KNOB_R = 9

class Slider:
    def __init__(self, state, field, label, label_color, track_color, hint=None,
                 lo=config.SLIDER_MIN, hi=config.SLIDER_MAX):
        self.state = state
        self.field = field
        self.label = label
        self.label_color = label_color
        self.track_color = track_color
        self.hint = hint
        self.lo = lo
        self.hi = hi
        self.rect = pygame.Rect(0, 0, 0, 0)     # track rect, set by layout
        self.dragging = False
        self.focused = False

    @property
    def value(self):
        return self.state.get(self.field)

    def value_at(self, x):
        """World value under screen x (unsnapped; the state snaps)."""
        if self.rect.width <= 0:
            return self.value
        t = (x - self.rect.left) / self.rect.width
        t = max(0.0, min(1.0, t))
        return self.lo + t * (self.hi - self.lo)

    def knob_x(self):
        t = (self.value - self.lo) / (self.hi - self.lo)
        return int(round(self.rect.left + t * self.rect.width))

    def hit_rect(self):
        # Generous vertical hit area: the track itself is only a few pixels tall.
        return self.rect.inflate(2*KNOB_R, 2*KNOB_R + 8)

    def handle_event(self, e):
        """Returns True if the event changed the bound value."""
        if e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
            if self.hit_rect().collidepoint(e.pos):
                self.dragging = True
                return self.state.set(self.field, self.value_at(e.pos[0]))

        elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
            self.dragging = False

        elif e.type == pygame.MOUSEMOTION and self.dragging:
            return self.state.set(self.field, self.value_at(e.pos[0]))

        return False

    def draw(self, surf, fonts, colors):
        lbl_y = self.rect.top - 30
        caption = fonts.render(fonts.body, self.label, self.label_color)
        surf.blit(caption, (self.rect.left, lbl_y))

        readout = fonts.render(fonts.mono, f"{self.value:+.1f}", colors["text"])
        surf.blit(readout, readout.get_rect(topright=(self.rect.right, lbl_y + 2)))

        pygame.draw.rect(surf, self.track_color, self.rect, border_radius=TRACK_H // 2)

        kx = self.knob_x()
        ky = self.rect.centery
        pygame.draw.circle(surf, self.label_color, (kx, ky), KNOB_R)
        if self.focused:
            pygame.draw.circle(surf, colors["text"], (kx, ky), KNOB_R + 3, 2)

        if self.hint:
            hint = fonts.render(fonts.small, self.hint, colors["axes"])
            surf.blit(hint, hint.get_rect(topright=(self.rect.right, self.rect.bottom + 8)))
