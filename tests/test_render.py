import os

import pygame
import pytest

from nullspace_viz import config, panels
from nullspace_viz.app import Visualizer, snapshot
from nullspace_viz.config import COLORS
from nullspace_viz.coords import SURFACE_SIZE, world_to_screen
from nullspace_viz.model import ScalarParameters, solve
from nullspace_viz.text import sanitize_unicode, wrap_text

SIZE = (1560, 940)


def canvas():
    return pygame.Surface((SURFACE_SIZE, SURFACE_SIZE))


def rgb(surf, pos):
    return tuple(surf.get_at(pos))[:3]


def test_codomain_markers(fonts):
    sol = solve(ScalarParameters(3, 1, -2))
    surf = canvas()
    panels.draw_codomain(surf, fonts, sol, COLORS)

    assert rgb(surf, world_to_screen(sol.b)) == COLORS["b"]
    assert rgb(surf, world_to_screen(sol.a_diff)) == COLORS["diff"]
    assert world_to_screen(sol.a_diff) == (400, 400)


def test_domain_arrows(fonts):
    sol = solve(ScalarParameters(3, 1, -2))
    surf = canvas()
    panels.draw_domain(surf, fonts, sol, COLORS)

    mid_x1 = world_to_screen((sol.x1[0] / 2, sol.x1[1] / 2))
    mid_x2 = world_to_screen((sol.x2[0] / 2, sol.x2[1] / 2))
    assert rgb(surf, mid_x1) == COLORS["x1"]
    assert rgb(surf, mid_x2) == COLORS["x2"]


def test_degenerate_configuration_draws(fonts):
    # x1 == x2 == origin: zero-length arrows must not fail.
    sol = solve(ScalarParameters(0, 0, 0))
    surf = canvas()
    panels.draw_domain(surf, fonts, sol, COLORS)
    panels.draw_codomain(surf, fonts, sol, COLORS)


def test_snapshot_writes_png(tmp_path, state):
    path = os.path.join(str(tmp_path), "frame.png")
    surface = snapshot(state, SIZE, path)
    assert surface.get_size() == SIZE
    assert os.path.getsize(path) > 0


def test_visualizer_recomputes_on_state_change(fonts, state):
    viz = Visualizer(state, SIZE)
    screen = pygame.Surface(SIZE)
    viz.render(screen)
    assert not viz.dirty

    state.set("lambda2", 0.5)
    assert viz.dirty
    assert viz.solution.params.lambda2 == 0.5
    assert viz.invariants_ok
    viz.render(screen)


def test_visualizer_keyboard(fonts, state):
    viz = Visualizer(state, SIZE)

    def key(k):
        viz.handle_event(pygame.event.Event(pygame.KEYDOWN, key=k, mod=0, unicode="", scancode=0))

    # Nudging does nothing until a slider has focus.
    key(pygame.K_RIGHT)
    assert state.get("b_scalar") == 3

    key(pygame.K_1)
    key(pygame.K_RIGHT)
    assert state.get("b_scalar") == 3.1

    key(pygame.K_3)
    key(pygame.K_LEFT)
    key(pygame.K_LEFT)
    assert state.get("lambda2") == -2.2
    assert [s.focused for s in viz.sliders] == [False, False, True]

    key(pygame.K_r)
    assert state.params == ScalarParameters(3, 1, -2)

    key(pygame.K_3)
    assert viz.focus is None


def test_sliders_sit_inside_controls(fonts, state):
    viz = Visualizer(state, SIZE)
    for s in viz.sliders:
        assert viz.layout.controls.contains(s.rect)


@pytest.mark.parametrize("size", [config.MIN_WINDOW_SIZE, (1366, 768), SIZE])
def test_controls_stay_inside_their_card(fonts, state, size):
    viz = Visualizer(state, size)
    screen = pygame.Surface(size)
    viz.render(screen)

    controls = viz.layout.controls
    for s in viz.sliders:
        assert controls.contains(s.rect)
    # The strip between the controls card and the explanation cards is bare page.
    for y in range(controls.bottom, viz.layout.cards[0].top):
        for x in range(controls.left, controls.right):
            assert rgb(screen, (x, y)) == COLORS["page"], (x, y)


def test_sanitize_unicode():
    assert sanitize_unicode("‖A(x₁ − x₂)‖") == "||A(x1 - x2)||"


def test_wrap_text(fonts):
    lines = wrap_text(fonts.body, "one two three four five six seven eight nine ten", 80)
    assert len(lines) > 1
    assert " ".join(lines) == "one two three four five six seven eight nine ten"
    assert all(fonts.body.size(line)[0] <= 80 or " " not in line for line in lines)
