import pygame

from nullspace_viz.widgets import Slider


def make_slider(state, field="lambda1"):
    s = Slider(state, field, "Solution x1", (0, 0, 255), (200, 200, 255))
    s.rect = pygame.Rect(0, 0, 80, 8)
    return s


def click(pos, kind=pygame.MOUSEBUTTONDOWN):
    return pygame.event.Event(kind, pos=pos, button=1)


def test_value_at_maps_track_to_range(state):
    s = make_slider(state)
    assert s.value_at(0) == -4
    assert s.value_at(40) == 0
    assert s.value_at(80) == 4
    assert s.value_at(-50) == -4
    assert s.value_at(500) == 4


def test_knob_follows_state(state):
    s = make_slider(state)
    assert s.knob_x() == 50
    state.set("lambda1", -4)
    assert s.knob_x() == 0


def test_click_sets_value(state):
    s = make_slider(state)
    assert s.handle_event(click((60, 4)))
    assert state.get("lambda1") == 2.0
    assert s.dragging


def test_click_outside_is_ignored(state):
    s = make_slider(state)
    assert not s.handle_event(click((60, 200)))
    assert state.get("lambda1") == 1
    assert not s.dragging


def test_drag_and_release(state):
    s = make_slider(state)
    s.handle_event(click((40, 4)))
    assert state.get("lambda1") == 0

    s.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 30), rel=(-30, 26), buttons=(1, 0, 0)))
    assert state.get("lambda1") == -3

    s.handle_event(click((10, 30), pygame.MOUSEBUTTONUP))
    assert not s.dragging

    assert not s.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(80, 4), rel=(70, -26), buttons=(0, 0, 0)))
    assert state.get("lambda1") == -3


def test_slider_only_touches_its_field(state):
    s = make_slider(state, "b_scalar")
    s.handle_event(click((0, 4)))
    assert state.get("b_scalar") == -4
    assert state.get("lambda1") == 1
    assert state.get("lambda2") == -2
