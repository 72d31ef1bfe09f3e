import os

# No window, no sound card: everything renders to off-screen surfaces.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from nullspace_viz.state import InteractiveState  # noqa: E402
from nullspace_viz.text import Fonts  # noqa: E402


@pytest.fixture(scope="session")
def fonts():
    pygame.font.init()
    return Fonts()


@pytest.fixture
def state():
    return InteractiveState()
