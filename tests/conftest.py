import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from sortvis.state import AppState
from sortvis.store import ArrayStore


class RecordingRenderer:
    """Stands in for the pygame window; keeps every frame it is asked to draw."""

    def __init__(self):
        self.frames = []

    def draw_highlighted(self, values, i=None, j=None, k=None, label=""):
        hl = tuple(x for x in (i, j, k) if x is not None)
        self.frames.append(("highlighted", tuple(values), hl))

    def draw_plain(self, values, label=""):
        self.frames.append(("plain", tuple(values), ()))


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def state():
    return AppState(store=ArrayStore(12, 10, 99, seed=7))
