import logging

import pygame

from .sorters import ALGORITHM_KEYS

logger = logging.getLogger(__name__)

QUIT_KEY       = pygame.K_ESCAPE
REGENERATE_KEY = pygame.K_r

# 1..6 pick algorithms in ALGORITHMS order
SELECT_KEYS = {
    getattr(pygame, f"K_{n + 1}"): key for n, key in enumerate(ALGORITHM_KEYS)
}


class InputDispatcher:
    """Applies window and keyboard events to an AppState, in arrival order."""

    def __init__(self, state):
        self.state = state

    def dispatch(self, ev):
        """Apply one event. Returns True if it changed anything."""
        if ev.type == pygame.QUIT:
            self.state.shutdown()
            return True
        if ev.type != pygame.KEYDOWN:
            return False
        if ev.key == QUIT_KEY:
            self.state.shutdown()
            return True
        if ev.key == REGENERATE_KEY:
            self.state.regenerate()
            return True
        if ev.key in SELECT_KEYS:
            self.state.select(SELECT_KEYS[ev.key])
            return True
        return False

    def dispatch_all(self, events):
        """Drain `events`; anything queued after a quit is dropped."""
        for ev in events:
            self.dispatch(ev)
            if self.state.quit:
                logger.debug("Quit requested")
                break
