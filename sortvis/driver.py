"""
The frame loop.

One tick = drain input, advance the active sort by one unit, redraw. Nothing
runs between ticks, so whatever the window shows is exactly the array after
the last input action or sort step.
"""

import logging

import pygame

from .dispatcher import InputDispatcher
from .state import RunState

logger = logging.getLogger(__name__)

KEY_HINTS = "1-6 algorithm   R regenerate   ESC quit"


class FrameDriver:
    def __init__(self, state, renderer, fps=60, poll=None, clock=None):
        self.state      = state
        self.renderer   = renderer
        self.fps        = fps
        self.dispatcher = InputDispatcher(state)
        self._poll      = poll if poll is not None else pygame.event.get
        self._clock     = clock
        self.ticks      = 0

    def label(self):
        st = self.state
        if st.run_state is RunState.IDLE:
            return KEY_HINTS
        text = f"{st.algorithm_name}   steps: {st.steps}"
        if st.run_state is RunState.COMPLETED:
            text += "  [SORTED]"
        return f"{text}      {KEY_HINTS}"

    def redraw(self):
        st = self.state
        values = st.store.snapshot()
        if st.run_state is RunState.RUNNING and st.highlights:
            self.renderer.draw_highlighted(values, *st.highlights, label=self.label())
        else:
            self.renderer.draw_plain(values, label=self.label())

    def start(self):
        """Generate the first array and show it before any sort step."""
        self.state.regenerate()
        self.redraw()

    def tick(self):
        """Run one frame. Returns False once the user has asked to quit."""
        self.dispatcher.dispatch_all(self._poll())
        if self.state.quit:
            return False
        self.state.advance()
        self.redraw()
        self.ticks += 1
        return True

    def run(self):
        if self._clock is None:
            self._clock = pygame.time.Clock()
        self.start()
        try:
            while self.tick():
                self._clock.tick(self.fps)
        finally:
            self.state.shutdown()
        logger.info("Stopped after %d frames", self.ticks)
