import logging

import pygame

from .settings import (
    BACKGROUND_COLOR, BAR_COLOR, PRIMARY_COLOR, SECONDARY_COLOR,
    TERTIARY_COLOR, HUD_COLOR, HUD_HEIGHT, HUD_FONT_SIZE,
)

logger = logging.getLogger(__name__)

CAPTION = "Sorting Visualizer"


class RendererError(RuntimeError):
    pass


class Renderer:
    """Draws the bar sequence into a pygame window."""

    def __init__(self, width, height, max_value):
        self.width, self.height = width, height
        self.max_value = max(1, max_value)
        self.screen = None
        self.font = None

    def open(self):
        try:
            pygame.display.init()
            pygame.font.init()
            self.screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(CAPTION)
            self.font = pygame.font.Font(None, HUD_FONT_SIZE)
        except pygame.error as e:
            raise RendererError(str(e)) from e
        logger.debug("Opened %dx%d window", self.width, self.height)

    def close(self):
        if self.screen is not None:
            self.screen = None
            pygame.display.quit()

    def bar_color(self, x, i, j, k):
        if x == i: return PRIMARY_COLOR
        if x == j: return SECONDARY_COLOR
        if x == k: return TERTIARY_COLOR
        return BAR_COLOR

    def draw_highlighted(self, values, i=None, j=None, k=None, label=""):
        s = self.screen
        s.fill(BACKGROUND_COLOR)
        n = len(values)
        if n:
            bw = self.width / n
            usable = self.height - HUD_HEIGHT
            for x, v in enumerate(values):
                h = (v / self.max_value) * usable
                pygame.draw.rect(s, self.bar_color(x, i, j, k),
                                 (x * bw, self.height - h, max(1, bw), h))
        if label:
            s.blit(self.font.render(label, True, HUD_COLOR), (10, 6))
        pygame.display.flip()

    def draw_plain(self, values, label=""):
        self.draw_highlighted(values, label=label)
