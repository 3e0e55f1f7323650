"""
Overlays
========
Countdown, FIGHT! banner, KO screen dan pause menu.
"""

import pygame
from typing import Tuple

from ..config import (
    SCREEN_WIDTH, SCREEN_HEIGHT,
    WHITE, BLACK, GOLD, DARK_RED, YELLOW
)


def draw_outlined_text(surface: pygame.Surface, font: pygame.font.Font,
                       text: str, center: Tuple[int, int],
                       color, stroke_color, stroke: int = 3,
                       scale: float = 1.0, shadow: bool = True):
    """Text dengan stroke dan drop shadow"""
    fill = font.render(text, True, color)
    outline = font.render(text, True, stroke_color)

    if scale != 1.0:
        size = (int(fill.get_width() * scale), int(fill.get_height() * scale))
        fill = pygame.transform.smoothscale(fill, size)
        outline = pygame.transform.smoothscale(outline, size)

    rect = fill.get_rect(center=center)

    if shadow:
        shade = font.render(text, True, BLACK)
        if scale != 1.0:
            shade = pygame.transform.smoothscale(shade, fill.get_size())
        shade.set_alpha(160)
        surface.blit(shade, rect.move(6, 6))

    for dx in (-stroke, 0, stroke):
        for dy in (-stroke, 0, stroke):
            if dx or dy:
                surface.blit(outline, rect.move(dx, dy))
    surface.blit(fill, rect)


COUNTDOWN_DIM_ALPHA = 128  # half-dark screen behind 3, 2, 1 and FIGHT!


def _dim(surface: pygame.Surface, alpha: int):
    overlay = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))
    surface.blit(overlay, (0, 0))


class CountdownOverlay:
    """Digit 3, 2, 1 di tengah layar"""

    def __init__(self):
        self.font = None

    def render(self, surface: pygame.Surface, value: int):
        _dim(surface, COUNTDOWN_DIM_ALPHA)
        if value <= 0:
            return
        if self.font is None:
            self.font = pygame.font.Font(None, 240)
        draw_outlined_text(surface, self.font, str(value),
                           (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2),
                           GOLD, DARK_RED, stroke=4)


class FightBanner:
    """FIGHT! yang membesar selama banner tampil"""

    def __init__(self):
        self.font = None

    @staticmethod
    def scale_for(progress: float) -> float:
        return 1 + max(0.0, min(1.0, progress)) * 0.3

    def render(self, surface: pygame.Surface, progress: float):
        _dim(surface, COUNTDOWN_DIM_ALPHA)
        if self.font is None:
            self.font = pygame.font.Font(None, 180)
        draw_outlined_text(surface, self.font, "FIGHT!",
                           (SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2),
                           YELLOW, DARK_RED, stroke=4,
                           scale=self.scale_for(progress))


class ResultScreen:
    """
    KO screen: pemenang + hint untuk main lagi.
    """

    def __init__(self):
        self.label = ""
        self.is_active = False
        self.title_font = None
        self.font = None
        self.hint_font = None

    def show(self, label: str):
        self.label = label
        self.is_active = True

    def hide(self):
        self.is_active = False

    def render(self, surface: pygame.Surface):
        if not self.is_active:
            return
        if self.title_font is None:
            self.title_font = pygame.font.Font(None, 160)
            self.font = pygame.font.Font(None, 72)
            self.hint_font = pygame.font.Font(None, 32)

        _dim(surface, 150)

        center_x = SCREEN_WIDTH // 2
        center_y = SCREEN_HEIGHT // 2
        draw_outlined_text(surface, self.title_font, "K.O.",
                           (center_x, center_y - 90), GOLD, DARK_RED, stroke=4)
        draw_outlined_text(surface, self.font, self.label,
                           (center_x, center_y + 20), WHITE, BLACK, stroke=2)

        hint = self.hint_font.render("Press ENTER to play again", True, WHITE)
        surface.blit(hint, hint.get_rect(center=(center_x, center_y + 100)))


class PauseMenu:
    """
    Pause menu overlay.
    """

    def __init__(self):
        self.is_active = False
        self.title_font = None
        self.font = None

    def show(self):
        self.is_active = True

    def hide(self):
        self.is_active = False

    def render(self, surface: pygame.Surface):
        if not self.is_active:
            return
        if self.title_font is None:
            self.title_font = pygame.font.Font(None, 96)
            self.font = pygame.font.Font(None, 32)

        # Darken background
        _dim(surface, 180)

        center_x = SCREEN_WIDTH // 2
        center_y = SCREEN_HEIGHT // 2
        draw_outlined_text(surface, self.title_font, "PAUSED",
                           (center_x, center_y - 40), WHITE, BLACK, stroke=2)
        hint = self.font.render("Press ENTER to resume", True, WHITE)
        surface.blit(hint, hint.get_rect(center=(center_x, center_y + 40)))
