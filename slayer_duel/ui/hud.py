"""
HUD System
==========
Health bars dan win counters.
"""

import pygame
from typing import Tuple

from ..config import (
    SCREEN_WIDTH, MAX_HEALTH,
    WHITE, DARK_GRAY, GOLD,
    HEALTH_GREEN, HEALTH_YELLOW, HEALTH_RED,
    HEALTH_LOW_THRESHOLD, HEALTH_MID_THRESHOLD
)


def health_color(health: float) -> Tuple[int, int, int]:
    """Green >= 60, yellow 30-59, red < 30"""
    if health >= HEALTH_MID_THRESHOLD:
        return HEALTH_GREEN
    elif health >= HEALTH_LOW_THRESHOLD:
        return HEALTH_YELLOW
    return HEALTH_RED


class HealthBar:
    """
    Health bar dengan nama dan angka HP.
    """

    def __init__(self, x: int, y: int, width: int, height: int,
                 label: str, is_flipped: bool = False):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.label = label
        self.is_flipped = is_flipped

        self.value = MAX_HEALTH
        self.max_value = MAX_HEALTH

        self.bg_color = DARK_GRAY
        self.border_color = WHITE

        self.font = None

    def set_value(self, value: float):
        """Set health value"""
        self.value = max(0, min(self.max_value, value))

    @property
    def color(self) -> Tuple[int, int, int]:
        return health_color(self.value)

    def render(self, surface: pygame.Surface):
        """Render health bar"""
        if self.font is None:
            self.font = pygame.font.Font(None, 24)

        pygame.draw.rect(surface, self.bg_color,
                         (self.x, self.y, self.width, self.height))

        fill_width = int(self.width * self.value / self.max_value)
        if fill_width > 0:
            # Player 2 drains toward the center
            fill_x = self.x + self.width - fill_width if self.is_flipped else self.x
            pygame.draw.rect(surface, self.color,
                             (fill_x, self.y, fill_width, self.height))

        pygame.draw.rect(surface, self.border_color,
                         (self.x, self.y, self.width, self.height), 2)

        name = self.font.render(self.label, True, WHITE)
        hp = self.font.render(f"HP {int(self.value)}", True, WHITE)
        text_y = self.y + self.height + 4
        if self.is_flipped:
            surface.blit(name, (self.x + self.width - name.get_width(), text_y))
            surface.blit(hp, (self.x, text_y))
        else:
            surface.blit(name, (self.x, text_y))
            surface.blit(hp, (self.x + self.width - hp.get_width(), text_y))


class WinCounter:
    """
    Jumlah round yang dimenangkan satu fighter.
    """

    def __init__(self, x: int, y: int, align_right: bool = False):
        self.x = x
        self.y = y
        self.align_right = align_right
        self.wins = 0
        self.font = None

    def set_value(self, wins: int):
        self.wins = wins

    def render(self, surface: pygame.Surface):
        if self.font is None:
            self.font = pygame.font.Font(None, 28)

        text = self.font.render(f"Wins: {self.wins}", True, GOLD)
        x = self.x - text.get_width() if self.align_right else self.x
        surface.blit(text, (x, self.y))


class HUD:
    """
    Main HUD class combining all elements.
    Slot 0 on the left, slot 1 on the right.
    """

    def __init__(self, labels: Tuple[str, str] = ("Tanjiro", "Demon")):
        bar_width = 400
        bar_height = 25
        bar_y = 30
        margin = 50

        self.health_bars = [
            HealthBar(margin, bar_y, bar_width, bar_height, labels[0]),
            HealthBar(SCREEN_WIDTH - margin - bar_width, bar_y, bar_width, bar_height,
                      labels[1], is_flipped=True),
        ]
        counter_y = bar_y + bar_height + 30
        self.win_counters = [
            WinCounter(margin, counter_y),
            WinCounter(SCREEN_WIDTH - margin, counter_y, align_right=True),
        ]

    def set_health(self, slot: int, health: float):
        self.health_bars[slot].set_value(health)

    def set_score(self, slot: int, score: int):
        self.win_counters[slot].set_value(score)

    def render(self, surface: pygame.Surface):
        """Render entire HUD"""
        panel = pygame.Surface((SCREEN_WIDTH, 110), pygame.SRCALPHA)
        panel.fill((0, 0, 0, 150))
        surface.blit(panel, (0, 0))

        for bar in self.health_bars:
            bar.render(surface)
        for counter in self.win_counters:
            counter.render(surface)
