"""
UI Manager
==========
Main manager yang mengintegrasikan semua UI components.
RoundManager dan Simulation hanya memanggil set_*/show_*/hide_*.
"""

import pygame

from ..config import RoundPhase, CHARACTERS, CharacterKind
from .hud import HUD
from .overlays import CountdownOverlay, FightBanner, ResultScreen, PauseMenu


class UIManager:
    """
    Manages semua UI dalam game.
    """

    def __init__(self):
        self.hud = HUD((CHARACTERS[CharacterKind.TANJIRO].label,
                        CHARACTERS[CharacterKind.DEMON].label))

        self.countdown = CountdownOverlay()
        self.fight_banner = FightBanner()
        self.result_screen = ResultScreen()
        self.pause_menu = PauseMenu()

    # Sink untuk simulation
    def set_health_display(self, slot: int, health: int):
        self.hud.set_health(slot, health)

    def set_score_display(self, slot: int, score: int):
        self.hud.set_score(slot, score)

    def show_result_screen(self, label: str):
        self.result_screen.show(label)

    def hide_result_screen(self):
        self.result_screen.hide()

    def show_pause_menu(self):
        self.pause_menu.show()

    def hide_pause_menu(self):
        self.pause_menu.hide()

    def render_overlay(self, surface: pygame.Surface, phase: RoundPhase,
                       value, show_fight: bool = False):
        """
        Phase overlay. Saat countdown, value = digit, atau banner progress
        (0..1) kalau show_fight.
        """
        if phase != RoundPhase.COUNTDOWN:
            return
        if show_fight:
            self.fight_banner.render(surface, value)
        else:
            self.countdown.render(surface, value)

    def render(self, surface: pygame.Surface, round_manager):
        """HUD, lalu overlay sesuai phase"""
        self.hud.render(surface)

        state = round_manager.state
        if state.show_fight:
            self.render_overlay(surface, round_manager.phase,
                                round_manager.banner_progress, show_fight=True)
        else:
            self.render_overlay(surface, round_manager.phase, state.countdown_value)

        self.result_screen.render(surface)
        self.pause_menu.render(surface)
