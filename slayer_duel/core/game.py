"""
Game shell: pygame window + frame loop di sekitar Simulation.
One frame = one simulation tick, capped at FPS.
"""

import random
import pygame
from typing import Optional

from ..config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, GAME_TITLE,
    AUDIO_SAMPLE_RATE, AUDIO_CHANNELS, AUDIO_BUFFER_SIZE,
    ASSET_DIR, DEBUG_FRAMERATE, BACKGROUND_FILL, WHITE
)
from .input_handler import InputHandler
from .simulation import Simulation


def init_mixer() -> bool:
    """Mixer is optional; headless machines often have no audio device"""
    try:
        pygame.mixer.init(frequency=AUDIO_SAMPLE_RATE, size=-16,
                          channels=AUDIO_CHANNELS, buffer=AUDIO_BUFFER_SIZE)
    except pygame.error as e:
        print(f"[Audio] Could not initialize mixer: {e}")
        return False
    return True


class Game:
    """
    Owns the display, clock and input handler.
    Renderer, UI and sound are attached by initialize_systems().
    """

    def __init__(self, asset_dir: str = ASSET_DIR, seed: Optional[int] = None):
        pygame.init()
        self.audio_available = init_mixer()

        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(GAME_TITLE)
        self.clock = pygame.time.Clock()

        self.asset_dir = asset_dir
        self.rng = random.Random(seed)
        self.input_handler = InputHandler()

        self.renderer = None
        self.ui_manager = None
        self.sound_manager = None
        self.simulation: Optional[Simulation] = None

        self.running = False
        self._fps_font = None

    def initialize_systems(self, renderer, ui_manager, sound_manager=None):
        """Attach presentation sinks, lalu bangun simulation"""
        self.renderer = renderer
        self.ui_manager = ui_manager
        self.sound_manager = sound_manager
        self.simulation = Simulation.create(self.input_handler,
                                            audio=sound_manager,
                                            ui=ui_manager,
                                            rng=self.rng)

    def run(self):
        """Frame loop sampai window ditutup"""
        if self.simulation is None:
            raise RuntimeError("initialize_systems() must be called before run()")

        self.running = True
        try:
            while self.running:
                self.clock.tick(FPS)
                self.step()
        finally:
            self._cleanup()

    def step(self):
        """One frame: events -> tick -> draw -> flip"""
        self.input_handler.update()
        for event in pygame.event.get():
            self.input_handler.process_event(event)

        if self.input_handler.should_quit():
            self.running = False
            return

        self.simulation.tick(self.input_handler)
        self._draw()
        pygame.display.flip()

    def _draw(self):
        self.screen.fill(BACKGROUND_FILL)
        if self.renderer:
            self.renderer.render(self.simulation.fighters)
        # UI always on top
        if self.ui_manager:
            self.ui_manager.render(self.screen, self.simulation.round_manager)
        if DEBUG_FRAMERATE:
            self._draw_fps()

    def _draw_fps(self):
        if self._fps_font is None:
            self._fps_font = pygame.font.Font(None, 24)
        text = self._fps_font.render(f"FPS: {self.clock.get_fps():.0f}", True, WHITE)
        self.screen.blit(text, (10, SCREEN_HEIGHT - 30))

    def _cleanup(self):
        if self.sound_manager:
            self.sound_manager.cleanup()
        pygame.quit()
