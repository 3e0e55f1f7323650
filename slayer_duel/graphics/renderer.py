"""
Main Renderer
=============
Background, fighter sprites dan debug overlay ke satu target surface.
"""

import pygame
from typing import Dict, Iterable, Optional, Tuple

from ..config import (
    AnimationState, CharacterKind, ASSET_DIR,
    SPRITE_OFFSET_X, BACKGROUND_FILL, DEBUG_HITBOXES
)
from .sprites import FighterSprites, BackgroundSprites


class Renderer:
    """
    Main renderer untuk game.
    """

    def __init__(self, surface: pygame.Surface, asset_dir: str = ASSET_DIR,
                 debug_hitboxes: bool = DEBUG_HITBOXES):
        self.surface = surface

        # Sprites per character (sheets or procedural frames)
        self.sprites: Dict[CharacterKind, FighterSprites] = {
            kind: FighterSprites(kind, asset_dir) for kind in CharacterKind
        }

        # Background (cached)
        self._background: Optional[pygame.Surface] = BackgroundSprites.load(asset_dir)

        # Debug
        self.debug_hitboxes = debug_hitboxes

    def render(self, fighters: Iterable):
        """Render world: background lalu fighters"""
        self.render_background()
        for fighter in fighters:
            fighter.draw(self)

        if self.debug_hitboxes:
            self.render_debug_hitboxes(fighters)

    def render_background(self):
        # Solid fill until the image is ready
        self.surface.fill(BACKGROUND_FILL)
        if self._background:
            self.surface.blit(self._background, (0, 0))

    def render_sprite(self, character_kind: CharacterKind,
                      action: AnimationState, frame_index: int,
                      position: Tuple[float, float], mirrored: bool) -> bool:
        """
        Draw one frame at (x - SPRITE_OFFSET_X, y - frame_height / 2).
        Return False (nothing drawn) kalau frame belum tersedia.
        """
        sprites = self.sprites.get(character_kind)
        if sprites is None:
            return False

        frame = sprites.get_frame(action, frame_index)
        if frame is None:
            return False

        if mirrored:
            frame = pygame.transform.flip(frame, True, False)

        x, y = position
        self.surface.blit(frame, (x - SPRITE_OFFSET_X, y - frame.get_height() / 2))
        return True

    def render_debug_hitboxes(self, fighters: Iterable):
        """Body box (green), strike box (red) saat menyerang"""
        for fighter in fighters:
            pygame.draw.rect(self.surface, (0, 255, 0), fighter.body_box().as_tuple(), 2)
            if fighter.is_attacking:
                pygame.draw.rect(self.surface, (255, 0, 0), fighter.strike_box().as_tuple(), 2)
