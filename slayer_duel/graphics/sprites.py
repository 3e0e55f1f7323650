"""
Sprite Sheets + Procedural Fallback
===================================
Load sprite sheet per karakter dari ASSET_DIR.
Kalau sheet tidak ada atau rusak, generate frames secara procedural
menggunakan pygame primitives.
"""

import math
import os
import random
import pygame
from typing import Tuple, Dict, List, Optional

from ..config import (
    AnimationState, CharacterKind, ANIMATION_DATA, ATTACK_STATES, CHARACTERS,
    FIGHTER_WIDTH, FIGHTER_HEIGHT, SPRITE_DRAW_SIZE, SPRITE_OFFSET_X,
    SCREEN_WIDTH, SCREEN_HEIGHT, FLOOR_Y, ASSET_DIR, BACKGROUND_IMAGE,
    SKIN_TONE, SKIN_TONE_PALE, BLADE_COLOR, MAGIC_COLOR, BLACK, WHITE
)

Color = Tuple[int, int, int]


def _prepare(surface: pygame.Surface) -> pygame.Surface:
    """convert_alpha only works once a display mode exists"""
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        return surface.convert_alpha()
    return surface


def slice_sheet(sheet: pygame.Surface, frame_count: int,
                size: Tuple[int, int] = SPRITE_DRAW_SIZE) -> List[pygame.Surface]:
    """
    Potong horizontal strip jadi frame_count frames.
    Every frame is scaled to the body box times SPRITE_SCALE, whatever the sheet's native size.
    """
    frame_width = sheet.get_width() // frame_count
    frame_height = sheet.get_height()
    frames = []
    for i in range(frame_count):
        frame = sheet.subsurface(pygame.Rect(i * frame_width, 0, frame_width, frame_height))
        frames.append(pygame.transform.scale(frame, size))
    return frames


class SpriteGenerator:
    """
    Generate frame fighter secara procedural.

    Frame size is chosen so the standard draw offset (x - SPRITE_OFFSET_X,
    y - height / 2) puts the figure on the body box: the figure occupies the
    lower half of the surface.
    """

    FRAME_WIDTH = FIGHTER_WIDTH + SPRITE_OFFSET_X * 2
    FRAME_HEIGHT = FIGHTER_HEIGHT * 2

    @staticmethod
    def create_frame(kind: CharacterKind, state: AnimationState,
                     frame: int, frame_count: int) -> pygame.Surface:
        """One frame, always drawn facing right"""
        data = CHARACTERS[kind]
        surface = pygame.Surface(
            (SpriteGenerator.FRAME_WIDTH, SpriteGenerator.FRAME_HEIGHT), pygame.SRCALPHA
        )
        progress = frame / max(1, frame_count - 1)

        if state == AnimationState.DEATH:
            body = SpriteGenerator._draw_body(kind, data.primary_color,
                                              data.secondary_color, 0, 0)
            # Fall backwards
            angle = 90 * progress
            rotated = pygame.transform.rotate(body, angle)
            rect = rotated.get_rect(midbottom=(surface.get_width() // 2,
                                               surface.get_height()))
            surface.blit(rotated, rect)
            return surface

        bob = 0
        stride = 0
        if state == AnimationState.IDLE:
            bob = int(3 * math.sin(progress * 2 * math.pi))
        elif state == AnimationState.RUN:
            stride = int(14 * math.sin(progress * 2 * math.pi))
        elif state == AnimationState.JUMP:
            stride = 8

        body = SpriteGenerator._draw_body(kind, data.primary_color,
                                          data.secondary_color, bob, stride)

        if state in ATTACK_STATES:
            SpriteGenerator._draw_attack(body, kind, state, progress)

        if state == AnimationState.HIT:
            body = pygame.transform.rotate(body, 8)
            body.fill((90, 90, 90), special_flags=pygame.BLEND_RGB_ADD)

        rect = body.get_rect(midbottom=(surface.get_width() // 2, surface.get_height()))
        surface.blit(body, rect)
        return surface

    @staticmethod
    def _draw_body(kind: CharacterKind, primary: Color, secondary: Color,
                   bob: int, stride: int) -> pygame.Surface:
        """Figure standing in a FRAME_WIDTH x FIGHTER_HEIGHT box, facing right"""
        width = SpriteGenerator.FRAME_WIDTH
        height = FIGHTER_HEIGHT
        surface = pygame.Surface((width, height), pygame.SRCALPHA)
        skin = SKIN_TONE if kind == CharacterKind.TANJIRO else SKIN_TONE_PALE

        center_x = width // 2
        head_size = int(height * 0.16)
        torso_height = int(height * 0.34)
        torso_width = int(FIGHTER_WIDTH * 0.45)
        leg_height = int(height * 0.36)
        leg_width = int(FIGHTER_WIDTH * 0.16)

        leg_y = height - leg_height
        torso_y = leg_y - torso_height + bob
        head_y = torso_y - head_size

        # Legs
        pygame.draw.rect(surface, secondary,
                         (center_x - leg_width - 4 - stride // 2, leg_y, leg_width, leg_height))
        pygame.draw.rect(surface, secondary,
                         (center_x + 4 + stride // 2, leg_y, leg_width, leg_height))

        # Torso
        torso = pygame.Rect(center_x - torso_width // 2, torso_y, torso_width, torso_height)
        pygame.draw.rect(surface, primary, torso)
        if kind == CharacterKind.TANJIRO:
            # Checkered haori
            cell = max(6, torso_width // 5)
            for row in range(0, torso_height, cell):
                for col in range(0, torso_width, cell):
                    if (row // cell + col // cell) % 2 == 0:
                        pygame.draw.rect(surface, secondary,
                                         (torso.x + col, torso.y + row,
                                          min(cell, torso_width - col),
                                          min(cell, torso_height - row)))
        else:
            pygame.draw.line(surface, secondary,
                             (center_x, torso_y), (center_x, torso_y + torso_height), 3)

        # Arms
        arm_width = int(FIGHTER_WIDTH * 0.1)
        arm_length = int(height * 0.26)
        pygame.draw.rect(surface, skin,
                         (torso.left - arm_width, torso_y + 4, arm_width, arm_length))
        pygame.draw.rect(surface, skin,
                         (torso.right, torso_y + 4, arm_width, arm_length))

        # Head
        pygame.draw.ellipse(surface, skin,
                            (center_x - head_size // 2, head_y, head_size, head_size))
        eye_y = head_y + int(head_size * 0.4)
        pygame.draw.circle(surface, BLACK, (center_x + 4, eye_y), 2)
        pygame.draw.circle(surface, BLACK, (center_x + 11, eye_y), 2)

        if kind == CharacterKind.DEMON:
            # Horns
            pygame.draw.polygon(surface, WHITE, [
                (center_x - head_size // 3, head_y + 4),
                (center_x - head_size // 2, head_y - 12),
                (center_x - head_size // 6, head_y + 2),
            ])
            pygame.draw.polygon(surface, WHITE, [
                (center_x + head_size // 3, head_y + 4),
                (center_x + head_size // 2, head_y - 12),
                (center_x + head_size // 6, head_y + 2),
            ])
        else:
            # Hair
            pygame.draw.ellipse(surface, (60, 20, 20),
                                (center_x - head_size // 2, head_y - 4, head_size, head_size // 2))

        return surface

    @staticmethod
    def _draw_attack(surface: pygame.Surface, kind: CharacterKind,
                     state: AnimationState, progress: float):
        """Sword arc (Tanjiro) or magic burst (Demon) in front of the body"""
        width, height = surface.get_size()
        shoulder = (width // 2 + FIGHTER_WIDTH // 4, int(height * 0.3))

        # Swing: -60 deg to +60 deg; ATTACK2 swings the other way
        sweep = -60 + 120 * progress
        if state == AnimationState.ATTACK2:
            sweep = -sweep
        angle = math.radians(sweep)
        reach = SPRITE_OFFSET_X + FIGHTER_WIDTH // 4

        tip = (int(shoulder[0] + reach * math.cos(angle)),
               int(shoulder[1] + reach * math.sin(angle)))

        if kind == CharacterKind.TANJIRO:
            pygame.draw.line(surface, BLADE_COLOR, shoulder, tip, 5)
            pygame.draw.circle(surface, BLACK, shoulder, 4)
        else:
            radius = int(6 + 10 * math.sin(progress * math.pi))
            pygame.draw.line(surface, MAGIC_COLOR, shoulder, tip, 3)
            pygame.draw.circle(surface, MAGIC_COLOR, tip, max(2, radius))


class FighterSprites:
    """
    Semua frames untuk satu karakter, per AnimationState.
    """

    def __init__(self, kind: CharacterKind, asset_dir: str = ASSET_DIR):
        self.kind = kind
        self.asset_dir = asset_dir
        self.sheet_dir = os.path.join(asset_dir, CHARACTERS[kind].sprite_dir)

        self._frames: Dict[AnimationState, List[pygame.Surface]] = {}
        self.missing_sheets: List[str] = []
        self._load_all()

    def _load_all(self):
        for state, data in ANIMATION_DATA.items():
            path = os.path.join(self.sheet_dir, data.sheet_file)
            try:
                sheet = pygame.image.load(path)
                self._frames[state] = [_prepare(f) for f in slice_sheet(sheet, data.frames)]
            except (FileNotFoundError, pygame.error):
                self.missing_sheets.append(data.sheet_file)
                self._frames[state] = [
                    SpriteGenerator.create_frame(self.kind, state, i, data.frames)
                    for i in range(data.frames)
                ]

        if self.missing_sheets:
            print(f"[Sprites] {CHARACTERS[self.kind].label}: "
                  f"{len(self.missing_sheets)} sheet(s) missing in {self.sheet_dir}, "
                  f"using procedural frames")

    def get_frame(self, state: AnimationState, frame_index: int) -> Optional[pygame.Surface]:
        """None kalau frame belum ada (renderer skip draw)"""
        frames = self._frames.get(state)
        if not frames or not 0 <= frame_index < len(frames):
            return None
        return frames[frame_index]


class BackgroundSprites:
    """
    Background image, atau generated night-sky dojo.
    """

    @staticmethod
    def load(asset_dir: str = ASSET_DIR,
             width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> pygame.Surface:
        path = os.path.join(asset_dir, BACKGROUND_IMAGE)
        try:
            image = pygame.image.load(path)
            return _prepare(pygame.transform.scale(image, (width, height)))
        except (FileNotFoundError, pygame.error) as e:
            print(f"[Sprites] Background not loaded ({e}), using generated backdrop")
            return BackgroundSprites.create_night_surface(width, height)

    @staticmethod
    def create_night_surface(width: int, height: int) -> pygame.Surface:
        """Night sky gradient, moon, stars, wooden floor"""
        surface = pygame.Surface((width, height))

        # Sky gradient
        for y in range(height):
            t = y / height
            color = (int(10 + 30 * t), int(10 + 20 * t), int(30 + 40 * t))
            pygame.draw.line(surface, color, (0, y), (width, y))

        # Stars, consistent between runs
        rng = random.Random(42)
        for _ in range(120):
            x = rng.randint(0, width)
            y = rng.randint(0, int(FLOOR_Y * 0.6))
            shade = rng.randint(150, 255)
            surface.set_at((x, y), (shade, shade, shade))

        # Moon
        pygame.draw.circle(surface, (240, 235, 210), (int(width * 0.8), 110), 50)
        pygame.draw.circle(surface, (20, 18, 45), (int(width * 0.8) + 18, 98), 44)

        # Dojo floor
        pygame.draw.rect(surface, (70, 45, 30), (0, FLOOR_Y, width, height - FLOOR_Y))
        for x in range(0, width, 80):
            pygame.draw.line(surface, (50, 32, 22), (x, FLOOR_Y), (x, height), 2)
        pygame.draw.line(surface, (110, 75, 50), (0, FLOOR_Y), (width, FLOOR_Y), 3)

        return surface
