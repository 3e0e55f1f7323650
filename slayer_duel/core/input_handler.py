"""
Keyboard input -> logical InputAction queries
"""

import pygame
from typing import Dict, Optional, Set
from dataclasses import dataclass, field

from ..config import InputAction, EDGE_TRIGGERED_ACTIONS


@dataclass
class InputState:
    """Keys held now, plus what changed during the current frame"""
    keys_pressed: Set[int] = field(default_factory=set)
    keys_just_pressed: Set[int] = field(default_factory=set)
    keys_just_released: Set[int] = field(default_factory=set)
    quit_requested: bool = False

    def begin_frame(self):
        self.keys_just_pressed.clear()
        self.keys_just_released.clear()
        self.quit_requested = False


def default_bindings() -> Dict[InputAction, int]:
    """Arrow keys + space, ESC untuk pause, ENTER untuk confirm"""
    return {
        InputAction.MOVE_LEFT: pygame.K_LEFT,
        InputAction.MOVE_RIGHT: pygame.K_RIGHT,
        InputAction.JUMP: pygame.K_UP,
        InputAction.ATTACK: pygame.K_SPACE,
        InputAction.PAUSE: pygame.K_ESCAPE,
        InputAction.CONFIRM: pygame.K_RETURN,
    }


class InputHandler:
    """
    Input source untuk Simulation.
    Game calls update() once per frame, then feeds every pygame event.
    """

    def __init__(self, bindings: Optional[Dict[InputAction, int]] = None):
        self.state = InputState()
        self.bindings: Dict[InputAction, int] = bindings or default_bindings()

    def update(self):
        self.state.begin_frame()

    def process_event(self, event: pygame.event.Event):
        state = self.state
        if event.type == pygame.QUIT:
            state.quit_requested = True
        elif event.type == pygame.KEYDOWN:
            # Key repeat sends KEYDOWN for held keys, only the first counts
            if event.key not in state.keys_pressed:
                state.keys_just_pressed.add(event.key)
            state.keys_pressed.add(event.key)
        elif event.type == pygame.KEYUP:
            state.keys_pressed.discard(event.key)
            state.keys_just_released.add(event.key)

    def is_key_pressed(self, key: int) -> bool:
        return key in self.state.keys_pressed

    def is_key_just_pressed(self, key: int) -> bool:
        return key in self.state.keys_just_pressed

    def is_action_pressed(self, action: InputAction) -> bool:
        key = self.bindings.get(action)
        return key is not None and self.is_key_pressed(key)

    def is_action_just_pressed(self, action: InputAction) -> bool:
        key = self.bindings.get(action)
        return key is not None and self.is_key_just_pressed(key)

    def is_action_active(self, action: InputAction) -> bool:
        """
        Query yang dipakai simulation.
        PAUSE/CONFIRM hanya aktif di frame tombol ditekan, sisanya selama ditahan.
        """
        if action in EDGE_TRIGGERED_ACTIONS:
            return self.is_action_just_pressed(action)
        return self.is_action_pressed(action)

    def set_binding(self, action: InputAction, key: int):
        self.bindings[action] = key

    def should_quit(self) -> bool:
        return self.state.quit_requested
