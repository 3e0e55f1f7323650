"""
Intent Providers
================
Sumber keputusan gerak/serang untuk fighter.
Human input dan AI policy memakai interface yang sama.
"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from ..config import (
    AnimationState, ControllerKind, InputAction,
    HUMAN_MOVE_SPEED, HUMAN_ATTACK1_BIAS
)

if TYPE_CHECKING:
    from .fighter import FighterView


@dataclass
class Intent:
    """Normalized movement/attack request for one tick"""
    move_x: float = 0.0                       # horizontal velocity
    jump: bool = False
    attack: Optional[AnimationState] = None   # ATTACK1 / ATTACK2

    @property
    def is_moving(self) -> bool:
        return self.move_x != 0


class IntentProvider(ABC):
    """
    Base class untuk intent providers.
    """

    controller_kind: ControllerKind = ControllerKind.HUMAN

    @abstractmethod
    def produce_intent(self, me: 'FighterView',
                       opponent: 'FighterView') -> Intent:
        """Decide this tick's intent from both fighters' public state"""
        pass

    def reset(self):
        """Reset untuk round baru"""
        pass


class KeyboardIntent(IntentProvider):
    """
    Human player: baca logical actions dari input source.
    """

    controller_kind = ControllerKind.HUMAN

    def __init__(self, input_source, rng: Optional[random.Random] = None,
                 move_speed: float = HUMAN_MOVE_SPEED):
        self.input_source = input_source
        self.rng = rng or random.Random()
        self.move_speed = move_speed

    def produce_intent(self, me: 'FighterView',
                       opponent: 'FighterView') -> Intent:
        intent = Intent()
        active = self.input_source.is_action_active

        if active(InputAction.MOVE_LEFT):
            intent.move_x = -self.move_speed
        if active(InputAction.MOVE_RIGHT):
            intent.move_x = self.move_speed

        intent.jump = active(InputAction.JUMP)

        # Random attack type
        if active(InputAction.ATTACK) and me.attack_cooldown == 0:
            intent.attack = (AnimationState.ATTACK1
                             if self.rng.random() < HUMAN_ATTACK1_BIAS
                             else AnimationState.ATTACK2)

        return intent
