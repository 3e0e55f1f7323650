"""
AI Controller
=============
Scripted AI untuk Demon fighter.
Timer-gated mode selection + distance bands, tanpa learning.
"""

import random
from typing import Optional

from ..config import (
    AIMode, AnimationState, ControllerKind, DEBUG_AI_DECISIONS,
    AI_DECISION_INTERVAL, AI_DIRECTION_INTERVAL,
    AI_DEFENSIVE_HEALTH, AI_AGGRESSIVE_HEALTH, AI_AGGRESSIVE_DISTANCE,
    AI_ATTACK_RANGE, AI_COMFORT_RANGE, AI_RETREAT_RANGE,
    AI_NEUTRAL_FAR, AI_NEUTRAL_MID,
    AI_AGGRESSIVE_FAST, AI_AGGRESSIVE_SLOW, AI_RETREAT_SPEED,
    AI_NEUTRAL_FAST, AI_NEUTRAL_SLOW,
    AI_AGGRESSIVE_DWELL, AI_AGGRESSIVE_VERTICAL,
    AI_AGGRESSIVE_ATTACK_CHANCE, AI_AGGRESSIVE_ATTACK1_BIAS,
    AI_AGGRESSIVE_JUMP_CHANCE,
    AI_NEUTRAL_DWELL, AI_NEUTRAL_VERTICAL,
    AI_NEUTRAL_ATTACK_CHANCE, AI_NEUTRAL_ATTACK1_BIAS,
    AI_DEFENSIVE_ATTACK_CHANCE
)
from ..fighters.intent import Intent, IntentProvider


def choose_mode(health: int, distance: float) -> AIMode:
    """Mode berdasarkan health dan jarak"""
    if health < AI_DEFENSIVE_HEALTH:
        return AIMode.DEFENSIVE
    if distance < AI_AGGRESSIVE_DISTANCE and health > AI_AGGRESSIVE_HEALTH:
        # Only aggressive when healthy and close
        return AIMode.AGGRESSIVE
    return AIMode.NEUTRAL


class AIController(IntentProvider):
    """
    Controller untuk AI fighter.
    Observes its own and the opponent's public state every tick.
    """

    controller_kind = ControllerKind.AI

    def __init__(self, rng: Optional[random.Random] = None,
                 debug: bool = DEBUG_AI_DECISIONS):
        self.rng = rng or random.Random()
        self.debug = debug

        # State
        self.mode = AIMode.NEUTRAL
        self.decision_timer = 0
        self.idle_timer = 0
        self.move_timer = 0
        self.last_direction = 0

    def produce_intent(self, me, opponent) -> Intent:
        distance = abs(opponent.x - me.x)
        vertical = abs(opponent.y - me.y)

        # Slow, stable decisions
        self.decision_timer += 1
        if self.decision_timer > AI_DECISION_INTERVAL:
            self.decision_timer = 0
            previous = self.mode
            self.mode = choose_mode(me.health, distance)
            if self.debug and self.mode != previous:
                print(f"[AI] mode {previous.value} -> {self.mode.value} "
                      f"(health={me.health}, distance={int(distance)})")

        self.move_timer += 1
        toward = -1 if opponent.x < me.x else 1

        if self.mode == AIMode.AGGRESSIVE:
            intent = self._aggressive(me, distance, vertical, toward)
        elif self.mode == AIMode.DEFENSIVE:
            intent = self._defensive(me, distance, toward)
        else:
            intent = self._neutral(me, distance, vertical, toward)

        # Reset idle timer when moving
        if intent.is_moving:
            self.idle_timer = 0

        return intent

    def _aggressive(self, me, distance: float, vertical: float,
                    toward: int) -> Intent:
        intent = Intent()

        if distance > AI_ATTACK_RANGE:
            # Direction only changes every few ticks, no jitter
            if self.move_timer > AI_DIRECTION_INTERVAL:
                self.last_direction = toward
                self.move_timer = 0
            intent.move_x = self.last_direction * AI_AGGRESSIVE_FAST
        elif distance > AI_COMFORT_RANGE:
            intent.move_x = toward * AI_AGGRESSIVE_SLOW
        else:
            # Comfortable range: stop and wait for an opening
            self.idle_timer += 1
            if (self.idle_timer > AI_AGGRESSIVE_DWELL and me.attack_cooldown == 0 and
                    vertical < AI_AGGRESSIVE_VERTICAL):
                if self.rng.random() < AI_AGGRESSIVE_ATTACK_CHANCE:
                    intent.attack = self._pick_attack(AI_AGGRESSIVE_ATTACK1_BIAS)
                    self.idle_timer = 0

        # Jump occasionally when moving
        if (intent.is_moving and not me.is_jumping and
                self.rng.random() < AI_AGGRESSIVE_JUMP_CHANCE):
            intent.jump = True

        return intent

    def _defensive(self, me, distance: float, toward: int) -> Intent:
        intent = Intent()

        # Mundur saat health rendah
        if distance < AI_RETREAT_RANGE:
            intent.move_x = -toward * AI_RETREAT_SPEED

        # Very rare defensive attacks
        if (distance < AI_ATTACK_RANGE and me.attack_cooldown == 0 and
                self.rng.random() < AI_DEFENSIVE_ATTACK_CHANCE):
            intent.attack = AnimationState.ATTACK1

        return intent

    def _neutral(self, me, distance: float, vertical: float,
                 toward: int) -> Intent:
        intent = Intent()

        if distance > AI_NEUTRAL_FAR:
            intent.move_x = toward * AI_NEUTRAL_FAST
        elif distance > AI_NEUTRAL_MID:
            intent.move_x = toward * AI_NEUTRAL_SLOW
        else:
            # Stop and observe when close
            self.idle_timer += 1
            if (self.idle_timer > AI_NEUTRAL_DWELL and me.attack_cooldown == 0 and
                    vertical < AI_NEUTRAL_VERTICAL):
                if self.rng.random() < AI_NEUTRAL_ATTACK_CHANCE:
                    intent.attack = self._pick_attack(AI_NEUTRAL_ATTACK1_BIAS)
                    self.idle_timer = 0

        return intent

    def _pick_attack(self, attack1_bias: float) -> AnimationState:
        if self.rng.random() < attack1_bias:
            return AnimationState.ATTACK1
        return AnimationState.ATTACK2

    def reset(self):
        """Reset untuk round baru"""
        self.mode = AIMode.NEUTRAL
        self.decision_timer = 0
        self.idle_timer = 0
        self.move_timer = 0
        self.last_direction = 0

