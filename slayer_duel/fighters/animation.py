"""
Animation Playback
==================
Transition table + reducer untuk frame animation fighter.

ANIMATION_DATA (config) maps each action to its frame count and the event
fired when one cycle completes. step_animation is the only place frames
advance; the fighter reacts to the returned event.
"""

from dataclasses import dataclass
from typing import Optional

from ..config import (
    AnimationState, AnimationEnd, ANIMATION_DATA, FRAME_HOLD_TICKS
)


@dataclass
class AnimationPlayback:
    """Current action and where we are in its animation"""
    state: AnimationState = AnimationState.IDLE
    frame_index: int = 0
    frame_timer: int = 0

    def play(self, state: AnimationState, restart: bool = False):
        """Switch action. Frame restarts when the action changes or on request."""
        if state != self.state or restart:
            self.state = state
            self.frame_index = 0
            self.frame_timer = 0

    @property
    def frame_count(self) -> int:
        return ANIMATION_DATA[self.state].frames


def step_animation(playback: AnimationPlayback,
                   hold_ticks: int = FRAME_HOLD_TICKS) -> Optional[AnimationEnd]:
    """
    Advance playback by one tick.
    Return completion event saat animasi menyelesaikan satu siklus, else None.
    """
    playback.frame_timer += 1
    if playback.frame_timer < hold_ticks:
        return None

    playback.frame_timer = 0
    playback.frame_index += 1

    data = ANIMATION_DATA[playback.state]
    if playback.frame_index < data.frames:
        return None

    if data.on_complete == AnimationEnd.FREEZE:
        playback.frame_index = data.frames - 1
    else:
        playback.frame_index = 0

    return data.on_complete


def cycle_ticks(state: AnimationState, hold_ticks: int = FRAME_HOLD_TICKS) -> int:
    """Ticks needed for one full cycle of an action"""
    return ANIMATION_DATA[state].frames * hold_ticks
