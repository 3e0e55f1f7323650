"""Tests for fighters/animation.py"""

from slayer_duel.config import AnimationState, AnimationEnd, FRAME_HOLD_TICKS
from slayer_duel.fighters.animation import AnimationPlayback, step_animation, cycle_ticks


def run(playback, ticks):
    events = []
    for _ in range(ticks):
        event = step_animation(playback)
        if event is not None:
            events.append(event)
    return events


class TestStepAnimation:
    """Frame advance and completion events."""

    def test_frame_advances_every_hold_ticks(self):
        playback = AnimationPlayback()
        run(playback, FRAME_HOLD_TICKS - 1)
        assert playback.frame_index == 0

        run(playback, 1)
        assert playback.frame_index == 1
        assert playback.frame_timer == 0

    def test_idle_loops(self):
        playback = AnimationPlayback()
        events = run(playback, cycle_ticks(AnimationState.IDLE))
        assert events == [AnimationEnd.LOOP]
        assert playback.frame_index == 0

    def test_attack_reports_end(self):
        playback = AnimationPlayback()
        playback.play(AnimationState.ATTACK1)
        events = run(playback, cycle_ticks(AnimationState.ATTACK1))
        assert events == [AnimationEnd.END_ATTACK]

    def test_hit_reports_end(self):
        playback = AnimationPlayback()
        playback.play(AnimationState.HIT)
        assert cycle_ticks(AnimationState.HIT) == 4 * FRAME_HOLD_TICKS
        events = run(playback, cycle_ticks(AnimationState.HIT))
        assert events == [AnimationEnd.END_HIT]

    def test_death_freezes_on_last_frame(self):
        playback = AnimationPlayback()
        playback.play(AnimationState.DEATH)
        run(playback, cycle_ticks(AnimationState.DEATH) * 3)
        assert playback.frame_index == 5


class TestPlay:
    """Switching actions."""

    def test_same_action_keeps_frame(self):
        playback = AnimationPlayback()
        run(playback, FRAME_HOLD_TICKS * 2 + 3)
        playback.play(AnimationState.IDLE)
        assert playback.frame_index == 2
        assert playback.frame_timer == 3

    def test_new_action_restarts(self):
        playback = AnimationPlayback()
        run(playback, FRAME_HOLD_TICKS * 2)
        playback.play(AnimationState.RUN)
        assert playback.frame_index == 0
        assert playback.frame_timer == 0

    def test_restart_same_action(self):
        playback = AnimationPlayback(AnimationState.ATTACK2)
        run(playback, FRAME_HOLD_TICKS)
        playback.play(AnimationState.ATTACK2, restart=True)
        assert playback.frame_index == 0

    def test_frame_counts(self):
        counts = {state: AnimationPlayback(state).frame_count for state in AnimationState}
        assert counts == {
            AnimationState.IDLE: 8,
            AnimationState.RUN: 8,
            AnimationState.JUMP: 2,
            AnimationState.ATTACK1: 6,
            AnimationState.ATTACK2: 6,
            AnimationState.HIT: 4,
            AnimationState.DEATH: 6,
        }
