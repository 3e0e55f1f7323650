"""Shared fakes and fixtures for the Slayer Duel tests."""

import random

import pytest

from slayer_duel.config import (
    CharacterKind, ControllerKind, RoundPhase, FIGHT_BANNER_TICKS,
    FLOOR_Y, FIGHTER_HEIGHT
)
from slayer_duel.fighters.fighter import Fighter, FighterView
from slayer_duel.fighters.intent import Intent, IntentProvider


GROUND_Y = FLOOR_Y - FIGHTER_HEIGHT


class FakeInput:
    """Input source: held actions plus one-frame presses."""

    def __init__(self):
        self.held = set()
        self.pressed = set()

    def hold(self, *actions):
        self.held.update(actions)

    def release(self, *actions):
        self.held.difference_update(actions)

    def press(self, action):
        self.pressed.add(action)

    def next_frame(self):
        self.pressed.clear()

    def is_action_active(self, action):
        return action in self.held or action in self.pressed


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, start=0):
        self.now = start

    def advance(self, ms):
        self.now += ms

    def __call__(self):
        return self.now


class RecordingAudio:
    """Audio sink that records every cue."""

    def __init__(self):
        self.cues = []

    def play_cue(self, cue, controller=None):
        self.cues.append((cue, controller))

    def cue_names(self):
        return [cue for cue, _ in self.cues]


class RecordingUI:
    """Presentation sink that keeps the latest displayed values."""

    def __init__(self):
        self.health = {}
        self.scores = {}
        self.result_label = None
        self.result_visible = False
        self.pause_visible = False

    def set_health_display(self, slot, health):
        self.health[slot] = health

    def set_score_display(self, slot, score):
        self.scores[slot] = score

    def show_result_screen(self, label):
        self.result_label = label
        self.result_visible = True

    def hide_result_screen(self):
        self.result_visible = False

    def show_pause_menu(self):
        self.pause_visible = True

    def hide_pause_menu(self):
        self.pause_visible = False


class ScriptedIntent(IntentProvider):
    """Replays queued intents, then stands still."""

    def __init__(self, controller_kind=ControllerKind.HUMAN, intents=()):
        self.controller_kind = controller_kind
        self.queue = list(intents)
        self.reset_calls = 0

    def produce_intent(self, me, opponent):
        if self.queue:
            return self.queue.pop(0)
        return Intent()

    def reset(self):
        self.reset_calls += 1


class FixedRandom(random.Random):
    """random() always returns the same value."""

    def __init__(self, value):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


def make_view(x, y=GROUND_Y, health=100, attack_cooldown=0, is_jumping=False):
    return FighterView(
        x=x, y=y, width=120, height=180,
        health=health, is_alive=health > 0,
        is_jumping=is_jumping, is_attacking=False, is_hit=False,
        attack_cooldown=attack_cooldown, facing_flipped=False,
    )


def run_countdown(round_manager, clock):
    """Drive a round manager from COUNTDOWN to PLAYING."""
    for _ in range(3):
        clock.advance(1000)
        round_manager.update()
    for _ in range(FIGHT_BANNER_TICKS):
        round_manager.update()
    assert round_manager.phase == RoundPhase.PLAYING


@pytest.fixture
def audio():
    return RecordingAudio()


@pytest.fixture
def ui():
    return RecordingUI()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_input():
    return FakeInput()


@pytest.fixture
def make_fighter():
    """Factory: fighter standing on the ground with a scripted controller."""
    def _make(kind=CharacterKind.TANJIRO, controller=None, x=100, y=GROUND_Y,
              **kwargs):
        controller = controller or ScriptedIntent()
        return Fighter(kind, controller, x, y, **kwargs)
    return _make
