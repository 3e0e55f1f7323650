"""
Round Manager
=============
Countdown -> fight -> round over -> reset, plus pause and scoring.

Semua waktu dalam milliseconds dari clock yang di-inject
(default: pygame.time.get_ticks), kecuali banner FIGHT! yang dihitung per tick.
"""

import pygame
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from ..config import (
    RoundPhase, InputAction, AudioCue, SIMULATED_PHASES,
    COUNTDOWN_START, COUNTDOWN_STEP_MS, FIGHT_BANNER_TICKS,
    RESET_DELAY_MS, DRAW_LABEL, DEBUG_ROUNDS
)
from .state_machine import StateMachine


@dataclass
class RoundState:
    """Round/score data. Only scores survive a reset."""
    countdown_value: int = COUNTDOWN_START
    show_fight: bool = False
    fight_banner_timer: int = 0
    last_countdown_ms: int = 0
    round_over_ms: int = 0
    scores: List[int] = field(default_factory=lambda: [0, 0])
    winner_slot: Optional[int] = None
    winner_label: str = ""
    rounds_played: int = 0


class RoundManager:
    """
    Owns the round phase and the score counters.
    References only the two fighters, the optional sinks and the clock.
    """

    def __init__(self, fighters: Sequence, audio=None, ui=None,
                 clock: Optional[Callable[[], int]] = None,
                 debug: bool = DEBUG_ROUNDS):
        if len(fighters) != 2:
            raise ValueError(f"RoundManager needs exactly 2 fighters, got {len(fighters)}")

        self.fighters = list(fighters)
        self.audio = audio
        self.ui = ui
        self.clock = clock or pygame.time.get_ticks
        self.debug = debug

        self.state = RoundState(last_countdown_ms=self.clock())

        self.state_machine = StateMachine(RoundPhase.COUNTDOWN)
        self._setup_state_handlers()

    def _setup_state_handlers(self):
        """Register handlers for each round phase"""
        self.state_machine.register_handlers(
            RoundPhase.COUNTDOWN,
            enter=self._enter_countdown,
            update=self._update_countdown
        )
        self.state_machine.register_handlers(
            RoundPhase.PLAYING,
            enter=self._enter_playing,
            update=self.check_round_over
        )
        self.state_machine.register_handlers(
            RoundPhase.PAUSED,
            enter=self._enter_paused,
            exit_handler=self._exit_paused
        )
        self.state_machine.register_handlers(
            RoundPhase.ROUND_OVER,
            enter=self._enter_round_over,
            exit_handler=self._exit_round_over
        )

    # =========================================================================
    # QUERIES
    # =========================================================================

    @property
    def phase(self) -> RoundPhase:
        return self.state_machine.current_state

    @property
    def simulation_active(self) -> bool:
        """Fighters only update while playing or after a KO"""
        return self.phase in SIMULATED_PHASES

    @property
    def scores(self) -> List[int]:
        return self.state.scores

    @property
    def banner_progress(self) -> float:
        return min(1.0, self.state.fight_banner_timer / FIGHT_BANNER_TICKS)

    # =========================================================================
    # PER-TICK
    # =========================================================================

    def handle_input(self, input_source):
        """Pause, resume dan reset. PAUSE/CONFIRM are edge-triggered."""
        phase = self.phase

        if phase == RoundPhase.PLAYING:
            if input_source.is_action_active(InputAction.PAUSE):
                self.pause()

        elif phase == RoundPhase.PAUSED:
            if input_source.is_action_active(InputAction.CONFIRM):
                self.resume()

        elif phase == RoundPhase.ROUND_OVER:
            if input_source.is_action_active(InputAction.CONFIRM):
                # Ignore confirm presses right after the KO
                if self.clock() - self.state.round_over_ms > RESET_DELAY_MS:
                    self.reset_round()

    def update(self):
        """Countdown progress or round-over check, depending on phase"""
        self.state_machine.update()

    def _update_countdown(self):
        state = self.state

        if state.countdown_value > 0:
            now = self.clock()
            if now - state.last_countdown_ms >= COUNTDOWN_STEP_MS:
                state.countdown_value -= 1
                state.last_countdown_ms = now
                if state.countdown_value == 0:
                    state.show_fight = True
                    state.fight_banner_timer = 0
            return

        # FIGHT! banner
        state.fight_banner_timer += 1
        if state.fight_banner_timer >= FIGHT_BANNER_TICKS:
            state.show_fight = False
            self.state_machine.transition_to(RoundPhase.PLAYING)

    def check_round_over(self) -> bool:
        """
        End the round when a fighter died this tick.
        Kedua fighter mati di tick yang sama = draw, tanpa skor.
        """
        if self.phase != RoundPhase.PLAYING:
            return False

        player, opponent = self.fighters
        if player.is_alive and opponent.is_alive:
            return False

        state = self.state
        if not player.is_alive and not opponent.is_alive:
            state.winner_slot = None
            state.winner_label = DRAW_LABEL
        else:
            slot = 0 if player.is_alive else 1
            state.scores[slot] += 1
            state.winner_slot = slot
            state.winner_label = f"{self.fighters[slot].label} Wins!"
            if self.ui:
                self.ui.set_score_display(slot, state.scores[slot])

        state.rounds_played += 1
        state.round_over_ms = self.clock()

        if self.debug:
            print(f"[Round] {state.winner_label} scores={state.scores}")

        self.state_machine.transition_to(RoundPhase.ROUND_OVER)
        return True

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def pause(self) -> bool:
        if self.phase != RoundPhase.PLAYING:
            return False
        return self.state_machine.transition_to(RoundPhase.PAUSED)

    def resume(self) -> bool:
        if self.phase != RoundPhase.PAUSED:
            return False
        return self.state_machine.transition_to(RoundPhase.PLAYING)

    def reset_round(self):
        """Fighters kembali ke spawn, skor tetap"""
        for fighter in self.fighters:
            fighter.reset()
        self._refresh_health_displays()

        if self.audio:
            self.audio.play_cue(AudioCue.BACKGROUND_RESTART)

        self.state.winner_slot = None
        self.state.winner_label = ""

        if self.debug:
            print(f"[Round] reset, round {self.state.rounds_played + 1} starting")

        self.state_machine.transition_to(RoundPhase.COUNTDOWN)

    def _refresh_health_displays(self):
        if not self.ui:
            return
        for slot, fighter in enumerate(self.fighters):
            self.ui.set_health_display(slot, fighter.health)

    # =========================================================================
    # STATE HANDLERS
    # =========================================================================

    def _enter_countdown(self):
        state = self.state
        state.countdown_value = COUNTDOWN_START
        state.show_fight = False
        state.fight_banner_timer = 0
        state.last_countdown_ms = self.clock()

    def _enter_playing(self):
        if self.audio:
            self.audio.play_cue(AudioCue.BACKGROUND_START)

    def _enter_paused(self):
        if self.audio:
            self.audio.play_cue(AudioCue.BACKGROUND_STOP)
        if self.ui:
            self.ui.show_pause_menu()

    def _exit_paused(self):
        if self.ui:
            self.ui.hide_pause_menu()

    def _enter_round_over(self):
        if self.audio:
            self.audio.play_cue(AudioCue.BACKGROUND_STOP)
            self.audio.play_cue(AudioCue.KNOCKOUT)
        if self.ui:
            self.ui.show_result_screen(self.state.winner_label)

    def _exit_round_over(self):
        if self.ui:
            self.ui.hide_result_screen()
