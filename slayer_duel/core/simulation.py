"""
Simulation context: dua fighter + round manager + sinks.
No window, no pygame display; Game drives it once per frame.
"""

import random
from typing import Callable, Optional

from ..config import CharacterKind, CHARACTERS, RoundPhase
from ..ai.controller import AIController
from ..combat.engine import CombatResolver
from ..fighters.fighter import Fighter
from ..fighters.intent import IntentProvider, KeyboardIntent
from .round_manager import RoundManager


class Simulation:
    """
    Owns the two fighters and the round manager for one session.
    Slot 0 is the player (Tanjiro), slot 1 the opponent (Demon).
    """

    def __init__(self, player: Fighter, opponent: Fighter,
                 round_manager: RoundManager, audio=None, ui=None):
        self.player = player
        self.opponent = opponent
        self.round_manager = round_manager
        self.audio = audio
        self.ui = ui
        self.tick_count = 0

    @classmethod
    def create(cls, input_source,
               audio=None, ui=None,
               clock: Optional[Callable[[], int]] = None,
               rng: Optional[random.Random] = None,
               opponent_controller: Optional[IntentProvider] = None) -> 'Simulation':
        """Build the standard Tanjiro (human) vs Demon (AI) session"""
        rng = rng or random.Random()
        resolver = CombatResolver()

        tanjiro = CHARACTERS[CharacterKind.TANJIRO]
        demon = CHARACTERS[CharacterKind.DEMON]

        player = Fighter(
            CharacterKind.TANJIRO,
            KeyboardIntent(input_source, rng=rng),
            tanjiro.start_x, tanjiro.start_y,
            audio=audio, resolver=resolver
        )
        opponent = Fighter(
            CharacterKind.DEMON,
            opponent_controller or AIController(rng=rng),
            demon.start_x, demon.start_y,
            facing_flipped=True,
            audio=audio, resolver=resolver
        )

        round_manager = RoundManager([player, opponent], audio=audio, ui=ui, clock=clock)
        sim = cls(player, opponent, round_manager, audio=audio, ui=ui)
        sim._wire_health_displays()
        return sim

    def _wire_health_displays(self):
        if not self.ui:
            return
        for slot, fighter in enumerate(self.fighters):
            fighter.on_health_changed(
                lambda f, slot=slot: self.ui.set_health_display(slot, f.health)
            )
            self.ui.set_health_display(slot, fighter.health)

    @property
    def fighters(self):
        return (self.player, self.opponent)

    @property
    def phase(self) -> RoundPhase:
        return self.round_manager.phase

    def tick(self, input_source):
        """Satu frame simulasi: input -> fighters -> round"""
        self.tick_count += 1
        self.round_manager.handle_input(input_source)

        phase = self.round_manager.phase
        if self.round_manager.simulation_active:
            self.player.update(self.opponent, phase)
            self.opponent.update(self.player, phase)

        self.round_manager.update()
