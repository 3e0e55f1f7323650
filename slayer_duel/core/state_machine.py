"""
Round phase state machine
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from ..config import RoundPhase

Handler = Optional[Callable[[], None]]


@dataclass
class PhaseHandlers:
    """Callbacks for one phase; any of them may be missing"""
    enter: Handler = None
    exit: Handler = None
    update: Handler = None


class StateMachine:
    """
    Current round phase plus per-phase handlers.
    Exit handler of the old phase runs before the enter handler of the new one.
    """

    def __init__(self, initial_state: RoundPhase = RoundPhase.COUNTDOWN):
        self.current_state = initial_state
        self.previous_state: Optional[RoundPhase] = None
        self._handlers: Dict[RoundPhase, PhaseHandlers] = {}

        # (from, to) of every completed transition
        self.history: List[Tuple[RoundPhase, RoundPhase]] = []

    def register_handlers(self, state: RoundPhase,
                          enter: Handler = None,
                          exit_handler: Handler = None,
                          update: Handler = None):
        self._handlers[state] = PhaseHandlers(enter, exit_handler, update)

    def _handler(self, state: RoundPhase, kind: str) -> Handler:
        handlers = self._handlers.get(state)
        return getattr(handlers, kind) if handlers else None

    def transition_to(self, new_state: RoundPhase) -> bool:
        """False when already in new_state (no handlers run)"""
        if new_state == self.current_state:
            return False

        on_exit = self._handler(self.current_state, 'exit')
        if on_exit:
            on_exit()

        self.previous_state, self.current_state = self.current_state, new_state
        self.history.append((self.previous_state, new_state))

        on_enter = self._handler(new_state, 'enter')
        if on_enter:
            on_enter()
        return True

    def update(self):
        """Run the current phase's per-tick handler"""
        on_update = self._handler(self.current_state, 'update')
        if on_update:
            on_update()

    def is_state(self, state: RoundPhase) -> bool:
        return self.current_state == state
