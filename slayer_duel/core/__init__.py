"""
Core game engine modules
"""

from .state_machine import StateMachine
from .input_handler import InputHandler
from .round_manager import RoundManager, RoundState
from .simulation import Simulation

__all__ = ['StateMachine', 'InputHandler', 'RoundManager', 'RoundState', 'Simulation']
