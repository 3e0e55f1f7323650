"""
Fighter System Module

Fighter itself lives in fighters.fighter (it depends on combat.engine,
which depends on the hitbox helpers exported here).
"""

from .intent import Intent, IntentProvider, KeyboardIntent
from .animation import AnimationPlayback, step_animation
from .hitbox import Rect, boxes_overlap
from .movement import MovementController

__all__ = [
    'Intent', 'IntentProvider', 'KeyboardIntent',
    'AnimationPlayback', 'step_animation',
    'Rect', 'boxes_overlap', 'MovementController'
]
