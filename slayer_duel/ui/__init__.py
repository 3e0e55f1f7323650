"""
UI System Module
"""

from .manager import UIManager
from .hud import HUD, HealthBar, WinCounter
from .overlays import CountdownOverlay, FightBanner, ResultScreen, PauseMenu

__all__ = [
    'UIManager', 'HUD', 'HealthBar', 'WinCounter',
    'CountdownOverlay', 'FightBanner', 'ResultScreen', 'PauseMenu'
]
