"""
Audio System
============
Sound manager dan procedural sound generation.
"""

from .sound_manager import SoundManager
from .generator import SoundGenerator, ProceduralSFX

__all__ = [
    'SoundManager',
    'SoundGenerator',
    'ProceduralSFX',
]
