"""
Graphics System Module
"""

from .renderer import Renderer
from .sprites import SpriteGenerator, FighterSprites, BackgroundSprites

__all__ = ['Renderer', 'SpriteGenerator', 'FighterSprites', 'BackgroundSprites']
