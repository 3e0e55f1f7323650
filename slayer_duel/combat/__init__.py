"""
Combat System Module
"""

from .engine import CombatResolver, HitResult

__all__ = ['CombatResolver', 'HitResult']
