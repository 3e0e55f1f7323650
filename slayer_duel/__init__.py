"""
SLAYER DUEL
===========
Tanjiro vs Demon, a two-fighter pygame duel.
"""

__version__ = "1.0.0"
