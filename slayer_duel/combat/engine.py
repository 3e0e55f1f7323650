"""
Combat Engine
=============
Hit detection dan damage untuk satu serangan.

The resolver is stateless: it does not remember whether a swing already hit.
Fighter.update decides when to call it (once per swing, inside the active
hit window).
"""

from dataclasses import dataclass
from typing import Optional

from ..config import ATTACK_DAMAGE, DEBUG_COMBAT
from ..fighters.hitbox import Rect, boxes_overlap


@dataclass
class HitResult:
    """Outcome of one strike check"""
    landed: bool
    damage: int
    strike_box: Optional[Rect]
    defender_health: int
    overlap: bool = False


class CombatResolver:
    """
    Resolve attacker strike box vs defender body box.
    Damage sama untuk kedua karakter dan kedua jenis serangan.
    """

    def __init__(self, damage: int = ATTACK_DAMAGE, debug: bool = DEBUG_COMBAT):
        self.damage = damage
        self.debug = debug

    def resolve(self, attacker, defender) -> HitResult:
        """Check strike overlap and apply damage if the defender can be hit"""
        if attacker is defender:
            return HitResult(False, 0, None, defender.health)

        attack_box = attacker.strike_box()
        target_box = defender.body_box()
        overlap = boxes_overlap(attack_box, target_box)

        if self.debug:
            print(f"[Combat] {attacker.character_kind.value} attacking: "
                  f"{attack_box.as_tuple()} opponent: {target_box.as_tuple()}")

        if not overlap or defender.hit_cooldown != 0:
            return HitResult(False, 0, attack_box, defender.health, overlap)

        dealt = defender.take_damage(self.damage)
        if self.debug and dealt:
            print(f"[Combat] {attacker.character_kind.value} HIT "
                  f"{defender.character_kind.value}! health -> {defender.health}")

        return HitResult(dealt > 0, dealt, attack_box, defender.health, overlap)
