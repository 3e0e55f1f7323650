"""
Hitbox System
=============
Axis-aligned boxes untuk collision detection.
- Body box: footprint fighter (selalu aktif)
- Strike box: jangkauan serangan, hanya dievaluasi pada tick hit-check
"""

from dataclasses import dataclass
from typing import Tuple

from ..config import STRIKE_REACH


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in world coordinates (top-left origin)"""
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


def boxes_overlap(a: Rect, b: Rect) -> bool:
    """AABB collision. Edges that only touch do not count."""
    return (a.x < b.right and
            a.right > b.x and
            a.y < b.bottom and
            a.bottom > b.y)


def body_box(x: float, y: float, width: float, height: float) -> Rect:
    return Rect(x, y, width, height)


def strike_box(x: float, y: float, width: float, height: float,
               facing_flipped: bool, reach: float = STRIKE_REACH) -> Rect:
    """
    Strike rectangle di depan body, pada sisi yang dihadapi.
    Tidak overlap dengan body sendiri; vertikal = setengah tengah body.
    """
    strike_x = x - reach if facing_flipped else x + width
    return Rect(strike_x, y + height / 4, reach, height / 2)
