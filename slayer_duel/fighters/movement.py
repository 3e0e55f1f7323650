"""
Movement Controller
===================
Kinematics fighter: velocity, gravity, knockback, ground & wall clamping.
"""

from dataclasses import dataclass

from ..config import (
    SCREEN_WIDTH, FLOOR_Y, GRAVITY,
    KNOCKBACK_X, KNOCKBACK_LIFT, KNOCKBACK_DECAY
)


@dataclass
class MovementController:
    """
    Mengontrol posisi dan velocity satu fighter.
    Position (x, y) is the top-left corner of the body box.
    """
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    # Velocity (pixels per tick)
    velocity_x: float = 0
    velocity_y: float = 0

    # Knockback
    knockback_velocity: float = 0
    knockback_decay: float = KNOCKBACK_DECAY

    is_jumping: bool = False

    # Bounds
    floor_y: float = FLOOR_Y
    arena_width: float = SCREEN_WIDTH

    def set_position(self, x: float, y: float):
        self.x = x
        self.y = y

    def stop(self):
        """Hentikan semua gerakan"""
        self.velocity_x = 0
        self.velocity_y = 0
        self.knockback_velocity = 0
        self.is_jumping = False

    def steer(self, move_x: float):
        """Set horizontal velocity dari intent, plus sisa knockback"""
        self.velocity_x = move_x + self.knockback_velocity

        if self.knockback_velocity != 0:
            self.knockback_velocity *= self.knockback_decay
            if abs(self.knockback_velocity) < 1:
                self.knockback_velocity = 0

    @property
    def is_airborne(self) -> bool:
        """True selama badan di atas lantai, termasuk saat jatuh atau terkena knockback"""
        return self.is_jumping or self.y + self.height < self.floor_y

    def jump(self, jump_velocity: float) -> bool:
        """Start a jump. Return False kalau sedang di udara."""
        if self.is_airborne:
            return False
        self.velocity_y = jump_velocity
        self.is_jumping = True
        return True

    def apply_knockback(self, direction: int):
        """Push away (direction -1 = left, 1 = right) with a small lift"""
        self.velocity_x = direction * KNOCKBACK_X
        self.knockback_velocity = self.velocity_x
        self.velocity_y = -KNOCKBACK_LIFT

    def integrate(self):
        """Gravity, lalu position += velocity"""
        self.velocity_y += GRAVITY
        self.x += self.velocity_x
        self.y += self.velocity_y

    def clamp_to_arena(self) -> bool:
        """
        Clamp ke lantai dan dinding arena.
        Return True jika fighter menyentuh lantai tick ini.
        """
        grounded = False
        if self.y + self.height > self.floor_y:
            self.y = self.floor_y - self.height
            self.velocity_y = 0
            self.is_jumping = False
            grounded = True

        if self.x < 0:
            self.x = 0
        if self.x + self.width > self.arena_width:
            self.x = self.arena_width - self.width

        return grounded
