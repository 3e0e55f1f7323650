"""
Fighter Class
=============
Main fighter entity yang mengintegrasikan physics, animation, dan combat state.

Satu class untuk kedua fighter; perbedaan human vs AI hanya dari
IntentProvider yang di-inject dan ControllerProfile yang dipilih darinya.
"""

from dataclasses import dataclass
from typing import Optional, Callable

from ..config import (
    AnimationState, AnimationEnd, CharacterKind, ControllerKind,
    RoundPhase, AudioCue, SIMULATED_PHASES, ATTACK_STATES,
    CONTROLLER_PROFILES, CHARACTERS, ControllerProfile,
    FIGHTER_WIDTH, FIGHTER_HEIGHT, MAX_HEALTH,
    HIT_RECOVERY_TICKS, HIT_WINDOW_TICKS
)
from ..combat.engine import CombatResolver, HitResult
from .animation import AnimationPlayback, step_animation
from .hitbox import Rect, body_box, strike_box
from .intent import Intent, IntentProvider
from .movement import MovementController


@dataclass(frozen=True)
class FighterView:
    """Read-only snapshot of a fighter's public state (for AI/input)"""
    x: float
    y: float
    width: float
    height: float
    health: int
    is_alive: bool
    is_jumping: bool
    is_attacking: bool
    is_hit: bool
    attack_cooldown: int
    facing_flipped: bool


class Fighter:
    """
    Main fighter class.
    """

    def __init__(self, character_kind: CharacterKind,
                 controller: IntentProvider,
                 x: float, y: float,
                 width: float = FIGHTER_WIDTH,
                 height: float = FIGHTER_HEIGHT,
                 health: int = MAX_HEALTH,
                 facing_flipped: bool = False,
                 audio=None,
                 resolver: Optional[CombatResolver] = None):
        # Caller bugs fail fast
        if width <= 0 or height <= 0:
            raise ValueError(f"Fighter size must be positive, got {width}x{height}")
        if not 0 <= health <= MAX_HEALTH:
            raise ValueError(f"Fighter health must be within [0, {MAX_HEALTH}], got {health}")

        self.character_kind = character_kind
        self.controller = controller
        self.profile: ControllerProfile = CONTROLLER_PROFILES[controller.controller_kind]

        # Core systems
        self.movement = MovementController(x=x, y=y, width=width, height=height)
        self.animation = AnimationPlayback()
        self.resolver = resolver or CombatResolver()
        self.audio = audio

        # Spawn data untuk reset
        self._spawn = (x, y)
        self._initial_health = health
        self._initial_facing = facing_flipped

        # Vitals
        self.health = health
        self.is_alive = health > 0

        # Combat flags
        self.is_attacking = False
        self.attack_cooldown = 0
        self.is_hit = False
        self.hit_cooldown = 0
        self.facing_flipped = facing_flipped
        self._strike_resolved = False
        self.last_hit: Optional[HitResult] = None

        # Callbacks
        self._on_health_changed: Optional[Callable] = None

    # Position properties untuk kemudahan akses
    @property
    def x(self) -> float:
        return self.movement.x

    @x.setter
    def x(self, value: float):
        self.movement.x = value

    @property
    def y(self) -> float:
        return self.movement.y

    @y.setter
    def y(self, value: float):
        self.movement.y = value

    @property
    def width(self) -> float:
        return self.movement.width

    @property
    def height(self) -> float:
        return self.movement.height

    @property
    def velocity_x(self) -> float:
        return self.movement.velocity_x

    @property
    def velocity_y(self) -> float:
        return self.movement.velocity_y

    @property
    def is_jumping(self) -> bool:
        return self.movement.is_jumping

    @property
    def is_airborne(self) -> bool:
        return self.movement.is_airborne

    @property
    def current_action(self) -> AnimationState:
        return self.animation.state

    @property
    def frame_index(self) -> int:
        return self.animation.frame_index

    @property
    def frame_timer(self) -> int:
        return self.animation.frame_timer

    @property
    def controller_kind(self) -> ControllerKind:
        return self.controller.controller_kind

    @property
    def is_ai_controlled(self) -> bool:
        return self.controller_kind == ControllerKind.AI

    @property
    def label(self) -> str:
        return CHARACTERS[self.character_kind].label

    # =========================================================================
    # PER-TICK UPDATE
    # =========================================================================

    def update(self, opponent: 'Fighter', phase: RoundPhase = RoundPhase.PLAYING):
        """Update fighter per tick"""
        if phase not in SIMULATED_PHASES:
            return

        # 1. Intent (hanya saat hidup dan round sedang berjalan)
        intent = Intent()
        if self.is_alive and phase == RoundPhase.PLAYING:
            intent = self.controller.produce_intent(self.view(), opponent.view())
        self._apply_intent(intent)

        # 2-3. Physics
        self.movement.integrate()
        self.movement.clamp_to_arena()

        # 4. Face opponent
        self.facing_flipped = not (opponent.x > self.x)

        # 5. Cooldowns
        self._tick_cooldowns()

        # 6. Animation
        self._select_action(intent)
        self._advance_animation(intent)

        # 7. Strike, sekali per swing
        if self._strike_due():
            self._strike_resolved = True
            self.last_hit = self.resolver.resolve(self, opponent)

    def _apply_intent(self, intent: Intent):
        self.movement.steer(intent.move_x)

        if intent.jump:
            self.movement.jump(self.profile.jump_velocity)

        if intent.attack is not None:
            self.attack(intent.attack)

    def _tick_cooldowns(self):
        if self.attack_cooldown > 0:
            self.attack_cooldown -= 1
        if self.hit_cooldown > 0:
            self.hit_cooldown -= 1
            if self.hit_cooldown == 0:
                self.is_hit = False

    def _select_action(self, intent: Intent):
        """idle/run/jump never override attack, hit or death"""
        if (self.current_action == AnimationState.DEATH or
                self.is_attacking or self.is_hit):
            return

        if self.movement.is_airborne:
            self.animation.play(AnimationState.JUMP)
        elif intent.is_moving:
            self.animation.play(AnimationState.RUN)
        else:
            self.animation.play(AnimationState.IDLE)

    def _advance_animation(self, intent: Intent):
        event = step_animation(self.animation)
        if event == AnimationEnd.END_ATTACK:
            self.is_attacking = False
            self._select_action(intent)
        elif event == AnimationEnd.END_HIT:
            self.is_hit = False
            self._select_action(intent)

    def _strike_due(self) -> bool:
        """Active hit window: (hit_check_frame - HIT_WINDOW_TICKS, hit_check_frame]"""
        if not self.is_attacking or self._strike_resolved:
            return False
        window_start = self.profile.hit_check_frame
        return window_start - HIT_WINDOW_TICKS < self.attack_cooldown <= window_start

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def attack(self, attack_state: AnimationState) -> bool:
        """
        Mulai serangan.
        Return False (tanpa mengubah state) saat cooldown, hit-stun, atau mati.
        """
        if attack_state not in ATTACK_STATES:
            raise ValueError(f"Not an attack action: {attack_state}")

        if not self.is_alive or self.attack_cooldown > 0 or self.is_hit:
            return False

        self.is_attacking = True
        self._strike_resolved = False
        self.attack_cooldown = self.profile.attack_cooldown
        self.animation.play(attack_state, restart=True)

        if self.audio:
            self.audio.play_cue(AudioCue.ATTACK_SWING, controller=self.controller_kind)

        return True

    def take_damage(self, damage: int) -> int:
        """
        Terima serangan.
        Return damage yang benar-benar diterapkan (0 saat hit cooldown / mati).
        """
        if damage < 0:
            raise ValueError(f"Damage must be non-negative, got {damage}")

        if not self.is_alive or self.hit_cooldown > 0:
            return 0

        before = self.health
        self.health = max(0, self.health - int(damage))

        # Hit-stun, cancels any swing in progress
        self.is_hit = True
        self.hit_cooldown = HIT_RECOVERY_TICKS
        self.is_attacking = False
        self.animation.play(AnimationState.HIT, restart=True)

        # Knockback away from the attacker
        self.movement.apply_knockback(1 if self.facing_flipped else -1)

        if self.health <= 0:
            self.health = 0
            self.is_alive = False
            self.animation.play(AnimationState.DEATH, restart=True)

        if self._on_health_changed:
            self._on_health_changed(self)

        return before - self.health

    def reset(self):
        """Reset untuk round baru. Identity tetap, sisanya kembali ke spawn."""
        self.movement.set_position(*self._spawn)
        self.movement.stop()

        self.health = self._initial_health
        self.is_alive = self.health > 0

        self.is_attacking = False
        self.attack_cooldown = 0
        self.is_hit = False
        self.hit_cooldown = 0
        self.facing_flipped = self._initial_facing
        self._strike_resolved = False
        self.last_hit = None

        self.animation = AnimationPlayback()
        self.controller.reset()

        if self._on_health_changed:
            self._on_health_changed(self)

    # =========================================================================
    # GEOMETRY & PRESENTATION
    # =========================================================================

    def body_box(self) -> Rect:
        return body_box(self.x, self.y, self.width, self.height)

    def strike_box(self) -> Rect:
        return strike_box(self.x, self.y, self.width, self.height, self.facing_flipped)

    def draw(self, renderer):
        """Serahkan frame saat ini ke renderer"""
        renderer.render_sprite(
            self.character_kind,
            self.current_action,
            self.frame_index,
            (self.x, self.y),
            self.facing_flipped
        )

    def view(self) -> FighterView:
        return FighterView(
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            health=self.health,
            is_alive=self.is_alive,
            is_jumping=self.is_airborne,
            is_attacking=self.is_attacking,
            is_hit=self.is_hit,
            attack_cooldown=self.attack_cooldown,
            facing_flipped=self.facing_flipped,
        )

    # Callbacks
    def on_health_changed(self, callback: Callable):
        """Register callback untuk saat health berubah (hit atau reset)"""
        self._on_health_changed = callback
