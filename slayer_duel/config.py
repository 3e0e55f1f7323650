"""
Slayer Duel - Configuration & Constants
=======================================
All game settings, enums, and tuning constants in one place.
Semua nilai dalam satuan tick (1 tick = 1 frame) kecuali disebut lain.
"""

import os
from enum import Enum
from dataclasses import dataclass
from typing import Dict, Tuple

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
GAME_TITLE = "SLAYER DUEL - Tanjiro vs Demon"

# =============================================================================
# COLORS
# =============================================================================

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (128, 128, 128)
DARK_GRAY = (40, 40, 40)
BACKGROUND_FILL = (26, 26, 26)  # #1a1a1a

RED = (255, 0, 0)
DARK_RED = (139, 0, 0)
GOLD = (255, 215, 0)
YELLOW = (230, 200, 50)

# Character palettes (procedural sprites)
TANJIRO_PRIMARY = (30, 110, 70)     # checkered haori green
TANJIRO_SECONDARY = (20, 20, 20)
DEMON_PRIMARY = (120, 30, 60)
DEMON_SECONDARY = (230, 230, 240)
SKIN_TONE = (255, 220, 180)
SKIN_TONE_PALE = (235, 225, 230)
BLADE_COLOR = (200, 210, 230)
MAGIC_COLOR = (180, 80, 255)

# Health bar colors
HEALTH_GREEN = (0, 255, 0)
HEALTH_YELLOW = (255, 255, 0)
HEALTH_RED = (255, 0, 0)
HEALTH_LOW_THRESHOLD = 30
HEALTH_MID_THRESHOLD = 60

# =============================================================================
# ARENA SETTINGS
# =============================================================================

GROUND_OFFSET = 100  # floor sits this far above the bottom of the canvas
FLOOR_Y = SCREEN_HEIGHT - GROUND_OFFSET
GRAVITY = 1.0        # added to velocity_y every tick, no terminal velocity

# =============================================================================
# ENUMS
# =============================================================================


class RoundPhase(Enum):
    """Round lifecycle phases"""
    COUNTDOWN = "countdown"
    PLAYING = "playing"
    PAUSED = "paused"
    ROUND_OVER = "round_over"


# Phases in which fighter physics integrates
SIMULATED_PHASES = (RoundPhase.PLAYING, RoundPhase.ROUND_OVER)


class AnimationState(Enum):
    """Fighter actions, satu yang aktif pada satu waktu"""
    IDLE = "idle"
    RUN = "run"
    JUMP = "jump"
    ATTACK1 = "attack1"
    ATTACK2 = "attack2"
    HIT = "hit"
    DEATH = "death"


ATTACK_STATES = (AnimationState.ATTACK1, AnimationState.ATTACK2)


class AnimationEnd(Enum):
    """What happens when an action's animation completes one cycle"""
    LOOP = "loop"
    FREEZE = "freeze"          # clamp at last frame (death)
    END_ATTACK = "end_attack"  # clears is_attacking
    END_HIT = "end_hit"        # clears is_hit


class CharacterKind(Enum):
    TANJIRO = "tanjiro"
    DEMON = "demon"


class ControllerKind(Enum):
    HUMAN = "human"
    AI = "ai"


class AIMode(Enum):
    """AI behaviour modes"""
    NEUTRAL = "neutral"
    AGGRESSIVE = "aggressive"
    DEFENSIVE = "defensive"


class InputAction(Enum):
    """Logical inputs"""
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    JUMP = "jump"
    ATTACK = "attack"
    PAUSE = "pause"
    CONFIRM = "confirm"


# Fire once per key press, not once per tick held
EDGE_TRIGGERED_ACTIONS = (InputAction.PAUSE, InputAction.CONFIRM)


class AudioCue(Enum):
    """Fire-and-forget audio events"""
    ATTACK_SWING = "attack_swing"
    KNOCKOUT = "knockout"
    BACKGROUND_START = "background_start"
    BACKGROUND_STOP = "background_stop"
    BACKGROUND_RESTART = "background_restart"


# =============================================================================
# FIGHTER SETTINGS
# =============================================================================

FIGHTER_WIDTH = 120
FIGHTER_HEIGHT = 180
MAX_HEALTH = 100

HUMAN_MOVE_SPEED = 7

# Knockback applied on a successful hit
KNOCKBACK_X = 5
KNOCKBACK_LIFT = 5
KNOCKBACK_DECAY = 0.85


@dataclass(frozen=True)
class ControllerProfile:
    """Per-controller tuning. AI cooldown lebih panjang = lebih mudah dilawan."""
    attack_cooldown: int
    hit_check_frame: int   # attack_cooldown value at which the strike lands
    jump_velocity: float
    swing_sound: str


CONTROLLER_PROFILES: Dict[ControllerKind, ControllerProfile] = {
    ControllerKind.HUMAN: ControllerProfile(
        attack_cooldown=40,
        hit_check_frame=30,
        jump_velocity=-20,
        swing_sound='sword',
    ),
    ControllerKind.AI: ControllerProfile(
        attack_cooldown=120,
        hit_check_frame=100,
        jump_velocity=-18,
        swing_sound='magic',
    ),
}


@dataclass(frozen=True)
class CharacterData:
    """Spawn data and asset folder for one character"""
    label: str
    start_x: float
    start_y: float
    sprite_dir: str
    primary_color: Tuple[int, int, int]
    secondary_color: Tuple[int, int, int]


CHARACTERS: Dict[CharacterKind, CharacterData] = {
    CharacterKind.TANJIRO: CharacterData(
        label="Tanjiro",
        start_x=250,
        start_y=400,
        sprite_dir="characters/raiden/Sprites",
        primary_color=TANJIRO_PRIMARY,
        secondary_color=TANJIRO_SECONDARY,
    ),
    CharacterKind.DEMON: CharacterData(
        label="Demon",
        start_x=750,
        start_y=380,  # spawns 20px higher
        sprite_dir="characters/fighter2/Sprites",
        primary_color=DEMON_PRIMARY,
        secondary_color=DEMON_SECONDARY,
    ),
}

# =============================================================================
# COMBAT SETTINGS
# =============================================================================

ATTACK_DAMAGE = 15       # same for both characters and both attacks
HIT_RECOVERY_TICKS = 30  # hit_cooldown after taking damage
STRIKE_REACH = 80        # strike box width in front of the body
HIT_WINDOW_TICKS = 5     # ticks after hit_check_frame the strike may still land

# =============================================================================
# ANIMATION SETTINGS
# =============================================================================

FRAME_HOLD_TICKS = 7     # ticks per animation frame


@dataclass(frozen=True)
class AnimationData:
    """Frame count, completion rule and sheet file for one action"""
    frames: int
    on_complete: AnimationEnd
    sheet_file: str


ANIMATION_DATA: Dict[AnimationState, AnimationData] = {
    AnimationState.IDLE: AnimationData(8, AnimationEnd.LOOP, "Idle.png"),
    AnimationState.RUN: AnimationData(8, AnimationEnd.LOOP, "Run.png"),
    AnimationState.JUMP: AnimationData(2, AnimationEnd.LOOP, "Jump.png"),
    AnimationState.ATTACK1: AnimationData(6, AnimationEnd.END_ATTACK, "Attack1.png"),
    AnimationState.ATTACK2: AnimationData(6, AnimationEnd.END_ATTACK, "Attack2.png"),
    AnimationState.HIT: AnimationData(4, AnimationEnd.END_HIT, "Take hit.png"),
    AnimationState.DEATH: AnimationData(6, AnimationEnd.FREEZE, "Death.png"),
}

SPRITE_SCALE = 4
# Sheet frames are drawn at this size (480x720)
SPRITE_DRAW_SIZE = (FIGHTER_WIDTH * SPRITE_SCALE, FIGHTER_HEIGHT * SPRITE_SCALE)
SPRITE_OFFSET_X = 40

# =============================================================================
# AI SETTINGS
# =============================================================================

AI_DECISION_INTERVAL = 90    # ticks between mode re-evaluations
AI_DIRECTION_INTERVAL = 30   # ticks between direction changes (aggressive)

AI_DEFENSIVE_HEALTH = 25
AI_AGGRESSIVE_HEALTH = 50
AI_AGGRESSIVE_DISTANCE = 200

AI_ATTACK_RANGE = 180
AI_COMFORT_RANGE = 120
AI_RETREAT_RANGE = 300
AI_NEUTRAL_FAR = 300
AI_NEUTRAL_MID = 150

AI_AGGRESSIVE_FAST = 3.5
AI_AGGRESSIVE_SLOW = 2
AI_RETREAT_SPEED = 3
AI_NEUTRAL_FAST = 2.5
AI_NEUTRAL_SLOW = 1.5

AI_AGGRESSIVE_DWELL = 40
AI_AGGRESSIVE_VERTICAL = 50
AI_AGGRESSIVE_ATTACK_CHANCE = 0.08
AI_AGGRESSIVE_ATTACK1_BIAS = 0.6
AI_AGGRESSIVE_JUMP_CHANCE = 0.008

AI_NEUTRAL_DWELL = 60
AI_NEUTRAL_VERTICAL = 40
AI_NEUTRAL_ATTACK_CHANCE = 0.05
AI_NEUTRAL_ATTACK1_BIAS = 0.5

AI_DEFENSIVE_ATTACK_CHANCE = 0.02

HUMAN_ATTACK1_BIAS = 0.5

# =============================================================================
# ROUND SETTINGS
# =============================================================================

COUNTDOWN_START = 3
COUNTDOWN_STEP_MS = 1000
FIGHT_BANNER_TICKS = 40
RESET_DELAY_MS = 1500
DRAW_LABEL = "Draw!"

# =============================================================================
# AUDIO SETTINGS
# =============================================================================

AUDIO_ENABLED = True
AUDIO_SAMPLE_RATE = 44100
AUDIO_CHANNELS = 2
AUDIO_BUFFER_SIZE = 512

# Volume levels (0.0 - 1.0)
MASTER_VOLUME = 1.0
SFX_VOLUME = 0.1
MUSIC_VOLUME = 0.1

# =============================================================================
# ASSETS
# =============================================================================

ASSET_DIR = os.environ.get(
    "SLAYER_DUEL_ASSETS",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets")
)
BACKGROUND_IMAGE = "background.png"

# =============================================================================
# DEBUG FLAGS
# =============================================================================

DEBUG_HITBOXES = False
DEBUG_FRAMERATE = True
DEBUG_COMBAT = False
DEBUG_AI_DECISIONS = False
DEBUG_ROUNDS = False
