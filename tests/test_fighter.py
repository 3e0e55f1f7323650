"""Tests for fighters/fighter.py"""

import pytest

from slayer_duel.config import (
    AnimationState, AudioCue, CharacterKind, ControllerKind, RoundPhase,
    HIT_RECOVERY_TICKS, FLOOR_Y, SCREEN_WIDTH
)
from slayer_duel.fighters.intent import Intent

from conftest import GROUND_Y, ScriptedIntent


class TestConstruction:
    """Constructor validation and initial state."""

    def test_rejects_non_positive_size(self, make_fighter):
        with pytest.raises(ValueError):
            make_fighter(width=0)
        with pytest.raises(ValueError):
            make_fighter(height=-5)

    def test_rejects_health_out_of_range(self, make_fighter):
        with pytest.raises(ValueError):
            make_fighter(health=101)
        with pytest.raises(ValueError):
            make_fighter(health=-1)

    def test_initial_state(self, make_fighter):
        fighter = make_fighter()
        assert fighter.health == 100
        assert fighter.is_alive
        assert fighter.current_action == AnimationState.IDLE
        assert fighter.frame_index == 0
        assert not fighter.is_attacking
        assert not fighter.is_hit
        assert fighter.attack_cooldown == 0

    def test_controller_kind_selects_profile(self, make_fighter):
        human = make_fighter()
        demon = make_fighter(CharacterKind.DEMON,
                             controller=ScriptedIntent(ControllerKind.AI))
        assert not human.is_ai_controlled
        assert demon.is_ai_controlled
        assert human.profile.attack_cooldown == 40
        assert demon.profile.attack_cooldown == 120


class TestTakeDamage:
    """Damage, hit-stun and death."""

    def test_damage_applies_hit_stun_and_knockback(self, make_fighter):
        fighter = make_fighter()
        dealt = fighter.take_damage(15)

        assert dealt == 15
        assert fighter.health == 85
        assert fighter.is_hit
        assert fighter.hit_cooldown == HIT_RECOVERY_TICKS
        assert fighter.current_action == AnimationState.HIT
        assert fighter.velocity_x == -5
        assert fighter.velocity_y == -5

    def test_knockback_pushes_away_from_facing_side(self, make_fighter):
        fighter = make_fighter(facing_flipped=True)
        fighter.take_damage(15)
        assert fighter.velocity_x == 5

    def test_no_damage_during_hit_cooldown(self, make_fighter):
        fighter = make_fighter()
        fighter.take_damage(15)
        assert fighter.take_damage(15) == 0
        assert fighter.health == 85

    def test_negative_damage_rejected(self, make_fighter):
        fighter = make_fighter()
        with pytest.raises(ValueError):
            fighter.take_damage(-1)

    def test_lethal_damage_clamps_and_kills(self, make_fighter):
        fighter = make_fighter(health=10)
        dealt = fighter.take_damage(15)

        assert dealt == 10
        assert fighter.health == 0
        assert not fighter.is_alive
        assert fighter.current_action == AnimationState.DEATH

    def test_dead_fighter_ignores_damage(self, make_fighter):
        fighter = make_fighter(health=10)
        opponent = make_fighter(x=600)
        fighter.take_damage(15)

        for _ in range(HIT_RECOVERY_TICKS + 5):
            fighter.update(opponent, RoundPhase.ROUND_OVER)

        assert fighter.hit_cooldown == 0
        assert fighter.take_damage(15) == 0
        assert fighter.health == 0
        assert not fighter.is_alive

    def test_health_is_monotone_and_bounded(self, make_fighter):
        fighter = make_fighter()
        opponent = make_fighter(x=600)
        previous = fighter.health

        for _ in range(20):
            fighter.take_damage(15)
            assert 0 <= fighter.health <= previous
            previous = fighter.health
            for _ in range(HIT_RECOVERY_TICKS):
                fighter.update(opponent, RoundPhase.PLAYING)

        assert fighter.health == 0

    def test_hit_cancels_attack(self, make_fighter):
        fighter = make_fighter()
        fighter.attack(AnimationState.ATTACK1)
        fighter.take_damage(15)
        assert not fighter.is_attacking
        assert fighter.current_action == AnimationState.HIT

    def test_health_callback(self, make_fighter):
        fighter = make_fighter()
        seen = []
        fighter.on_health_changed(lambda f: seen.append(f.health))
        fighter.take_damage(15)
        assert seen == [85]


class TestAttack:
    """Attack transitions and cooldown gating."""

    def test_attack_sets_cooldown_and_action(self, make_fighter, audio):
        fighter = make_fighter(audio=audio)
        assert fighter.attack(AnimationState.ATTACK2)

        assert fighter.is_attacking
        assert fighter.attack_cooldown == 40
        assert fighter.current_action == AnimationState.ATTACK2
        assert audio.cues == [(AudioCue.ATTACK_SWING, ControllerKind.HUMAN)]

    def test_ai_swing_cue_carries_controller(self, make_fighter, audio):
        demon = make_fighter(CharacterKind.DEMON,
                             controller=ScriptedIntent(ControllerKind.AI),
                             audio=audio)
        demon.attack(AnimationState.ATTACK1)
        assert demon.attack_cooldown == 120
        assert audio.cues == [(AudioCue.ATTACK_SWING, ControllerKind.AI)]

    def test_cooldown_gates_reattack(self, make_fighter):
        fighter = make_fighter()
        opponent = make_fighter(x=900)
        assert fighter.attack(AnimationState.ATTACK1)
        assert not fighter.attack(AnimationState.ATTACK1)

        for _ in range(39):
            fighter.update(opponent, RoundPhase.PLAYING)
        assert fighter.attack_cooldown == 1
        assert not fighter.attack(AnimationState.ATTACK2)

        fighter.update(opponent, RoundPhase.PLAYING)
        assert fighter.attack_cooldown == 0
        assert fighter.attack(AnimationState.ATTACK2)

    def test_no_attack_during_hit_stun(self, make_fighter):
        fighter = make_fighter()
        fighter.take_damage(15)
        assert not fighter.attack(AnimationState.ATTACK1)
        assert not fighter.is_attacking

    def test_dead_fighter_cannot_attack(self, make_fighter):
        fighter = make_fighter(health=5)
        fighter.take_damage(15)
        assert not fighter.attack(AnimationState.ATTACK1)

    def test_non_attack_state_rejected(self, make_fighter):
        fighter = make_fighter()
        with pytest.raises(ValueError):
            fighter.attack(AnimationState.RUN)

    def test_attack_animation_ends_after_one_cycle(self, make_fighter):
        fighter = make_fighter()
        opponent = make_fighter(x=900)
        fighter.attack(AnimationState.ATTACK1)

        for _ in range(41):
            fighter.update(opponent, RoundPhase.PLAYING)
        assert fighter.is_attacking

        fighter.update(opponent, RoundPhase.PLAYING)
        assert not fighter.is_attacking
        assert fighter.current_action == AnimationState.IDLE


class TestStrike:
    """The swing lands once, inside the active window."""

    def test_strike_lands_once_per_swing(self, make_fighter):
        attacker = make_fighter(controller=ScriptedIntent(
            intents=[Intent(attack=AnimationState.ATTACK1)]))
        defender = make_fighter(CharacterKind.DEMON, x=200,
                                controller=ScriptedIntent(ControllerKind.AI))

        for tick in range(1, 41):
            attacker.update(defender, RoundPhase.PLAYING)
            defender.update(attacker, RoundPhase.PLAYING)
            if tick < 10:
                assert defender.health == 100
            else:
                assert defender.health == 85

        assert attacker.last_hit is not None
        assert attacker.last_hit.landed

    def test_out_of_range_swing_misses(self, make_fighter):
        attacker = make_fighter(controller=ScriptedIntent(
            intents=[Intent(attack=AnimationState.ATTACK1)]))
        defender = make_fighter(CharacterKind.DEMON, x=600,
                                controller=ScriptedIntent(ControllerKind.AI))

        for _ in range(40):
            attacker.update(defender, RoundPhase.PLAYING)
            defender.update(attacker, RoundPhase.PLAYING)

        assert defender.health == 100
        assert attacker.last_hit is not None
        assert not attacker.last_hit.landed


class TestUpdate:
    """Per-tick physics, facing and phase gating."""

    def test_no_update_outside_simulated_phases(self, make_fighter):
        fighter = make_fighter(y=0, controller=ScriptedIntent(
            intents=[Intent(move_x=7)] * 10))
        opponent = make_fighter(x=600)
        fighter.attack(AnimationState.ATTACK1)

        for phase in (RoundPhase.COUNTDOWN, RoundPhase.PAUSED):
            for _ in range(10):
                fighter.update(opponent, phase)

        assert fighter.x == 100
        assert fighter.y == 0
        assert fighter.attack_cooldown == 40
        assert fighter.frame_timer == 0

    def test_gravity_lands_on_floor(self, make_fighter):
        fighter = make_fighter(y=0)
        opponent = make_fighter(x=600)

        for _ in range(60):
            fighter.update(opponent, RoundPhase.PLAYING)

        assert fighter.y + fighter.height == FLOOR_Y
        assert fighter.velocity_y == 0
        assert not fighter.is_jumping

    def test_jump(self, make_fighter):
        fighter = make_fighter(controller=ScriptedIntent(intents=[Intent(jump=True)]))
        opponent = make_fighter(x=600)

        fighter.update(opponent, RoundPhase.PLAYING)

        assert fighter.is_jumping
        assert fighter.velocity_y == -19
        assert fighter.y == GROUND_Y - 19
        assert fighter.current_action == AnimationState.JUMP

    def test_falling_shows_jump(self, make_fighter):
        fighter = make_fighter(y=GROUND_Y - 40, controller=ScriptedIntent(
            intents=[Intent(move_x=7)] * 20))
        opponent = make_fighter(x=600)

        fighter.update(opponent, RoundPhase.PLAYING)
        assert not fighter.is_jumping
        assert fighter.is_airborne
        assert fighter.current_action == AnimationState.JUMP

        while fighter.y < GROUND_Y:
            assert fighter.current_action == AnimationState.JUMP
            fighter.update(opponent, RoundPhase.PLAYING)

        assert not fighter.is_airborne
        assert fighter.current_action == AnimationState.RUN

    def test_no_jump_while_falling(self, make_fighter):
        fighter = make_fighter(y=GROUND_Y - 40, controller=ScriptedIntent(
            intents=[Intent(jump=True)]))
        opponent = make_fighter(x=600)

        fighter.update(opponent, RoundPhase.PLAYING)

        assert not fighter.is_jumping
        assert fighter.velocity_y == 1
        assert fighter.view().is_jumping

    def test_no_jump_during_knockback_lift(self, make_fighter):
        fighter = make_fighter(controller=ScriptedIntent(
            intents=[Intent(), Intent(jump=True)]))
        opponent = make_fighter(x=600)

        fighter.take_damage(10)
        fighter.update(opponent, RoundPhase.PLAYING)
        assert fighter.y == GROUND_Y - 4
        assert fighter.is_airborne

        fighter.update(opponent, RoundPhase.PLAYING)
        assert not fighter.is_jumping
        assert fighter.velocity_y == -3
        assert fighter.y == GROUND_Y - 7

    def test_run_then_idle(self, make_fighter):
        fighter = make_fighter(controller=ScriptedIntent(intents=[Intent(move_x=7)]))
        opponent = make_fighter(x=600)

        fighter.update(opponent, RoundPhase.PLAYING)
        assert fighter.x == 107
        assert fighter.current_action == AnimationState.RUN

        fighter.update(opponent, RoundPhase.PLAYING)
        assert fighter.x == 107
        assert fighter.current_action == AnimationState.IDLE

    def test_wall_clamp(self, make_fighter):
        fighter = make_fighter(x=3, controller=ScriptedIntent(intents=[Intent(move_x=-7)]))
        opponent = make_fighter(x=600)
        fighter.update(opponent, RoundPhase.PLAYING)
        assert fighter.x == 0

        right = make_fighter(x=SCREEN_WIDTH - 122,
                             controller=ScriptedIntent(intents=[Intent(move_x=7)]))
        right.update(opponent, RoundPhase.PLAYING)
        assert right.x == SCREEN_WIDTH - right.width

    def test_faces_opponent(self, make_fighter):
        fighter = make_fighter(x=500)
        left_opponent = make_fighter(x=100)
        fighter.update(left_opponent, RoundPhase.PLAYING)
        assert fighter.facing_flipped

        right_opponent = make_fighter(x=900)
        fighter.update(right_opponent, RoundPhase.PLAYING)
        assert not fighter.facing_flipped

    def test_round_over_ignores_intent(self, make_fighter):
        fighter = make_fighter(controller=ScriptedIntent(intents=[Intent(move_x=7)]))
        opponent = make_fighter(x=600)
        fighter.update(opponent, RoundPhase.ROUND_OVER)
        assert fighter.x == 100


class TestReset:
    """reset() restores the documented initial values."""

    def test_reset_restores_initial_state(self, make_fighter):
        controller = ScriptedIntent(intents=[Intent(move_x=7, jump=True)])
        fighter = make_fighter(controller=controller)
        opponent = make_fighter(x=600)

        fighter.update(opponent, RoundPhase.PLAYING)
        fighter.take_damage(15)
        fighter.update(opponent, RoundPhase.PLAYING)

        fighter.reset()

        assert (fighter.x, fighter.y) == (100, GROUND_Y)
        assert fighter.velocity_x == 0
        assert fighter.velocity_y == 0
        assert fighter.health == 100
        assert fighter.is_alive
        assert not fighter.is_hit
        assert not fighter.is_attacking
        assert not fighter.is_jumping
        assert fighter.attack_cooldown == 0
        assert fighter.hit_cooldown == 0
        assert fighter.current_action == AnimationState.IDLE
        assert fighter.frame_index == 0
        assert fighter.frame_timer == 0
        assert not fighter.facing_flipped
        assert controller.reset_calls == 1

    def test_reset_revives_dead_fighter(self, make_fighter):
        fighter = make_fighter(health=10)
        fighter.take_damage(15)
        assert not fighter.is_alive

        fighter.reset()
        assert fighter.is_alive
        assert fighter.health == 10
