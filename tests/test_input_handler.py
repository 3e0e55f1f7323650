"""Tests for core/input_handler.py"""

import pygame

from slayer_duel.config import InputAction
from slayer_duel.core.input_handler import InputHandler


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


class TestKeys:
    """Held and just-pressed tracking."""

    def test_held_key(self):
        handler = InputHandler()
        handler.update()
        handler.process_event(key_down(pygame.K_LEFT))

        assert handler.is_key_pressed(pygame.K_LEFT)
        assert handler.is_action_pressed(InputAction.MOVE_LEFT)
        assert handler.is_action_active(InputAction.MOVE_LEFT)

        handler.update()
        assert handler.is_action_active(InputAction.MOVE_LEFT)

        handler.process_event(key_up(pygame.K_LEFT))
        assert not handler.is_action_active(InputAction.MOVE_LEFT)
        assert pygame.K_LEFT in handler.state.keys_just_released

    def test_quit_event(self):
        handler = InputHandler()
        handler.process_event(pygame.event.Event(pygame.QUIT))
        assert handler.should_quit()

        handler.update()
        assert not handler.should_quit()


class TestEdgeTriggered:
    """PAUSE and CONFIRM fire once per press."""

    def test_pause_only_on_press_frame(self):
        handler = InputHandler()
        handler.update()
        handler.process_event(key_down(pygame.K_ESCAPE))
        assert handler.is_action_active(InputAction.PAUSE)

        # Still held next frame
        handler.update()
        assert handler.is_key_pressed(pygame.K_ESCAPE)
        assert not handler.is_action_active(InputAction.PAUSE)

    def test_key_repeat_is_not_a_new_press(self):
        handler = InputHandler()
        handler.update()
        handler.process_event(key_down(pygame.K_ESCAPE))
        handler.update()
        handler.process_event(key_down(pygame.K_ESCAPE))

        assert not handler.is_action_active(InputAction.PAUSE)

    def test_confirm_again_after_release(self):
        handler = InputHandler()
        handler.update()
        handler.process_event(key_down(pygame.K_RETURN))
        handler.update()
        handler.process_event(key_up(pygame.K_RETURN))
        handler.update()
        handler.process_event(key_down(pygame.K_RETURN))

        assert handler.is_action_active(InputAction.CONFIRM)


class TestBindings:
    """Default and custom bindings."""

    def test_defaults(self):
        bindings = InputHandler().bindings
        assert bindings[InputAction.ATTACK] == pygame.K_SPACE
        assert bindings[InputAction.JUMP] == pygame.K_UP
        assert bindings[InputAction.CONFIRM] == pygame.K_RETURN

    def test_rebind(self):
        handler = InputHandler()
        handler.set_binding(InputAction.ATTACK, pygame.K_z)
        handler.update()
        handler.process_event(key_down(pygame.K_z))

        assert handler.is_action_active(InputAction.ATTACK)

    def test_unbound_action(self):
        handler = InputHandler(bindings={InputAction.ATTACK: pygame.K_SPACE})
        assert not handler.is_action_pressed(InputAction.JUMP)
        assert not handler.is_action_just_pressed(InputAction.PAUSE)
