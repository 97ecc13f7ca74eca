import pygame
import pytest

from chunkrunner.input import InputHandler, MouseButton


def ev(kind, **attrs):
    return pygame.event.Event(kind, attrs)


def test_initial_state_is_released():
    handler = InputHandler()
    assert handler.mouse_position == (0.0, 0.0)
    assert [handler.mouse_button(b) for b in MouseButton] == [False, False, False]
    assert handler.is_key_down(pygame.K_SPACE) is False
    assert handler.quit_requested is False


def test_mouse_button_indices_fixed_by_source():
    handler = InputHandler()
    handler.process_event(ev(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))
    assert [handler.mouse_button(i) for i in (0, 1, 2)] == [True, False, False]
    handler.process_event(ev(pygame.MOUSEBUTTONDOWN, button=2, pos=(0, 0)))
    assert [handler.mouse_button(i) for i in (0, 1, 2)] == [True, True, False]


@pytest.mark.parametrize(
    "pygame_button, button",
    [(1, MouseButton.LEFT), (2, MouseButton.MIDDLE), (3, MouseButton.RIGHT)],
)
def test_mouse_button_down_and_up(pygame_button, button):
    handler = InputHandler()
    handler.process_event(ev(pygame.MOUSEBUTTONDOWN, button=pygame_button, pos=(0, 0)))
    assert handler.mouse_button(button) is True
    others = [handler.mouse_button(b) for b in MouseButton if b != button]
    assert others == [False, False]
    handler.process_event(ev(pygame.MOUSEBUTTONUP, button=pygame_button, pos=(0, 0)))
    assert handler.mouse_button(button) is False


def test_wheel_buttons_are_ignored():
    handler = InputHandler()
    handler.process_event(ev(pygame.MOUSEBUTTONDOWN, button=4, pos=(0, 0)))
    assert [handler.mouse_button(b) for b in MouseButton] == [False, False, False]


def test_mouse_button_accepts_plain_int():
    handler = InputHandler()
    handler.process_event(ev(pygame.MOUSEBUTTONDOWN, button=3, pos=(0, 0)))
    assert handler.mouse_button(2) is True


def test_mouse_motion_sets_position():
    handler = InputHandler()
    handler.process_event(ev(pygame.MOUSEMOTION, pos=(30, 60), rel=(0, 0), buttons=(0, 0, 0)))
    assert handler.mouse_position == (30.0, 60.0)


def test_mouse_motion_is_scaled_to_logical_coordinates():
    handler = InputHandler(scale=3)
    handler.process_event(ev(pygame.MOUSEMOTION, pos=(30, 60), rel=(0, 0), buttons=(0, 0, 0)))
    assert handler.mouse_position == (30 / 3, 60 / 3)


def test_key_down_marks_held_and_pressed():
    handler = InputHandler()
    handler.process_event(ev(pygame.KEYDOWN, key=pygame.K_SPACE))
    assert handler.is_key_down(pygame.K_SPACE) is True
    assert handler.was_key_pressed(pygame.K_SPACE) is True
    assert handler.is_key_down(pygame.K_ESCAPE) is False


def test_key_up_clears_held_and_pressed():
    handler = InputHandler()
    handler.process_event(ev(pygame.KEYDOWN, key=pygame.K_SPACE))
    handler.process_event(ev(pygame.KEYUP, key=pygame.K_SPACE))
    assert handler.is_key_down(pygame.K_SPACE) is False
    assert handler.was_key_pressed(pygame.K_SPACE) is False


def test_repeated_key_down_is_not_a_new_press():
    handler = InputHandler()
    handler.process_event(ev(pygame.KEYDOWN, key=pygame.K_SPACE, repeat=1))
    assert handler.is_key_down(pygame.K_SPACE) is True
    assert handler.was_key_pressed(pygame.K_SPACE) is False


def test_clear_pressed_keys_keeps_held_keys():
    handler = InputHandler()
    handler.process_event(ev(pygame.KEYDOWN, key=pygame.K_SPACE))
    handler.clear_pressed_keys()
    assert handler.was_key_pressed(pygame.K_SPACE) is False
    assert handler.is_key_down(pygame.K_SPACE) is True


def test_reset_releases_mouse_but_not_keys():
    handler = InputHandler()
    handler.update(
        [
            ev(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)),
            ev(pygame.MOUSEMOTION, pos=(30, 60), rel=(0, 0), buttons=(1, 0, 0)),
            ev(pygame.KEYDOWN, key=pygame.K_SPACE),
        ]
    )
    handler.reset()
    assert handler.mouse_button(MouseButton.LEFT) is False
    assert handler.mouse_position == (0.0, 0.0)
    assert handler.is_key_down(pygame.K_SPACE) is True


def test_quit_event_calls_callback():
    calls = []
    handler = InputHandler(on_quit=lambda: calls.append("quit"))
    handler.update([ev(pygame.QUIT)])
    assert calls == ["quit"]
    assert handler.quit_requested is True


def test_update_processes_events_in_order():
    handler = InputHandler()
    handler.update(
        [
            ev(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)),
            ev(pygame.MOUSEBUTTONUP, button=1, pos=(0, 0)),
            ev(pygame.MOUSEBUTTONDOWN, button=3, pos=(0, 0)),
        ]
    )
    assert handler.mouse_button(MouseButton.LEFT) is False
    assert handler.mouse_button(MouseButton.RIGHT) is True