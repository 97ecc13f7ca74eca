import pygame

from chunkrunner.button import Button, ButtonState
from chunkrunner.input import InputHandler
from chunkrunner.textures import TextureManager


def move(handler, x, y):
    handler.process_event(
        pygame.event.Event(pygame.MOUSEMOTION, {"pos": (x, y), "rel": (0, 0), "buttons": (0, 0, 0)})
    )


def press(handler):
    handler.process_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, {"button": 1, "pos": (0, 0)}))


def release(handler):
    handler.process_event(pygame.event.Event(pygame.MOUSEBUTTONUP, {"button": 1, "pos": (0, 0)}))


class Counter:
    def __init__(self):
        self.count = 0

    def __call__(self):
        self.count += 1


def make_button(counter):
    return Button(128, 56, 128, 40, counter)


def test_frame_numbers_fixed_by_source():
    button = make_button(Counter())
    handler = InputHandler()
    move(handler, 10, 10)
    button.update(handler)
    assert button.current_frame == 0
    move(handler, 150, 70)
    button.update(handler)
    assert button.current_frame == 1
    press(handler)
    button.update(handler)
    assert button.current_frame == 2


def test_new_button_is_mouse_out():
    assert make_button(Counter()).current_frame is ButtonState.MOUSE_OUT


def test_contains_is_strict_at_edges():
    button = make_button(Counter())
    assert button.contains(129, 57) is True
    assert button.contains(128, 70) is False
    assert button.contains(256, 70) is False
    assert button.contains(150, 56) is False
    assert button.contains(150, 96) is False


def test_pointer_outside_is_mouse_out():
    counter = Counter()
    button = make_button(counter)
    handler = InputHandler()
    move(handler, 10, 10)
    press(handler)
    button.update(handler)
    assert button.current_frame is ButtonState.MOUSE_OUT
    assert counter.count == 0


def test_hover_without_press_is_mouse_over():
    counter = Counter()
    button = make_button(counter)
    handler = InputHandler()
    move(handler, 150, 70)
    button.update(handler)
    assert button.current_frame is ButtonState.MOUSE_OVER
    assert counter.count == 0


def test_click_fires_callback_once():
    counter = Counter()
    button = make_button(counter)
    handler = InputHandler()
    move(handler, 150, 70)
    press(handler)
    button.update(handler)
    assert button.current_frame is ButtonState.CLICKED
    assert counter.count == 1


def test_held_button_fires_every_other_update():
    counter = Counter()
    button = make_button(counter)
    handler = InputHandler()
    move(handler, 150, 70)
    press(handler)
    frames = []
    for _ in range(4):
        button.update(handler)
        frames.append(button.current_frame)
    assert frames == [
        ButtonState.CLICKED,
        ButtonState.MOUSE_OVER,
        ButtonState.CLICKED,
        ButtonState.MOUSE_OVER,
    ]
    assert counter.count == 2


def test_release_then_hover_does_not_fire():
    counter = Counter()
    button = make_button(counter)
    handler = InputHandler()
    move(handler, 150, 70)
    press(handler)
    button.update(handler)
    release(handler)
    button.update(handler)
    assert button.current_frame is ButtonState.MOUSE_OVER
    assert counter.count == 1


def test_draw_paints_button_rectangle():
    textures = TextureManager()
    picture = pygame.Surface((128, 40))
    picture.fill((255, 0, 0))
    textures.add("menuu", picture)
    target = pygame.Surface((384, 224))
    target.fill((0, 0, 0))
    button = make_button(Counter())
    button.draw(textures, "menuu", target)
    assert target.get_at((130, 60)) == (255, 0, 0, 255)
    assert target.get_at((255, 95)) == (255, 0, 0, 255)
    assert target.get_at((100, 60)) == (0, 0, 0, 255)
    assert target.get_at((130, 100)) == (0, 0, 0, 255)