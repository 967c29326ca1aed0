from unittest import mock

import pygame
import pytest

from flapbird.assets import AssetManager
from flapbird.bird import Bird
from flapbird.context import GameData
from flapbird.definitions import FLY_SPEED, GRAVITY, BirdState

YELLOW = (255, 255, 0)


@pytest.fixture
def data(tmp_path):
    sprite_image = pygame.Surface((40, 30))
    sprite_image.fill(YELLOW)
    image_file = tmp_path / "bird.bmp"
    pygame.image.save(sprite_image, str(image_file))
    textures = AssetManager()
    textures.load_texture("Bird", str(image_file))
    return GameData(window=pygame.Surface((650, 1000)), assets=textures, clock=mock.Mock(return_value=0.0))


def _advance(bird, data, now, dt):
    data.clock.return_value = now
    bird.update(dt)


def test_starts_still_and_vertically_centred(data):
    bird = Bird(data)
    assert bird.state is BirdState.STILL
    assert bird.sprite.y + bird.sprite.height / 2 == pytest.approx(500)
    assert bird.sprite.x < 650 / 2


@pytest.mark.parametrize(
    "now, dt, expected",
    [(0.1, 0.5, BirdState.STILL), (1.0, 0.1, BirdState.FALL)],
)
def test_untapped_bird_does_not_move(data, now, dt, expected):
    bird = Bird(data)
    start = bird.sprite.y
    _advance(bird, data, now, dt)
    assert bird.sprite.y == start
    assert bird.state is expected


def test_tap_makes_bird_rise(data):
    bird = Bird(data)
    start = bird.sprite.y
    bird.tap()
    _advance(bird, data, 0.1, 0.1)
    assert bird.state is BirdState.FLY
    assert bird.sprite.y == pytest.approx(start - FLY_SPEED * 0.1)


def test_flight_ends_then_bird_falls(data):
    bird = Bird(data)
    bird.tap()
    _advance(bird, data, 0.3, 0.1)
    assert bird.state is BirdState.FALL
    start = bird.sprite.y
    _advance(bird, data, 0.35, 0.1)
    assert bird.sprite.y == pytest.approx(start + GRAVITY * 0.1)
    assert bird.state is BirdState.FALL


def test_draw_puts_bird_on_window(data):
    bird = Bird(data)
    bird.draw()
    point = (int(bird.sprite.x) + 5, int(bird.sprite.y) + 5)
    assert data.window.get_at(point)[:3] == YELLOW