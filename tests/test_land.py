import pygame
import pytest

from flapbird.assets import AssetManager
from flapbird.context import GameData
from flapbird.definitions import PIPE_MOVE_SPEED
from flapbird.land import Land

BLUE = (0, 0, 255)


@pytest.fixture
def data(tmp_path):
    tile_file = tmp_path / "land.bmp"
    ground = pygame.Surface((100, 50))
    ground.fill(BLUE)
    pygame.image.save(ground, str(tile_file))
    manager = AssetManager()
    manager.load_texture("Land", str(tile_file))
    return GameData(window=pygame.Surface((650, 1000)), assets=manager)


def test_two_tiles_side_by_side_at_bottom(data):
    first, second = Land(data).sprites
    assert first.x == 0
    assert second.x == first.width
    assert first.y + first.height == 1000
    assert second.y == first.y


def test_move_scrolls_left(data):
    land = Land(data)
    land.move(0.1)
    shift = PIPE_MOVE_SPEED * 0.1
    assert [tile.x for tile in land.sprites] == pytest.approx([-shift, 100 - shift])


def test_tile_off_screen_wraps_to_right_edge(data):
    land = Land(data)
    land.move(0.75)
    first, second = land.sprites
    assert first.x == 650
    assert -second.width <= second.x < 0


@pytest.mark.parametrize("point, colour", [((10, 990), BLUE), ((150, 990), BLUE), ((10, 10), (0, 0, 0))])
def test_draw_paints_ground(data, point, colour):
    Land(data).draw()
    assert data.window.get_at(point)[:3] == colour