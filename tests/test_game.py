import pygame
import pytest

from flapbird.definitions import SCREEN_HEIGHT, SCREEN_WIDTH
from flapbird.game import Game
from flapbird.splash import SplashState
from flapbird.state_machine import State

TITLE = "Flappy Bird"


@pytest.fixture
def make_game(tmp_path, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    splash_file = tmp_path / "assets" / "res" / "bird-splash.jpg"
    splash_file.parent.mkdir(parents=True)
    backdrop = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    backdrop.fill((200, 200, 200))
    pygame.image.save(backdrop, str(splash_file))
    (tmp_path / "run").mkdir()
    monkeypatch.chdir(tmp_path / "run")
    yield lambda: Game(SCREEN_WIDTH, SCREEN_HEIGHT, TITLE)
    pygame.display.quit()


class _Stopper(State):
    def __init__(self, data):
        self.data = data
        self.updates = 0
        self.draws = 0

    def init(self):
        pass

    def handle_input(self):
        pass

    def update(self, dt):
        self.updates += 1
        self.data.running = False

    def draw(self, interpolation):
        self.draws += 1


def test_window_size_and_caption(make_game):
    game = make_game()
    assert game.data.window_size() == (SCREEN_WIDTH, SCREEN_HEIGHT)
    assert pygame.display.get_caption()[0] == TITLE


def test_first_step_activates_splash(make_game):
    game = make_game()
    assert game.step(0.0) == 0
    assert isinstance(game.data.state_machine.active_state(), SplashState)


def test_time_accumulates_across_frames(make_game):
    game = make_game()
    assert [game.step(0.01), game.step(0.01)] == [0, 1]


def test_long_frames_are_clamped(make_game):
    clamped = make_game().step(0.25)
    long_frame = make_game().step(10.0)
    assert long_frame == clamped
    assert clamped >= 14


def test_run_stops_when_window_closes(make_game):
    game = make_game()
    stopper = _Stopper(game.data)
    game.data.state_machine.add_state(stopper)
    game.run()
    assert game.data.running is False
    assert stopper.updates >= 1
    assert stopper.draws >= 1