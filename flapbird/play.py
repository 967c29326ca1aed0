"""The playing screen, the game-over screen and high-score persistence."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Union

import pygame

from .bird import Bird
from .collision import Sprite, check_collision
from .context import GameData
from .definitions import (
    BIRD_FILEPATH,
    BLACK,
    FLAPPY_FONT_FILEPATH,
    GAME_BACKGROUND_FILEPATH,
    GAME_OVER_BODY_FILEPATH,
    GAME_OVER_TITLE_FILEPATH,
    LAND_FILEPATH,
    PIPE_DOWN_FILEPATH,
    PIPE_SPAWN_FREQUENCY,
    PIPE_UP_FILEPATH,
    RED,
    SCORING_PIPE_FILEPATH,
    TIME_BEFORE_GAME_OVER,
    WHITE,
    GameStates,
)
from .hud import DisplayHUD
from .inputs import MouseButton, is_clicked
from .land import Land
from .pipes import Pipes
from .state_machine import State

PathArg = Union[str, "PathLike[str]"]

SCORE_FONT_SIZE = 50


def read_high_score(path: PathArg) -> int:
    """Return the last integer stored in the file, or 0 if there is none."""
    try:
        text = Path(path).read_text()
    except OSError:
        return 0
    best = 0
    for token in text.split():
        try:
            best = int(token)
        except ValueError:
            break
    return best


def record_high_score(path: PathArg, score: int) -> int:
    """Store the better of the saved high score and score; return it."""
    best = max(read_high_score(path), score)
    try:
        Path(path).write_text(str(best))
    except OSError:
        pass
    return best


class GameState(State):
    """A round of play: the bird, scrolling land and pipes, and the score."""

    def __init__(self, data: GameData) -> None:
        self._data = data
        self._clock_start = data.clock()
        self.score = 0
        self.game_state = GameStates.READY
        self.background: Sprite
        self.pipes: Pipes
        self.land: Land
        self.bird: Bird
        self.hud: DisplayHUD

    def _elapsed(self) -> float:
        return self._data.clock() - self._clock_start

    def _restart_clock(self) -> None:
        self._clock_start = self._data.clock()

    def init(self) -> None:
        assets = self._data.assets
        assets.load_texture("Game Background", GAME_BACKGROUND_FILEPATH)
        assets.load_texture("Pipe Up", PIPE_UP_FILEPATH)
        assets.load_texture("Pipe Down", PIPE_DOWN_FILEPATH)
        assets.load_texture("Scoring Pipe", SCORING_PIPE_FILEPATH)
        assets.load_texture("Land", LAND_FILEPATH)
        assets.load_texture("Bird", BIRD_FILEPATH)
        assets.load_font("Flappy Font", FLAPPY_FONT_FILEPATH)

        self.pipes = Pipes(self._data)
        self.land = Land(self._data)
        self.bird = Bird(self._data)
        self.hud = DisplayHUD(self._data)
        self.background = Sprite.from_texture(assets.get_texture("Game Background"))

        self.score = 0
        self.hud.update_score(self.score)
        self.game_state = GameStates.READY

    def handle_input(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._data.running = False
            if is_clicked(self.background, MouseButton.LEFT):
                if self.game_state is not GameStates.GAME_OVER:
                    self.game_state = GameStates.PLAYING
                    self.bird.tap()

    def _collect_score(self) -> None:
        remaining = []
        for gate in self.pipes.score_pipes:
            if check_collision(self.bird.sprite, gate):
                self.score += 1
                self.hud.update_score(self.score)
                print(f"Score: {self.score}")
            else:
                remaining.append(gate)
        self.pipes.score_pipes = remaining

    def update(self, dt: float) -> None:
        if self.game_state is not GameStates.GAME_OVER:
            self.land.move(dt)

        if self.game_state is GameStates.PLAYING:
            self.pipes.move_pipes(dt)
            if self._elapsed() > PIPE_SPAWN_FREQUENCY:
                self.pipes.randomize_offset()
                self.pipes.spawn_top_pipe()
                self.pipes.spawn_bottom_pipe()
                self.pipes.spawn_score_pipe()
                self._restart_clock()

            self.bird.update(dt)

            obstacles = [*self.land.sprites, *self.pipes.pipes]
            if any(check_collision(self.bird.sprite, obstacle) for obstacle in obstacles):
                self.game_state = GameStates.GAME_OVER
                self._restart_clock()

            if self.game_state is GameStates.PLAYING:
                self._collect_score()

        if self.game_state is GameStates.GAME_OVER and self._elapsed() > TIME_BEFORE_GAME_OVER:
            self._data.state_machine.add_state(GameOverState(self._data, self.score), True)

    def draw(self, interpolation: float) -> None:
        window = self._data.window
        window.fill(RED)
        self.background.draw(window)
        self.pipes.draw_pipes()
        self.land.draw()
        self.bird.draw()
        self.hud.draw()
        pygame.display.flip()


class GameOverState(State):
    """Shows the final and best scores and offers another round."""

    def __init__(self, data: GameData, score: int) -> None:
        self._data = data
        self.score = score
        self.high_score = 0
        self.score_text = str(score)
        self.high_score_text = "0"
        self.background: Sprite
        self.title: Sprite
        self.body: Sprite
        self.again_button: Sprite
        self._texts: list[tuple[pygame.Surface, tuple[float, float]]] = []

    def _render_centred(self, text: str, centre: tuple[float, float]) -> tuple[pygame.Surface, tuple[float, float]]:
        font = self._data.assets.get_font("Flappy Font", SCORE_FONT_SIZE)
        surface = font.render(text, True, WHITE)
        width, height = surface.get_size()
        return surface, (centre[0] - width / 2, centre[1] - height / 2)

    def init(self) -> None:
        self.high_score = record_high_score(self._data.high_score_path, self.score)

        assets = self._data.assets
        assets.load_texture("Game Over Background", GAME_BACKGROUND_FILEPATH)
        assets.load_texture("Game Over Title", GAME_OVER_TITLE_FILEPATH)
        assets.load_texture("Game Over Body", GAME_OVER_BODY_FILEPATH)

        self.background = Sprite.from_texture(assets.get_texture("Game Over Background"))
        self.title = Sprite.from_texture(assets.get_texture("Game Over Title"))
        self.body = Sprite.from_texture(assets.get_texture("Game Over Body"))
        self.again_button = Sprite.from_texture(assets.get_texture("Play Button"))

        width, height = self._data.window_size()
        self.body.x = width // 2 - self.body.width / 2
        self.body.y = height // 2 - self.body.height / 2
        self.title.x = width // 2 - self.title.width / 2
        self.title.y = self.body.y - self.title.height * 1.2
        self.again_button.x = width // 2 - self.again_button.width / 2
        self.again_button.y = self.body.y + self.body.height + self.again_button.height * 0.2

        self.score_text = str(self.score)
        self.high_score_text = str(self.high_score)
        self._texts = [
            self._render_centred(self.score_text, (width // 10 * 7.25, height / 2.15)),
            self._render_centred(self.high_score_text, (width // 10 * 7, height / 1.78)),
        ]

    def handle_input(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._data.running = False
            if is_clicked(self.again_button, MouseButton.LEFT):
                self._data.state_machine.add_state(GameState(self._data), True)

    def update(self, dt: float) -> None:
        """The game-over screen has nothing to advance."""

    def draw(self, interpolation: float) -> None:
        window = self._data.window
        window.fill(BLACK)
        for sprite in (self.background, self.title, self.body, self.again_button):
            sprite.draw(window)
        for surface, position in self._texts:
            window.blit(surface, position)
        pygame.display.flip()