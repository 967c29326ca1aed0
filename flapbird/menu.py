"""The main menu with the title and play button."""

from __future__ import annotations

from typing import Iterable

import pygame

from .collision import Sprite
from .context import GameData
from .definitions import (
    GAME_TITLE_FILEPATH,
    MAIN_MENU_BACKGROUND_FILEPATH,
    PLAY_BUTTON_FILEPATH,
    RED,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from .inputs import MouseButton, is_clicked
from .play import GameState
from .state_machine import State


class _ScreenState(State):
    """A state that reacts to window events and paints a stack of sprites."""

    fill_colour: tuple[int, int, int] = RED

    def __init__(self, data: GameData) -> None:
        self._data = data

    def _layers(self) -> Iterable[Sprite]:
        return ()

    def _after_event(self) -> None:
        """Called once for every polled event."""

    def handle_input(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._data.running = False
            self._after_event()

    def draw(self, interpolation: float) -> None:
        window = self._data.window
        window.fill(self.fill_colour)
        for sprite in self._layers():
            sprite.draw(window)
        pygame.display.flip()


class MainMenuState(_ScreenState):
    """Shows the title and starts a round when the play button is clicked."""

    def __init__(self, data: GameData) -> None:
        super().__init__(data)
        self.background: Sprite
        self.title: Sprite
        self.play_button: Sprite

    def init(self) -> None:
        assets = self._data.assets
        assets.load_texture("Main Menu Background", MAIN_MENU_BACKGROUND_FILEPATH)
        assets.load_texture("Game Title", GAME_TITLE_FILEPATH)
        assets.load_texture("Play Button", PLAY_BUTTON_FILEPATH)

        self.background = Sprite.from_texture(assets.get_texture("Main Menu Background"))
        self.title = Sprite.from_texture(assets.get_texture("Game Title"))
        self.play_button = Sprite.from_texture(assets.get_texture("Play Button"))

        self.title.x = SCREEN_WIDTH // 2 - self.title.width / 2
        self.title.y = self.title.height / 2
        self.play_button.x = SCREEN_WIDTH // 2 - self.play_button.width / 2
        self.play_button.y = SCREEN_HEIGHT // 2 - self.play_button.height / 2

    def _after_event(self) -> None:
        if is_clicked(self.play_button, MouseButton.LEFT):
            self._data.state_machine.add_state(GameState(self._data), True)
            print("Play Button Clicked")

    def _layers(self) -> Iterable[Sprite]:
        return (self.background, self.title, self.play_button)

    def handle_input(self) -> None:
        """Stop on window close; start a round when the play button is clicked."""
        super().handle_input()

    def update(self, dt: float) -> None:
        """The menu has nothing to advance."""

    def draw(self, interpolation: float) -> None:
        """Paint the background, the title and the play button."""
        super().draw(interpolation)