"""The splash screen shown when the game starts."""

from __future__ import annotations

from typing import Iterable

from .collision import Sprite
from .context import GameData
from .definitions import BLACK, SPLASH_SCENE_BACKGROUND_FILEPATH, SPLASH_STATE_SHOW_TIME
from .menu import MainMenuState, _ScreenState


class SplashState(_ScreenState):
    """Shows a splash image, then switches to the main menu."""

    fill_colour = BLACK

    def __init__(self, data: GameData) -> None:
        super().__init__(data)
        self._clock_start = data.clock()
        self.background: Sprite

    def init(self) -> None:
        assets = self._data.assets
        assets.load_texture("Splash State Background", SPLASH_SCENE_BACKGROUND_FILEPATH)
        self.background = Sprite.from_texture(assets.get_texture("Splash State Background"), 0, 0)

    def _layers(self) -> Iterable[Sprite]:
        return (self.background,)

    def handle_input(self) -> None:
        """Stop the game when the window is closed."""
        super().handle_input()

    def update(self, dt: float) -> None:
        if self._data.clock() - self._clock_start > SPLASH_STATE_SHOW_TIME:
            self._data.state_machine.add_state(MainMenuState(self._data), True)

    def draw(self, interpolation: float) -> None:
        """Paint the splash background."""
        super().draw(interpolation)