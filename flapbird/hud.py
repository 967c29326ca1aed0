"""The on-screen score display."""

from __future__ import annotations

from .context import GameData
from .definitions import WHITE

HUD_FONT_SIZE = 128


class DisplayHUD:
    """Draws the current score near the top centre of the window."""

    def __init__(self, data: GameData) -> None:
        self._data = data
        self._font = data.assets.get_font("Flappy Font", HUD_FONT_SIZE)
        self.text = "0"
        self._surface = self._font.render(self.text, True, WHITE)
        width, height = self._surface.get_size()
        self._origin = (width / 2, height / 2)
        window_width, window_height = data.window_size()
        self.position = (window_width // 2, window_height // 5)

    def draw(self) -> None:
        x, y = self.position
        ox, oy = self._origin
        self._data.window.blit(self._surface, (x - ox, y - oy))

    def update_score(self, score: int) -> None:
        self.text = str(score)
        self._surface = self._font.render(self.text, True, WHITE)