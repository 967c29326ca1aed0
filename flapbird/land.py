"""The scrolling ground strip."""

from __future__ import annotations

from .collision import Sprite
from .context import GameData
from .definitions import PIPE_MOVE_SPEED


class Land:
    """Two ground tiles that scroll left and wrap around."""

    def __init__(self, data: GameData) -> None:
        self._data = data
        texture = data.assets.get_texture("Land")
        _, window_height = data.window_size()
        first = Sprite.from_texture(texture)
        first.y = window_height - first.height
        second = Sprite.from_texture(texture, first.width, window_height - first.height)
        self.sprites = [first, second]

    def move(self, dt: float) -> None:
        """Scroll the tiles left, moving any tile fully off screen to the right edge."""
        window_width, _ = self._data.window_size()
        movement = PIPE_MOVE_SPEED * dt
        for sprite in self.sprites:
            sprite.move(-movement, 0.0)
            if sprite.x < -sprite.width:
                sprite.x = window_width

    def draw(self) -> None:
        for sprite in self.sprites:
            sprite.draw(self._data.window)