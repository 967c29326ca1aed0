"""Obstacle pipes and the invisible scoring gates between them."""

from __future__ import annotations

from .collision import Sprite
from .context import GameData
from .definitions import PIPE_MOVE_SPEED


class Pipes:
    """Spawns, scrolls and draws pipe pairs and their scoring gates."""

    def __init__(self, data: GameData) -> None:
        self._data = data
        self.land_height = data.assets.get_texture("Land").get_height()
        self.offset = 0
        self.pipes: list[Sprite] = []
        self.score_pipes: list[Sprite] = []

    def spawn_top_pipe(self) -> None:
        width, _ = self._data.window_size()
        texture = self._data.assets.get_texture("Pipe Down")
        self.pipes.append(Sprite.from_texture(texture, width, -self.offset))

    def spawn_bottom_pipe(self) -> None:
        width, height = self._data.window_size()
        sprite = Sprite.from_texture(self._data.assets.get_texture("Pipe Up"))
        sprite.x = width
        sprite.y = height - sprite.height - self.offset
        self.pipes.append(sprite)

    def spawn_score_pipe(self) -> None:
        width, _ = self._data.window_size()
        sprite = Sprite.from_texture(self._data.assets.get_texture("Scoring Pipe"), width, 0)
        sprite.visible = False
        self.score_pipes.append(sprite)

    @staticmethod
    def _scroll(sprites: list[Sprite], movement: float) -> list[Sprite]:
        kept = [sprite for sprite in sprites if not sprite.x < -sprite.width]
        for sprite in kept:
            sprite.move(-movement, 0)
        return kept

    def move_pipes(self, dt: float) -> None:
        """Scroll all pipes left and drop those that have left the screen."""
        movement = PIPE_MOVE_SPEED * dt
        self.pipes = self._scroll(self.pipes, movement)
        self.score_pipes = self._scroll(self.score_pipes, movement)

    def draw_pipes(self) -> None:
        for sprite in self.pipes:
            sprite.draw(self._data.window)

    def randomize_offset(self) -> None:
        """Pick a new vertical offset between 0 and the land height inclusive."""
        self.offset = self._data.rng.randint(0, self.land_height)