"""The player's bird: gravity, flapping and drawing."""

from __future__ import annotations

from .collision import Sprite
from .context import GameData
from .definitions import FLY_DURATION, FLY_SPEED, GRAVITY, BirdState


class Bird:
    """A bird that rises briefly after each tap and falls otherwise."""

    def __init__(self, data: GameData) -> None:
        self._data = data
        self.sprite = Sprite.from_texture(data.assets.get_texture("Bird"))
        width, height = data.window_size()
        self.sprite.x = width // 4 - self.sprite.width / 2
        self.sprite.y = height // 2 - self.sprite.height / 2
        self.state = BirdState.STILL
        self._clock_start = data.clock()

    def _elapsed(self) -> float:
        return self._data.clock() - self._clock_start

    def _restart_clock(self) -> None:
        self._clock_start = self._data.clock()

    def draw(self) -> None:
        self.sprite.draw(self._data.window)

    def update(self, dt: float) -> None:
        """Move by dt seconds, and fall once the flap has lasted long enough."""
        if self.state is BirdState.FALL:
            self.sprite.move(0, GRAVITY * dt)
        elif self.state is BirdState.FLY:
            self.sprite.move(0, -FLY_SPEED * dt)
        if self._elapsed() > FLY_DURATION:
            self._restart_clock()
            self.state = BirdState.FALL

    def tap(self) -> None:
        """Start a flap."""
        self._restart_clock()
        self.state = BirdState.FLY