"""The window, the fixed-step main loop and the command entry point."""

from __future__ import annotations

import argparse
from typing import Sequence

import pygame

from .context import GameData
from .definitions import SCREEN_HEIGHT, SCREEN_WIDTH
from .splash import SplashState

MAX_FRAME_TIME = 0.25


class Game:
    """Opens the window and drives the active state at a fixed update rate."""

    dt = 1.0 / 60.0

    def __init__(self, width: int, height: int, title: str) -> None:
        pygame.display.init()
        pygame.font.init()
        window = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.data = GameData(window)
        self.data.state_machine.add_state(SplashState(self.data))
        self._accumulator = 0.0

    def step(self, frame_time: float) -> int:
        """Advance by one frame of frame_time seconds; return the number of updates run."""
        machine = self.data.state_machine
        machine.process_state_changes()

        self._accumulator += min(frame_time, MAX_FRAME_TIME)
        updates = 0
        while self._accumulator >= self.dt:
            state = machine.active_state()
            state.handle_input()
            state.update(self.dt)
            self._accumulator -= self.dt
            updates += 1

        machine.active_state().draw(self._accumulator / self.dt)
        return updates

    def run(self) -> None:
        """Run frames until the window is closed."""
        current = self.data.clock()
        while self.data.running:
            now = self.data.clock()
            frame_time, current = now - current, now
            self.step(frame_time)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="A side-scrolling bird game.")
    parser.parse_args(argv)
    try:
        Game(SCREEN_WIDTH, SCREEN_HEIGHT, "Flappy Bird").run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())