"""Shared game context handed to every state and entity."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import pygame

from .assets import AssetManager
from .definitions import HIGH_SCORE_FILEPATH
from .state_machine import StateMachine


@dataclass
class GameData:
    """The window, state machine, assets, clock and random source of a game."""

    window: pygame.Surface
    state_machine: StateMachine = field(default_factory=StateMachine)
    assets: AssetManager = field(default_factory=AssetManager)
    clock: Callable[[], float] = time.monotonic
    rng: random.Random = field(default_factory=random.Random)
    high_score_path: Path = Path(HIGH_SCORE_FILEPATH)
    running: bool = True

    def window_size(self) -> tuple[int, int]:
        """Return the window size in pixels as (width, height)."""
        return self.window.get_size()