"""Mouse click detection over sprites."""

from __future__ import annotations

from enum import IntEnum

import pygame

from .collision import Rect, Sprite


class MouseButton(IntEnum):
    """Indexes into pygame.mouse.get_pressed()."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


def is_clicked(sprite: Sprite, button: int = MouseButton.LEFT) -> bool:
    """Return True if the button is held and the cursor lies over the sprite."""
    if not pygame.mouse.get_pressed()[button]:
        return False
    bounds = sprite.global_bounds()
    area = Rect(int(sprite.x), int(sprite.y), int(bounds.width), int(bounds.height))
    x, y = pygame.mouse.get_pos()
    return area.contains(x, y)