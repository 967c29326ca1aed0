"""Axis-aligned rectangles, positioned sprites and collision tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def _span_x(self) -> tuple[float, float]:
        return min(self.left, self.right), max(self.left, self.right)

    def _span_y(self) -> tuple[float, float]:
        return min(self.top, self.bottom), max(self.top, self.bottom)

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles overlap with a non-empty area."""
        a_left, a_right = self._span_x()
        a_top, a_bottom = self._span_y()
        b_left, b_right = other._span_x()
        b_top, b_bottom = other._span_y()
        return (
            max(a_left, b_left) < min(a_right, b_right)
            and max(a_top, b_top) < min(a_bottom, b_bottom)
        )

    def contains(self, x: float, y: float) -> bool:
        """Return True if the point lies inside; right and bottom edges excluded."""
        left, right = self._span_x()
        top, bottom = self._span_y()
        return left <= x < right and top <= y < bottom


@dataclass
class Sprite:
    """A drawable image placed at a position on screen."""

    width: float
    height: float
    x: float = 0.0
    y: float = 0.0
    image: Any = None
    visible: bool = True

    @classmethod
    def from_texture(cls, texture: Any, x: float = 0.0, y: float = 0.0) -> Sprite:
        """Build a sprite sized to a texture surface."""
        width, height = texture.get_size()
        return cls(width, height, x, y, texture)

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def global_bounds(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def move(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    def draw(self, surface: Any) -> None:
        """Blit the sprite's image onto a surface if it is visible."""
        if self.visible and self.image is not None:
            surface.blit(self.image, (self.x, self.y))


def check_collision(sprite1: Sprite, sprite2: Sprite) -> bool:
    """Return True if the bounds of two sprites overlap."""
    return sprite1.global_bounds().intersects(sprite2.global_bounds())