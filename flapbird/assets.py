"""Loading and lookup of textures and fonts by name."""

from __future__ import annotations

from pathlib import Path

import pygame


class AssetError(RuntimeError):
    """Raised when a texture cannot be opened or decoded."""


class AssetManager:
    """Keeps loaded textures and font files under symbolic names."""

    _PROBE_FONT_SIZE = 12

    def __init__(self) -> None:
        self._textures: dict[str, pygame.Surface] = {}
        self._font_files: dict[str, str] = {}
        self._fonts: dict[tuple[str, int], pygame.font.Font] = {}

    def load_texture(self, name: str, file_name: str) -> None:
        """Load an image file and store it under name; raise AssetError on failure."""
        path = Path(file_name)
        try:
            with path.open("rb") as stream:
                try:
                    texture = pygame.image.load(stream, path.name)
                except pygame.error as exc:
                    raise AssetError(
                        f"Failed to load texture from stream: {file_name}"
                    ) from exc
        except OSError as exc:
            raise AssetError(f"Failed to open texture file: {file_name}") from exc
        self._textures[name] = texture

    def get_texture(self, name: str) -> pygame.Surface:
        """Return a loaded texture; raise KeyError if it is unknown."""
        return self._textures[name]

    def load_font(self, name: str, file_name: str) -> None:
        """Register a font file under name; a file that cannot be loaded is ignored."""
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            pygame.font.Font(file_name, self._PROBE_FONT_SIZE)
        except (OSError, pygame.error):
            return
        self._font_files[name] = file_name
        self._fonts = {key: font for key, font in self._fonts.items() if key[0] != name}

    def get_font(self, name: str, size: int) -> pygame.font.Font:
        """Return the named font at a pixel size; raise KeyError if it is unknown."""
        file_name = self._font_files[name]
        key = (name, size)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.Font(file_name, size)
        return self._fonts[key]