"""A side-scrolling flapping-bird arcade game on pygame: screens, entities and the main loop."""

__version__ = "0.1.0"