"""A tile-based puzzle game: map loading and checks, game rules, pygame drawing and a command."""

__version__ = "1.0.0"