"""A two-player dot-striking board game on a triangle of 21 dots."""

__version__ = "0.1.0"
__all__ = ["app", "board", "game", "moves"]