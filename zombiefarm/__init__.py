"""An in-memory zombie breeding game, with kitty records and their binary encoding."""

__version__ = "0.1.0"
__all__ = ["contract", "kitty"]