"""Single-player football card scoring game."""

__version__ = "0.1.0"
