"""Turn a GitHub contribution graph into an animated Breakout game."""

__version__ = "0.1.0"
