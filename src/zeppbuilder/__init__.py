"""ZeppBuilder - widget scenes to Zepp OS watch app projects."""

__version__ = "0.1.0"
