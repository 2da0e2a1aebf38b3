"""Console MP3 folder player with playlist, loop, shuffle, seek and volume controls."""

__version__ = "0.1.0"