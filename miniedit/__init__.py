"""Building blocks for a minimal terminal text editor: buffer, keys, rendering and terminal."""

__version__ = "0.0.2"