"""Solutions to daily programming puzzles, grid helpers and a command-line runner."""

__version__ = "0.1.0"