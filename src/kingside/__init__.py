"""Chess rules-and-state engine: positions, legal moves, status and history."""

__version__ = "0.1.0"
