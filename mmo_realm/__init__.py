"""In-memory game-server state and rules for a small online role-playing world."""

__version__ = "0.1.0"