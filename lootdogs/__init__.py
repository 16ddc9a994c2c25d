"""Game model for a loot-collecting dog game: maps, sessions, collisions and snapshots."""

__version__ = "0.1.0"