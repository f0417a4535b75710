"""
Terrain and level data model.
"""

from .board import Board, Direction, Position, Tile
from .levels import CLASSIC_LEVELS, FALLBACK_LEVEL, LevelData

__all__ = [
    "Board",
    "CLASSIC_LEVELS",
    "Direction",
    "FALLBACK_LEVEL",
    "LevelData",
    "Position",
    "Tile",
]
