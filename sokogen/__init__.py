"""
sokogen: deterministic, solvable-by-construction box-pushing level generator.
"""

from .errors import ConfigError, MoveError, PlacementError, SokogenError
from .game.board import Direction, Position, Tile
from .game.levels import FALLBACK_LEVEL, LevelData
from .generator.config import PRESETS, DifficultyPreset, GeneratorConfig, GeneratorTunables
from .generator.orchestrator import (
    GenerationReport,
    GenerationState,
    LevelGenerator,
    generate,
)

__all__ = [
    "ConfigError",
    "DifficultyPreset",
    "Direction",
    "FALLBACK_LEVEL",
    "GenerationReport",
    "GenerationState",
    "GeneratorConfig",
    "GeneratorTunables",
    "LevelData",
    "LevelGenerator",
    "MoveError",
    "PRESETS",
    "PlacementError",
    "Position",
    "SokogenError",
    "Tile",
    "generate",
]
