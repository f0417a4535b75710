"""
Level generation: sequence generator, terrain, placement, scrambling and
the retry loop that ties them together.
"""

from .config import PRESETS, DifficultyPreset, GeneratorConfig, GeneratorTunables
from .level_set import LevelSet, build_level_set, config_for_level, seed_for_level
from .orchestrator import (
    GenerationReport,
    GenerationState,
    GeneratorStats,
    LevelGenerator,
    generate,
)
from .rng import SequenceGenerator
from .scramble import ScrambleMove, ScrambleResult, Scrambler

__all__ = [
    "DifficultyPreset",
    "GenerationReport",
    "GenerationState",
    "GeneratorConfig",
    "GeneratorStats",
    "GeneratorTunables",
    "LevelGenerator",
    "LevelSet",
    "PRESETS",
    "ScrambleMove",
    "ScrambleResult",
    "Scrambler",
    "SequenceGenerator",
    "build_level_set",
    "config_for_level",
    "generate",
    "seed_for_level",
]
