"""
Generation orchestrator.

Drives the reseed-and-retry loop over terrain synthesis, entity placement
and scrambling, validates each attempt, and falls back to a fixed level
when every attempt is rejected.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from loguru import logger

from ..errors import PlacementError
from ..game.board import Board
from ..game.levels import FALLBACK_LEVEL, LevelData
from .config import ConfigLike, GeneratorConfig, GeneratorTunables, resolve_config
from .placement import EntityPlacer
from .rng import SequenceGenerator
from .scramble import ScrambleResult, Scrambler
from .terrain import TerrainSynthesizer


class GenerationState(Enum):
    ATTEMPTING = "attempting"
    ACCEPTED = "accepted"
    FALLBACK = "fallback"


@dataclass
class GenerationReport:
    """Outcome of one ``generate`` call."""

    level: LevelData
    state: GenerationState
    attempts: int
    seed: Optional[int] = None  # Sub-seed of the accepted attempt
    scramble: Optional[ScrambleResult] = None
    placement_failures: int = 0
    rejected_scrambles: int = 0

    @property
    def is_fallback(self) -> bool:
        return self.state == GenerationState.FALLBACK


@dataclass
class GeneratorStats:
    """Running totals across calls on one LevelGenerator."""

    levels: int = 0
    attempts: int = 0
    fallbacks: int = 0


class LevelGenerator:
    """Generates solvable, non-trivial levels from a seed and a config."""

    def __init__(self, tunables: Optional[GeneratorTunables] = None):
        self.tunables = tunables or GeneratorTunables()
        self.stats = GeneratorStats()
        self.state: Optional[GenerationState] = None
        self.logger = logger.bind(component="generator")

    def sub_seed(self, seed: int, attempt: int) -> int:
        return seed + attempt * self.tunables.seed_stride

    def attempt(
        self, seed: int, config: GeneratorConfig
    ) -> Tuple[Board, ScrambleResult]:
        """Run one full attempt with a fresh generator seeded by ``seed``.

        Raises:
            PlacementError: Boxes could not be placed on this terrain.
        """
        tunables = self.tunables
        rng = SequenceGenerator(seed)

        board = TerrainSynthesizer(
            config.width,
            config.height,
            tunables.density_for(config.box_count),
            rng,
            jitter=tunables.obstacle_jitter,
        ).synthesize()

        placement = EntityPlacer(
            board,
            rng,
            spot_samples=tunables.spot_samples,
            placement_retries=tunables.placement_retries,
        ).place(config.box_count)

        result = Scrambler(board, rng, pull_bias=tunables.pull_bias).scramble(
            placement.player,
            placement.boxes,
            placement.targets,
            config.resolved_steps,
        )
        return board, result

    def generate_with_report(self, seed: int, config: ConfigLike) -> GenerationReport:
        """Generate a level and report how it was obtained.

        Args:
            seed: Base seed; attempt ``i`` uses ``seed + i * seed_stride``
            config: Preset name, DifficultyPreset or GeneratorConfig

        Returns:
            GenerationReport whose level is always valid
        """
        config = resolve_config(config)
        tunables = self.tunables
        placement_failures = 0
        rejected_scrambles = 0
        self.state = GenerationState.ATTEMPTING

        for attempt in range(1, tunables.max_attempts + 1):
            sub_seed = self.sub_seed(seed, attempt)
            try:
                board, result = self.attempt(sub_seed, config)
            except PlacementError as e:
                placement_failures += 1
                self.logger.trace(f"Attempt {attempt} (seed {sub_seed}): {e}")
                continue

            if not result.is_accepted(config.box_count, tunables.min_pulls_per_box):
                rejected_scrambles += 1
                self.logger.trace(
                    f"Attempt {attempt} (seed {sub_seed}) rejected: "
                    f"{result.pull_count} pulls, {result.boxes_on_targets} boxes on targets"
                )
                continue

            level = LevelData(
                grid=board.grid,
                player=result.player,
                boxes=tuple(result.boxes),
            )
            self.state = GenerationState.ACCEPTED
            self._record(attempt, fallback=False)
            self.logger.debug(
                f"Accepted seed {seed} after {attempt} attempt(s) "
                f"({config.width}x{config.height}, {config.box_count} boxes)"
            )
            return GenerationReport(
                level=level,
                state=GenerationState.ACCEPTED,
                attempts=attempt,
                seed=sub_seed,
                scramble=result,
                placement_failures=placement_failures,
                rejected_scrambles=rejected_scrambles,
            )

        self.state = GenerationState.FALLBACK
        self._record(tunables.max_attempts, fallback=True)
        self.logger.warning(
            f"All {tunables.max_attempts} attempts failed for seed {seed} "
            f"({config.width}x{config.height}, {config.box_count} boxes); "
            f"using fallback level ({self.stats.fallbacks} fallbacks so far)"
        )
        return GenerationReport(
            level=FALLBACK_LEVEL,
            state=GenerationState.FALLBACK,
            attempts=tunables.max_attempts,
            placement_failures=placement_failures,
            rejected_scrambles=rejected_scrambles,
        )

    def generate(self, seed: int, config: ConfigLike) -> LevelData:
        return self.generate_with_report(seed, config).level

    def _record(self, attempts: int, fallback: bool) -> None:
        self.stats.levels += 1
        self.stats.attempts += attempts
        if fallback:
            self.stats.fallbacks += 1


def generate(seed: int, config: ConfigLike) -> LevelData:
    """Generate a level; always returns a valid LevelData for a valid config."""
    return LevelGenerator().generate(seed, config)
