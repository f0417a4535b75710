"""
Level catalogue: a handful of hand-authored opening levels followed by
generated levels whose size and box count ramp up with the level number.
"""

from typing import Dict, Iterator, List, Optional

from loguru import logger

from ..game.levels import CLASSIC_LEVELS, LevelData
from .config import GeneratorConfig
from .orchestrator import LevelGenerator

DEFAULT_TOTAL_LEVELS = 60
LEVEL_SEED_STRIDE = 777
LEVEL_SEED_OFFSET = 123

# (last level number in band, width, height, boxes, steps)
LEVEL_BANDS = [
    (5, 7, 7, 1, None),
    (10, 8, 8, 2, None),
    (20, 8, 8, 3, 300),
    (30, 9, 9, 3, None),
    (40, 10, 10, 4, None),
    (50, 10, 10, 4, 300),
]
FINAL_BAND = (10, 10, 5, 400)


def seed_for_level(index: int) -> int:
    """Seed for the zero-based catalogue index."""
    return index * LEVEL_SEED_STRIDE + LEVEL_SEED_OFFSET


def config_for_level(level_number: int) -> GeneratorConfig:
    """Generator config for a one-based level number."""
    for last, width, height, boxes, steps in LEVEL_BANDS:
        if level_number <= last:
            return GeneratorConfig(
                width=width, height=height, box_count=boxes, steps=steps
            )
    width, height, boxes, steps = FINAL_BAND
    return GeneratorConfig(width=width, height=height, box_count=boxes, steps=steps)


class LevelSet:
    """Fixed-length catalogue; generated levels are built on first access
    and cached by index."""

    def __init__(
        self,
        total: int = DEFAULT_TOTAL_LEVELS,
        generator: Optional[LevelGenerator] = None,
        classics: Optional[List[LevelData]] = None,
    ):
        self.total = total
        self.generator = generator or LevelGenerator()
        self.classics = list(CLASSIC_LEVELS if classics is None else classics)
        self._cache: Dict[int, LevelData] = {}
        self.logger = logger.bind(component="level_set")

    def __len__(self) -> int:
        return self.total

    def __getitem__(self, index: int) -> LevelData:
        if index < 0:
            index += self.total
        if not 0 <= index < self.total:
            raise IndexError(f"level index {index} out of range 0..{self.total - 1}")

        if index < len(self.classics):
            return self.classics[index]
        if index not in self._cache:
            seed = seed_for_level(index)
            config = config_for_level(index + 1)
            self.logger.debug(f"Generating level {index + 1} (seed {seed})")
            self._cache[index] = self.generator.generate(seed, config)
        return self._cache[index]

    def __iter__(self) -> Iterator[LevelData]:
        for index in range(self.total):
            yield self[index]

    def is_generated(self, index: int) -> bool:
        return index >= len(self.classics)


def build_level_set(total: int = DEFAULT_TOTAL_LEVELS) -> List[LevelData]:
    """Generate every level of the catalogue eagerly."""
    return list(LevelSet(total))
