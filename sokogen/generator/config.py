"""
Configuration for level generation.

Defines the per-call generator config, the difficulty presets that map onto
it, and the retry/density tunables shared by every generation attempt.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Union

from ..errors import ConfigError


@dataclass(frozen=True)
class GeneratorConfig:
    """Size and difficulty of a single generated level."""

    width: int
    height: int
    box_count: int
    steps: Optional[int] = None  # Scramble budget; defaults to box_count*100 + 200

    def __post_init__(self):
        if self.width < 3 or self.height < 3:
            raise ConfigError(
                f"width and height must be at least 3, got {self.width}x{self.height}"
            )
        if self.box_count < 1:
            raise ConfigError(f"box_count must be at least 1, got {self.box_count}")
        if self.steps is not None and self.steps < 1:
            raise ConfigError(f"steps must be positive, got {self.steps}")

    @property
    def resolved_steps(self) -> int:
        if self.steps is not None:
            return self.steps
        return self.box_count * 100 + 200


@dataclass(frozen=True)
class DifficultyPreset:
    """Named, fixed generator config."""

    name: str
    width: int
    height: int
    box_count: int
    steps: int

    def to_config(self) -> GeneratorConfig:
        return GeneratorConfig(
            width=self.width,
            height=self.height,
            box_count=self.box_count,
            steps=self.steps,
        )


PRESETS: Dict[str, DifficultyPreset] = {
    "easy": DifficultyPreset(name="easy", width=8, height=8, box_count=2, steps=100),
    "medium": DifficultyPreset(
        name="medium", width=10, height=10, box_count=3, steps=300
    ),
    "hard": DifficultyPreset(name="hard", width=12, height=12, box_count=4, steps=500),
}


@dataclass(frozen=True)
class GeneratorTunables:
    """Empirical limits and weights used by every generation attempt."""

    # Placement
    spot_samples: int = 100  # Random probes per empty-spot lookup
    placement_retries: int = 50  # Resamples per box before the attempt is aborted

    # Retry loop
    max_attempts: int = 500
    seed_stride: int = 113  # sub_seed = seed + attempt * seed_stride

    # Terrain
    single_box_density: float = 0.05
    multi_box_density: float = 0.15
    obstacle_jitter: int = 2  # Obstacle count varies by +/- this much

    # Scramble
    pull_bias: int = 95  # Percent of steps that pull when a pull is available
    min_pulls_per_box: int = 3

    def __post_init__(self):
        for name in ("spot_samples", "max_attempts"):
            if getattr(self, name) < 1:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        for name in ("placement_retries", "obstacle_jitter", "min_pulls_per_box"):
            if getattr(self, name) < 0:
                raise ConfigError(
                    f"{name} must not be negative, got {getattr(self, name)}"
                )
        for name in ("single_box_density", "multi_box_density"):
            if not 0.0 <= getattr(self, name) < 1.0:
                raise ConfigError(f"{name} must be in [0, 1), got {getattr(self, name)}")
        if not 0 <= self.pull_bias <= 100:
            raise ConfigError(f"pull_bias must be in [0, 100], got {self.pull_bias}")

    def density_for(self, box_count: int) -> float:
        return self.single_box_density if box_count == 1 else self.multi_box_density


ConfigLike = Union[str, DifficultyPreset, GeneratorConfig]


def resolve_config(config: ConfigLike) -> GeneratorConfig:
    """Turn a preset name, preset or explicit config into a GeneratorConfig."""
    if isinstance(config, GeneratorConfig):
        return config
    if isinstance(config, DifficultyPreset):
        return config.to_config()
    if isinstance(config, str):
        preset = PRESETS.get(config.lower())
        if preset is None:
            raise ConfigError(
                f"Unknown difficulty preset {config!r}; expected one of {sorted(PRESETS)}"
            )
        return preset.to_config()
    raise ConfigError(f"Unsupported config type: {type(config).__name__}")
