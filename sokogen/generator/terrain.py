"""
Terrain synthesis: a walled rectangle with randomly scattered obstacles.
"""

import math

from loguru import logger

from ..game.board import Board, Tile
from .rng import SequenceGenerator


class TerrainSynthesizer:
    """Builds the wall/floor layout for one generation attempt."""

    def __init__(
        self,
        width: int,
        height: int,
        density: float,
        rng: SequenceGenerator,
        jitter: int = 2,
    ):
        """Initialize terrain synthesizer.

        Args:
            width: Grid width including the border ring
            height: Grid height including the border ring
            density: Fraction of the grid area to scatter as obstacles
            rng: Sequence generator owned by the current attempt
            jitter: Obstacle count varies by up to this much either way
        """
        self.width = width
        self.height = height
        self.density = density
        self.rng = rng
        self.jitter = jitter
        self.logger = logger.bind(component="terrain")

    def obstacle_count(self) -> int:
        base = math.floor(self.width * self.height * self.density)
        return max(0, base + self.rng.next_int(-self.jitter, self.jitter))

    def synthesize(self) -> Board:
        """Generate the terrain.

        Returns:
            Board: Bordered grid with interior obstacles and no targets.
            Interior connectivity is not guaranteed.
        """
        board = Board(self.width, self.height)
        board.fill_bordered()

        count = self.obstacle_count()
        for _ in range(count):
            x = self.rng.next_int(1, self.width - 2)
            y = self.rng.next_int(1, self.height - 2)
            board.set_tile(x, y, Tile.WALL)

        self.logger.trace(f"Scattered {count} obstacles on {self.width}x{self.height}")
        return board
