"""
Entity placement: drops the player and each box/target pair onto free
floor cells. Boxes start on their own targets (the solved configuration).
"""

from dataclasses import dataclass, field
from typing import List

from ..errors import PlacementError
from ..game.board import Board, Position, Tile
from .rng import SequenceGenerator

DEFAULT_SPOT = (1, 1)


@dataclass
class Placement:
    """Player, boxes and targets in the solved configuration."""

    player: Position
    boxes: List[Position] = field(default_factory=list)
    targets: List[Position] = field(default_factory=list)


class EntityPlacer:
    """Places the player and boxes on a synthesized board."""

    def __init__(
        self,
        board: Board,
        rng: SequenceGenerator,
        spot_samples: int = 100,
        placement_retries: int = 50,
    ):
        self.board = board
        self.rng = rng
        self.spot_samples = spot_samples
        self.placement_retries = placement_retries

    def get_empty_spot(self) -> Position:
        """Sample interior cells for a plain floor cell.

        Falls back to (1, 1) when every sample misses; the caller's
        collision check is expected to reject that spot if it is taken.
        """
        for _ in range(self.spot_samples):
            x = self.rng.next_int(1, self.board.width - 2)
            y = self.rng.next_int(1, self.board.height - 2)
            if self.board.get_tile(x, y) == Tile.FLOOR:
                return (x, y)
        return DEFAULT_SPOT

    def place(self, box_count: int) -> Placement:
        """Place the player, then ``box_count`` boxes each on a new target.

        Raises:
            PlacementError: A box could not be placed clear of the player
                and the other boxes within the retry bound.
        """
        placement = Placement(player=self.get_empty_spot())

        for i in range(box_count):
            pos = self.get_empty_spot()
            retries = 0
            while self._is_taken(pos, placement):
                if retries >= self.placement_retries:
                    raise PlacementError(
                        f"Could not place box {i} after {retries} retries"
                    )
                pos = self.get_empty_spot()
                retries += 1

            placement.boxes.append(pos)
            placement.targets.append(pos)
            self.board.set_tile(pos[0], pos[1], Tile.TARGET)

        return placement

    @staticmethod
    def _is_taken(pos: Position, placement: Placement) -> bool:
        return pos == placement.player or pos in placement.boxes
