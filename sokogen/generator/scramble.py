"""
Reverse-pull scrambling.

Starting from the solved configuration (every box on its target), the
player takes a bounded random walk in which most steps pull an adjacent
box. A pull is the exact time-reversal of a push, so replaying the walk
backwards as pushes returns every box to its target: any state reached
this way is solvable without ever running a solver.
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple

from loguru import logger

from ..game.board import Board, Direction, Position
from .rng import SequenceGenerator


class ScrambleMove(NamedTuple):
    """One executed step of the walk; direction is the player's travel."""

    direction: Direction
    pulled: bool


class PullCandidate(NamedTuple):
    box_index: int
    direction: Direction  # Player travel direction; the box follows it


@dataclass
class ScrambleResult:
    """Final configuration of a scramble and the walk that produced it."""

    player: Position
    boxes: List[Position]
    targets: List[Position]
    pull_count: int = 0
    moves: List[ScrambleMove] = field(default_factory=list)

    @property
    def boxes_on_targets(self) -> int:
        targets = set(self.targets)
        return sum(1 for box in self.boxes if box in targets)

    def is_accepted(self, box_count: int, min_pulls_per_box: int = 3) -> bool:
        """Not already solved, and enough genuine box displacement."""
        return (
            self.boxes_on_targets == 0
            and self.pull_count >= min_pulls_per_box * box_count
        )

    def solution(self) -> List[Direction]:
        """Forward plan (walks and pushes) from this state back to solved."""
        return [move.direction.opposite() for move in reversed(self.moves)]


class Scrambler:
    """Runs the pull-based random walk for one generation attempt."""

    def __init__(self, board: Board, rng: SequenceGenerator, pull_bias: int = 95):
        """Initialize scrambler.

        Args:
            board: Terrain with targets already marked
            rng: Sequence generator owned by the current attempt
            pull_bias: Percent chance of pulling when a pull is available
        """
        self.board = board
        self.rng = rng
        self.pull_bias = pull_bias
        self.logger = logger.bind(component="scramble")

    def is_open(self, pos: Position, boxes: List[Position]) -> bool:
        return self.board.is_floor(pos[0], pos[1]) and pos not in boxes

    def pullable(self, player: Position, boxes: List[Position]) -> List[PullCandidate]:
        """Boxes cardinally adjacent to the player with a free cell behind
        the player, in box order."""
        candidates = []
        for i, box in enumerate(boxes):
            # The player backs away from the box, so travel = player - box.
            direction = Direction.between(box, player)
            if direction is None:
                continue
            if not self.is_open(direction.apply(player), boxes):
                continue
            candidates.append(PullCandidate(i, direction))
        return candidates

    def scramble(
        self,
        player: Position,
        boxes: List[Position],
        targets: List[Position],
        steps: int,
    ) -> ScrambleResult:
        """Walk ``steps`` times from the given solved configuration."""
        result = ScrambleResult(
            player=player, boxes=list(boxes), targets=list(targets)
        )
        directions = list(Direction)

        for _ in range(steps):
            candidates = self.pullable(result.player, result.boxes)

            if candidates and self.rng.next_int(0, 99) < self.pull_bias:
                candidate = candidates[self.rng.next_int(0, len(candidates) - 1)]
                result.boxes[candidate.box_index] = result.player
                result.player = candidate.direction.apply(result.player)
                result.pull_count += 1
                result.moves.append(ScrambleMove(candidate.direction, True))
                continue

            direction = directions[self.rng.next_int(0, 3)]
            target = direction.apply(result.player)
            if self.is_open(target, result.boxes):
                result.player = target
                result.moves.append(ScrambleMove(direction, False))

        self.logger.trace(
            f"Scrambled {len(boxes)} boxes: {result.pull_count} pulls, "
            f"{result.boxes_on_targets} still on targets"
        )
        return result

