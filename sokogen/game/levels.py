from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np

from .board import Board, Position, Tile


@dataclass(frozen=True, eq=False)
class LevelData:
    """A generated (or hand-authored) level: terrain, player start and boxes.

    The grid is a read-only numpy array indexed [y, x]. Target cells are
    the cells marked ``Tile.TARGET``; boxes and the player are not baked
    into the grid.
    """

    grid: np.ndarray
    player: Position
    boxes: Tuple[Position, ...] = field(default_factory=tuple)

    def __post_init__(self):
        grid = np.array(self.grid, dtype=np.int8)
        grid.flags.writeable = False
        object.__setattr__(self, "grid", grid)
        object.__setattr__(self, "player", (int(self.player[0]), int(self.player[1])))
        object.__setattr__(
            self, "boxes", tuple((int(x), int(y)) for x, y in self.boxes)
        )

    @property
    def width(self) -> int:
        return self.grid.shape[1]

    @property
    def height(self) -> int:
        return self.grid.shape[0]

    @property
    def targets(self) -> List[Position]:
        ys, xs = np.nonzero(self.grid == Tile.TARGET.value)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    @property
    def map(self) -> List[List[Tile]]:
        return [[Tile(int(v)) for v in row] for row in self.grid]

    def board(self) -> Board:
        """Return a mutable copy of the terrain."""
        return Board.from_array(self.grid)

    def tile_at(self, x: int, y: int) -> Tile:
        return Tile(int(self.grid[y, x]))

    def is_solved(self) -> bool:
        return set(self.boxes) == set(self.targets)

    def boxes_on_targets(self) -> int:
        targets = set(self.targets)
        return sum(1 for box in self.boxes if box in targets)

    def validate(self) -> List[str]:
        errors = []

        if self.width < 3 or self.height < 3:
            errors.append("Level must be at least 3x3")
            return errors

        board = self.board()
        for y in range(self.height):
            for x in range(self.width):
                if board.is_border(x, y) and board.get_tile(x, y) != Tile.WALL:
                    errors.append(f"Border cell ({x}, {y}) is not a wall")

        targets = self.targets
        if len(self.boxes) != len(targets):
            errors.append(
                f"Box count {len(self.boxes)} does not match target count {len(targets)}"
            )
        if not self.boxes:
            errors.append("Level must contain at least one box")

        for name, (x, y) in [("Player", self.player)] + [
            (f"Box {i}", box) for i, box in enumerate(self.boxes)
        ]:
            if not board.is_valid_position(x, y):
                errors.append(f"{name} at ({x}, {y}) is outside the grid")
            elif not board.is_floor(x, y):
                errors.append(f"{name} at ({x}, {y}) is on a wall")

        if len(set(self.boxes)) != len(self.boxes):
            errors.append("Multiple boxes share a cell")
        if self.player in self.boxes:
            errors.append(f"Player at {self.player} shares a cell with a box")

        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            "map": self.grid.tolist(),
            "player": {"x": self.player[0], "y": self.player[1]},
            "boxes": [{"x": x, "y": y} for x, y in self.boxes],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LevelData":
        board = Board.from_rows(data["map"])
        return cls(
            grid=board.grid,
            player=(data["player"]["x"], data["player"]["y"]),
            boxes=tuple((b["x"], b["y"]) for b in data.get("boxes", [])),
        )

    @classmethod
    def from_rows(
        cls, rows: Sequence[Sequence[int]], player: Position, boxes: Sequence[Position]
    ) -> "LevelData":
        return cls(grid=Board.from_rows(rows).grid, player=player, boxes=tuple(boxes))

    def render(self) -> str:
        """Text dump: ``#`` wall, ``.`` target, ``$`` box, ``*`` box on
        target, ``@`` player, ``+`` player on target."""
        boxes = set(self.boxes)
        lines = []
        for y in range(self.height):
            row = []
            for x in range(self.width):
                tile = self.tile_at(x, y)
                if (x, y) == self.player:
                    row.append("+" if tile == Tile.TARGET else "@")
                elif (x, y) in boxes:
                    row.append("*" if tile == Tile.TARGET else "$")
                elif tile == Tile.WALL:
                    row.append("#")
                elif tile == Tile.TARGET:
                    row.append(".")
                else:
                    row.append(" ")
            lines.append("".join(row))
        return "\n".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LevelData):
            return NotImplemented
        return (
            self.player == other.player
            and self.boxes == other.boxes
            and np.array_equal(self.grid, other.grid)
        )

    def __hash__(self) -> int:
        return hash((self.grid.tobytes(), self.grid.shape, self.player, self.boxes))

    def __str__(self) -> str:
        return self.render()


# Bordered room, one box one step right of its target. The player walks
# round to (4, 2) and pushes left once.
FALLBACK_LEVEL = LevelData.from_rows(
    [
        [1, 1, 1, 1, 1, 1, 1],
        [1, 0, 0, 0, 0, 0, 1],
        [1, 0, 2, 0, 0, 0, 1],
        [1, 0, 0, 0, 0, 0, 1],
        [1, 1, 1, 1, 1, 1, 1],
    ],
    player=(1, 1),
    boxes=[(3, 2)],
)


CLASSIC_LEVELS: List[LevelData] = [
    LevelData.from_rows(
        [
            [1, 1, 1, 1, 1, 1, 1],
            [1, 0, 0, 0, 0, 0, 1],
            [1, 0, 0, 0, 2, 0, 1],
            [1, 0, 0, 0, 0, 0, 1],
            [1, 1, 1, 1, 1, 1, 1],
        ],
        player=(2, 2),
        boxes=[(3, 2)],
    ),
    LevelData.from_rows(
        [
            [1, 1, 1, 1, 1, 1, 1, 1],
            [1, 0, 0, 0, 1, 1, 1, 1],
            [1, 2, 0, 0, 1, 1, 1, 1],
            [1, 0, 0, 0, 0, 0, 0, 1],
            [1, 2, 0, 0, 0, 0, 0, 1],
            [1, 1, 1, 1, 1, 1, 1, 1],
        ],
        player=(2, 2),
        boxes=[(3, 2), (3, 3)],
    ),
    LevelData.from_rows(
        [
            [1, 1, 1, 1, 1, 1, 1, 1],
            [1, 1, 0, 0, 1, 0, 1, 1],
            [1, 0, 0, 0, 0, 0, 1, 1],
            [1, 0, 0, 0, 0, 2, 1, 1],
            [1, 1, 0, 2, 0, 1, 1, 1],
            [1, 1, 1, 1, 1, 1, 1, 1],
        ],
        player=(2, 2),
        boxes=[(3, 2), (4, 3)],
    ),
]
