from enum import Enum
from typing import List, Optional, Sequence, Tuple

import numpy as np

Position = Tuple[int, int]


class Tile(Enum):
    FLOOR = 0
    WALL = 1
    TARGET = 2


class Direction(Enum):
    # Order matters: random directions are drawn by index into this enum.
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def opposite(self) -> "Direction":
        opposites = {
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
            Direction.LEFT: Direction.RIGHT,
            Direction.RIGHT: Direction.LEFT,
        }
        return opposites[self]

    def apply(self, pos: Position) -> Position:
        return (pos[0] + self.dx, pos[1] + self.dy)

    @classmethod
    def between(cls, src: Position, dst: Position) -> Optional["Direction"]:
        """Direction of a single cardinal step from src to dst, if any."""
        delta = (dst[0] - src[0], dst[1] - src[1])
        for direction in cls:
            if direction.value == delta:
                return direction
        return None


TILE_SYMBOLS = {
    Tile.FLOOR: " ",
    Tile.WALL: "#",
    Tile.TARGET: ".",
}


class Board:
    """Terrain grid for a level, indexed [y, x]."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.grid = np.full((height, width), Tile.FLOOR.value, dtype=np.int8)

    def is_valid_position(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_border(self, x: int, y: int) -> bool:
        return x in (0, self.width - 1) or y in (0, self.height - 1)

    def get_tile(self, x: int, y: int) -> Optional[Tile]:
        if not self.is_valid_position(x, y):
            return None
        return Tile(int(self.grid[y, x]))

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        if self.is_valid_position(x, y):
            self.grid[y, x] = tile.value

    def is_floor(self, x: int, y: int) -> bool:
        """True for in-bounds cells a box or the player may stand on."""
        tile = self.get_tile(x, y)
        return tile == Tile.FLOOR or tile == Tile.TARGET

    def fill_bordered(self) -> None:
        """Wall in the outer ring and clear the interior to floor."""
        self.grid[:, :] = Tile.WALL.value
        if self.width > 2 and self.height > 2:
            self.grid[1:-1, 1:-1] = Tile.FLOOR.value

    def find_cells_by_type(self, tile: Tile) -> List[Position]:
        ys, xs = np.nonzero(self.grid == tile.value)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def interior_cells(self) -> List[Position]:
        return [
            (x, y)
            for y in range(1, self.height - 1)
            for x in range(1, self.width - 1)
        ]

    def copy(self) -> "Board":
        new_board = Board(self.width, self.height)
        new_board.grid = self.grid.copy()
        return new_board

    def freeze(self) -> np.ndarray:
        """Return a read-only copy of the tile array."""
        frozen = self.grid.copy()
        frozen.flags.writeable = False
        return frozen

    def to_rows(self) -> List[List[Tile]]:
        return [[Tile(int(v)) for v in row] for row in self.grid]

    @classmethod
    def from_array(cls, grid: np.ndarray) -> "Board":
        height, width = grid.shape
        board = cls(width, height)
        board.grid = np.array(grid, dtype=np.int8)
        return board

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        """Build a board from integer tile codes or Tile values, rows outer."""
        codes = [[t.value if isinstance(t, Tile) else int(t) for t in row] for row in rows]
        for row in codes:
            for code in row:
                Tile(code)
        return cls.from_array(np.array(codes, dtype=np.int8))

    def __str__(self) -> str:
        result = []
        for y in range(self.height):
            row = [TILE_SYMBOLS[Tile(int(v))] for v in self.grid[y]]
            result.append("".join(row))
        return "\n".join(result)
