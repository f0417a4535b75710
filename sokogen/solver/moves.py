"""
Player moves over a fixed terrain.

``push`` and ``pull`` are exact inverses: for any state ``s`` where the pull
is legal, ``push(board, pull(board, s, d), d.opposite()) == s``.
"""

from typing import Iterable, NamedTuple, Optional, Tuple

from ..errors import MoveError
from ..game.board import Board, Direction, Position
from ..game.levels import LevelData


class PuzzleState(NamedTuple):
    player: Position
    boxes: Tuple[Position, ...]

    @classmethod
    def from_level(cls, level: LevelData) -> "PuzzleState":
        return cls(level.player, tuple(level.boxes))

    def box_at(self, pos: Position) -> Optional[int]:
        try:
            return self.boxes.index(pos)
        except ValueError:
            return None

    def move_box(self, index: int, pos: Position) -> Tuple[Position, ...]:
        boxes = list(self.boxes)
        boxes[index] = pos
        return tuple(boxes)


def _is_open(board: Board, state: PuzzleState, pos: Position) -> bool:
    return board.is_floor(pos[0], pos[1]) and state.box_at(pos) is None


def push(board: Board, state: PuzzleState, direction: Direction) -> PuzzleState:
    """Player steps into the adjacent box, shoving it one cell further."""
    box_pos = direction.apply(state.player)
    index = state.box_at(box_pos)
    if index is None:
        raise MoveError(f"No box at {box_pos} to push {direction.name}")
    dest = direction.apply(box_pos)
    if not _is_open(board, state, dest):
        raise MoveError(f"Box at {box_pos} is blocked moving {direction.name}")
    return PuzzleState(box_pos, state.move_box(index, dest))


def pull(board: Board, state: PuzzleState, direction: Direction) -> PuzzleState:
    """Player steps away from the box behind it, dragging the box along."""
    box_pos = direction.opposite().apply(state.player)
    index = state.box_at(box_pos)
    if index is None:
        raise MoveError(f"No box at {box_pos} to pull {direction.name}")
    dest = direction.apply(state.player)
    if not _is_open(board, state, dest):
        raise MoveError(f"Player is blocked pulling {direction.name} into {dest}")
    return PuzzleState(dest, state.move_box(index, state.player))


def step(board: Board, state: PuzzleState, direction: Direction) -> PuzzleState:
    """Forward move: walk into a free cell or push the box in the way."""
    dest = direction.apply(state.player)
    if state.box_at(dest) is not None:
        return push(board, state, direction)
    if not board.is_floor(dest[0], dest[1]):
        raise MoveError(f"Cannot walk {direction.name} into {dest}")
    return PuzzleState(dest, state.boxes)


def replay(level: LevelData, directions: Iterable[Direction]) -> PuzzleState:
    """Apply forward moves from the level's start state.

    Raises:
        MoveError: A move is illegal in the state it is applied to.
    """
    board = level.board()
    state = PuzzleState.from_level(level)
    for direction in directions:
        state = step(board, state, direction)
    return state


def is_solved(level: LevelData, state: PuzzleState) -> bool:
    return set(state.boxes) == set(level.targets)
