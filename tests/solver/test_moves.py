"""
Tests for push/pull move rules.
"""

import pytest

from sokogen.errors import MoveError
from sokogen.game.board import Board, Direction
from sokogen.game.levels import FALLBACK_LEVEL
from sokogen.solver.moves import PuzzleState, is_solved, pull, push, replay, step

ROWS = [
    [1, 1, 1, 1, 1, 1],
    [1, 0, 0, 0, 0, 1],
    [1, 0, 0, 0, 0, 1],
    [1, 0, 0, 1, 0, 1],
    [1, 1, 1, 1, 1, 1],
]


@pytest.fixture
def board():
    return Board.from_rows(ROWS)


class TestPushPull:
    def test_push(self, board):
        state = PuzzleState((1, 2), ((2, 2),))
        assert push(board, state, Direction.RIGHT) == PuzzleState((2, 2), ((3, 2),))

    def test_push_blocked_by_wall(self, board):
        with pytest.raises(MoveError):
            push(board, PuzzleState((3, 1), ((4, 1),)), Direction.RIGHT)
        with pytest.raises(MoveError):
            push(board, PuzzleState((3, 1), ((3, 2),)), Direction.DOWN)

    def test_push_blocked_by_box(self, board):
        state = PuzzleState((1, 1), ((2, 1), (3, 1)))
        with pytest.raises(MoveError):
            push(board, state, Direction.RIGHT)

    def test_push_without_box(self, board):
        with pytest.raises(MoveError, match="No box"):
            push(board, PuzzleState((1, 1), ()), Direction.RIGHT)

    def test_pull(self, board):
        state = PuzzleState((2, 2), ((3, 2),))
        assert pull(board, state, Direction.LEFT) == PuzzleState((1, 2), ((2, 2),))

    def test_pull_blocked(self, board):
        # Nothing to back into from the left edge.
        with pytest.raises(MoveError):
            pull(board, PuzzleState((1, 2), ((2, 2),)), Direction.LEFT)
        with pytest.raises(MoveError, match="No box"):
            pull(board, PuzzleState((2, 2), ()), Direction.LEFT)

    @pytest.mark.parametrize(
        "direction, player",
        [
            (Direction.UP, (2, 2)),
            (Direction.DOWN, (2, 2)),
            (Direction.LEFT, (2, 2)),
            (Direction.RIGHT, (3, 2)),
        ],
    )
    def test_push_undoes_pull(self, board, direction, player):
        box = direction.opposite().apply(player)
        state = PuzzleState(player, (box, (4, 3)))

        pulled = pull(board, state, direction)
        assert pulled.player == direction.apply(player)
        assert pulled.boxes[0] == player
        assert push(board, pulled, direction.opposite()) == state

    def test_box_order_preserved(self, board):
        state = PuzzleState((2, 2), ((4, 1), (3, 2)))
        pulled = pull(board, state, Direction.LEFT)
        assert pulled.boxes == ((4, 1), (2, 2))


class TestStep:
    def test_walk(self, board):
        state = PuzzleState((1, 1), ((3, 2),))
        assert step(board, state, Direction.DOWN) == PuzzleState((1, 2), ((3, 2),))

    def test_walk_into_wall(self, board):
        with pytest.raises(MoveError):
            step(board, PuzzleState((1, 1), ()), Direction.UP)

    def test_step_pushes(self, board):
        state = PuzzleState((1, 2), ((2, 2),))
        assert step(board, state, Direction.RIGHT) == PuzzleState((2, 2), ((3, 2),))


class TestReplay:
    def test_fallback_solution(self):
        plan = [
            Direction.RIGHT,
            Direction.RIGHT,
            Direction.RIGHT,
            Direction.DOWN,
            Direction.LEFT,
        ]
        final = replay(FALLBACK_LEVEL, plan)

        assert final.player == (3, 2)
        assert final.boxes == ((2, 2),)
        assert is_solved(FALLBACK_LEVEL, final)

    def test_illegal_move(self):
        with pytest.raises(MoveError):
            replay(FALLBACK_LEVEL, [Direction.UP])

    def test_empty_plan(self):
        final = replay(FALLBACK_LEVEL, [])
        assert final == PuzzleState.from_level(FALLBACK_LEVEL)
        assert not is_solved(FALLBACK_LEVEL, final)
