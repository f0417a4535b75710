"""
Tests for the reverse-pull scrambler.
"""

import pytest

from sokogen.game.board import Board, Direction, Tile
from sokogen.game.levels import LevelData
from sokogen.generator.rng import SequenceGenerator
from sokogen.generator.scramble import (
    PullCandidate,
    ScrambleMove,
    ScrambleResult,
    Scrambler,
)
from sokogen.solver.moves import is_solved, replay


def room_with_targets(targets, width=7, height=7):
    board = Board(width, height)
    board.fill_bordered()
    for x, y in targets:
        board.set_tile(x, y, Tile.TARGET)
    return board


class TestPullable:
    def test_adjacent_box_with_room_behind(self):
        board = room_with_targets([(3, 3)])
        scrambler = Scrambler(board, SequenceGenerator(1))

        assert scrambler.pullable((3, 4), [(3, 3)]) == [PullCandidate(0, Direction.DOWN)]
        assert scrambler.pullable((2, 3), [(3, 3)]) == [PullCandidate(0, Direction.LEFT)]

    def test_wall_behind_player(self):
        board = room_with_targets([(3, 4)])
        scrambler = Scrambler(board, SequenceGenerator(1))

        # Player at (3, 5) would have to back into the bottom wall.
        assert scrambler.pullable((3, 5), [(3, 4)]) == []

    def test_box_behind_player(self):
        board = room_with_targets([(3, 3), (3, 5)])
        scrambler = Scrambler(board, SequenceGenerator(1))

        # Each box blocks the other's pull.
        assert scrambler.pullable((3, 4), [(3, 3), (3, 5)]) == []

    def test_candidates_in_box_order(self):
        board = room_with_targets([(2, 3), (3, 2)])
        scrambler = Scrambler(board, SequenceGenerator(1))

        assert scrambler.pullable((3, 3), [(2, 3), (3, 2)]) == [
            PullCandidate(0, Direction.RIGHT),
            PullCandidate(1, Direction.DOWN),
        ]

    def test_diagonal_and_distant_boxes_ignored(self):
        board = room_with_targets([(3, 3)])
        scrambler = Scrambler(board, SequenceGenerator(1))

        assert scrambler.pullable((4, 4), [(3, 3)]) == []
        assert scrambler.pullable((3, 5), [(3, 3)]) == []


class TestScrambler:
    def test_forced_pull(self):
        board = room_with_targets([(3, 3)])
        scrambler = Scrambler(board, SequenceGenerator(5), pull_bias=100)

        result = scrambler.scramble((3, 4), [(3, 3)], [(3, 3)], steps=1)

        assert result.boxes == [(3, 4)]
        assert result.player == (3, 5)
        assert result.pull_count == 1
        assert result.moves == [ScrambleMove(Direction.DOWN, True)]

    def test_no_pulls_without_bias(self):
        board = room_with_targets([(3, 3)])
        scrambler = Scrambler(board, SequenceGenerator(5), pull_bias=0)

        result = scrambler.scramble((3, 4), [(3, 3)], [(3, 3)], steps=200)

        assert result.pull_count == 0
        assert result.boxes == [(3, 3)]
        assert all(not move.pulled for move in result.moves)

    def test_player_stays_on_open_cells(self):
        board = room_with_targets([(2, 2), (4, 4)])
        board.set_tile(3, 3, Tile.WALL)
        scrambler = Scrambler(board, SequenceGenerator(21))

        result = scrambler.scramble((1, 1), [(2, 2), (4, 4)], [(2, 2), (4, 4)], 300)

        assert board.is_floor(*result.player)
        assert result.player not in result.boxes
        assert len(set(result.boxes)) == 2
        assert all(board.is_floor(*box) for box in result.boxes)

    def test_inputs_not_mutated(self):
        board = room_with_targets([(3, 3)])
        boxes = [(3, 3)]
        targets = [(3, 3)]
        Scrambler(board, SequenceGenerator(2), pull_bias=100).scramble(
            (3, 4), boxes, targets, steps=10
        )
        assert boxes == [(3, 3)]
        assert targets == [(3, 3)]

    def test_deterministic(self):
        board = room_with_targets([(2, 3), (4, 3)])

        def run():
            return Scrambler(board, SequenceGenerator(99)).scramble(
                (3, 3), [(2, 3), (4, 3)], [(2, 3), (4, 3)], 250
            )

        a, b = run(), run()
        assert (a.player, a.boxes, a.pull_count, a.moves) == (
            b.player,
            b.boxes,
            b.pull_count,
            b.moves,
        )

    @pytest.mark.parametrize("seed", range(25))
    def test_solution_replays_to_solved(self, seed):
        targets = [(2, 2), (4, 4), (5, 2)]
        board = room_with_targets(targets, width=8, height=7)
        board.set_tile(3, 3, Tile.WALL)

        result = Scrambler(board, SequenceGenerator(seed)).scramble(
            (1, 5), targets, targets, steps=400
        )
        level = LevelData(grid=board.grid, player=result.player, boxes=result.boxes)

        final = replay(level, result.solution())
        assert is_solved(level, final)
        assert final.boxes == tuple(targets)


class TestScrambleResult:
    def test_acceptance(self):
        result = ScrambleResult(
            player=(1, 1), boxes=[(2, 2)], targets=[(3, 3)], pull_count=3
        )
        assert result.boxes_on_targets == 0
        assert result.is_accepted(1)
        assert not result.is_accepted(2)
        assert result.is_accepted(2, min_pulls_per_box=1)

    def test_rejects_box_on_target(self):
        result = ScrambleResult(
            player=(1, 1),
            boxes=[(2, 2), (3, 3)],
            targets=[(3, 3), (4, 4)],
            pull_count=50,
        )
        assert result.boxes_on_targets == 1
        assert not result.is_accepted(2)

    def test_solution_reverses_moves(self):
        result = ScrambleResult(
            player=(1, 1),
            boxes=[],
            targets=[],
            moves=[
                ScrambleMove(Direction.DOWN, True),
                ScrambleMove(Direction.LEFT, False),
            ],
        )
        assert result.solution() == [Direction.RIGHT, Direction.UP]
