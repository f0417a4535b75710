"""
BFS solver for box-pushing levels.

Explores forward moves breadth-first, so the first solution found has the
fewest moves. Intended for small levels: verification in tests and the
``--solve`` CLI flag.
"""

import time
from collections import deque
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Set, Tuple

from ..errors import MoveError
from ..game.board import Direction, Position
from ..game.levels import LevelData
from .moves import PuzzleState, step


@dataclass
class BFSResult:
    """Result of BFS solving."""

    solution: Optional[List[Direction]]
    solution_length: int
    pushes: int
    nodes_explored: int
    time_taken_ms: float
    success: bool


StateKey = Tuple[Position, FrozenSet[Position]]


class BFSSolver:
    """Breadth-first solver over (player, box set) states."""

    def __init__(
        self, depth_cap: int = 200, max_nodes: int = 200_000, timeout_ms: float = 5000
    ):
        """Initialize BFS solver.

        Args:
            depth_cap: Maximum number of moves in a solution
            max_nodes: Maximum number of states to expand
            timeout_ms: Timeout in milliseconds
        """
        self.depth_cap = depth_cap
        self.max_nodes = max_nodes
        self.timeout_ms = timeout_ms

    def solve(self, level: LevelData) -> BFSResult:
        """Find a shortest forward move sequence that solves the level.

        Args:
            level: Level to solve from its start state

        Returns:
            BFSResult with solution if found
        """
        start_time = time.time()
        board = level.board()
        targets = frozenset(level.targets)
        initial = PuzzleState.from_level(level)

        queue = deque([(initial, [])])
        visited: Set[StateKey] = {self._state_key(initial)}
        nodes_explored = 0

        while queue:
            elapsed_ms = (time.time() - start_time) * 1000
            if elapsed_ms > self.timeout_ms or nodes_explored >= self.max_nodes:
                break

            state, path = queue.popleft()
            nodes_explored += 1

            if frozenset(state.boxes) == targets:
                return self._result(level, path, nodes_explored, start_time)

            if len(path) >= self.depth_cap:
                continue

            for direction in Direction:
                try:
                    next_state = step(board, state, direction)
                except MoveError:
                    continue
                key = self._state_key(next_state)
                if key not in visited:
                    visited.add(key)
                    queue.append((next_state, path + [direction]))

        elapsed_ms = (time.time() - start_time) * 1000
        return BFSResult(
            solution=None,
            solution_length=0,
            pushes=0,
            nodes_explored=nodes_explored,
            time_taken_ms=elapsed_ms,
            success=False,
        )

    def _state_key(self, state: PuzzleState) -> StateKey:
        return (state.player, frozenset(state.boxes))

    def _result(
        self,
        level: LevelData,
        path: List[Direction],
        nodes_explored: int,
        start_time: float,
    ) -> BFSResult:
        return BFSResult(
            solution=path,
            solution_length=len(path),
            pushes=count_pushes(level, path),
            nodes_explored=nodes_explored,
            time_taken_ms=(time.time() - start_time) * 1000,
            success=True,
        )


def count_pushes(level: LevelData, directions: List[Direction]) -> int:
    """Number of moves in a forward plan that move a box."""
    board = level.board()
    state = PuzzleState.from_level(level)
    pushes = 0
    for direction in directions:
        next_state = step(board, state, direction)
        if next_state.boxes != state.boxes:
            pushes += 1
        state = next_state
    return pushes
