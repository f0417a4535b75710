"""
BFS solver and move rules for box-pushing levels.

Used to verify that generated levels are solvable.
"""

from .moves import PuzzleState, is_solved, pull, push, replay, step
from .solver import BFSResult, BFSSolver, count_pushes

__all__ = [
    "BFSResult",
    "BFSSolver",
    "PuzzleState",
    "count_pushes",
    "is_solved",
    "pull",
    "push",
    "replay",
    "step",
]
