# Shared helpers: board encoding for full repaints and default data paths.
from __future__ import annotations

import os

import numpy as np

try:
    from .game_logic import Coord, World
except ImportError:
    from game_logic import Coord, World


EMPTY = 0
SNAKE = 1
FOOD = 2
CELL_LABELS = ("empty", "snake", "food")

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DATA_DIR = os.path.join(BASE_DIR, "data")
RECORD_FILENAME = "snake_record.json"


def default_record_path() -> str:
    return os.path.join(DATA_DIR, RECORD_FILENAME)


def encode_board(world: World) -> np.ndarray:
    """
    Board encoding indexed [y, x]:
    - 0: empty
    - 1: snake segment
    - 2: food
    """
    board = np.full((world.size, world.size), EMPTY, dtype=np.int8)

    if world.food is not None:
        fx, fy = world.food
        board[fy, fx] = FOOD

    for x, y in world.snake:
        board[y, x] = SNAKE

    return board


def iter_cells(board: np.ndarray):
    """Yield ((x, y), label) for every cell of an encoded board."""
    for (y, x), code in np.ndenumerate(board):
        cell: Coord = (int(x), int(y))
        yield cell, CELL_LABELS[int(code)]
