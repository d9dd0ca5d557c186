# Core Snake world state and rules, independent from GUI/controller code.
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
import random
from typing import Iterable, Optional


# Bounds used when validating launcher input.
MIN_GRID_SIZE = 4
MAX_GRID_SIZE = 60
MIN_CELL_SIZE = 12
MAX_CELL_SIZE = 64
MIN_SPEED_MS = 40
MAX_SPEED_MS = 2000
MIN_INITIAL_LENGTH = 2

Coord = tuple[int, int]


@dataclass
class SnakeConfig:
    """Runtime settings shared between the world, controller and GUI."""
    grid_size: int = 10
    cell_size: int = 32
    speed_ms: int = 500
    initial_length: int = 2
    wrap_walls: bool = True
    seed: Optional[int] = None

    def validate(self) -> None:
        """Raise ValueError if any setting is out of its allowed range."""
        _check_range(self.grid_size, MIN_GRID_SIZE, MAX_GRID_SIZE, "Grid size")
        _check_range(self.cell_size, MIN_CELL_SIZE, MAX_CELL_SIZE, "Cell size")
        _check_range(self.speed_ms, MIN_SPEED_MS, MAX_SPEED_MS, "Speed")
        # Head sits at the centre with the body extending left, and one cell must stay free for food.
        max_length = min(self.grid_size // 2 + 1, self.grid_size * self.grid_size - 1)
        _check_range(self.initial_length, MIN_INITIAL_LENGTH, max_length, "Initial length")


def _check_range(value: int, low: int, high: int, label: str) -> None:
    if not (low <= value <= high):
        raise ValueError(f"{label} must be between {low} and {high}.")


class Direction(Enum):
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

    def is_opposite(self, other: Direction) -> bool:
        return self.dx + other.dx == 0 and self.dy + other.dy == 0


class StepOutcome(Enum):
    MOVED = "moved"
    ATE_FOOD = "ate_food"
    COLLIDED = "collided"


@dataclass(frozen=True)
class StepResult:
    """What one tick did: the new head and, for plain moves, the vacated tail cell."""
    outcome: StepOutcome
    head: Optional[Coord] = None
    vacated: Optional[Coord] = None


def wrap(coord: Coord, size: int) -> Coord:
    """Normalize a coordinate onto an N x N torus."""
    x, y = coord
    return (x + size) % size, (y + size) % size


class World:
    """Board geometry, snake body, heading and food; advances one tick per step()."""
    def __init__(
        self,
        config: SnakeConfig,
        snake: Optional[Iterable[Coord]] = None,
        direction: Direction = Direction.RIGHT,
        food: Optional[Coord] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config
        self.size = config.grid_size
        self.rng = rng if rng is not None else random.Random(config.seed)

        self.snake: deque[Coord] = deque()       # ordered body, head at index 0
        self.snake_set: set[Coord] = set()       # O(1) body collision lookup
        self.direction = direction
        self.pending_direction = direction       # queued from input; applied next tick
        self.food: Optional[Coord] = None

        if snake is None:
            self.spawn_snake(config.initial_length)
        else:
            for pos in snake:
                self.snake.append(pos)
                self.snake_set.add(pos)
            if len(self.snake) < MIN_INITIAL_LENGTH:
                raise ValueError(f"Snake needs at least {MIN_INITIAL_LENGTH} segments.")

        if food is None:
            self.spawn_food()
        else:
            self.food = food

    @property
    def head(self) -> Coord:
        return self.snake[0]

    @property
    def heading(self) -> Direction:
        return self.direction

    def spawn_snake(self, length: int) -> None:
        """Place snake so the head starts at the board center, body extending left."""
        center = self.size // 2
        for i in range(length):
            pos = wrap((center - i, center), self.size)
            self.snake.append(pos)
            self.snake_set.add(pos)

    def occupied(self, coord: Coord) -> bool:
        return coord in self.snake_set

    def set_pending_direction(self, new_direction: Direction) -> bool:
        """Queue an input direction; reject instant 180-degree turns.

        Returns True when the direction was accepted.
        """
        if new_direction.is_opposite(self.direction):
            return False
        self.pending_direction = new_direction
        return True

    def _next_head(self) -> Optional[Coord]:
        head_x, head_y = self.snake[0]
        new_x = head_x + self.direction.dx
        new_y = head_y + self.direction.dy
        if self.config.wrap_walls:
            return wrap((new_x, new_y), self.size)
        if not (0 <= new_x < self.size and 0 <= new_y < self.size):
            return None
        return new_x, new_y

    def step(self) -> StepResult:
        """Advance one tick and report the outcome.

        A collision leaves the body untouched. Food is cleared when eaten; the caller
        is responsible for scoring and spawning the next one.
        """
        # Apply the latest valid input once per tick.
        self.direction = self.pending_direction
        new_head = self._next_head()
        if new_head is None:
            return StepResult(StepOutcome.COLLIDED)

        growing = new_head == self.food
        tail = self.snake[-1]

        # Moving into current tail is allowed only if not growing
        # (because tail moves away in the same tick).
        if new_head in self.snake_set and not (not growing and new_head == tail):
            return StepResult(StepOutcome.COLLIDED, head=new_head)

        if growing:
            self.snake.appendleft(new_head)
            self.snake_set.add(new_head)
            self.food = None
            return StepResult(StepOutcome.ATE_FOOD, head=new_head)

        old_tail = self.snake.pop()
        self.snake_set.discard(old_tail)
        self.snake.appendleft(new_head)
        self.snake_set.add(new_head)
        return StepResult(StepOutcome.MOVED, head=new_head, vacated=old_tail)

    def spawn_food(self) -> Coord:
        """Rejection-sample a free cell for the food."""
        if len(self.snake_set) >= self.size * self.size:
            raise RuntimeError("No free cell left to spawn food.")
        while True:
            pos = (self.rng.randrange(self.size), self.rng.randrange(self.size))
            if pos not in self.snake_set:
                self.food = pos
                return pos
