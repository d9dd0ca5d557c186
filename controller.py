# Game lifecycle: timer-driven ticking, input mapping, score and record bookkeeping.
from __future__ import annotations

from enum import Enum
import logging
from typing import Any, Callable, Optional, Protocol

try:
    from .game_logic import Coord, Direction, SnakeConfig, StepOutcome, StepResult, World
    from .records import RecordStore
    from .utils import encode_board, iter_cells
except ImportError:
    from game_logic import Coord, Direction, SnakeConfig, StepOutcome, StepResult, World
    from records import RecordStore
    from utils import encode_board, iter_cells


logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    "Up": Direction.UP,
    "Down": Direction.DOWN,
    "Left": Direction.LEFT,
    "Right": Direction.RIGHT,
}


class GameState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class Renderer(Protocol):
    def render(self, coord: Coord, label: str) -> None: ...


class Scoreboard(Protocol):
    def set_score(self, score: int) -> None: ...

    def set_record(self, record: Optional[int]) -> None: ...


class Scheduler(Protocol):
    """Single-shot timer source; tkinter's Tk.after/after_cancel satisfy it."""

    def after(self, ms: int, func: Callable[[], None]) -> Any: ...

    def after_cancel(self, handle: Any) -> None: ...


class GameController:
    """Owns the Idle/Running/GameOver lifecycle around a World."""
    def __init__(
        self,
        config: SnakeConfig,
        renderer: Renderer,
        scoreboard: Scoreboard,
        store: RecordStore,
        scheduler: Scheduler,
        on_game_over: Optional[Callable[[int], None]] = None,
        world_factory: Optional[Callable[[SnakeConfig], World]] = None,
    ) -> None:
        self.config = config
        self.renderer = renderer
        self.scoreboard = scoreboard
        self.store = store
        self.scheduler = scheduler
        self.on_game_over = on_game_over
        self.world_factory = world_factory or World

        self.state = GameState.IDLE
        self.score = 0
        self.after_id: Any = None  # timer handle for the pending tick
        self.world = self.world_factory(config)
        self.record = self._load_record()

        self.scoreboard.set_score(self.score)
        self.scoreboard.set_record(self.record)
        self.redraw()

    # ----- persistence (best effort) -----
    def _load_record(self) -> Optional[int]:
        try:
            return self.store.get_record()
        except (OSError, ValueError):
            logger.warning("Could not load record; starting without one", exc_info=True)
            return None

    def _save_record(self, score: int) -> None:
        try:
            self.store.set_record(score)
        except (OSError, ValueError):
            logger.warning("Could not save record %d", score, exc_info=True)

    # ----- timer -----
    def _cancel_loop(self) -> None:
        """Cancel scheduled tick callback if one exists."""
        if self.after_id is not None:
            self.scheduler.after_cancel(self.after_id)
            self.after_id = None

    def _schedule_tick(self) -> None:
        self._cancel_loop()
        self.after_id = self.scheduler.after(self.config.speed_ms, self.tick)

    # ----- input handlers -----
    def on_start(self) -> None:
        """Idle -> Running. Re-entrant starts and starts after game over are ignored."""
        if self.state is not GameState.IDLE:
            logger.debug("Start ignored in state %s", self.state.value)
            return
        self.state = GameState.RUNNING
        self.score = 0
        self.scoreboard.set_score(self.score)
        logger.info("Game started")
        self._schedule_tick()

    def on_reset(self) -> None:
        """Stop ticking, rebuild the world and return to Idle."""
        self._cancel_loop()
        self.world = self.world_factory(self.config)
        self.score = 0
        self.state = GameState.IDLE
        self.scoreboard.set_score(self.score)
        self.redraw()
        logger.info("Game reset")

    def on_direction(self, direction: Direction) -> None:
        if self.state is not GameState.RUNNING:
            return
        if not self.world.set_pending_direction(direction):
            logger.debug("Reversal to %s ignored", direction.name)

    def on_key(self, keysym: str) -> None:
        """Translate an arrow keysym into a direction change; other keys are ignored."""
        direction = KEY_DIRECTIONS.get(keysym)
        if direction is None:
            return
        self.on_direction(direction)

    # ----- loop -----
    def tick(self) -> Optional[StepResult]:
        """Single step of the game loop; reschedules itself while running."""
        self._cancel_loop()
        if self.state is not GameState.RUNNING:
            return None

        result = self.world.step()
        if result.outcome is StepOutcome.COLLIDED:
            self._game_over()
            return result

        if result.outcome is StepOutcome.MOVED and result.vacated is not None:
            self.renderer.render(result.vacated, "empty")
        self.renderer.render(result.head, "snake")

        if result.outcome is StepOutcome.ATE_FOOD:
            self.score += 1
            self.scoreboard.set_score(self.score)
            food = self.world.spawn_food()
            self.renderer.render(food, "food")

        self._schedule_tick()
        return result

    def _game_over(self) -> None:
        self._cancel_loop()
        self.state = GameState.GAME_OVER
        logger.info("Game over with score %d", self.score)

        if self.record is None or self.score > self.record:
            self.record = self.score
            self.scoreboard.set_record(self.record)
            logger.info("New record: %d", self.record)
            self._save_record(self.score)

        if self.on_game_over is not None:
            self.on_game_over(self.score)

    def redraw(self) -> None:
        """Repaint every cell from the current world."""
        for cell, label in iter_cells(encode_board(self.world)):
            self.renderer.render(cell, label)
