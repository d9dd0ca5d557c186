# Manual Snake player GUI: renders cells and forwards input to GameController.
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import messagebox
from typing import Optional

# Support both package imports and running this file directly.
try:
    from .controller import GameController, GameState
    from .game_logic import Coord, SnakeConfig
    from .records import JsonRecordStore, RecordStore
    from .utils import default_record_path
except ImportError:
    from controller import GameController, GameState
    from game_logic import Coord, SnakeConfig
    from records import JsonRecordStore, RecordStore
    from utils import default_record_path


logger = logging.getLogger(__name__)


class SnakeApp:
    """Tkinter presentation layer: Renderer, Scoreboard and input source for GameController."""
    UI_SCALE = 1.2
    BG = "#101418"
    BOARD_BG = "#1c2229"
    SIDEBAR_BG = "#0f1720"
    GRID_COLOR = "#293340"
    SNAKE_COLOR = "#1fb86b"
    APPLE_COLOR = "#ff5c74"
    TEXT_PRIMARY = "#e6eef7"
    TEXT_MUTED = "#95a4b8"
    ACCENT = "#42c4ff"

    LABEL_COLORS = {
        "empty": BOARD_BG,
        "snake": SNAKE_COLOR,
        "food": APPLE_COLOR,
    }

    def __init__(self, root: tk.Tk, config: SnakeConfig, store: RecordStore) -> None:
        self.root = root
        self.root.title("Snake")
        self.root.configure(bg=self.BG)
        self.root.tk.call("tk", "scaling", self.UI_SCALE)

        self.config = config
        self.cells: dict[Coord, int] = {}  # canvas item id per board cell

        self._build_layout()
        self.controller = GameController(
            config,
            renderer=self,
            scoreboard=self,
            store=store,
            scheduler=self.root,
            on_game_over=self.show_game_over,
        )
        self._bind_input()
        self._refresh_state()

    def _s(self, value: int) -> int:
        """Scale pixel/font values for better readability."""
        return int(round(value * self.UI_SCALE))

    def _build_layout(self) -> None:
        """Create board canvas + right sidebar."""
        container = tk.Frame(self.root, bg=self.BG)
        container.pack(fill="both", expand=True, padx=self._s(16), pady=self._s(16))

        side = self.config.grid_size * self.config.cell_size
        self.canvas = tk.Canvas(
            container,
            width=side,
            height=side,
            bg=self.BOARD_BG,
            highlightthickness=0,
            bd=0,
            cursor="hand2",
        )
        self.canvas.pack(side="left", padx=(0, self._s(16)))
        self._build_cells()

        self.sidebar = tk.Frame(container, bg=self.SIDEBAR_BG, width=self._s(260))
        self.sidebar.pack(side="left", fill="y")
        self.sidebar.pack_propagate(False)

        title = tk.Label(
            self.sidebar,
            text="Snake",
            fg=self.TEXT_PRIMARY,
            bg=self.SIDEBAR_BG,
            font=("Helvetica", self._s(16), "bold"),
        )
        title.pack(anchor="w", padx=self._s(16), pady=(self._s(16), self._s(6)))

        subtitle = tk.Label(
            self.sidebar,
            text="Click the board to start",
            fg=self.TEXT_MUTED,
            bg=self.SIDEBAR_BG,
            font=("Helvetica", self._s(10)),
        )
        subtitle.pack(anchor="w", padx=self._s(16), pady=(0, self._s(14)))

        self._build_status()

        self.restart_btn = tk.Button(
            self.sidebar,
            text="Restart",
            command=self.restart,
            fg="#09141f",
            bg=self.ACCENT,
            activebackground="#74d8ff",
            activeforeground="#09141f",
            bd=0,
            relief="flat",
            font=("Helvetica", self._s(11), "bold"),
            padx=self._s(12),
            pady=self._s(9),
            cursor="hand2",
        )

        footer = tk.Label(
            self.sidebar,
            text="Move: Arrow keys",
            fg=self.TEXT_MUTED,
            bg=self.SIDEBAR_BG,
            font=("Helvetica", self._s(10)),
        )
        footer.pack(side="bottom", anchor="w", padx=self._s(16), pady=self._s(10))

    def _build_cells(self) -> None:
        """One rectangle per cell; render() only recolours it."""
        cell = self.config.cell_size
        for y in range(self.config.grid_size):
            for x in range(self.config.grid_size):
                self.cells[(x, y)] = self.canvas.create_rectangle(
                    x * cell,
                    y * cell,
                    (x + 1) * cell,
                    (y + 1) * cell,
                    fill=self.BOARD_BG,
                    outline=self.GRID_COLOR,
                )

    def _build_status(self) -> None:
        """Score / record / run-state labels."""
        frame = tk.LabelFrame(
            self.sidebar,
            text="Status",
            fg=self.TEXT_PRIMARY,
            bg=self.SIDEBAR_BG,
            bd=1,
            font=("Helvetica", self._s(10), "bold"),
            labelanchor="n",
        )
        frame.pack(fill="x", padx=self._s(16), pady=(0, self._s(14)))

        self.score_var = tk.StringVar(value="Score: 0")
        self.record_var = tk.StringVar(value="Best: -")
        self.state_var = tk.StringVar(value="State: Ready")

        for var in (self.score_var, self.record_var, self.state_var):
            tk.Label(
                frame,
                textvariable=var,
                fg=self.TEXT_PRIMARY,
                bg=self.SIDEBAR_BG,
                font=("Helvetica", self._s(11)),
                anchor="w",
            ).pack(fill="x", padx=self._s(10), pady=self._s(4))

    def _bind_input(self) -> None:
        self.root.bind("<KeyPress>", lambda e: self.controller.on_key(e.keysym))
        self.canvas.bind("<Button-1>", lambda _e: self.start())

    # ----- collaborator interface used by GameController -----
    def render(self, coord: Coord, label: str) -> None:
        self.canvas.itemconfigure(self.cells[coord], fill=self.LABEL_COLORS[label])

    def set_score(self, score: int) -> None:
        self.score_var.set(f"Score: {score}")

    def set_record(self, record: Optional[int]) -> None:
        self.record_var.set("Best: -" if record is None else f"Best: {record}")

    def show_game_over(self, score: int) -> None:
        self._refresh_state()
        self.restart_btn.pack(fill="x", padx=self._s(16), pady=self._s(4))
        messagebox.showinfo("Game Over", f"Game over! Your score: {score}")

    # ----- button/click actions -----
    def start(self) -> None:
        self.controller.on_start()
        self._refresh_state()

    def restart(self) -> None:
        self.controller.on_reset()
        self.restart_btn.pack_forget()
        self._refresh_state()

    def _refresh_state(self) -> None:
        text = {
            GameState.IDLE: "State: Ready",
            GameState.RUNNING: "State: Running",
            GameState.GAME_OVER: "State: Game Over",
        }[self.controller.state]
        self.state_var.set(text)


def run_player_gui(config: Optional[SnakeConfig] = None, store: Optional[RecordStore] = None) -> None:
    """Launch the manual Snake player interface."""
    if config is None:
        config = SnakeConfig()
    if store is None:
        store = JsonRecordStore(default_record_path())

    root = tk.Tk()
    SnakeApp(root, config, store)
    logger.info("Opened %dx%d board", config.grid_size, config.grid_size)
    root.mainloop()


if __name__ == "__main__":
    run_player_gui()
