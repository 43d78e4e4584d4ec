"""Don't Say N! CLI Application.

A Textual-based terminal interface for playing Don't Say N!.

Screens:
- Configuration (target, steps, win condition)
- Mode selection (two player or vs computer)
- Game screen with position, turn, step buttons and number strip
"""

from __future__ import annotations

import logging
from typing import Optional

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.logging import TextualHandler
from textual.screen import Screen
from textual.widgets import (
    Button,
    Checkbox,
    Footer,
    Header,
    Input,
    Label,
    Rule,
    Static,
)

from dontsay.engine.game_engine import GameEngine, MoveResult
from dontsay.engine.scheduler import Cancel, TurnScheduler
from dontsay.models.config import ConfigValidationError
from dontsay.models.state import GameMode, GameState, MoveRecord, Player
from dontsay.opponents.optimal import OptimalOpponent
from dontsay.settings import (
    get_computer_delay,
    get_default_steps,
    get_default_target,
    get_log_level,
)

logger = logging.getLogger(__name__)


CSS = """
Screen {
    background: $surface;
}

#main-menu {
    align: center middle;
    width: 100%;
    height: 100%;
}

.menu-container {
    width: 60;
    height: auto;
    border: solid $accent;
    padding: 1 2;
}

.menu-title {
    text-align: center;
    text-style: bold;
    color: $accent;
    margin-bottom: 1;
}

.menu-button {
    width: 100%;
    margin: 1 0 0 0;
}

.field-label {
    margin-top: 1;
}

#position {
    text-align: center;
    text-style: bold;
    color: $accent;
}

#turn, #last-move {
    text-align: center;
}

#game-over {
    text-align: center;
    text-style: bold;
    color: $error;
}

#step-buttons {
    height: auto;
    align: center middle;
    margin-top: 1;
}

.step-button {
    min-width: 8;
    margin: 0 1;
}

#number-strip {
    margin-top: 1;
    text-align: center;
}
"""


def render_number_strip(position: int, target: int) -> str:
    """Render totals 0..target with the current position highlighted."""
    cells = []
    for i in range(target + 1):
        if i == position:
            cells.append(f"[bold reverse] {i} [/]")
        else:
            cells.append(f" {i} ")
    return "".join(cells)


def describe_turn(state: GameState) -> str:
    return f"Turn: {state.active_player.value}"


def describe_outcome(state: GameState) -> str:
    """Game-over banner text, empty while the game is running."""
    if not state.game_over or state.loser is None:
        return ""
    return f"Game Over! {state.loser.value} loses."


def describe_last_move(history: list[MoveRecord]) -> str:
    if not history:
        return ""
    record = history[-1]
    return f"{record.player.value} played +{record.step}"


# =============================================================================
# Screens
# =============================================================================


class ConfigScreen(Screen):
    """Configuration entry: target, steps and win condition."""

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="main-menu"):
            with Vertical(classes="menu-container"):
                yield Static("CUSTOMIZE YOUR GAME", classes="menu-title")
                yield Rule()
                yield Label("Final number:", classes="field-label")
                yield Input(str(get_default_target()), id="target-input")
                yield Label("Steps (comma-separated):", classes="field-label")
                yield Input(get_default_steps(), id="steps-input")
                yield Checkbox("Last move wins", id="last-move-wins")
                yield Button("Start Game", id="start-game", variant="success", classes="menu-button")
        yield Footer()

    @on(Button.Pressed, "#start-game")
    def submit_config(self) -> None:
        engine: GameEngine = self.app.engine
        target = self.query_one("#target-input", Input).value
        steps = self.query_one("#steps-input", Input).value
        last_move_wins = self.query_one("#last-move-wins", Checkbox).value
        try:
            engine.configure(target, steps, last_move_wins)
        except ConfigValidationError as e:
            self.notify(str(e), title="Invalid configuration", severity="error")
            return
        self.app.push_screen(ModeSelectScreen())


class ModeSelectScreen(Screen):
    """Choose two player or vs computer."""

    BINDINGS = [
        Binding("escape", "go_back", "Back"),
    ]

    def compose(self) -> ComposeResult:
        engine: GameEngine = self.app.engine
        yield Header()
        with Container(id="main-menu"):
            with Vertical(classes="menu-container"):
                yield Static(f"Don't Say {engine.config.target}!", classes="menu-title")
                yield Static("Select a game mode:")
                yield Rule()
                yield Button("Two Player", id="two-player", classes="menu-button", variant="primary")
                yield Button("Vs Computer", id="vs-computer", classes="menu-button", variant="primary")
                yield Button("Back", id="back", classes="menu-button", variant="default")
        yield Footer()

    def _start(self, mode: GameMode) -> None:
        self.app.engine.start_game(mode)
        self.app.push_screen(GameScreen())

    @on(Button.Pressed, "#two-player")
    def two_player(self) -> None:
        self._start(GameMode.TWO_PLAYER)

    @on(Button.Pressed, "#vs-computer")
    def vs_computer(self) -> None:
        self._start(GameMode.VS_COMPUTER)

    @on(Button.Pressed, "#back")
    def go_back(self) -> None:
        self.app.engine.reset()
        self.app.pop_screen()

    def action_go_back(self) -> None:
        self.go_back()


class GameScreen(Screen):
    """Main game screen."""

    BINDINGS = [
        Binding("r", "restart", "Restart"),
        Binding("1", "select_step(0)", "Step 1", show=False),
        Binding("2", "select_step(1)", "Step 2", show=False),
        Binding("3", "select_step(2)", "Step 3", show=False),
        Binding("4", "select_step(3)", "Step 4", show=False),
        Binding("5", "select_step(4)", "Step 5", show=False),
        Binding("6", "select_step(5)", "Step 6", show=False),
        Binding("7", "select_step(6)", "Step 7", show=False),
        Binding("8", "select_step(7)", "Step 8", show=False),
        Binding("9", "select_step(8)", "Step 9", show=False),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.scheduler: Optional[TurnScheduler] = None

    @property
    def engine(self) -> GameEngine:
        return self.app.engine

    def compose(self) -> ComposeResult:
        config = self.engine.config
        yield Header()
        with Container(id="main-menu"):
            with Vertical(classes="menu-container"):
                yield Static(f"Don't Say {config.target}!", classes="menu-title")
                yield Static("", id="position")
                yield Static("", id="turn")
                yield Static("", id="last-move")
                yield Static("", id="game-over")
                with Horizontal(id="step-buttons"):
                    for step in config.distinct_steps:
                        yield Button(f"+{step}", id=f"step-{step}", classes="step-button")
                yield Button("Restart Game", id="restart", variant="error", classes="menu-button")
                yield Static("", id="number-strip")
        yield Footer()

    def on_mount(self) -> None:
        """Set up computer scheduling and draw the initial state."""
        self.scheduler = TurnScheduler(
            self.engine,
            OptimalOpponent(),
            delay=self.app.computer_delay,
            timer_factory=self._start_timer,
            on_move=self._on_computer_move,
        )
        self.update_display()
        self.scheduler.sync()

    def on_unmount(self) -> None:
        if self.scheduler is not None:
            self.scheduler.cancel()

    def _start_timer(self, delay: float, callback) -> Cancel:
        timer = self.set_timer(delay, callback)
        return timer.stop

    def _on_computer_move(self, result: MoveResult) -> None:
        self.update_display()

    def _human_to_move(self) -> bool:
        state = self.engine.state
        if not state.in_progress:
            return False
        return state.mode == GameMode.TWO_PLAYER or state.active_player == Player.PLAYER

    def update_display(self) -> None:
        """Update all display elements."""
        state = self.engine.state
        config = self.engine.config
        if config is None:
            return

        self.query_one("#position", Static).update(f"Current position: {state.position}")
        self.query_one("#turn", Static).update(describe_turn(state))
        self.query_one("#last-move", Static).update(describe_last_move(self.engine.history))
        self.query_one("#game-over", Static).update(describe_outcome(state))

        self.query_one("#step-buttons", Horizontal).display = self._human_to_move()
        for step in config.distinct_steps:
            button = self.query_one(f"#step-{step}", Button)
            button.disabled = state.position + step > config.target

        self.query_one("#number-strip", Static).update(
            render_number_strip(state.position, config.target)
        )

    def play_step(self, step: int) -> None:
        """Apply a human move and hand over to the computer if needed."""
        if not self._human_to_move():
            return
        result = self.engine.make_move(step)
        if not result.success:
            self.app.bell()
            return
        self.update_display()
        if self.scheduler is not None:
            self.scheduler.sync()

    @on(Button.Pressed, ".step-button")
    def step_pressed(self, event: Button.Pressed) -> None:
        step = int(str(event.button.id).removeprefix("step-"))
        self.play_step(step)

    def action_select_step(self, index: int) -> None:
        steps = self.engine.config.distinct_steps
        if index < len(steps):
            self.play_step(steps[index])

    @on(Button.Pressed, "#restart")
    def restart(self) -> None:
        if self.scheduler is not None:
            self.scheduler.cancel()
        self.engine.reset()
        # Pop back to the configuration screen (keep base Screen + ConfigScreen)
        while len(self.app.screen_stack) > 2:
            self.app.pop_screen()

    def action_restart(self) -> None:
        self.restart()


# =============================================================================
# Main Application
# =============================================================================


class DontSayApp(App):
    """Main Don't Say N! CLI application."""

    TITLE = "Don't Say N!"
    SUB_TITLE = "A Subtraction Game"
    CSS = CSS

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True, priority=True),
    ]

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        computer_delay: Optional[float] = None,
    ) -> None:
        super().__init__()
        self.engine = engine or GameEngine()
        self.computer_delay = get_computer_delay() if computer_delay is None else computer_delay

    def on_mount(self) -> None:
        """Show configuration screen when app starts."""
        self.push_screen(ConfigScreen())


def main() -> None:
    """Entry point for the CLI application.

    Log records go to the Textual devtools console:
        1. In one terminal: textual console
        2. In another terminal: textual run --dev dontsay.cli.app:DontSayApp
    """
    logging.basicConfig(level=get_log_level(), handlers=[TextualHandler()])
    app = DontSayApp()
    app.run()


if __name__ == "__main__":
    main()
