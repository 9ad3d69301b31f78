from __future__ import annotations

from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Input, RichLog, Static

from medrpg.commands.interpreter import ECHO_PREFIX, CommandInterpreter
from medrpg.state.quests import new_game
from medrpg.state.store import StatsSnapshot


def style_line(line: str) -> Text:
    """Blank strings become spacing lines; echoed input is dimmed."""
    if not line:
        return Text(" ")
    if line.startswith(ECHO_PREFIX):
        return Text(line, style="dim")
    return Text(line)


def format_stats(snapshot: StatsSnapshot) -> str:
    return (
        f"Stamina: {snapshot.stamina}/{snapshot.max_stamina}\n"
        f"Knowledge: {snapshot.knowledge}"
    )


class MedSchoolApp(App):
    TITLE = "MedSchoolRPG"
    SUB_TITLE = ""
    BINDINGS = [
        ("f6", "focus_log", "Focus log"),
        ("f8", "focus_input", "Focus input"),
    ]
    CSS = """
    Screen {
        layout: vertical;
    }
    #header {
        height: auto;
        padding: 1 1;
    }
    #title {
        width: 1fr;
    }
    #stats {
        width: auto;
        text-align: right;
    }
    #log {
        height: 1fr;
        border: solid $secondary;
        padding: 0 1;
    }
    #command {
        height: 3;
        padding: 0 1;
    }
    """

    def __init__(self, quests_path: Path | None = None) -> None:
        super().__init__()
        self.state = new_game(quests_path)
        self.interpreter = CommandInterpreter(self.state)
        self._rendered = 0

    def compose(self) -> ComposeResult:
        with Vertical():
            with Horizontal(id="header"):
                yield Static("MedSchoolRPG\nYour medical journey awaits...", id="title")
                yield Static("", id="stats")
            yield RichLog(id="log", wrap=True)
            yield Input(placeholder="Enter your command here...", id="command")

    def on_mount(self) -> None:
        self._refresh()
        self.query_one("#command", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.interpreter.process(event.value)
        event.input.value = ""
        self._refresh()

    def action_focus_log(self) -> None:
        self.query_one("#log", RichLog).focus()

    def action_focus_input(self) -> None:
        self.query_one("#command", Input).focus()

    def _refresh(self) -> None:
        log = self.query_one("#log", RichLog)
        history = self.state.history
        for line in history[self._rendered :]:
            log.write(style_line(line))
        self._rendered = len(history)
        self.query_one("#stats", Static).update(format_stats(self.state.snapshot()))
