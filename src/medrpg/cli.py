"""Plain terminal loop around the command interpreter."""

from __future__ import annotations

from typing import Callable

from medrpg.commands.interpreter import CommandInterpreter
from medrpg.state.store import GameState


def new_lines(state: GameState, start: int) -> list[str]:
    return state.history[start:]


def run_repl(
    state: GameState,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    show_stats: bool = False,
) -> None:
    interpreter = CommandInterpreter(state)
    for line in state.history:
        write(line)
    while True:
        try:
            raw = read("> ")
        except (EOFError, KeyboardInterrupt):
            write("")
            return
        start = len(state.history)
        interpreter.process(raw)
        # The echo line repeats what the terminal already shows.
        for line in new_lines(state, start)[1:]:
            write(line)
        if show_stats:
            snapshot = state.snapshot()
            write(f"[Stamina {snapshot.stamina}/{snapshot.max_stamina}  Knowledge {snapshot.knowledge}]")
