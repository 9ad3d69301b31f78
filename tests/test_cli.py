from __future__ import annotations

from medrpg.cli import run_repl
from medrpg.state.quests import new_game


def _scripted(inputs: list[str]):
    pending = list(inputs)

    def read(prompt: str) -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read


def test_repl_prints_welcome_and_command_output() -> None:
    state = new_game()
    output: list[str] = []
    run_repl(state, read=_scripted(["study", "", "status"]), write=output.append)

    assert output[0] == "Welcome to MedSchoolRPG. Your journey begins..."
    assert "> study" not in output
    assert "📚 You spent an hour studying medical textbooks." in output
    assert "Stamina: 85/100" in output
    assert state.knowledge == 20


def test_repl_stats_line() -> None:
    state = new_game()
    output: list[str] = []
    run_repl(state, read=_scripted(["rest"]), write=output.append, show_stats=True)
    assert "[Stamina 100/100  Knowledge 0]" in output


def test_repl_stops_on_interrupt() -> None:
    state = new_game()

    def read(prompt: str) -> str:
        raise KeyboardInterrupt

    output: list[str] = []
    run_repl(state, read=read, write=output.append)
    assert output[-1] == ""
    assert len(state.history) == 3
