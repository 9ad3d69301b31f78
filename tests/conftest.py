from __future__ import annotations

import pytest

from medrpg.commands.interpreter import CommandInterpreter
from medrpg.state.quests import new_game
from medrpg.state.store import GameState


@pytest.fixture()
def state() -> GameState:
    return new_game()


@pytest.fixture()
def interpreter(state: GameState) -> CommandInterpreter:
    return CommandInterpreter(state)
