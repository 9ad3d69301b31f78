"""Dispatch raw player input to command handlers."""

from __future__ import annotations

import logging
import threading
from typing import Callable

from medrpg.commands import handlers
from medrpg.commands.results import CommandOutcome, CommandResult
from medrpg.domain.enums import CommandName
from medrpg.state.store import GameState

logger = logging.getLogger(__name__)

Handler = Callable[[GameState], CommandResult]

ECHO_PREFIX = "> "

COMMANDS: dict[str, Handler] = {
    CommandName.HELP.value: handlers.show_help,
    CommandName.STATUS.value: handlers.show_status,
    CommandName.QUESTS.value: handlers.show_quests,
    CommandName.FIND_COFFEE_MUG.value: handlers.find_coffee_mug,
    CommandName.STUDY.value: handlers.study,
    CommandName.REST.value: handlers.rest,
    CommandName.INVENTORY.value: handlers.show_inventory,
}


def normalize_command(raw: str) -> str:
    return raw.strip().lower()


class CommandInterpreter:
    """Single writer for a GameState.

    Every accepted command is framed in the transcript as the echoed input,
    a blank line, the command body and a closing blank line.
    """

    def __init__(self, state: GameState, commands: dict[str, Handler] | None = None) -> None:
        self.state = state
        self.commands = dict(commands if commands is not None else COMMANDS)
        self._lock = threading.RLock()

    def process(self, raw: str) -> CommandResult:
        normalized = normalize_command(raw)
        if not normalized:
            return CommandResult(None, CommandOutcome.NO_OP)
        with self._lock:
            self.state.append_line(f"{ECHO_PREFIX}{raw}")
            self.state.append_line("")
            handler = self.commands.get(normalized)
            if handler is None:
                result = handlers.not_understood(raw)
            else:
                result = handler(self.state)
            self.state.append_lines(result.lines)
            self.state.append_line("")
        logger.debug(
            "Command %r -> %s (stamina %+d, knowledge %+d)",
            normalized,
            result.outcome,
            result.stamina_change,
            result.knowledge_change,
        )
        return result
