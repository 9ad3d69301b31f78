"""Command vocabulary and interpreter."""

from medrpg.commands.interpreter import CommandInterpreter, normalize_command
from medrpg.commands.results import CommandOutcome, CommandResult

__all__ = [
    "CommandInterpreter",
    "CommandOutcome",
    "CommandResult",
    "normalize_command",
]
