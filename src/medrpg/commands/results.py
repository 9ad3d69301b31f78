"""Result structures for commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from medrpg.domain.enums import CommandName
from medrpg.domain.models import Quest


class CommandOutcome(StrEnum):
    SUCCESS = "success"
    REJECTED = "rejected"
    UNRECOGNIZED = "unrecognized"
    NO_OP = "no_op"


@dataclass
class CommandResult:
    command: CommandName | None
    outcome: CommandOutcome
    lines: list[str] = field(default_factory=list)
    stamina_change: int = 0
    knowledge_change: int = 0
    completed_quests: list[Quest] = field(default_factory=list)
