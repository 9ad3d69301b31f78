"""Quest and command vocabulary."""

from medrpg.domain.enums import CommandName, QuestKey
from medrpg.domain.models import Quest

__all__ = [
    "CommandName",
    "Quest",
    "QuestKey",
]
