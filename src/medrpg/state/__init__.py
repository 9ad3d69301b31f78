"""Game state store and quest bookkeeping."""

from medrpg.state.quests import (
    QuestDataError,
    complete_quest,
    load_starter_quests,
    new_game,
)
from medrpg.state.store import GameState, StatsSnapshot

__all__ = [
    "GameState",
    "QuestDataError",
    "StatsSnapshot",
    "complete_quest",
    "load_starter_quests",
    "new_game",
]
