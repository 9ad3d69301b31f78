"""Mutable game state owned by a single session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from medrpg import config
from medrpg.domain.enums import QuestKey
from medrpg.domain.models import Quest


@dataclass(frozen=True)
class StatsSnapshot:
    stamina: int
    knowledge: int
    max_stamina: int = config.MAX_STAMINA


@dataclass
class GameState:
    """Stamina, knowledge, quests and the transcript.

    The store does no validation of its own; bounds are enforced by the
    command handlers that mutate it.
    """

    stamina: int = config.START_STAMINA
    knowledge: int = config.START_KNOWLEDGE
    quests: list[Quest] = field(default_factory=list)
    history: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        titles = [quest.title for quest in self.quests]
        if len(set(titles)) != len(titles):
            raise ValueError("Quest titles must be unique.")
        keys = [quest.key for quest in self.quests]
        if len(set(keys)) != len(keys):
            raise ValueError("Quest keys must be unique.")

    def append_line(self, text: str) -> None:
        self.history.append(text)

    def append_lines(self, lines: Iterable[str]) -> None:
        self.history.extend(lines)

    def quest_by_key(self, key: QuestKey) -> Quest | None:
        for quest in self.quests:
            if quest.key == key:
                return quest
        return None

    def incomplete_quest(self, key: QuestKey) -> Quest | None:
        quest = self.quest_by_key(key)
        if quest is None or quest.completed:
            return None
        return quest

    def active_quests(self) -> list[Quest]:
        return [quest for quest in self.quests if not quest.completed]

    def completed_quests(self) -> list[Quest]:
        return [quest for quest in self.quests if quest.completed]

    def snapshot(self) -> StatsSnapshot:
        return StatsSnapshot(stamina=self.stamina, knowledge=self.knowledge)
